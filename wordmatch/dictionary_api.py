"""
Dictionary lookups for the word-matching game.

Definitions come back grouped by part of speech. A word with fewer definitions
than the configured minimum is reported as insufficient so the caller can pick
another word.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .config import GameSettings, load_settings
from .errors import ErrorKind, FetchResult, ParseError
from .monitoring import log_info_safe
from .schemas import DictionaryEntry

logger = logging.getLogger(__name__)

DefinitionSet = Dict[str, List[str]]


def parse_definitions(payload: Any) -> Tuple[DefinitionSet, int]:
    """
    Group the definitions of the first dictionary entry by part of speech.

    Args:
        payload: Decoded JSON body of the dictionary service

    Returns:
        (definitions, total) where no part of speech maps to an empty list

    Raises:
        ParseError: the payload does not have the expected shape
    """
    if not isinstance(payload, list) or not payload:
        raise ParseError("expected a non-empty JSON array of entries")
    if not isinstance(payload[0], dict):
        raise ParseError("first entry is not a JSON object")
    try:
        entry = DictionaryEntry(**payload[0])
    except ValidationError as e:
        raise ParseError(f"unexpected entry shape: {e.error_count()} validation error(s)") from e

    definitions: DefinitionSet = {}
    total = 0
    for meaning in entry.meanings:
        texts = [d.definition for d in meaning.definitions]
        if not texts:
            continue
        definitions.setdefault(meaning.part_of_speech, []).extend(texts)
        total += len(texts)
    return definitions, total


class DefinitionSource:
    """Fetches and groups definitions from the dictionary service."""

    def __init__(self, settings: Optional[GameSettings] = None, min_definitions: Optional[int] = None):
        self.settings = settings or load_settings()
        self.min_definitions = min_definitions if min_definitions is not None else self.settings.min_definitions

    def _url_for(self, word: str) -> str:
        base = self.settings.dictionary_api_url
        if not base.endswith("/"):
            base += "/"
        return base + quote(word)

    def fetch_definitions(self, word: str) -> FetchResult[DefinitionSet]:
        """
        Look up `word` and return its definitions grouped by part of speech.

        Never raises for network or shape problems; a failed result always
        carries an empty mapping.
        """
        logger.info(f"Searching for definitions of '{word}'")
        url = self._url_for(word)
        try:
            response = requests.get(url, timeout=self.settings.timeout)
            if response.status_code == 404:
                logger.info(f"No definitions found for '{word}', trying another word...")
                return FetchResult.failure({}, ErrorKind.INSUFFICIENT_DATA, "word not in dictionary")
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Error fetching definitions for '{word}': {e}")
            return FetchResult.failure({}, ErrorKind.TRANSPORT, str(e))

        try:
            definitions, total = parse_definitions(response.json())
        except ValueError as e:
            # ParseError and JSON decode errors are both ValueErrors
            logger.warning(f"Error parsing definitions for '{word}': {e}")
            return FetchResult.failure({}, ErrorKind.PARSE, str(e))

        if total < self.min_definitions:
            logger.info(
                f"Not enough definitions found for '{word}' ({total} < {self.min_definitions}), trying another word..."
            )
            return FetchResult.failure(
                {}, ErrorKind.INSUFFICIENT_DATA, f"{total} definitions, need {self.min_definitions}"
            )

        for part_of_speech, texts in definitions.items():
            for text in texts:
                log_info_safe(logger, f"[{part_of_speech}] ", text)
        logger.info(f"Found {total} definitions for '{word}' across {len(definitions)} parts of speech")
        return FetchResult.success(definitions)
