import random
import logging
from typing import Optional

import requests

from .config import GameSettings, load_settings
from .errors import ErrorKind, FetchResult, ParseError
from .fallback_words import get_fallback_word

logger = logging.getLogger(__name__)


class WordSource:
    """Supplies candidate words from the random-word service or the bundled fallback list."""

    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings or load_settings()
        self.rng = rng or random.Random()

    def fetch_random(self) -> FetchResult[Optional[str]]:
        """Ask the random-word service for a word. Never raises; failures come back as a result."""
        url = self.settings.word_api_url
        try:
            response = requests.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Error fetching word from {url}: {e}")
            return FetchResult.failure(None, ErrorKind.TRANSPORT, str(e))

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Error parsing word response from {url}: {e}")
            return FetchResult.failure(None, ErrorKind.PARSE, str(e))

        if not isinstance(payload, list) or not payload:
            logger.warning(f"Unexpected word response shape: {payload!r}")
            return FetchResult.failure(None, ErrorKind.PARSE, "expected a non-empty JSON array")
        word = payload[0]
        if not isinstance(word, str) or not word.strip():
            logger.warning(f"Unexpected word value in response: {word!r}")
            return FetchResult.failure(None, ErrorKind.PARSE, "first element is not a non-empty string")

        word = word.strip()
        logger.info(f"Selected word '{word}' from random-word service")
        return FetchResult.success(word)

    def fetch_from_local_list(self, index: Optional[int] = None) -> FetchResult[Optional[str]]:
        """
        Pick a word from the bundled list, uniformly from the first 1000 entries.

        An explicit index outside [0, 1000) raises IndexError.
        """
        try:
            word = get_fallback_word(index=index, rng=self.rng, path=self.settings.words_file)
        except OSError as e:
            logger.error(f"Error reading word list {self.settings.words_file}: {e}")
            return FetchResult.failure(None, ErrorKind.RESOURCE, str(e))
        except ParseError as e:
            logger.error(f"Error parsing word list: {e}")
            return FetchResult.failure(None, ErrorKind.PARSE, str(e))
        return FetchResult.success(word)
