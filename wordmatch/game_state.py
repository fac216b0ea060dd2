import time
import random
import logging
from typing import Dict, List, Optional, Tuple

from .config import GameSettings, load_settings
from .dictionary_api import DefinitionSet, DefinitionSource
from .errors import ErrorKind, GameInitializationError
from .word_source import WordSource

logger = logging.getLogger(__name__)

# Returned by random_definition() when there is nothing to serve
NO_DEFINITIONS: Tuple[str, Optional[str]] = ("No definitions found.", None)


class GameState:
    """One round's word and its definitions grouped by part of speech."""

    def __init__(self, word: str, definitions: DefinitionSet, rng: Optional[random.Random] = None):
        self.word = word
        self.definitions: Dict[str, List[str]] = {pos: list(texts) for pos, texts in definitions.items() if texts}
        self.rng = rng or random.Random()

    @classmethod
    def initialize(cls,
                   min_definitions: Optional[int] = None,
                   word_source: Optional[WordSource] = None,
                   definition_source: Optional[DefinitionSource] = None,
                   settings: Optional[GameSettings] = None,
                   rng: Optional[random.Random] = None) -> "GameState":
        """
        Find a word with at least `min_definitions` definitions.

        The first attempt asks the random-word service (falling back to the
        local list if it is down); later attempts use the local list only.
        Transport failures back off exponentially before the next attempt.

        Raises:
            GameInitializationError: no playable word within `max_attempts`
        """
        settings = settings or load_settings()
        if min_definitions is None:
            min_definitions = settings.min_definitions
        rng = rng or random.Random()
        word_source = word_source or WordSource(settings, rng=rng)
        definition_source = definition_source or DefinitionSource(settings, min_definitions=min_definitions)

        last_error: Optional[ErrorKind] = None
        for attempt in range(settings.max_attempts):
            if attempt == 0:
                word_result = word_source.fetch_random()
                if not word_result.ok:
                    logger.warning(f"Random-word service failed ({word_result.error.value}); using the local word list")
                    word_result = word_source.fetch_from_local_list()
            else:
                word_result = word_source.fetch_from_local_list()

            if not word_result.ok or not word_result.value:
                last_error = word_result.error
                logger.warning(f"No word available (attempt {attempt + 1}/{settings.max_attempts}): {word_result.detail}")
                continue

            word = word_result.value
            definitions_result = definition_source.fetch_definitions(word)
            definitions = definitions_result.value
            total = sum(len(texts) for texts in definitions.values())
            if definitions_result.ok and definitions and total >= min_definitions:
                logger.info(f"Selected word '{word}' with {total} definitions after {attempt + 1} attempt(s)")
                return cls(word, definitions, rng=rng)

            last_error = definitions_result.error or ErrorKind.INSUFFICIENT_DATA
            logger.info(f"Rejected '{word}' (attempt {attempt + 1}/{settings.max_attempts}): {last_error.value}")
            if last_error is ErrorKind.TRANSPORT and attempt + 1 < settings.max_attempts:
                wait = min(settings.retry_max_delay, settings.retry_base_delay * (2 ** attempt)) + rng.uniform(0, 1)
                logger.warning(f"Dictionary service unreachable. Retrying in {wait:.1f}s...")
                time.sleep(wait)

        logger.error(f"Failed to find a playable word after {settings.max_attempts} attempts")
        raise GameInitializationError(settings.max_attempts, last_error)

    def current_word(self) -> str:
        return self.word

    def all_definitions(self) -> DefinitionSet:
        return {pos: list(texts) for pos, texts in self.definitions.items()}

    def flattened_definitions(self) -> List[str]:
        return [text for texts in self.definitions.values() for text in texts]

    def total_definitions(self) -> int:
        return sum(len(texts) for texts in self.definitions.values())

    def random_definition(self) -> Tuple[str, Optional[str]]:
        """Pick a part of speech uniformly, then one of its definitions uniformly."""
        keys = [pos for pos, texts in self.definitions.items() if texts]
        if not keys:
            return NO_DEFINITIONS
        part_of_speech = self.rng.choice(keys)
        return self.rng.choice(self.definitions[part_of_speech]), part_of_speech

    def matches(self, definition: str, part_of_speech: str) -> bool:
        """True when `definition` is listed under `part_of_speech` for this word."""
        return definition in self.definitions.get(part_of_speech, [])

    def __repr__(self) -> str:
        return f"GameState(word={self.word!r}, definitions={self.total_definitions()})"
