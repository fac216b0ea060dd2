"""
Fallback word list for when the random-word service is unavailable or a word
did not have enough definitions.
The bundled list is a JSON array of 1000 common English words.
"""

import json
import random
import logging
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_WORDS_FILE, FALLBACK_POOL_SIZE
from .errors import ParseError

logger = logging.getLogger(__name__)


def load_fallback_words(path: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Read the fallback word list from disk.

    Raises OSError when the file cannot be read and ParseError when it is not a
    JSON array of at least FALLBACK_POOL_SIZE strings.
    """
    words_file = Path(path) if path else DEFAULT_WORDS_FILE
    with open(words_file, 'r', encoding='utf-8') as f:
        try:
            words = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Word list {words_file} is not valid JSON: {e}") from e

    if not isinstance(words, list):
        raise ParseError(f"Word list {words_file} must be a JSON array, got {type(words).__name__}")
    if len(words) < FALLBACK_POOL_SIZE:
        raise ParseError(f"Word list {words_file} has {len(words)} words, need at least {FALLBACK_POOL_SIZE}")
    if not all(isinstance(w, str) and w.strip() for w in words[:FALLBACK_POOL_SIZE]):
        raise ParseError(f"Word list {words_file} contains empty or non-string entries")
    return words


def get_fallback_word(index: Optional[int] = None,
                      rng: Optional[random.Random] = None,
                      path: Optional[Union[str, Path]] = None) -> str:
    """
    Pick a word from the fallback list.

    Args:
        index: Exact position to return; drawn uniformly from [0, 1000) when omitted
        rng: Random source used to draw the index
        path: Alternative word list file

    Returns:
        The stripped word at the chosen position
    """
    if index is not None and not 0 <= index < FALLBACK_POOL_SIZE:
        raise IndexError(f"Fallback word index {index} outside [0, {FALLBACK_POOL_SIZE})")

    words = load_fallback_words(path)
    if index is None:
        index = (rng or random).randrange(FALLBACK_POOL_SIZE)

    selected_word = words[index].strip()
    logger.info(f"Selected fallback word: {selected_word} (index {index} of {FALLBACK_POOL_SIZE})")
    return selected_word
