"""Word/definition acquisition and scoring core for a part-of-speech matching game."""

from .config import GameSettings, load_settings
from .dictionary_api import DefinitionSource, parse_definitions
from .errors import ErrorKind, FetchResult, GameInitializationError, ParseError, WordMatchError
from .game_logic import GameLogic
from .game_state import NO_DEFINITIONS, GameState
from .word_source import WordSource

__all__ = [
    "DefinitionSource",
    "ErrorKind",
    "FetchResult",
    "GameInitializationError",
    "GameLogic",
    "GameSettings",
    "GameState",
    "NO_DEFINITIONS",
    "ParseError",
    "WordMatchError",
    "WordSource",
    "load_settings",
    "parse_definitions",
]

__version__ = "0.1.0"
