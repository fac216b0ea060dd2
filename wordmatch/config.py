import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_WORDS_FILE = PACKAGE_DIR / "data" / "words.json"

DEFAULT_WORD_API_URL = "https://random-word-api.herokuapp.com/word"
DEFAULT_DICTIONARY_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"

# The fallback index is always drawn from [0, FALLBACK_POOL_SIZE)
FALLBACK_POOL_SIZE = 1000


class GameSettings(BaseModel):
    """Runtime knobs for the word and definition sources and the setup loop."""

    word_api_url: str = DEFAULT_WORD_API_URL
    dictionary_api_url: str = DEFAULT_DICTIONARY_API_URL
    connect_timeout: float = Field(2.0, gt=0)
    read_timeout: float = Field(2.0, gt=0)
    min_definitions: int = Field(3, ge=1)
    max_attempts: int = Field(10, ge=1)
    retry_base_delay: float = Field(0.5, ge=0)
    retry_max_delay: float = Field(4.0, ge=0)
    words_file: Path = DEFAULT_WORDS_FILE

    @property
    def timeout(self) -> tuple:
        """(connect, read) tuple in the form requests expects."""
        return (self.connect_timeout, self.read_timeout)


def load_env(env_path: Optional[str] = None) -> str:
    """Load a .env file without overriding variables already set; returns the path used."""
    path = env_path or find_dotenv(usecwd=True)
    if not path:
        candidate = PACKAGE_DIR.parent / ".env"
        path = str(candidate) if candidate.exists() else ""
    if path and os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded .env from: {path}")
    return path


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        logger.warning(f"Ignoring invalid integer for {name}: {os.getenv(name)!r}")
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        logger.warning(f"Ignoring invalid number for {name}: {os.getenv(name)!r}")
        return default


def load_settings(env_path: Optional[str] = None) -> GameSettings:
    """Build GameSettings from the environment (and .env), falling back to defaults."""
    load_env(env_path)
    values = dict(
        word_api_url=os.getenv("WORDMATCH_WORD_API_URL", DEFAULT_WORD_API_URL),
        dictionary_api_url=os.getenv("WORDMATCH_DICTIONARY_API_URL", DEFAULT_DICTIONARY_API_URL),
        connect_timeout=_env_float("WORDMATCH_CONNECT_TIMEOUT_S", 2.0),
        read_timeout=_env_float("WORDMATCH_READ_TIMEOUT_S", 2.0),
        min_definitions=_env_int("WORDMATCH_MIN_DEFINITIONS", 3),
        max_attempts=_env_int("WORDMATCH_MAX_ATTEMPTS", 10),
        retry_base_delay=_env_float("WORDMATCH_RETRY_BASE_DELAY_S", 0.5),
        retry_max_delay=_env_float("WORDMATCH_RETRY_MAX_DELAY_S", 4.0),
        words_file=Path(os.getenv("WORDMATCH_WORDS_FILE", str(DEFAULT_WORDS_FILE))),
    )
    try:
        settings = GameSettings(**values)
    except ValidationError as e:
        # Values that parse but break a constraint fall back to the field default
        for name in {err["loc"][0] for err in e.errors() if err["loc"]}:
            logger.warning(f"Ignoring out-of-range value for {name}: {values[name]!r}")
            values.pop(name, None)
        settings = GameSettings(**values)
    logger.debug(
        f"Settings: min_definitions={settings.min_definitions}, max_attempts={settings.max_attempts}, "
        f"timeout={settings.timeout}"
    )
    return settings
