"""Error kinds and the result type returned by the word and definition sources."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    TRANSPORT = "transport"            # network unreachable, timeout, HTTP error status
    PARSE = "parse"                    # invalid JSON or unexpected shape
    INSUFFICIENT_DATA = "insufficient_data"  # fewer definitions than required
    RESOURCE = "resource"              # local word list missing or unreadable


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """
    Outcome of a fetch: the value, and the error kind when the fetch failed.

    A failed result still carries a usable value (an empty DefinitionSet, or
    None for a word) so callers that only care about the data can ignore `error`.
    """

    value: T
    error: Optional[ErrorKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, value: T, error: ErrorKind, detail: str = "") -> "FetchResult[T]":
        return cls(value=value, error=error, detail=detail)


class WordMatchError(Exception):
    """Base class for errors raised by the game core."""


class ParseError(WordMatchError, ValueError):
    """A service response or resource did not have the expected shape."""


class GameInitializationError(WordMatchError, RuntimeError):
    """No playable word could be found within the allowed number of attempts."""

    def __init__(self, attempts: int, last_error: Optional[ErrorKind] = None):
        self.attempts = attempts
        self.last_error = last_error
        reason = last_error.value if last_error else "unknown"
        super().__init__(
            f"Could not find a word with enough definitions after {attempts} attempts (last error: {reason})"
        )
