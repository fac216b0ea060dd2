import time
import logging
from typing import Callable, Dict, List, Optional, Tuple

from .game_state import GameState

logger = logging.getLogger(__name__)

PART_OF_SPEECH_TARGETS = ["noun", "verb", "adjective", "adverb", "preposition", "conjunction"]
SKIP_TARGET = "other"
TARGETS = PART_OF_SPEECH_TARGETS + [SKIP_TARGET]

POINTS = {
    "correct": 100,
    "wrong": -50,
    "skipped": 0,
    "unanswered": 0,
}


class GameLogic:
    """
    Scoring rules for sorting definitions onto part-of-speech targets.

    Each word deals `definitions_per_round` definitions onto the board. A
    definition dropped on the right target scores and leaves the board, a wrong
    target costs points and the definition stays, "other" skips it.
    """

    def __init__(self, min_definitions: int = 3, definitions_per_round: int = 3, initial_score: int = 0,
                 state_factory: Optional[Callable[..., GameState]] = None):
        self.min_definitions = min_definitions
        self.definitions_per_round = definitions_per_round
        self.state_factory = state_factory or GameState.initialize
        self.score = initial_score
        self.placements: List[Dict] = []
        self.words_played: List[str] = []
        self.start_time = time.time()
        self.state: Optional[GameState] = None
        self.board: List[str] = []
        self.next_word()

    def next_word(self) -> str:
        """Replace the current state with a fresh word and deal its definitions. Score carries over."""
        self.state = self.state_factory(min_definitions=self.min_definitions)
        self.board = self.state.flattened_definitions()[:self.definitions_per_round]
        self.words_played.append(self.state.current_word())
        logger.info(f"Next word: '{self.state.current_word()}' with {len(self.board)} definitions on the board")
        return self.state.current_word()

    @property
    def word(self) -> str:
        return self.state.current_word()

    @property
    def round_complete(self) -> bool:
        return not self.board

    def place(self, definition: str, target: Optional[str]) -> Tuple[bool, str, int]:
        """
        Drop a definition on a target.

        Args:
            definition: Text of a definition currently on the board
            target: A part of speech, "other" to skip, or None for a drop outside every target

        Returns:
            (accepted, message, points) where accepted means the definition left the board
        """
        if definition not in self.board:
            raise ValueError(f"Definition is not on the board: {definition!r}")

        if target is None:
            return False, "Returned to its slot", POINTS["unanswered"]

        target = target.strip().lower()
        if target not in TARGETS:
            raise ValueError(f"Unknown target: {target!r}")

        if target == SKIP_TARGET:
            self.board.remove(definition)
            self._record(definition, target, "skipped")
            return True, "Skipped", POINTS["skipped"]

        if self.state.matches(definition, target):
            self.board.remove(definition)
            self._record(definition, target, "correct")
            return True, f"Correct! That's a {target} definition.", POINTS["correct"]

        self._record(definition, target, "wrong")
        return False, f"Wrong, that isn't a {target} definition.", POINTS["wrong"]

    def _record(self, definition: str, target: str, outcome: str) -> None:
        points = POINTS[outcome]
        self.score += points
        self.placements.append({
            "word": self.state.current_word(),
            "definition": definition,
            "target": target,
            "outcome": outcome,
            "points": points,
        })
        logger.debug(f"{outcome} placement on '{target}' ({points:+d}); score now {self.score}")

    def get_game_summary(self) -> Dict:
        outcomes = [p["outcome"] for p in self.placements]
        return {
            "word": self.state.current_word(),
            "words_played": list(self.words_played),
            "score": self.score,
            "board": list(self.board),
            "correct": outcomes.count("correct"),
            "wrong": outcomes.count("wrong"),
            "skipped": outcomes.count("skipped"),
            "placements": list(self.placements),
            "round_complete": self.round_complete,
            "time_taken": float(time.time() - self.start_time),
        }
