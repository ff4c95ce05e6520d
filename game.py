"""
A single player's round against the day's secret word.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from game_logic import (
    InvalidInput,
    calculate_score,
    check_word,
    clean_word,
    evaluate_guess,
    is_solved,
    is_valid_word,
    normalize_history,
    to_codes,
)

log = logging.getLogger(__name__)

MAX_GUESSES = 6

IN_PROGRESS = "in_progress"
WON = "won"
LOST = "lost"


class RoundOver(Exception):
    """Raised when a guess is submitted to a round that has already finished."""


@dataclass
class GuessResult:
    guess: str
    feedback: List[str]
    history: List[List[str]] = field(default_factory=list)
    status: str = IN_PROGRESS
    score: Optional[int] = None     # only set once the round is finished
    solution: Optional[str] = None  # only revealed once the round is finished


class DailyRound:
    """
    Append-only guess history for one player on one day.

    The round is won the first time a guess is all exact, and lost once
    MAX_GUESSES guesses have been used without solving it.
    """

    def __init__(self, secret: str, history=None):
        if isinstance(secret, str):
            secret = secret.strip().lower()
        check_word(secret, "Secret")
        self.secret = secret
        self._history = normalize_history(history or [])

        if len(self._history) > MAX_GUESSES:
            raise InvalidInput(f"A round holds at most {MAX_GUESSES} guesses")
        for n, evaluation in enumerate(self._history[:-1], start=1):
            if is_solved(evaluation):
                raise InvalidInput(f"Round was already solved on guess {n}")

    @property
    def history(self):
        return [list(evaluation) for evaluation in self._history]

    @property
    def solved(self) -> bool:
        return any(is_solved(evaluation) for evaluation in self._history)

    @property
    def exhausted(self) -> bool:
        return not self.solved and len(self._history) >= MAX_GUESSES

    @property
    def finished(self) -> bool:
        return self.solved or self.exhausted

    @property
    def status(self) -> str:
        if self.solved:
            return WON
        if self.exhausted:
            return LOST
        return IN_PROGRESS

    @property
    def guesses_used(self) -> int:
        return len(self._history)

    @property
    def guesses_left(self) -> int:
        return MAX_GUESSES - len(self._history)

    @property
    def score(self) -> int:
        return calculate_score(self._history)

    def submit(self, guess: str, check_dictionary: bool = True) -> GuessResult:
        """Evaluate a guess, record it, and report where the round stands."""
        if self.solved:
            raise RoundOver("You've already solved today's puzzle!")
        if self.exhausted:
            raise RoundOver(f"You've already used all {MAX_GUESSES} guesses for today!")

        word = clean_word(guess)
        if check_dictionary and not is_valid_word(word):
            raise InvalidInput(f"Word '{word}' is not a valid Wordle guess.")

        feedback = evaluate_guess(self.secret, word)
        self._history.append(feedback)
        log.debug("Guess %d/%d %s -> %s", len(self._history), MAX_GUESSES, word, feedback)

        result = GuessResult(guess=word, feedback=feedback, history=self.history, status=self.status)
        if self.finished:
            result.score = self.score
            result.solution = self.secret
            log.info("Round %s after %d guesses, score %d", self.status, len(self._history), result.score)
        return result

    def to_dict(self) -> dict:
        return {
            "guesses": to_codes(self._history),
            "status": self.status,
            "score": self.score,
        }
