import logging
from functools import lru_cache

import config

log = logging.getLogger(__name__)

WORD_LENGTH = 5

EXACT = "exact"
PRESENT = "present"
ABSENT = "absent"

# Numeric codes used when a history is stored or sent over the wire
CODE_VALUES = {EXACT: 0, PRESENT: 1, ABSENT: 2}
VALUE_CODES = {v: k for k, v in CODE_VALUES.items()}

# Score for solving on guess N (1-based)
SOLVE_SCORES = {1: 1000, 2: 900, 3: 800, 4: 700, 5: 600, 6: 500}
PARTIAL_CAP = 400


class InvalidInput(ValueError):
    """Raised when a word or a guess history is malformed."""


@lru_cache(maxsize=None)
def _read_words(path) -> frozenset:
    with open(path, "r") as f:
        words = frozenset(word.strip().lower() for word in f if word.strip())
    log.info("Loaded %d valid words from %s", len(words), path)
    return words


# Load valid words from text file
def load_valid_words(path=None) -> frozenset:
    return _read_words(path or config.WORDS_FILE)


# Check if a word is valid for Wordle gameplay.
def is_valid_word(word: str, path=None) -> bool:
    word = word.lower()
    if path:
        return word in load_valid_words(path)
    # Answer words plus the extra words accepted only as guesses
    return word in load_valid_words(config.WORDS_FILE) or word in load_valid_words(config.GUESSES_FILE)


def clean_word(word) -> str:
    """Normalize a submitted word and reject anything that is not 5 letters a-z."""
    if not isinstance(word, str):
        raise InvalidInput("Guess must be a string")
    word = word.strip().lower()
    if len(word) != WORD_LENGTH:
        raise InvalidInput(f"Guess must be {WORD_LENGTH} letters")
    if not all("a" <= ch <= "z" for ch in word):
        raise InvalidInput("Guess must contain only letters")
    return word


def check_word(word, what):
    if (
        not isinstance(word, str)
        or len(word) != WORD_LENGTH
        or not all("a" <= ch <= "z" for ch in word)
    ):
        raise InvalidInput(f"{what} must be {WORD_LENGTH} lowercase letters, got {word!r}")


# Evaluate a guess against the target word.
def evaluate_guess(target: str, guess: str) -> list:
    check_word(target, "Secret")
    check_word(guess, "Guess")

    result = [ABSENT] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH

    # First pass: exact matches consume their secret position
    for i in range(WORD_LENGTH):
        if guess[i] == target[i]:
            result[i] = EXACT
            consumed[i] = True

    # Second pass: leftmost unconsumed secret letter credits a present
    for i in range(WORD_LENGTH):
        if result[i] == EXACT:
            continue
        for j in range(WORD_LENGTH):
            if not consumed[j] and guess[i] == target[j]:
                result[i] = PRESENT
                consumed[j] = True
                break

    return result


def is_solved(evaluation) -> bool:
    return all(code == EXACT for code in evaluation)


def _normalize_code(code):
    # bool is an int subclass; True/False are never valid codes
    if isinstance(code, bool):
        raise InvalidInput(f"Unknown classification {code!r}")
    if isinstance(code, int):
        if code not in VALUE_CODES:
            raise InvalidInput(f"Unknown classification {code!r}")
        return VALUE_CODES[code]
    if isinstance(code, str) and code in CODE_VALUES:
        return code
    raise InvalidInput(f"Unknown classification {code!r}")


def normalize_history(raw) -> list:
    """
    Read a guess history supplied by a caller.

    Accepts evaluations made of string codes ("exact", "present", "absent")
    or of the numeric storage codes (0, 1, 2) and returns string codes.
    """
    if not isinstance(raw, (list, tuple)):
        raise InvalidInput("Guesses must be a list of evaluations")

    history = []
    for n, evaluation in enumerate(raw, start=1):
        if not isinstance(evaluation, (list, tuple)) or len(evaluation) != WORD_LENGTH:
            raise InvalidInput(f"Guess {n} must have {WORD_LENGTH} classifications")
        history.append([_normalize_code(code) for code in evaluation])
    return history


def to_codes(history) -> list:
    return [[CODE_VALUES[code] for code in evaluation] for evaluation in normalize_history(history)]


def calculate_score(history) -> int:
    """
    Score a player's guesses for the day.

    No exact letter anywhere scores 0. A solved history scores by the guess
    it was first solved on (1000 down to 500, then 50 less per extra guess).
    An unsolved history gets partial credit: 10 per exact and 4 per present
    letter across every guess, capped at 400.
    """
    history = normalize_history(history)

    total_exact = 0
    total_present = 0
    for evaluation in history:
        total_exact += evaluation.count(EXACT)
        total_present += evaluation.count(PRESENT)

    if total_exact == 0:
        return 0

    for n, evaluation in enumerate(history, start=1):
        if is_solved(evaluation):
            if n in SOLVE_SCORES:
                return SOLVE_SCORES[n]
            return max(0, 500 - (n - 6) * 50)

    return min(PARTIAL_CAP, total_exact * 10 + total_present * 4)
