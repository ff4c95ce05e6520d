"""
Runtime settings, read from the environment (and a .env file if present).
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Answer words, one per line; also accepted as guesses
WORDS_FILE = os.environ.get("WORDLE_WORDS_FILE", os.path.join(BASE_DIR, "data", "valid_words.txt"))

# Extra words accepted as guesses but never chosen as answers
GUESSES_FILE = os.environ.get("WORDLE_GUESSES_FILE", os.path.join(BASE_DIR, "data", "valid_guesses.txt"))

LOG_LEVEL = os.environ.get("WORDLE_LOG_LEVEL", "INFO").upper()


def configure_logging(level=None):
    """Set up root logging for scripts and services embedding the game."""
    level = level or LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
