import importlib
import logging
import os

import config


def test_default_words_file_exists():
    assert os.path.isfile(config.WORDS_FILE)


def test_words_file_from_environment(monkeypatch, tmp_path):
    words_file = tmp_path / "words.txt"
    monkeypatch.setenv("WORDLE_WORDS_FILE", str(words_file))
    monkeypatch.setenv("WORDLE_LOG_LEVEL", "debug")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.WORDS_FILE == str(words_file)
        assert reloaded.LOG_LEVEL == "DEBUG"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_configure_logging_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    config.configure_logging("WARNING")
    assert calls["level"] == logging.WARNING


def test_default_guesses_file_exists():
    assert os.path.isfile(config.GUESSES_FILE)
