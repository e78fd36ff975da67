"""
persian_word_guesser - word prediction for a Persian keyboard.

    from persian_word_guesser import load_dictionary
    guesser = load_dictionary("data/persian_words.txt").guesser
    guesser.guess("کتا")
"""

from .core import (
    DictionaryLoadError,
    LoadResult,
    StateSaveError,
    TypingSession,
    WordGuesser,
    load_dictionary,
    load_from_config,
)

__all__ = [
    "DictionaryLoadError",
    "LoadResult",
    "StateSaveError",
    "TypingSession",
    "WordGuesser",
    "load_dictionary",
    "load_from_config",
]

__version__ = "0.1.0"
