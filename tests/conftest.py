# tests/conftest.py
import pytest

from persian_word_guesser.core.loader import load_dictionary
from persian_word_guesser.utils.logger_utils import Log

WORDS = [
    "إسلام",
    "مؤمن",
    "سؤال",
    "رئیس",
    "آبی",
    "آب",
    "اسم",
    "است",
    "کتابخانه",
    "کتابها",
    "کتاب",
    "کار",
    "نمی\u200cدانم",
    "می\u200cخواهم",
    "می\u200cروم",
    "خیلی ممنون",
]


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path):
    """Keep log output out of the working tree."""
    Log.configure(path=str(tmp_path / "test.log"), level="DEBUG", echo=False)
    yield


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def guesser(words):
    return load_dictionary(words).guesser
