# tests/test_session.py
import pytest

from persian_word_guesser.core.loader import load_dictionary
from persian_word_guesser.core.session import TypingSession


@pytest.fixture
def session():
    return TypingSession(load_dictionary(["کتاب", "کتابها"]).guesser)


def test_strip_starts_with_composing_text(session):
    strip = session.update("کتاب")
    assert strip.candidates == ["کتاب", "کتابها"]
    assert strip.best_guess == "کتابها"
    assert strip.in_word_list


def test_unknown_composing_text(session):
    strip = session.update("کتا")
    assert strip.candidates == ["کتا", "کتابها", "کتاب"]
    assert not strip.in_word_list


def test_empty_text_clears_strip(session):
    session.update("کتاب")
    strip = session.update("")
    assert strip.candidates == []
    assert strip.best_guess is None


def test_commit_replaces_with_best_guess(session):
    session.update("کتا")
    assert session.commit() == "کتابها"
    assert session.guesser.history == ["کتابها"]
    assert session.composing == ""


def test_commit_as_typed_when_disabled(session):
    session.select_suggestion = False
    session.update("کتا")
    assert session.commit() == "کتا"
    assert session.guesser.history == []


def test_commit_without_guesses_keeps_text(session):
    session.update("کار")
    assert session.commit() == "کار"
    assert session.guesser.history == []


def test_pick_selects_and_adds_space(session):
    session.update("کتا")
    assert session.pick(2) == "کتاب "
    assert session.guesser.history == ["کتاب"]
    assert session.committed == ["کتاب "]
    assert session.guesser.guess("کتا")[0] == "کتاب"


def test_pick_needs_composing_text(session):
    with pytest.raises(IndexError):
        session.pick(0)
