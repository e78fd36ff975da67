# tests/test_model_store.py
import pytest

from persian_word_guesser.core.errors import StateSaveError
from persian_word_guesser.utils.model_store import PreferenceStore


def test_put_persists(tmp_path):
    path = str(tmp_path / "nested" / "prefs.json")
    store = PreferenceStore(path)
    assert store.get("selected-words") is None
    store.put("selected-words", "کتاب\n")
    assert PreferenceStore(path).get("selected-words") == "کتاب\n"
    assert store.keys() == ["selected-words"]


def test_remove(tmp_path):
    path = str(tmp_path / "prefs.json")
    store = PreferenceStore(path)
    store.put("a", "1")
    store.remove("a")
    assert PreferenceStore(path).get("a") is None


def test_failed_write_raises_and_rolls_back(tmp_path):
    blocker = tmp_path / "afile"
    blocker.write_text("x")
    store = PreferenceStore(str(blocker / "prefs.json"))
    with pytest.raises(StateSaveError):
        store.put("selected-words", "کتاب\n")
    assert store.get("selected-words") is None


def test_corrupt_store_starts_empty(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert PreferenceStore(str(path)).keys() == []
    path.write_text("[1, 2]", encoding="utf-8")
    assert PreferenceStore(str(path)).keys() == []
