# tests/test_loader.py
import pytest

from persian_word_guesser.core.errors import DictionaryLoadError, WordListFormatError
from persian_word_guesser.core.loader import load_dictionary, load_from_config
from persian_word_guesser.core.wordlist import write_word_list
from persian_word_guesser.utils.config_manager import Config
from persian_word_guesser.utils.model_store import PreferenceStore


def test_base_words_ranked_in_file_order(words):
    result = load_dictionary(words)
    assert result.ok
    assert result.words_loaded == len(words)
    trie = result.guesser.trie
    assert [trie.rank_of(w) for w in words] == list(range(len(words)))


def test_loads_text_and_binary_files(tmp_path, words):
    txt = tmp_path / "words.txt"
    binf = tmp_path / "words.bin"
    write_word_list(words, str(txt))
    write_word_list(words, str(binf))
    a = load_dictionary(str(txt)).guesser
    b = load_dictionary(binf).guesser
    assert a.guess("کتا") == b.guess("کتا") == ["کتاب", "کتابها", "کتابخانه"]


def test_persisted_selections_outrank_base_words(words):
    g = load_dictionary(words, "کتابخانه\nآب\n").guesser
    assert g.history == ["کتابخانه", "آب"]
    base_max = len(words) - 1
    assert g.trie.rank_of("آب") > g.trie.rank_of("کتابخانه") > base_max
    assert g.guess("کتا")[0] == "کتابخانه"


def test_round_trip_reproduces_history_and_order(words):
    g = load_dictionary(words).guesser
    for w in ("کار", "آب", "کتاب", "کار", "سؤال"):
        g.select_word(w)
    blob = g.save_state()

    again = load_dictionary(words, blob).guesser
    assert again.history == g.history == ["آب", "کتاب", "کار", "سؤال"]

    def order(guesser):
        return sorted(guesser.history, key=guesser.trie.rank_of)

    assert order(again) == order(g)


def test_missing_word_list_still_gives_working_guesser(tmp_path):
    result = load_dictionary(str(tmp_path / "nope.txt"), "کتاب\n")
    assert not result.ok
    assert isinstance(result.error, DictionaryLoadError)
    assert result.words_loaded == 0
    assert result.guesser.guess("کت") == ["کتاب"]
    with pytest.raises(DictionaryLoadError):
        result.raise_for_error()


def test_corrupt_binary_word_list(tmp_path):
    path = tmp_path / "broken.bin"
    path.write_bytes(b"\x00\x09" + "کت".encode("utf-8"))
    result = load_dictionary(str(path))
    assert isinstance(result.error, WordListFormatError)
    assert len(result.guesser.trie) == 0


def test_invalid_entries_are_skipped(words):
    result = load_dictionary(["کتاب", "book", "کار"])
    assert result.words_loaded == 2
    assert result.guesser.trie.rank_of("کار") == 1


def test_no_word_source():
    result = load_dictionary(None, "آب\n")
    assert result.ok
    assert result.guesser.guess("اب") == ["آب"]


def test_load_from_config(tmp_path, words):
    wl = tmp_path / "words.txt"
    write_word_list(words, str(wl))
    state = tmp_path / "state.json"
    PreferenceStore(str(state)).put("selected-words", "کار\n")

    cfg = Config(str(tmp_path / "config.json"))
    cfg.set("word_list", str(wl))
    cfg.set("state_path", str(state))
    cfg.set("max_returned_guesses", 2)

    result = load_from_config(cfg)
    g = result.guesser
    assert result.ok
    assert g.history == ["کار"]
    assert g.guess("ک") == ["کار", "کتاب"]

    g.select_word("کتاب")
    g.save_state()
    assert PreferenceStore(str(state)).get("selected-words") == "کار\nکتاب\n"


def test_unknown_format_in_config_is_reported(tmp_path, words):
    wl = tmp_path / "words.txt"
    write_word_list(words, str(wl))
    cfg = Config(str(tmp_path / "config.json"))
    cfg.set("word_list", str(wl))
    cfg.set("word_list_format", "csv")
    cfg.set("state_path", str(tmp_path / "state.json"))
    result = load_from_config(cfg)
    assert isinstance(result.error, WordListFormatError)
    assert result.words_loaded == 0
    assert result.guesser.guess("کت") == []
