# loader.py
# Builds a ready-to-use WordGuesser:
#  1. every entry of the bundled word list is inserted in file order, so
#     entries get ranks 0, 1, 2, ... (the list is pre-sorted by likelihood)
#  2. the persisted selection history is replayed through select_word, which
#     lifts those words above the whole base dictionary in their saved order
# An unreadable word list does not stop the guesser from working: the result
# carries the error next to a guesser over an empty base dictionary.

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from persian_word_guesser.core.errors import DictionaryLoadError
from persian_word_guesser.core.fuzzy_search import MAX_TOTAL_GUESSES
from persian_word_guesser.core.ranker import MAX_RETURNED_GUESSES
from persian_word_guesser.core.word_guesser import STATE_KEY, WordGuesser
from persian_word_guesser.core.wordlist import read_word_list
from persian_word_guesser.utils.logger_utils import Log
from persian_word_guesser.utils.model_store import PreferenceStore

WordSource = Union[str, "os.PathLike[str]", Iterable[str]]


@dataclass
class LoadResult:
    guesser: WordGuesser
    error: Optional[DictionaryLoadError] = None
    words_loaded: int = 0
    selections_restored: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> WordGuesser:
        """Return the guesser, or raise the load error if there was one."""
        if self.error is not None:
            raise self.error
        return self.guesser


def _read_source(word_source: WordSource, fmt: Optional[str]) -> Iterable[str]:
    if isinstance(word_source, (str, os.PathLike)):
        return read_word_list(os.fspath(word_source), fmt)
    return word_source


def load_dictionary(
    word_source: Optional[WordSource],
    persisted_state: Optional[str] = None,
    *,
    fmt: Optional[str] = None,
    max_total: int = MAX_TOTAL_GUESSES,
    max_returned: int = MAX_RETURNED_GUESSES,
    store: Optional[PreferenceStore] = None,
    state_key: str = STATE_KEY,
) -> LoadResult:
    """
    word_source: path to a word list, or any iterable of words (None = no base words).
    persisted_state: blob produced by WordGuesser.save_state, or None.
    """
    guesser = WordGuesser(
        max_total=max_total,
        max_returned=max_returned,
        store=store,
        state_key=state_key,
    )
    result = LoadResult(guesser=guesser)

    with Log.time_block("load dictionary"):
        if word_source is not None:
            try:
                for word in _read_source(word_source, fmt):
                    if guesser.trie.insert(word):
                        result.words_loaded += 1
            except DictionaryLoadError as e:
                Log.error(f"[Loader] word list unavailable, continuing without it: {e}")
                result.error = e

        result.selections_restored = guesser.restore_state(persisted_state)

    Log.info(
        f"[Loader] {result.words_loaded} base words, "
        f"{result.selections_restored} restored selections"
    )
    return result


def load_from_config(config) -> LoadResult:
    """Build a guesser from a Config: word list, state store and limits."""
    store = PreferenceStore(config.get("state_path"))
    state_key = config.get("state_key") or STATE_KEY
    return load_dictionary(
        config.get("word_list"),
        store.get(state_key),
        fmt=config.get("word_list_format") or None,
        max_total=int(config.get("max_total_guesses", MAX_TOTAL_GUESSES)),
        max_returned=int(config.get("max_returned_guesses", MAX_RETURNED_GUESSES)),
        store=store,
        state_key=state_key,
    )
