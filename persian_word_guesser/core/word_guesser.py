# word_guesser.py
"""
WordGuesser - the facade the keyboard host talks to.

Purpose:
 - Own the dictionary trie, the fuzzy matcher and the selection tracker
 - Simple public API for hosts/CLI/tests:
     guess(text), guess_ranked(text), select_word(word), add_verb_root(...),
     save_state(), restore_state(blob), stats()
 - Serialize every call with one lock so a guesser can be shared between
   several input surfaces

Nothing here is global: a host builds one guesser (usually through
persian_word_guesser.core.loader.load_dictionary) and passes it around.
"""

from __future__ import annotations
import threading
import time
from typing import Any, Dict, List, Optional, Tuple

from persian_word_guesser.core.fuzzy_search import MAX_TOTAL_GUESSES, FuzzyMatcher
from persian_word_guesser.core.morphology import conjugate
from persian_word_guesser.core.ranker import MAX_RETURNED_GUESSES, rank_candidates, ranked_pairs
from persian_word_guesser.core.selection_tracker import SelectionTracker
from persian_word_guesser.core.trie import Trie
from persian_word_guesser.utils.logger_utils import Log
from persian_word_guesser.utils.model_store import PreferenceStore

STATE_KEY = "selected-words"


class WordGuesser:
    """
    Public API:
      - guess(text) -> List[str]                (at most max_returned words)
      - guess_ranked(text) -> List[(word, rank)]
      - select_word(word) -> None
      - add_word_to_dictionary(word) -> bool
      - add_verb_root(past, present, colloquial=None) -> int
      - save_state(store=None) -> str
      - restore_state(blob) -> int
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        trie: Optional[Trie] = None,
        *,
        max_total: int = MAX_TOTAL_GUESSES,
        max_returned: int = MAX_RETURNED_GUESSES,
        store: Optional[PreferenceStore] = None,
        state_key: str = STATE_KEY,
    ):
        if max_returned > max_total:
            raise ValueError("max_returned cannot exceed max_total")
        self.trie = trie if trie is not None else Trie()
        self.matcher = FuzzyMatcher(self.trie, max_total=max_total)
        self.tracker = SelectionTracker(self.trie)
        self.max_returned = max_returned
        self.store = store
        self.state_key = state_key
        self._lock = threading.RLock()
        self._started_at = time.time()

    # Queries ---------------------------------------------------------
    def guess_ranked(self, text: str) -> List[Tuple[str, int]]:
        with self._lock:
            found = self.matcher.search(text)
            return ranked_pairs(found, self.max_returned)

    def guess(self, text: str) -> List[str]:
        """Ranked completions of text, most recently promoted first."""
        with self._lock:
            return rank_candidates(self.matcher.search(text), self.max_returned)

    # Mutations ---------------------------------------------------------
    def select_word(self, word: str) -> None:
        """The user committed word: promote it and move it to the end of the history."""
        with self._lock:
            self.tracker.select(word)

    def add_word_to_dictionary(self, word: str) -> bool:
        """Long-press "add word" from the host; same effect as a selection."""
        self.select_word(word)
        return True

    def add_verb_root(
        self,
        past_stem: str,
        present_stem: str,
        colloquial_present_stem: Optional[str] = None,
    ) -> int:
        """Insert every conjugated form of a verb. Returns how many forms entered the trie."""
        forms = conjugate(past_stem, present_stem, colloquial_present_stem)
        with self._lock:
            added = sum(1 for form in forms if self.trie.insert(form))
        Log.debug(f"[Guesser] verb root {past_stem}/{present_stem}: {added} forms")
        return added

    # Persistence ---------------------------------------------------------
    def save_state(self, store: Optional[PreferenceStore] = None) -> str:
        """
        Serialize the selection history. When a store is given (or was passed
        to the constructor) the blob is also written under state_key;
        StateSaveError propagates to the caller.
        """
        with self._lock:
            blob = self.tracker.serialize()
            target = store if store is not None else self.store
            if target is not None:
                target.put(self.state_key, blob)
                Log.info(f"[Guesser] saved {len(self.tracker)} selected words")
            return blob

    def restore_state(self, blob: Optional[str]) -> int:
        if not blob:
            return 0
        with self._lock:
            return self.tracker.restore(blob)

    @property
    def history(self) -> List[str]:
        with self._lock:
            return self.tracker.history

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "words": len(self.trie),
                "selected": len(self.tracker),
                "next_rank": self.trie.next_rank,
                "uptime_s": round(time.time() - self._started_at, 1),
            }
