# persian_word_guesser/core/selection_tracker.py
"""
SelectionTracker
Remembers which words the user picked, in the order they were last picked,
and promotes each pick to the top rank of the dictionary trie.
 - one history entry per word; re-picking moves it to the tail
 - serialized as plain text, one word per line, oldest first
 - restoring replays the picks in stored order, so their relative ranks
   come back exactly as they were
"""

from collections import OrderedDict
from typing import Iterator, List

from persian_word_guesser.core.trie import Trie
from persian_word_guesser.utils.logger_utils import Log


class SelectionTracker:
    """
    Public API:
      select(word)
      history            -> list, oldest first
      serialize()        -> str blob for the preference store
      restore(blob)
      parse(blob)        -> list of words (static)
    """

    def __init__(self, trie: Trie):
        self.trie = trie
        self._order: "OrderedDict[str, None]" = OrderedDict()

    def select(self, word: str) -> None:
        """Promote word to the highest rank and move it to the end of the history."""
        if "\n" in word:
            Log.warning(f"[Selection] {word!r} contains a newline, a save will split it")
        if not self.trie.insert(word):
            Log.debug(f"[Selection] '{word}' is outside the alphabet, kept in history only")
        self._order.pop(word, None)
        self._order[word] = None

    @property
    def history(self) -> List[str]:
        return list(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, word: str) -> bool:
        return word in self._order

    # Persistence ----------------------------------------------------------------------
    def serialize(self) -> str:
        """Each selected word followed by a newline, oldest first."""
        return "".join(word + "\n" for word in self._order)

    @staticmethod
    def parse(blob: str) -> List[str]:
        """Inverse of serialize; blank lines are ignored."""
        if not blob:
            return []
        return [line for line in blob.split("\n") if line]

    def restore(self, blob: str) -> int:
        """Replay a serialized history. Returns the number of words replayed."""
        words = self.parse(blob)
        for word in words:
            self.select(word)
        if words:
            Log.info(f"[Selection] restored {len(words)} selected words")
        return len(words)
