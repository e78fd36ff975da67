# trie.py
# 50-ary prefix tree over the Persian alphabet.
# Every word carries a rank; higher rank = inserted (or re-selected) more recently.
# Nodes are never pruned: re-inserting a word is the only way its rank changes.

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from persian_word_guesser.core.alphabet import (
    ALPHABET_SIZE,
    index_to_symbol,
    is_valid_word,
    symbol_to_index,
)

Word = str
Rank = int
Candidate = Tuple[Word, Rank]

NOT_A_WORD = -1


class TrieNode:
    """
    A single node in the Trie.
    children: one slot per alphabet symbol, None when absent
    is_terminal: True iff the path to this node spells a known word
    rank: the word's rank, NOT_A_WORD for non-terminal nodes
    """

    __slots__ = ("children", "is_terminal", "rank")

    def __init__(self) -> None:
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.is_terminal = False
        self.rank = NOT_A_WORD

    def child(self, symbol: str) -> Optional["TrieNode"]:
        index = symbol_to_index(symbol)
        if index is None:
            return None
        return self.children[index]

    def iter_children(self) -> Iterator[Tuple[int, "TrieNode"]]:
        """Yield (symbol index, child) pairs in alphabet order."""
        for index, node in enumerate(self.children):
            if node is not None:
                yield index, node


class Trie:
    """
    Dictionary trie used by the WordGuesser for:
     - storing the bundled word list with load-order ranks
     - promoting user-selected words to the highest rank
     - exposing nodes to the FuzzyMatcher for traversal
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self._next_rank = 0
        self._words = 0

    @property
    def next_rank(self) -> Rank:
        """Rank the next auto-ranked insertion will receive."""
        return self._next_rank

    # insertion -----------------------------------------------------
    def insert(self, word: str, rank: Optional[Rank] = None) -> bool:
        """
        Insert word (or re-insert it to refresh its rank).
        rank=None assigns next_rank and advances the counter.
        Returns False, leaving the trie untouched, for empty words or words
        containing characters outside the alphabet.
        """
        if not word or not is_valid_word(word):
            return False

        node = self.root
        for ch in word:
            index = symbol_to_index(ch)
            nxt = node.children[index]
            if nxt is None:
                nxt = node.children[index] = TrieNode()
            node = nxt

        if rank is None:
            rank = self._next_rank
            self._next_rank += 1

        if not node.is_terminal:
            self._words += 1
        node.is_terminal = True
        node.rank = rank
        return True

    # lookup ---------------------------------------------------------
    def find(self, prefix: str) -> Optional[TrieNode]:
        """Node reached by spelling prefix exactly, or None."""
        node = self.root
        for ch in prefix:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def rank_of(self, word: str) -> Optional[Rank]:
        node = self.find(word)
        if node is None or not node.is_terminal:
            return None
        return node.rank

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._words

    # convenience/debugging -----------------------------------------------------
    def words(self) -> Iterator[Candidate]:
        """
        Yield every (word, rank) in the trie, depth first.
        (Slow: O(N) walk. For inspection, not runtime.)
        """
        stack: List[Tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_terminal:
                yield prefix, node.rank
            for index, child in reversed(list(node.iter_children())):
                stack.append((child, prefix + index_to_symbol(index)))
