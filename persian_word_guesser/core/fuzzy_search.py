# fuzzy_search.py
# Variant-tolerant lookup + breadth-first completion over the dictionary trie.
#
# Persian typists commonly leave out the hamza/madda on alef, vav and yeh, and
# type the verb prefixes mi- / nemi- without the zero-width non-joiner. The
# matcher descends the trie along the query and, at every position, also
# follows the children for those written variants. Every branch that spells
# out the whole query seeds a FIFO queue; the queue is then drained breadth
# first so short completions come before long ones and no single subtree can
# use up the candidate budget on its own.

from collections import deque
from typing import Deque, Dict, Tuple

from persian_word_guesser.core.alphabet import (
    ALEF,
    ALEF_HAMZA_ABOVE,
    ALEF_HAMZA_BELOW,
    ALEF_MADDA,
    FARSI_YEH,
    MIM,
    NOON,
    VAV,
    VAV_HAMZA,
    YEH_HAMZA,
    ZWNJ,
    index_to_symbol,
    is_valid_word,
)
from persian_word_guesser.core.trie import Trie, TrieNode

MAX_TOTAL_GUESSES = 90

# bare letter -> written variants it may stand for (tried in this order)
LETTER_VARIANTS: Dict[str, Tuple[str, ...]] = {
    ALEF: (ALEF_MADDA, ALEF_HAMZA_ABOVE, ALEF_HAMZA_BELOW),
    VAV: (VAV_HAMZA,),
    FARSI_YEH: (YEH_HAMZA,),
}

# verb prefixes often typed without the joiner that should follow them
JOINER_PREFIXES = (MIM + FARSI_YEH, NOON + MIM + FARSI_YEH)

Frontier = Deque[Tuple[TrieNode, str]]


class FuzzyMatcher:
    """
    search(query) -> {word: rank} with at most max_total entries.
    A word reached along several branches keeps its highest rank.
    """

    def __init__(self, trie: Trie, max_total: int = MAX_TOTAL_GUESSES):
        if max_total < 1:
            raise ValueError("max_total must be positive")
        self.trie = trie
        self.max_total = max_total

    def search(self, query: str) -> Dict[str, int]:
        found: Dict[str, int] = {}
        if not query or not is_valid_word(query):
            return found

        frontier: Frontier = deque()
        self._descend(self.trie.root, query, 0, found, frontier)
        self._complete(found, frontier)
        return found

    # guided descent ------------------------------------------------------------
    def _descend(
        self,
        node: TrieNode,
        target: str,
        depth: int,
        found: Dict[str, int],
        frontier: Frontier,
    ) -> None:
        """
        node spells target[:depth]. target is the query as this branch reads
        it, i.e. with its own substitutions and inserted joiners applied.
        """
        if len(found) >= self.max_total:
            return

        if depth == len(target):
            self._take(node, target, found, frontier)
            return

        ch = target[depth]
        child = node.child(ch)
        if child is not None:
            self._descend(child, target, depth + 1, found, frontier)

        # mi- / nemi- typed without the joiner
        for prefix in JOINER_PREFIXES:
            if depth == len(prefix) and target.startswith(prefix) and ch != ZWNJ:
                joiner = node.child(ZWNJ)
                if joiner is not None:
                    joined = target[:depth] + ZWNJ + target[depth:]
                    self._descend(joiner, joined, depth + 1, found, frontier)

        for variant in LETTER_VARIANTS.get(ch, ()):
            child = node.child(variant)
            if child is not None:
                swapped = target[:depth] + variant + target[depth + 1:]
                self._descend(child, swapped, depth + 1, found, frontier)

    # breadth-first completion ---------------------------------------------------
    def _take(
        self, node: TrieNode, word: str, found: Dict[str, int], frontier: Frontier
    ) -> None:
        """Record node's word if terminal, then queue its children."""
        if node.is_terminal:
            best = found.get(word)
            if best is None or node.rank > best:
                found[word] = node.rank
                if len(found) >= self.max_total:
                    return

        for index, child in node.iter_children():
            frontier.append((child, word + index_to_symbol(index)))

    def _complete(self, found: Dict[str, int], frontier: Frontier) -> None:
        while frontier and len(found) < self.max_total:
            node, word = frontier.popleft()
            self._take(node, word, found, frontier)
