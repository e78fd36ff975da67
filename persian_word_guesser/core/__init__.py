"""
persian_word_guesser.core

The predictive-text engine.
Contains:
 - the 50-symbol alphabet codec and the dictionary trie
 - the variant-tolerant matcher with breadth-first completion (FuzzyMatcher)
 - recency ranking and the selection history (SelectionTracker)
 - word list codecs, the dictionary loader and verb conjugation
 - the WordGuesser facade and the host-side TypingSession
"""

from .errors import DictionaryLoadError, GuesserError, StateSaveError, WordListFormatError
from .trie import Trie, TrieNode
from .fuzzy_search import FuzzyMatcher
from .ranker import rank_candidates, ranked_pairs
from .selection_tracker import SelectionTracker
from .word_guesser import WordGuesser
from .loader import LoadResult, load_dictionary, load_from_config
from .session import CandidateStrip, TypingSession

__all__ = [
    "CandidateStrip",
    "DictionaryLoadError",
    "FuzzyMatcher",
    "GuesserError",
    "LoadResult",
    "SelectionTracker",
    "StateSaveError",
    "Trie",
    "TrieNode",
    "TypingSession",
    "WordGuesser",
    "WordListFormatError",
    "load_dictionary",
    "load_from_config",
    "rank_candidates",
    "ranked_pairs",
]
