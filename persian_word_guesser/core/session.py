# session.py
# Host-side bookkeeping for one text field: the composing text, the candidate
# strip shown above the keyboard, and what gets committed.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from persian_word_guesser.core.word_guesser import WordGuesser


@dataclass
class CandidateStrip:
    """
    candidates: the composing text first, then the guesses other than it
    best_guess: top guess (None when there are no guesses)
    in_word_list: the composing text itself came back as a guess
    """
    candidates: List[str] = field(default_factory=list)
    best_guess: Optional[str] = None
    in_word_list: bool = False


class TypingSession:
    def __init__(self, guesser: WordGuesser, select_suggestion: bool = True):
        self.guesser = guesser
        self.select_suggestion = select_suggestion
        self.composing = ""
        self.strip = CandidateStrip()
        self.committed: List[str] = []

    def update(self, text: str) -> CandidateStrip:
        """Replace the composing text and recompute the strip."""
        self.composing = text
        if not text:
            self.strip = CandidateStrip()
            return self.strip

        guesses = self.guesser.guess(text)
        strip = CandidateStrip(candidates=[text])
        if guesses:
            strip.best_guess = guesses[0]
        for word in guesses:
            if word == text:
                strip.in_word_list = True
            else:
                strip.candidates.append(word)
        self.strip = strip
        return strip

    def pick(self, index: int) -> str:
        """User tapped candidate `index`: promote it and commit it followed by a space."""
        if not self.composing:
            raise IndexError("no composing text to pick from")
        word = self.strip.candidates[index]
        self.guesser.select_word(word)
        return self._commit(word + " ")

    def commit(self) -> str:
        """
        Commit the composing text as typed, or the best guess in its place
        when select_suggestion is on.
        """
        text = self.composing
        if self.select_suggestion and self.strip.best_guess is not None:
            self.guesser.select_word(self.strip.best_guess)
            text = self.strip.best_guess
        return self._commit(text)

    def _commit(self, text: str) -> str:
        if text:
            self.committed.append(text)
        self.composing = ""
        self.strip = CandidateStrip()
        return text
