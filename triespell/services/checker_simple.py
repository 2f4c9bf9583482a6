"""
Checkers that never propose corrections.
"""
from dataclasses import dataclass

from triespell.services.checker_base import CLEAN, Checker, Verdict
from triespell.services.trie import Trie


@dataclass(frozen=True)
class LengthGateChecker(Checker):
    """
    Flags every word at least `threshold` characters long.

    The dictionary is ignored. Intersected with a fuzzy checker it keeps
    short words from being flagged.
    """

    threshold: int

    def __post_init__(self):
        if self.threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {self.threshold}")

    def check(self, word: str, trie: Trie) -> Verdict:
        if len(word) >= self.threshold:
            return Verdict(True, ())
        return CLEAN


@dataclass(frozen=True)
class ExactMatchChecker(Checker):
    """Flags every word that is not in the dictionary verbatim."""

    def check(self, word: str, trie: Trie) -> Verdict:
        if trie.contains(word):
            return CLEAN
        return Verdict(True, ())
