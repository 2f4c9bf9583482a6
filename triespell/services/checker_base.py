"""
Abstract base class for word checkers.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, NamedTuple, Tuple

from triespell.services.trie import Trie


class Verdict(NamedTuple):
    """Outcome of checking a single word."""

    misspelled: bool
    suggestions: Tuple[str, ...] = ()


CLEAN = Verdict(False, ())


class Checker(ABC):
    """
    Abstract base class for checker strategies.

    A checker is a pure function of (word, dictionary). Implementations hold
    only their own immutable configuration, so a single instance can be
    reused for any number of words and dictionaries, and composed with other
    checkers through UnionChecker and IntersectChecker.
    """

    @abstractmethod
    def check(self, word: str, trie: Trie) -> Verdict:
        """
        Check a word against a dictionary.

        Args:
            word: Word to check
            trie: Dictionary to check against

        Returns:
            Verdict with the misspelled flag and correction candidates
            (always empty when the word is not flagged)
        """
        pass


def merge_suggestions(groups: Iterable[Iterable[str]]) -> Tuple[str, ...]:
    """Concatenate suggestion lists in order, keeping the first occurrence of each word."""
    seen = set()
    merged: List[str] = []
    for group in groups:
        for word in group:
            if word not in seen:
                seen.add(word)
                merged.append(word)
    return tuple(merged)
