"""
Boolean composition of checkers.
"""
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from triespell.services.checker_base import CLEAN, Checker, Verdict, merge_suggestions
from triespell.services.trie import Trie


@dataclass(frozen=True, init=False)
class _CompositeChecker(Checker):
    children: Tuple[Checker, ...] = field(default=())

    def __init__(self, children: Iterable[Checker] = ()):
        children = tuple(children)
        for child in children:
            if not isinstance(child, Checker):
                raise TypeError(f"Expected a Checker, got {type(child).__name__}")
        object.__setattr__(self, "children", children)


class UnionChecker(_CompositeChecker):
    """
    Flags a word when any child flags it.

    Suggestions of the flagging children are concatenated in child order
    with duplicates removed.
    """

    def check(self, word: str, trie: Trie) -> Verdict:
        flagged = [verdict for verdict in (child.check(word, trie) for child in self.children)
                   if verdict.misspelled]
        if not flagged:
            return CLEAN
        return Verdict(True, merge_suggestions(verdict.suggestions for verdict in flagged))


class IntersectChecker(_CompositeChecker):
    """
    Flags a word only when every child flags it.

    Evaluation stops at the first child that does not flag the word.
    """

    def check(self, word: str, trie: Trie) -> Verdict:
        if not self.children:
            return CLEAN

        verdicts = []
        for child in self.children:
            verdict = child.check(word, trie)
            if not verdict.misspelled:
                return CLEAN
            verdicts.append(verdict)

        return Verdict(True, merge_suggestions(verdict.suggestions for verdict in verdicts))
