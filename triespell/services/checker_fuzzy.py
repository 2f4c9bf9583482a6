"""
Bounded fuzzy checker.

Walks the dictionary trie and the typed word together, spending separate
budgets on insertions, deletions, adjacent swaps and substitutions. Every
dictionary word reached with the whole word consumed becomes a suggestion.
"""
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from triespell.services.checker_base import CLEAN, Checker, Verdict
from triespell.services.trie import Trie, TrieNode
from triespell.utils.logger import get_logger


logger = get_logger("services.checker_fuzzy")


class EditBudget(NamedTuple):
    """Remaining allowance for each edit operation."""

    insertions: int = 0
    deletions: int = 0
    swaps: int = 0
    substitutions: int = 0


# (pending word, node, dictionary prefix, remaining budget)
_Step = Tuple[str, TrieNode, str, EditBudget]


class _BudgetedSearch:
    """
    Depth-first search over (pending word, trie node, remaining budget).

    Transitions are tried in a fixed order: match, substitution, swap,
    deletion, insertion; child branches in ascending alphabet index. That
    order fixes the order in which words are discovered. The search keeps its
    own stack, so word length is not limited by the interpreter's recursion
    limit.
    """

    def __init__(self, trie: Trie, limit: Optional[int]):
        self._alphabet = trie.alphabet
        self._limit = limit
        self._visited: Set[Tuple[str, TrieNode, EditBudget]] = set()
        # dict keeps first-discovery order
        self._found: Dict[str, None] = {}

    @property
    def suggestions(self) -> Tuple[str, ...]:
        return tuple(self._found)

    @property
    def states_explored(self) -> int:
        return len(self._visited)

    def _done(self) -> bool:
        return self._limit is not None and len(self._found) >= self._limit

    def explore(self, pending: str, node: TrieNode, prefix: str, budget: EditBudget) -> None:
        """
        Args:
            pending: Part of the typed word not consumed yet
            node: Current trie node
            prefix: Dictionary prefix spelled by the path to node
            budget: Remaining edits
        """
        stack: List[_Step] = [(pending, node, prefix, budget)]

        while stack and not self._done():
            pending, node, prefix, budget = stack.pop()

            state = (pending, node, budget)
            if state in self._visited:
                continue
            self._visited.add(state)

            if not pending and node.terminates and prefix not in self._found:
                self._found[prefix] = None
                if self._done():
                    return

            # Popped last-in first-out, so this list is reversed before pushing
            steps = self._transitions(pending, node, prefix, budget)
            steps.reverse()
            stack.extend(steps)

    def _transitions(self, pending: str, node: TrieNode, prefix: str, budget: EditBudget) -> List[_Step]:
        """Next states in the order they must be explored."""
        alphabet = self._alphabet
        children = node.children
        steps: List[_Step] = []

        if pending:
            char = pending[0]
            index, found = alphabet.index_of(char)
            match = children[index] if found else None

            if match is not None:
                steps.append((pending[1:], match, prefix + char, budget))

            if budget.substitutions > 0:
                reduced = budget._replace(substitutions=budget.substitutions - 1)
                for i, child in enumerate(children):
                    if child is not None and child is not match:
                        steps.append((pending[1:], child, prefix + alphabet.character(i), reduced))

            # The displaced character stays pending, so it can be swapped again
            if budget.swaps > 0 and len(pending) > 1 and pending[1] != char:
                next_char = pending[1]
                index, found = alphabet.index_of(next_char)
                swapped = children[index] if found else None
                if swapped is not None:
                    reduced = budget._replace(swaps=budget.swaps - 1)
                    steps.append((char + pending[2:], swapped, prefix + next_char, reduced))

            if budget.deletions > 0:
                reduced = budget._replace(deletions=budget.deletions - 1)
                steps.append((pending[1:], node, prefix, reduced))

        if budget.insertions > 0:
            reduced = budget._replace(insertions=budget.insertions - 1)
            for i, child in enumerate(children):
                if child is not None:
                    steps.append((pending, child, prefix + alphabet.character(i), reduced))

        return steps


@dataclass(frozen=True)
class BoundedFuzzyChecker(Checker):
    """
    Flags words that are a few edits away from a dictionary word.

    Each edit kind has its own budget; a budget of zero disables that kind.
    A word found in the dictionary is never flagged. A word too far from
    every dictionary word is not flagged either, so this checker is usually
    combined with ExactMatchChecker when unknown words must be reported.

    max_suggestions stops the search after that many distinct words have
    been found. None collects every word within budget.

    Words longer than max_word_length are not searched and come back clean;
    None searches words of any length.
    """

    insertions: int = 0
    deletions: int = 0
    swaps: int = 0
    substitutions: int = 0
    max_suggestions: Optional[int] = 1
    max_word_length: Optional[int] = None

    def __post_init__(self):
        for name, value in self.budget._asdict().items():
            if value < 0:
                raise ValueError(f"{name} budget must be non-negative, got {value}")
        if self.max_suggestions is not None and self.max_suggestions < 1:
            raise ValueError(f"max_suggestions must be at least 1, got {self.max_suggestions}")
        if self.max_word_length is not None and self.max_word_length < 0:
            raise ValueError(f"max_word_length must be non-negative, got {self.max_word_length}")

    @property
    def budget(self) -> EditBudget:
        return EditBudget(
            insertions=self.insertions,
            deletions=self.deletions,
            swaps=self.swaps,
            substitutions=self.substitutions,
        )

    def check(self, word: str, trie: Trie) -> Verdict:
        if trie.contains(word):
            return CLEAN

        if self.max_word_length is not None and len(word) > self.max_word_length:
            logger.debug("Word too long for fuzzy search", length=len(word), limit=self.max_word_length)
            return CLEAN

        search = _BudgetedSearch(trie, self.max_suggestions)
        search.explore(word, trie.root, "", self.budget)
        suggestions = search.suggestions

        logger.debug(
            "Fuzzy search finished",
            word=word,
            states=search.states_explored,
            suggestions=len(suggestions),
        )

        if not suggestions:
            return CLEAN
        return Verdict(True, suggestions)
