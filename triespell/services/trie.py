"""
Prefix-tree dictionary over a declared alphabet.
"""
from typing import Iterable, Iterator, List, Optional

from triespell.services.alphabet import Alphabet, DictionaryError, UnknownCharacterError
from triespell.utils.logger import get_logger


logger = get_logger("services.trie")

__all__ = ["Trie", "TrieNode", "DictionaryError", "UnknownCharacterError"]


class TrieNode:
    """
    A prefix of zero or more dictionary words.

    children holds one optional slot per alphabet index; terminates marks
    that the prefix ending here is itself a dictionary word.
    """

    __slots__ = ("children", "terminates")

    def __init__(self, width: int):
        self.children: List[Optional["TrieNode"]] = [None] * width
        self.terminates = False

    def child(self, index: int) -> Optional["TrieNode"]:
        return self.children[index]

    def __repr__(self) -> str:
        branches = sum(1 for child in self.children if child is not None)
        return f"TrieNode(branches={branches}, terminates={self.terminates})"


class Trie:
    """
    Read-only dictionary built once from a word list.

    Use Trie.build() to construct. There is no mutation after construction,
    so a Trie can be shared freely between checkers and threads.
    """

    __slots__ = ("_alphabet", "_root", "_word_count")

    def __init__(self, alphabet: Alphabet, root: TrieNode, word_count: int):
        self._alphabet = alphabet
        self._root = root
        self._word_count = word_count

    @classmethod
    def build(cls, words: Iterable[str], alphabet: Alphabet) -> "Trie":
        """
        Build a trie from a word list.

        Args:
            words: Words to insert (duplicates are harmless)
            alphabet: Alphabet every character must belong to

        Returns:
            The constructed Trie

        Raises:
            UnknownCharacterError: If any word contains a character outside
                the alphabet. No trie is returned in that case.
        """
        width = len(alphabet)
        root = TrieNode(width)
        word_count = 0
        node_count = 1

        for word in words:
            node = root
            for char in word:
                index, found = alphabet.index_of(char)
                if not found:
                    raise UnknownCharacterError(char, word)
                child = node.children[index]
                if child is None:
                    child = TrieNode(width)
                    node.children[index] = child
                    node_count += 1
                node = child
            if not node.terminates:
                node.terminates = True
                word_count += 1

        logger.debug(
            "Trie built",
            word_count=word_count,
            node_count=node_count,
            alphabet_size=width,
        )
        return cls(alphabet, root, word_count)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def root(self) -> TrieNode:
        return self._root

    def contains(self, word: str) -> bool:
        """
        Check whether word is a dictionary word.

        Characters outside the alphabet simply make the word unknown.
        """
        node = self._root
        for char in word:
            index, found = self._alphabet.index_of(char)
            if not found:
                return False
            node = node.children[index]
            if node is None:
                return False
        return node.terminates

    def words(self) -> Iterator[str]:
        """Yield every stored word, prefixes first, siblings in alphabet order."""
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.terminates:
                yield prefix
            # Reversed so the lowest index is popped first
            for index in range(len(node.children) - 1, -1, -1):
                child = node.children[index]
                if child is not None:
                    stack.append((child, prefix + self._alphabet.character(index)))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._word_count

    def __repr__(self) -> str:
        return f"Trie(words={self._word_count}, alphabet={self._alphabet!r})"
