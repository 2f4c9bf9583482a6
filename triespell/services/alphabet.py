"""
Alphabet mapping recognized characters to dense child-slot indices.
"""
from typing import Dict, Iterable, Iterator, Optional, Tuple


class DictionaryError(Exception):
    """Base exception for dictionary construction failures."""
    pass


class UnknownCharacterError(DictionaryError):
    """A character is not part of the declared alphabet."""

    def __init__(self, character: str, word: Optional[str] = None):
        self.character = character
        self.word = word
        if word is None:
            message = f"Character {character!r} not found in alphabet"
        else:
            message = f"Character {character!r} in word {word!r} not found in alphabet"
        super().__init__(message)


class Alphabet:
    """
    Ordered set of recognized characters.

    Each character gets a stable zero-based index used to address the
    fixed-width child lists of trie nodes. Duplicates collapse to the first
    index seen. Instances are immutable.
    """

    __slots__ = ("_characters", "_indices")

    def __init__(self, characters: Iterable[str]):
        """
        Build an alphabet from an explicit character sequence.

        Args:
            characters: Characters in index order (a string works)

        Raises:
            ValueError: If an element is not a single character
        """
        ordered = []
        indices: Dict[str, int] = {}
        for char in characters:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Alphabet entries must be single characters, got {char!r}")
            if char not in indices:
                indices[char] = len(ordered)
                ordered.append(char)

        self._characters: Tuple[str, ...] = tuple(ordered)
        self._indices = indices

    def index_of(self, character: str) -> Tuple[int, bool]:
        """
        Look up a character's index.

        Returns:
            (index, True) if the character is known, (-1, False) otherwise
        """
        index = self._indices.get(character)
        if index is None:
            return -1, False
        return index, True

    def index(self, character: str) -> int:
        """Like index_of, but raises UnknownCharacterError for unknown characters."""
        index = self._indices.get(character)
        if index is None:
            raise UnknownCharacterError(character)
        return index

    def character(self, index: int) -> str:
        """Reverse lookup from index to character."""
        return self._characters[index]

    @property
    def characters(self) -> str:
        return "".join(self._characters)

    def __len__(self) -> int:
        return len(self._characters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._characters)

    def __contains__(self, character: object) -> bool:
        return character in self._indices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._characters == other._characters

    def __hash__(self) -> int:
        return hash(self._characters)

    def __repr__(self) -> str:
        return f"Alphabet({self.characters!r})"
