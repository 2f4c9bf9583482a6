"""
Word-list spell-check service built on the trie checkers.
"""
import re
import string
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Pattern

from triespell.config import settings
from triespell.schemas.spellcheck import SpellingIssue
from triespell.services.alphabet import Alphabet
from triespell.services.checker_base import CLEAN, Checker, Verdict
from triespell.services.checker_factory import create_checker
from triespell.services.spellcheck_base import SpellCheckService
from triespell.services.trie import DictionaryError, Trie
from triespell.utils.logger import get_logger


logger = get_logger("services.spellcheck_dictionary")


def build_word_pattern(alphabet: Alphabet, lowercase: bool = True) -> Pattern[str]:
    """
    Build a tokenizer regex matching runs of alphabet characters.

    When lowercase is set, upper-case variants of the alphabet letters are
    matched too, since words are lower-cased before checking.
    """
    chars = set(alphabet)
    if lowercase:
        chars.update(char.upper() for char in alphabet if len(char.upper()) == 1)
    if not chars:
        raise ValueError("Cannot build a word pattern from an empty alphabet")
    char_class = "".join(re.escape(char) for char in sorted(chars))
    return re.compile(f"[{char_class}]+")


class DictionarySpellCheckService(SpellCheckService):
    """
    Spell-check service backed by a word list.

    Builds a Trie from a one-word-per-line file (or an in-memory list) and
    checks each distinct word of a text with a configurable Checker.
    """

    def __init__(
        self,
        wordlist_path: Optional[str] = None,
        alphabet: Optional[str] = None,
        checker: Optional[Checker] = None,
        lowercase: Optional[bool] = None,
    ):
        """
        Initialize the service.

        Args:
            wordlist_path: Path to word list file (one word per line)
            alphabet: Characters dictionary words are spelled in (default from config)
            checker: Checker to run on each word (default from create_checker())
            lowercase: Lower-case words before insertion and checking (default from config)
        """
        self._trie: Optional[Trie] = None
        self._loaded = False

        self._wordlist_path = Path(wordlist_path) if wordlist_path else Path(settings.SPELLCHECK_WORDLIST_PATH)
        self._alphabet = Alphabet(alphabet if alphabet is not None else settings.SPELLCHECK_ALPHABET)
        self._lowercase = settings.SPELLCHECK_LOWERCASE if lowercase is None else lowercase
        self._checker = checker if checker is not None else create_checker()
        self._word_pattern = build_word_pattern(self._alphabet, self._lowercase)

        logger.info(
            "Dictionary spell-check service initialized",
            wordlist_path=str(self._wordlist_path),
            alphabet_size=len(self._alphabet),
            lowercase=self._lowercase,
        )

    def load(self) -> bool:
        """
        Build the dictionary from the word list file.

        Returns:
            True if loaded successfully, False otherwise
        """
        if self._loaded:
            return True

        if not self._wordlist_path.exists():
            logger.error("Word list not found", wordlist_path=str(self._wordlist_path))
            return False

        try:
            with open(self._wordlist_path, "r", encoding="utf-8") as f:
                words = [line.strip() for line in f]
        except OSError as e:
            logger.error(
                "Failed to read word list",
                error=str(e),
                wordlist_path=str(self._wordlist_path),
            )
            return False

        return self.load_words(words)

    def load_words(self, words: Iterable[str]) -> bool:
        """
        Build the dictionary from an in-memory word list.

        Blank entries are skipped. A word containing a character outside the
        alphabet fails the whole load.

        Returns:
            True if loaded successfully, False otherwise
        """
        start_time = time.time()
        normalized = [self._normalize(word) for word in words if word and word.strip()]

        if not normalized:
            logger.error("No words loaded from word list", wordlist_path=str(self._wordlist_path))
            return False

        try:
            trie = Trie.build(normalized, self._alphabet)
        except DictionaryError as e:
            logger.error(
                "Failed to build dictionary (alphabet too narrow for word list)",
                error=str(e),
                alphabet=self._alphabet.characters,
            )
            return False

        self._trie = trie
        self._loaded = True

        logger.info(
            "Dictionary built from word list",
            word_count=len(trie),
            build_time_seconds=round(time.time() - start_time, 2),
        )
        return True

    def check_word(self, word: str, checker: Optional[Checker] = None) -> Verdict:
        """
        Check a single word.

        Args:
            word: Word to check
            checker: Checker to use instead of the service default

        Returns:
            Verdict (clean when the dictionary is not loaded)
        """
        if not self._loaded or self._trie is None:
            logger.warning("Spell-check called but dictionary not loaded")
            return CLEAN

        active = checker if checker is not None else self._checker
        return active.check(self._normalize(word), self._trie)

    def check_text(self, text: str) -> List[SpellingIssue]:
        """
        Check text for spelling issues.

        Args:
            text: Text to check

        Returns:
            Deduplicated list of misspelled words with suggestions, in text order
        """
        if not self._loaded or self._trie is None:
            logger.warning("Spell-check called but dictionary not loaded")
            return []

        issues: Dict[str, List[str]] = {}
        checked = set()

        for token in self._tokenize(text):
            word = self._dictionary_form(token)
            if not word or word in checked:
                continue
            checked.add(word)

            verdict = self._checker.check(word, self._trie)
            if verdict.misspelled:
                issues[word] = list(verdict.suggestions)

        logger.debug("Text checked", words=len(checked), issues=len(issues))

        return [
            SpellingIssue(word=word, suggestions=suggestions)
            for word, suggestions in issues.items()
        ]

    def _tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into words made of alphabet characters.

        Returns:
            List of words (preserving original case)
        """
        return self._word_pattern.findall(text)

    def _dictionary_form(self, token: str) -> str:
        """
        Normalize a token for checking.

        Punctuation at either edge (e.g. quoting apostrophes) is kept when the
        token is a dictionary word as written, such as "'tis", and stripped
        otherwise. An empty result means the token was only punctuation.
        """
        word = self._normalize(token)
        if self._trie is not None and self._trie.contains(word):
            return word
        return word.strip(string.punctuation)

    def _normalize(self, word: str) -> str:
        word = word.strip()
        return word.lower() if self._lowercase else word

    @property
    def trie(self) -> Optional[Trie]:
        return self._trie

    @property
    def checker(self) -> Checker:
        return self._checker

    def word_count(self) -> int:
        return len(self._trie) if self._trie is not None else 0

    def is_loaded(self) -> bool:
        """Check if dictionary is loaded."""
        return self._loaded

    def get_alphabet(self) -> Alphabet:
        """Get the dictionary alphabet."""
        return self._alphabet
