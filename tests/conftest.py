"""
Pytest configuration and fixtures for triespell tests.
"""
import os
from typing import AsyncGenerator, List

import pytest
from httpx import AsyncClient, ASGITransport

# Set before importing Settings so tests never look for a real word list
os.environ["SPELLCHECK_ENABLED"] = "false"
os.environ.setdefault("SPELLCHECK_WORDLIST_PATH", "/nonexistent/words.txt")

from triespell.main import app
from triespell.services.alphabet import Alphabet
from triespell.services.checker_factory import create_checker
from triespell.services.spellcheck import initialize_spellcheck, reset_spellcheck
from triespell.services.spellcheck_dictionary import DictionarySpellCheckService
from triespell.services.trie import Trie


# Small numeric dictionary used by the checker tests
DIGIT_ALPHABET = "1234"
DIGIT_WORDS = ["1", "12", "123", "1234"]

ENGLISH_ALPHABET = "abcdefghijklmnopqrstuvwxyz'"
ENGLISH_WORDS = ["hello", "world", "help", "word", "the", "spell", "check", "don't"]


@pytest.fixture
def digit_alphabet() -> Alphabet:
    return Alphabet(DIGIT_ALPHABET)


@pytest.fixture
def digit_trie(digit_alphabet: Alphabet) -> Trie:
    """Dictionary {"1", "12", "123", "1234"} over alphabet "1234"."""
    return Trie.build(DIGIT_WORDS, digit_alphabet)


@pytest.fixture
def english_words() -> List[str]:
    return list(ENGLISH_WORDS)


@pytest.fixture
def english_service(english_words: List[str]) -> DictionarySpellCheckService:
    """
    Loaded service with an explicit checker so tests don't depend on
    SPELLCHECK_* environment settings.
    """
    service = DictionarySpellCheckService(
        wordlist_path="/nonexistent/words.txt",
        alphabet=ENGLISH_ALPHABET,
        lowercase=True,
        checker=create_checker(
            min_word_length=3,
            insertions=1,
            deletions=1,
            swaps=1,
            substitutions=1,
            max_suggestions=5,
        ),
    )
    assert service.load_words(english_words)
    return service


@pytest.fixture
async def client(english_service: DictionarySpellCheckService) -> AsyncGenerator[AsyncClient, None]:
    """
    Async test client with the English test dictionary installed.

    ASGITransport does not run the lifespan, so the service singleton is
    installed here directly.
    """
    assert initialize_spellcheck(english_service)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    reset_spellcheck()


@pytest.fixture
async def unloaded_client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client with no dictionary loaded."""
    reset_spellcheck()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
