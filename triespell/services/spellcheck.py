"""
Spell-check service factory and singleton management.
"""
from typing import Optional

from triespell.services.spellcheck_dictionary import DictionarySpellCheckService
from triespell.utils.logger import get_logger

logger = get_logger("services.spellcheck")

_spellcheck_service: Optional[DictionarySpellCheckService] = None


def get_spellcheck_service() -> Optional[DictionarySpellCheckService]:
    """
    Get the singleton spell-check service.

    Returns:
        DictionarySpellCheckService instance if initialized, None otherwise
    """
    return _spellcheck_service


def initialize_spellcheck(service: Optional[DictionarySpellCheckService] = None) -> bool:
    """
    Initialize the spell-check service singleton.

    Called during app startup to pre-load the dictionary.

    Args:
        service: Service to install (default: one built from settings)

    Returns:
        True if initialized successfully, False otherwise
    """
    global _spellcheck_service

    logger.info("Initializing spell-check service...")
    candidate = service if service is not None else DictionarySpellCheckService()

    if candidate.load():
        _spellcheck_service = candidate
        logger.info("Spell-check service initialized successfully", word_count=candidate.word_count())
        return True
    else:
        logger.warning("Failed to initialize spell-check service")
        _spellcheck_service = None
        return False


def reset_spellcheck() -> None:
    """Drop the singleton (used at shutdown)."""
    global _spellcheck_service
    _spellcheck_service = None
