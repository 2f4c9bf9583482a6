"""
Pydantic schemas for API request/response models.
"""
from triespell.schemas.spellcheck import (
    CheckerSpec,
    HealthResponse,
    SpellCheckRequest,
    SpellCheckResponse,
    SpellingIssue,
    WordCheckRequest,
    WordCheckResponse,
)

__all__ = [
    "CheckerSpec",
    "HealthResponse",
    "SpellCheckRequest",
    "SpellCheckResponse",
    "SpellingIssue",
    "WordCheckRequest",
    "WordCheckResponse",
]
