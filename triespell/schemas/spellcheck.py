"""
Pydantic schemas for spell-check functionality.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from triespell.config import settings

# Upper bound on each budget in a per-request checker
_MAX_BUDGET = settings.SPELLCHECK_MAX_REQUEST_BUDGET


class SpellingIssue(BaseModel):
    """A spelling issue with suggested corrections."""

    word: str = Field(description="Misspelled word (as checked, lower-cased when configured)")
    suggestions: List[str] = Field(description="Suggested corrections in discovery order")


class CheckerSpec(BaseModel):
    """
    Nested description of a checker tree.

    Only the fields relevant to `type` are used:
    - length_gate: threshold
    - exact_match: nothing
    - fuzzy: insertions, deletions, swaps, substitutions, max_suggestions
    - union / intersect: children
    """

    type: Literal["length_gate", "exact_match", "fuzzy", "union", "intersect"]
    threshold: Optional[int] = Field(default=None, ge=0, description="Length gate threshold")
    insertions: int = Field(default=0, ge=0, le=_MAX_BUDGET)
    deletions: int = Field(default=0, ge=0, le=_MAX_BUDGET)
    swaps: int = Field(default=0, ge=0, le=_MAX_BUDGET)
    substitutions: int = Field(default=0, ge=0, le=_MAX_BUDGET)
    max_suggestions: Optional[int] = Field(
        default=1,
        ge=1,
        description="Stop after this many suggestions (null collects all)"
    )
    children: List["CheckerSpec"] = Field(default_factory=list)


class SpellCheckRequest(BaseModel):
    """Request schema for checking a block of text."""

    text: str = Field(..., max_length=100_000, description="Text to check")


class SpellCheckResponse(BaseModel):
    """Response schema for text checks."""

    issues: List[SpellingIssue] = Field(description="Misspelled words, deduplicated, in text order")


class WordCheckRequest(BaseModel):
    """Request schema for checking a single word."""

    word: str = Field(..., max_length=256, description="Word to check")
    checker: Optional[CheckerSpec] = Field(
        default=None,
        description="Checker to use instead of the configured default"
    )


class WordCheckResponse(BaseModel):
    """Response schema for single-word checks."""

    word: str
    misspelled: bool
    suggestions: List[str]


class HealthResponse(BaseModel):
    """Schema for health check endpoint response."""

    status: str
    dictionary_loaded: bool
    word_count: int
    timestamp: datetime
