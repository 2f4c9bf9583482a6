"""
Checker factory.

Builds the configured default checker pipeline and arbitrary checker trees
from nested descriptions (used for per-request checker selection).
"""
from typing import Any, Dict, Optional, Union

from triespell.config import settings
from triespell.schemas.spellcheck import CheckerSpec
from triespell.services.checker_base import Checker
from triespell.services.checker_combinators import IntersectChecker, UnionChecker
from triespell.services.checker_fuzzy import BoundedFuzzyChecker
from triespell.services.checker_simple import ExactMatchChecker, LengthGateChecker
from triespell.utils.logger import get_logger


logger = get_logger("services.checker_factory")


def create_checker(
    min_word_length: Optional[int] = None,
    insertions: Optional[int] = None,
    deletions: Optional[int] = None,
    swaps: Optional[int] = None,
    substitutions: Optional[int] = None,
    max_suggestions: Optional[int] = None,
) -> Checker:
    """
    Create the default checking pipeline.

    Words shorter than min_word_length are never flagged. Longer words are
    flagged when they are not in the dictionary, with fuzzy corrections
    when any are within budget:

        Intersect([LengthGate, Union([BoundedFuzzy, ExactMatch])])

    Arguments left as None fall back to the SPELLCHECK_* settings. The
    fuzzy word-length cap always comes from SPELLCHECK_MAX_FUZZY_WORD_LENGTH.

    Returns:
        Checker instance
    """
    def pick(value: Optional[int], default: int) -> int:
        return default if value is None else value

    fuzzy = BoundedFuzzyChecker(
        insertions=pick(insertions, settings.SPELLCHECK_MAX_INSERTIONS),
        deletions=pick(deletions, settings.SPELLCHECK_MAX_DELETIONS),
        swaps=pick(swaps, settings.SPELLCHECK_MAX_SWAPS),
        substitutions=pick(substitutions, settings.SPELLCHECK_MAX_SUBSTITUTIONS),
        max_suggestions=pick(max_suggestions, settings.SPELLCHECK_SUGGESTION_COUNT),
        max_word_length=settings.SPELLCHECK_MAX_FUZZY_WORD_LENGTH,
    )
    checker = IntersectChecker([
        LengthGateChecker(pick(min_word_length, settings.SPELLCHECK_MIN_WORD_LENGTH)),
        UnionChecker([fuzzy, ExactMatchChecker()]),
    ])

    logger.debug("Created default checker", checker=repr(checker))
    return checker


def create_checker_from_spec(spec: Union[CheckerSpec, Dict[str, Any]]) -> Checker:
    """
    Build a checker tree from a nested description.

    Args:
        spec: CheckerSpec or an equivalent dict, e.g.
            {"type": "intersect", "children": [
                {"type": "length_gate", "threshold": 4},
                {"type": "fuzzy", "substitutions": 1},
            ]}

    Returns:
        Checker instance

    Raises:
        ValueError: If the description is invalid (pydantic.ValidationError
            is a ValueError)
    """
    if not isinstance(spec, CheckerSpec):
        spec = CheckerSpec.model_validate(spec)

    if spec.type == "length_gate":
        if spec.threshold is None:
            raise ValueError("length_gate checker requires a threshold")
        return LengthGateChecker(spec.threshold)

    if spec.type == "exact_match":
        return ExactMatchChecker()

    if spec.type == "fuzzy":
        return BoundedFuzzyChecker(
            insertions=spec.insertions,
            deletions=spec.deletions,
            swaps=spec.swaps,
            substitutions=spec.substitutions,
            max_suggestions=spec.max_suggestions,
            max_word_length=settings.SPELLCHECK_MAX_FUZZY_WORD_LENGTH,
        )

    children = [create_checker_from_spec(child) for child in spec.children]
    if spec.type == "union":
        return UnionChecker(children)
    return IntersectChecker(children)
