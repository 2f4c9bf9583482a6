"""
API routes for spell-checking text and single words.

Handlers are plain functions, so FastAPI runs them in its threadpool.
"""
from fastapi import APIRouter, HTTPException, status

from triespell.schemas.spellcheck import (
    SpellCheckRequest,
    SpellCheckResponse,
    WordCheckRequest,
    WordCheckResponse,
)
from triespell.services.checker_factory import create_checker_from_spec
from triespell.services.spellcheck import get_spellcheck_service
from triespell.services.spellcheck_dictionary import DictionarySpellCheckService
from triespell.utils.logger import get_logger

logger = get_logger("routes.spellcheck")

router = APIRouter(prefix="/api/v1", tags=["Spellcheck"])


def _require_service() -> DictionarySpellCheckService:
    service = get_spellcheck_service()
    if service is None or not service.is_loaded():
        logger.warning("Spell-check requested but dictionary not loaded")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Spell-check dictionary is not loaded"
        )
    return service


@router.post(
    "/spellcheck",
    response_model=SpellCheckResponse,
    summary="Check text",
    responses={503: {"description": "Dictionary not loaded"}}
)
def check_text(request: SpellCheckRequest) -> SpellCheckResponse:
    """
    Check a block of text with the configured checker.

    Returns:
        SpellCheckResponse listing each distinct misspelled word once
    """
    service = _require_service()
    issues = service.check_text(request.text)

    logger.info("Text spell-checked", text_length=len(request.text), issues=len(issues))
    return SpellCheckResponse(issues=issues)


@router.post(
    "/spellcheck/word",
    response_model=WordCheckResponse,
    summary="Check a single word",
    responses={
        422: {"description": "Invalid checker description"},
        503: {"description": "Dictionary not loaded"}
    }
)
def check_word(request: WordCheckRequest) -> WordCheckResponse:
    """
    Check one word, optionally with a caller-supplied checker tree.

    Returns:
        WordCheckResponse with the verdict
    """
    service = _require_service()

    checker = None
    if request.checker is not None:
        try:
            checker = create_checker_from_spec(request.checker)
        except ValueError as e:
            logger.warning("Invalid checker description", error=str(e))
            raise HTTPException(
                status_code=422,
                detail=str(e)
            )

    verdict = service.check_word(request.word, checker=checker)
    return WordCheckResponse(
        word=request.word,
        misspelled=verdict.misspelled,
        suggestions=list(verdict.suggestions),
    )
