"""
Translate API - text translation and translation summaries
"""
from fastapi import APIRouter, Depends

from polyglot.api.auth import get_current_user
from polyglot.api.deps import get_translation_orchestrator, get_summarizer
from polyglot.api.errors import to_http_exception
from polyglot.config.constants import SUPPORTED_LANGUAGES
from polyglot.models.user import User
from polyglot.schemas.translation import (
    TranslateRequest,
    TranslateResponse,
    TranslationSummaryRequest,
    SummaryResponse,
)
from polyglot.services.exceptions import PolyglotError
from polyglot.services.summary.summarizer import Summarizer
from polyglot.services.translation.orchestrator import TranslationOrchestrator

router = APIRouter()


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    req: TranslateRequest,
    orchestrator: TranslationOrchestrator = Depends(get_translation_orchestrator),
    current_user: User = Depends(get_current_user)
):
    """
    Translate text between English and the supported Ghanaian languages.

    Local-to-local pairs (e.g. tw -> ee) are translated through English.
    The translation is added to the user's history in the background.
    """
    try:
        result = await orchestrator.translate(
            req.text,
            req.source_language,
            req.target_language,
            user_id=current_user.id,
        )
    except PolyglotError as e:
        raise to_http_exception(e)

    return TranslateResponse(
        translated_text=result.translated_text,
        source_language=result.source_language,
        target_language=result.target_language,
        pivot_text=result.pivot_text,
    )


@router.post("/translate/summary", response_model=SummaryResponse)
async def summarize_translation(
    req: TranslationSummaryRequest,
    summarizer: Summarizer = Depends(get_summarizer),
    current_user: User = Depends(get_current_user)
):
    """Summarize a translated text for a language learner."""
    language_name = SUPPORTED_LANGUAGES[req.target_language]
    try:
        summary = await summarizer.summarize_translation(req.translation, language_name)
    except PolyglotError as e:
        raise to_http_exception(e)
    return SummaryResponse(summary=summary)
