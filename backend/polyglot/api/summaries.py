from fastapi import APIRouter, Depends

from polyglot.api.auth import get_current_user
from polyglot.api.deps import get_summarizer
from polyglot.api.errors import to_http_exception
from polyglot.config.constants import SUPPORTED_LANGUAGES
from polyglot.models.user import User
from polyglot.schemas.summary import TextSummaryRequest
from polyglot.schemas.translation import SummaryResponse
from polyglot.services.exceptions import PolyglotError
from polyglot.services.summary.summarizer import Summarizer

router = APIRouter()


@router.post("/summaries", response_model=SummaryResponse)
async def summarize_text(
    req: TextSummaryRequest,
    summarizer: Summarizer = Depends(get_summarizer),
    current_user: User = Depends(get_current_user)
):
    """Summarize long-form text (news, essays, transcripts)."""
    language_name = SUPPORTED_LANGUAGES[req.language]
    try:
        summary = await summarizer.summarize_text(
            req.text,
            language_name,
            language_code=req.language,
            user_id=current_user.id,
        )
    except PolyglotError as e:
        raise to_http_exception(e)
    return SummaryResponse(summary=summary)
