from typing import Optional
from pydantic import BaseModel

from polyglot.schemas.auth import LanguageCode


class TranslateRequest(BaseModel):
    text: str
    source_language: LanguageCode
    target_language: LanguageCode


class TranslateResponse(BaseModel):
    translated_text: str
    source_language: str
    target_language: str
    pivot_text: Optional[str] = None


class TranslationSummaryRequest(BaseModel):
    translation: str
    target_language: LanguageCode


class SummaryResponse(BaseModel):
    summary: str
