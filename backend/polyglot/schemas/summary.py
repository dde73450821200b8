from pydantic import BaseModel

from polyglot.schemas.auth import LanguageCode


class TextSummaryRequest(BaseModel):
    text: str
    language: LanguageCode
