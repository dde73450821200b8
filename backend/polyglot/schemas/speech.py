from typing import Dict, List, Optional
from pydantic import BaseModel

from polyglot.schemas.auth import LanguageCode


class TranscribeRequest(BaseModel):
    audio_data_uri: str  # data:<mimetype>;base64,<data>
    language: LanguageCode


class TranscribeResponse(BaseModel):
    transcription: str


class SynthesizeRequest(BaseModel):
    text: str
    language: LanguageCode
    speaker_id: Optional[str] = None


class TtsLanguage(BaseModel):
    code: str
    name: str


class TtsOptionsResponse(BaseModel):
    languages: List[TtsLanguage]
    speakers: Dict[str, List[str]]
