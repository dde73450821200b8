"""
Speech API - transcription, TTS options and synthesis

The TTS option routes exist because the GhanaNLP endpoints reject
browser-origin requests; the server adds the subscription key.
"""
from typing import Any

from fastapi import APIRouter, Depends, Response

from polyglot.api.auth import get_current_user
from polyglot.api.deps import get_transcription_service, get_synthesis_service
from polyglot.api.errors import to_http_exception
from polyglot.models.user import User
from polyglot.schemas.speech import (
    TranscribeRequest,
    TranscribeResponse,
    SynthesizeRequest,
    TtsOptionsResponse,
)
from polyglot.services.exceptions import PolyglotError
from polyglot.services.speech.synthesis import SynthesisService
from polyglot.services.speech.transcription import TranscriptionService

router = APIRouter()


@router.post("/speech/transcribe", response_model=TranscribeResponse)
async def transcribe(
    req: TranscribeRequest,
    service: TranscriptionService = Depends(get_transcription_service),
    current_user: User = Depends(get_current_user)
):
    try:
        text = await service.transcribe(req.audio_data_uri, req.language, user_id=current_user.id)
    except PolyglotError as e:
        raise to_http_exception(e)
    return TranscribeResponse(transcription=text)


@router.get("/tts/languages")
async def tts_languages(
    service: SynthesisService = Depends(get_synthesis_service),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Raw GhanaNLP language list, passed through unmodified."""
    try:
        return await service.get_languages()
    except PolyglotError as e:
        raise to_http_exception(e)


@router.get("/tts/speakers")
async def tts_speakers(
    service: SynthesisService = Depends(get_synthesis_service),
    current_user: User = Depends(get_current_user)
) -> Any:
    """Raw GhanaNLP speaker mapping, passed through unmodified."""
    try:
        return await service.get_speakers()
    except PolyglotError as e:
        raise to_http_exception(e)


@router.get("/tts/options", response_model=TtsOptionsResponse)
async def tts_options(
    service: SynthesisService = Depends(get_synthesis_service),
    current_user: User = Depends(get_current_user)
):
    """Languages and speakers the app supports for synthesis."""
    try:
        options = await service.get_options()
    except PolyglotError as e:
        raise to_http_exception(e)
    return TtsOptionsResponse(**options.to_dict())


@router.post("/tts/synthesize")
async def synthesize(
    req: SynthesizeRequest,
    service: SynthesisService = Depends(get_synthesis_service),
    current_user: User = Depends(get_current_user)
):
    try:
        audio = await service.synthesize(
            req.text,
            req.language,
            req.speaker_id,
            user_id=current_user.id,
        )
    except PolyglotError as e:
        raise to_http_exception(e)
    return Response(content=audio.content, media_type=audio.media_type)
