"""
Request dependencies.

Long-lived services are built once in the application lifespan and stored
on ``app.state``; these dependencies hand them to the routes.
"""
from fastapi import Request

from polyglot.services.speech.synthesis import SynthesisService
from polyglot.services.speech.transcription import TranscriptionService
from polyglot.services.summary.summarizer import Summarizer
from polyglot.services.translation.orchestrator import TranslationOrchestrator


def get_translation_orchestrator(request: Request) -> TranslationOrchestrator:
    return request.app.state.translation_orchestrator


def get_transcription_service(request: Request) -> TranscriptionService:
    return request.app.state.transcription_service


def get_synthesis_service(request: Request) -> SynthesisService:
    return request.app.state.synthesis_service


def get_summarizer(request: Request) -> Summarizer:
    return request.app.state.summarizer
