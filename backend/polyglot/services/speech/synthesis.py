"""
Speech Synthesis

Proxies the GhanaNLP TTS option endpoints (which refuse browser-origin
requests) and the synthesize endpoint, and builds the filtered options the
UI offers.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from polyglot.config.constants import TTS_SUPPORTED_LANGUAGES, MAX_TTS_CHARS
from polyglot.models.activity import ActivityKind
from polyglot.services.activity.logger import ActivityLogger
from polyglot.services.exceptions import InvalidInputError
from polyglot.services.ghananlp.client import SynthesizedAudio
from polyglot.services.protocols import SpeechBackendProtocol

logger = logging.getLogger(__name__)


@dataclass
class TtsOptions:
    """Languages and speakers the app can offer for synthesis."""
    languages: List[Dict[str, str]] = field(default_factory=list)
    speakers: Dict[str, List[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"languages": self.languages, "speakers": self.speakers}


def build_tts_options(raw_languages: Any, raw_speakers: Any) -> TtsOptions:
    """
    Intersect the API's language list with the app-supported TTS subset.

    ``raw_languages`` is the body of GET /tts/v1/languages, whose
    ``languages`` member is keyed by language code. ``raw_speakers`` is the
    body of GET /tts/v1/speakers, whose ``speakers`` member is keyed by the
    API language name.
    """
    api_languages = raw_languages.get("languages") if isinstance(raw_languages, dict) else None
    api_codes = set(api_languages.keys()) if isinstance(api_languages, dict) else set()

    languages = [
        {"code": code, "name": name}
        for code, name in TTS_SUPPORTED_LANGUAGES.items()
        if code in api_codes
    ]
    if not languages:
        logger.warning(
            f"[TTS] No supported TTS languages reported by API (got: {sorted(api_codes) or 'none'})"
        )

    api_speakers = raw_speakers.get("speakers") if isinstance(raw_speakers, dict) else None
    api_speakers = api_speakers if isinstance(api_speakers, dict) else {}

    speakers = {
        entry["code"]: list(api_speakers.get(entry["name"], []))
        for entry in languages
    }
    return TtsOptions(languages=languages, speakers=speakers)


class SynthesisService:
    """
    TTS options proxy plus synthesis.

    The filtered options are fetched once per process and kept in memory.
    """

    def __init__(
        self,
        backend: SpeechBackendProtocol,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._backend = backend
        self._activity_logger = activity_logger
        self._options: Optional[TtsOptions] = None
        self._options_lock = asyncio.Lock()

    async def get_languages(self) -> Any:
        self._backend.ensure_configured()
        logger.info("[TTS] Fetching TTS languages from GhanaNLP API")
        return await self._backend.get_tts_languages()

    async def get_speakers(self) -> Any:
        self._backend.ensure_configured()
        logger.info("[TTS] Fetching TTS speakers from GhanaNLP API")
        return await self._backend.get_tts_speakers()

    async def get_options(self) -> TtsOptions:
        if self._options is not None:
            return self._options
        async with self._options_lock:
            if self._options is None:
                raw_languages = await self.get_languages()
                raw_speakers = await self.get_speakers()
                self._options = build_tts_options(raw_languages, raw_speakers)
        return self._options

    async def synthesize(
        self,
        text: str,
        language: str,
        speaker_id: Optional[str] = None,
        *,
        user_id: Optional[str] = None,
    ) -> SynthesizedAudio:
        if not text or not text.strip():
            raise InvalidInputError("Please enter text to speak.")
        if len(text) > MAX_TTS_CHARS:
            raise InvalidInputError(f"Text to speak must be {MAX_TTS_CHARS} characters or less.")
        if language not in TTS_SUPPORTED_LANGUAGES:
            raise InvalidInputError(f"Speech synthesis is not available for {language!r}")
        self._backend.ensure_configured()

        audio = await self._backend.synthesize(text, language, speaker_id)

        if user_id and self._activity_logger is not None:
            payload = {"spoken_text": text, "selected_language": language}
            if speaker_id:
                payload["speaker_id"] = speaker_id
            self._activity_logger.submit(user_id, ActivityKind.TEXT_TO_SPEECH, payload)

        return audio
