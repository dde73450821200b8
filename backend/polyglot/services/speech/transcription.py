"""
Transcription Proxy

Decodes a browser recording sent as a base64 data URI and forwards the raw
bytes to the GhanaNLP speech-to-text endpoint. The audio is passed through
in whatever encoding the recorder produced; the API accepts webm/ogg as is.
"""
import base64
import logging
import re
from dataclasses import dataclass
from typing import Optional

from polyglot.config.constants import SUPPORTED_LANGUAGES, DEFAULT_RECORDING_FILENAME
from polyglot.models.activity import ActivityKind
from polyglot.services.activity.logger import ActivityLogger
from polyglot.services.exceptions import InvalidInputError, InvalidPayloadError
from polyglot.services.protocols import SpeechBackendProtocol

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r"^data:(.+);base64,(.+)$", re.DOTALL)
NON_BASE64_CHARS = re.compile(r"[^A-Za-z0-9+/]")

# Extensions for the container formats browsers record in
MIME_EXTENSIONS = {
    "audio/webm": "webm",
    "audio/ogg": "ogg",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/mpeg": "mp3",
    "audio/mp4": "m4a",
}


@dataclass
class DecodedAudio:
    mime_type: str
    data: bytes

    @property
    def filename(self) -> str:
        base_type = self.mime_type.split(";")[0].strip().lower()
        extension = MIME_EXTENSIONS.get(base_type)
        if not extension:
            return DEFAULT_RECORDING_FILENAME
        return f"recording.{extension}"


def decode_data_uri(payload: str) -> DecodedAudio:
    """Split ``data:<mimetype>;base64,<data>`` into mime type and bytes."""
    match = DATA_URI_PATTERN.match(payload or "")
    if not match:
        raise InvalidPayloadError()
    mime_type, encoded = match.groups()
    return DecodedAudio(mime_type=mime_type, data=_decode_base64_lenient(encoded))


def _decode_base64_lenient(encoded: str) -> bytes:
    """
    Decode base64 the way browsers and Node buffers do.

    URL-safe characters are accepted; whitespace, padding and other stray
    characters are dropped, and a dangling final character is ignored.
    """
    cleaned = NON_BASE64_CHARS.sub("", encoded.replace("-", "+").replace("_", "/"))
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


def encode_data_uri(mime_type: str, data: bytes) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


class TranscriptionService:
    """Forwards recordings to the speech-to-text API and logs the result."""

    def __init__(
        self,
        backend: SpeechBackendProtocol,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._backend = backend
        self._activity_logger = activity_logger

    async def transcribe(
        self,
        audio_data_uri: str,
        language: str,
        *,
        user_id: Optional[str] = None,
    ) -> str:
        """
        Transcribe a recording.

        Args:
            audio_data_uri: "data:<mimetype>;base64,<data>"
            language: App language code passed as the ``language`` query parameter
            user_id: Owner for the voice-to-text history entry

        Returns:
            The transcription, exactly as the API returned it
        """
        self._backend.ensure_configured()
        if language not in SUPPORTED_LANGUAGES:
            raise InvalidInputError(f"Unsupported language: {language!r}")
        audio = decode_data_uri(audio_data_uri)

        logger.info(
            f"[Transcription] Sending {len(audio.data)} bytes of {audio.mime_type} ({language})"
        )
        transcription = await self._backend.transcribe(
            audio.data,
            language,
            filename=audio.filename,
            content_type=audio.mime_type,
        )

        if user_id and self._activity_logger is not None:
            self._activity_logger.submit(
                user_id,
                ActivityKind.VOICE_TO_TEXT,
                {"recognized_speech": transcription, "detected_language": language},
            )

        return transcription
