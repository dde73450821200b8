"""
Recording Buffer

Collects chunks from an AudioCaptureProtocol implementation until capture
stops, then assembles them into the single data-URI payload the
transcription proxy expects. Chunks are kept in the recorder's native
encoding; nothing is re-encoded.
"""
import logging
from typing import List, Optional

from polyglot.services.protocols import AudioCaptureProtocol
from polyglot.services.speech.transcription import encode_data_uri

logger = logging.getLogger(__name__)


class RecordingBuffer:
    """Accumulates one recording from a capture device."""

    def __init__(self, capture: AudioCaptureProtocol):
        self._capture = capture
        self._chunks: List[bytes] = []
        self.is_recording = False
        self.error: Optional[str] = None
        capture.on_result(self._append)
        capture.on_error(self._fail)

    def _append(self, chunk: bytes) -> None:
        if chunk:
            self._chunks.append(chunk)

    def _fail(self, message: str) -> None:
        logger.error(f"[RecordingBuffer] Capture error: {message}")
        self.error = message
        self.is_recording = False

    def start(self) -> None:
        self._chunks = []
        self.error = None
        self.is_recording = True
        self._capture.start_capture()

    def stop(self) -> str:
        """Stop capturing and return the recording as a data URI."""
        self._capture.stop_capture()
        self.is_recording = False
        return self.to_data_uri()

    @property
    def byte_count(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def to_data_uri(self) -> str:
        return encode_data_uri(self._capture.mime_type, b"".join(self._chunks))
