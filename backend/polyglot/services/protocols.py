"""
Protocol definitions for pluggable collaborators.

This module defines interfaces (Python Protocols) that allow:
- Swapping implementations (GhanaNLP HTTP API, fakes in tests)
- Platform-specific audio capture behind one contract
- Clear contracts between the orchestration code and its collaborators

Usage:
    from polyglot.services.protocols import TranslationBackendProtocol

    async def run(backend: TranslationBackendProtocol):
        text = await backend.translate("Hello", "en-tw")
"""

from typing import Any, Callable, Optional, Protocol


class TranslationBackendProtocol(Protocol):
    """
    Interface for the remote translation service.

    Implementations receive an API language pair (e.g. "tw-en") whose codes
    have already been rewritten to the names the remote service expects.
    """

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when credentials are missing."""
        ...

    async def translate(self, text: str, lang_pair: str) -> str:
        """
        Translate text.

        Args:
            text: Text to translate
            lang_pair: "<source>-<target>" pair in API codes

        Returns:
            The response body, unmodified
        """
        ...


class SpeechBackendProtocol(Protocol):
    """Interface for remote speech-to-text and speech-synthesis endpoints."""

    def ensure_configured(self) -> None:
        ...

    async def transcribe(
        self,
        audio: bytes,
        language: str,
        *,
        filename: str = ...,
        content_type: str = ...,
    ) -> str:
        ...

    async def get_tts_languages(self) -> Any:
        ...

    async def get_tts_speakers(self) -> Any:
        ...

    async def synthesize(self, text: str, language: str, speaker_id: Optional[str] = None) -> Any:
        ...


class SummaryEngineProtocol(Protocol):
    """
    Interface for the generative model behind summaries.

    ``generate`` receives a fully rendered prompt and returns the raw model
    text, or None when the model produced nothing.
    """

    async def generate(self, prompt: str) -> Optional[str]:
        ...


class AudioCaptureProtocol(Protocol):
    """
    Capability interface for platform audio capture.

    Browser, desktop and test implementations all expose the same four
    members; the recording buffer and transcription flow stay unaware of
    which one is active.

    Callbacks:
        on_result(chunk: bytes): called for every captured chunk, in the
            platform's native encoding
        on_error(message: str): called when capture fails
    """

    mime_type: str

    def start_capture(self) -> None:
        ...

    def stop_capture(self) -> None:
        ...

    def on_result(self, callback: Callable[[bytes], None]) -> None:
        ...

    def on_error(self, callback: Callable[[str], None]) -> None:
        ...
