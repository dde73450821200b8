"""
GhanaNLP API Client

Thin async wrapper around the third-party GhanaNLP translation/speech API.

Every request carries the subscription key header. Two keys can be
configured: the dev key is preferred, and when it is refused with a 403 the
request is re-issued once with the basic key, which then stays active for
the rest of the process. No other retries are attempted.

Usage:
    client = GhanaNLPClient.from_settings()
    text = await client.translate("Hello", "en-tw")
    await client.aclose()
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from polyglot.config.settings import settings
from polyglot.config.constants import (
    SUBSCRIPTION_KEY_HEADER,
    TRANSLATE_PATH,
    TRANSCRIBE_PATH,
    TTS_LANGUAGES_PATH,
    TTS_SPEAKERS_PATH,
    TTS_SYNTHESIZE_PATH,
    DEFAULT_RECORDING_FILENAME,
)
from polyglot.services.exceptions import (
    ConfigurationError,
    UpstreamHTTPError,
    UpstreamTransportError,
)
from polyglot.services.metrics import upstream_latency

logger = logging.getLogger(__name__)


@dataclass
class SynthesizedAudio:
    content: bytes
    media_type: str


class GhanaNLPClient:
    """Handles all HTTP traffic to the GhanaNLP API."""

    def __init__(
        self,
        *,
        base_url: str,
        dev_key: Optional[str] = None,
        basic_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.dev_key = dev_key or None
        self.basic_key = basic_key or None
        self.active_key_type = "dev" if self.dev_key else "basic"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GhanaNLPClient":
        return cls(
            base_url=settings.GHANANLP_BASE_URL,
            dev_key=settings.GHANANLP_API_KEY_DEV,
            basic_key=settings.GHANANLP_API_KEY_BASIC,
            timeout=settings.GHANANLP_TIMEOUT_SEC,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.dev_key or self.basic_key)

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when no subscription key is available."""
        if not self.is_configured:
            raise ConfigurationError("GhanaNLP API key is not configured on the server.")

    def _active_key(self) -> str:
        # Services check first so they can fail before doing local work; this
        # covers callers that use the client directly.
        self.ensure_configured()
        if self.active_key_type == "dev" and self.dev_key:
            return self.dev_key
        return self.basic_key

    async def _send(self, method: str, path: str, key: str, **kwargs) -> httpx.Response:
        headers = dict(kwargs.pop("headers", None) or {})
        headers[SUBSCRIPTION_KEY_HEADER] = key
        try:
            with upstream_latency.labels(endpoint=path).time():
                return await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"[GhanaNLP] {method} {path} transport error: {e!r}")
            raise UpstreamTransportError(str(e) or type(e).__name__) from e

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        key = self._active_key()
        key_type = self.active_key_type
        response = await self._send(method, path, key, **kwargs)

        if response.status_code == 403 and key_type == "dev" and self.basic_key:
            logger.warning(
                f"[GhanaNLP] Dev key refused on {path} (403), switching to basic key"
            )
            self.active_key_type = "basic"
            response = await self._send(method, path, self.basic_key, **kwargs)

        if response.is_error:
            logger.error(
                f"[GhanaNLP] {method} {path} failed with {response.status_code}"
            )
            raise UpstreamHTTPError(response.status_code, response.text, response.reason_phrase)

        return response

    async def translate(self, text: str, lang_pair: str) -> str:
        """Translate text for an API language pair such as ``"en-tw"``."""
        response = await self._request(
            "POST",
            TRANSLATE_PATH,
            json={"in": text, "lang": lang_pair},
        )
        return response.text

    async def transcribe(
        self,
        audio: bytes,
        language: str,
        *,
        filename: str = DEFAULT_RECORDING_FILENAME,
        content_type: str = "application/octet-stream",
    ) -> str:
        """Upload audio bytes for speech-to-text; the API answers in plain text."""
        response = await self._request(
            "POST",
            TRANSCRIBE_PATH,
            params={"language": language},
            files={"file": (filename, audio, content_type)},
        )
        return response.text

    async def get_tts_languages(self) -> Any:
        response = await self._request(
            "GET", TTS_LANGUAGES_PATH, headers={"Content-Type": "application/json"}
        )
        return response.json()

    async def get_tts_speakers(self) -> Any:
        response = await self._request(
            "GET", TTS_SPEAKERS_PATH, headers={"Content-Type": "application/json"}
        )
        return response.json()

    async def synthesize(self, text: str, language: str, speaker_id: Optional[str] = None) -> SynthesizedAudio:
        response = await self._request(
            "POST",
            TTS_SYNTHESIZE_PATH,
            json={"text": text, "language": language, "speaker_id": speaker_id},
        )
        media_type = response.headers.get("content-type", "audio/wav")
        return SynthesizedAudio(content=response.content, media_type=media_type)

    async def aclose(self) -> None:
        await self._client.aclose()
