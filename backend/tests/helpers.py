import json
import uuid
from typing import Dict, List, Optional

import httpx
from fastapi.testclient import TestClient

from polyglot.services.exceptions import ConfigurationError
from polyglot.services.ghananlp.client import GhanaNLPClient


def unique_email(prefix: str = 'user') -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}@example.com"


def create_user(client: TestClient, email: Optional[str] = None, full_name: str = 'Test User', password: str = 'pass123', preferred_language: str = 'en'):
    if email is None:
        email = unique_email()
    payload = {
        'email': email,
        'full_name': full_name,
        'password': password,
        'preferred_language': preferred_language,
    }
    r = client.post('/api/auth/register', json=payload)
    return r


def auth_headers(client: TestClient) -> Dict[str, str]:
    r = create_user(client)
    assert r.status_code == 201
    return {"Authorization": f"Bearer {r.json()['token']}"}


class FakeGhanaNLP:
    """
    In-process stand-in for the GhanaNLP API, served through httpx.MockTransport.

    Translate answers come from ``translations`` keyed by language pair and
    default to "<pair>:<input>". Set ``status_code``/``error_body`` to make
    every endpoint fail, or ``transport_error`` to make the connection itself fail.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.translations: Dict[str, str] = {}
        self.transcription = "Ɛte sɛn?"
        self.languages = {"languages": {"tw": "Twi", "ee": "Ewe", "ki": "Kikuyu"}}
        self.speakers = {"speakers": {"Twi": ["twi_speaker_4", "twi_speaker_5"], "Ewe": ["ewe_speaker_3"], "Kikuyu": ["kikuyu_speaker_1"]}}
        self.audio = b"RIFF\x00\x00WAVEfmt "
        self.status_code = 200
        self.error_body = ""
        self.refused_keys: set = set()
        self.transport_error: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.transport_error is not None:
            raise self.transport_error
        if request.headers.get("Ocp-Apim-Subscription-Key") in self.refused_keys:
            return httpx.Response(403, text="Access denied due to invalid subscription key.")
        if self.status_code >= 400:
            return httpx.Response(self.status_code, text=self.error_body)

        path = request.url.path
        if path == "/v1/translate":
            body = json.loads(request.content)
            text = self.translations.get(body["lang"], f"{body['lang']}:{body['in']}")
            return httpx.Response(200, text=text)
        if path == "/asr/v1/transcribe":
            return httpx.Response(200, text=self.transcription)
        if path == "/tts/v1/languages":
            return httpx.Response(200, json=self.languages)
        if path == "/tts/v1/speakers":
            return httpx.Response(200, json=self.speakers)
        if path == "/tts/v1/synthesize":
            return httpx.Response(200, content=self.audio, headers={"content-type": "audio/wav"})
        return httpx.Response(404, text="Not found")

    def client(self, dev_key: Optional[str] = "dev-key", basic_key: Optional[str] = None) -> GhanaNLPClient:
        return GhanaNLPClient(
            base_url="https://ghananlp.test",
            dev_key=dev_key,
            basic_key=basic_key,
            transport=httpx.MockTransport(self.handler),
        )

    @property
    def translate_calls(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path == "/v1/translate"]


class FakeTranslationBackend:
    """Records translate calls; answers from a per-pair table."""

    def __init__(self, responses: Optional[Dict[str, str]] = None, configured: bool = True):
        self.responses = responses or {}
        self.configured = configured
        self.calls: List[tuple] = []

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("GhanaNLP API key is not configured on the server.")

    async def translate(self, text: str, lang_pair: str) -> str:
        self.calls.append((text, lang_pair))
        return self.responses.get(lang_pair, f"<{lang_pair}>{text}")


class FakeSummaryEngine:
    def __init__(self, response: Optional[str] = '{"summary": "A short summary."}'):
        self.response = response
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return self.response


class RecordingActivityLogger:
    """Captures submit() calls instead of writing to the database."""

    def __init__(self):
        self.submitted: List[tuple] = []

    def submit(self, user_id, kind, payload):
        self.submitted.append((user_id, kind, payload))


class FakeCaptureDevice:
    mime_type = "audio/webm;codecs=opus"

    def __init__(self):
        self.started = False
        self._on_result = None
        self._on_error = None

    def start_capture(self) -> None:
        self.started = True

    def stop_capture(self) -> None:
        self.started = False

    def on_result(self, callback) -> None:
        self._on_result = callback

    def on_error(self, callback) -> None:
        self._on_error = callback

    def emit(self, chunk: bytes) -> None:
        self._on_result(chunk)

    def fail(self, message: str) -> None:
        self._on_error(message)
