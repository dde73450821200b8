import httpx
import pytest

from polyglot.models.activity import ActivityKind
from polyglot.services.activity.logger import ActivityLogger
from polyglot.services.ghananlp.client import GhanaNLPClient
from polyglot.services.exceptions import (
    ConfigurationError,
    EmptyTranslationError,
    InvalidInputError,
    UpstreamHTTPError,
    UpstreamTransportError,
)
from polyglot.services.translation.orchestrator import (
    TranslationOrchestrator,
    lang_pair,
    is_local_to_local,
)
from tests.helpers import FakeTranslationBackend, RecordingActivityLogger


def test_lang_pair_rewrites_ga():
    assert lang_pair("ga", "en") == "gaa-en"
    assert lang_pair("en", "ga") == "en-gaa"
    assert lang_pair("tw", "ee") == "tw-ee"


def test_is_local_to_local():
    assert is_local_to_local("tw", "ee")
    assert not is_local_to_local("en", "tw")
    assert not is_local_to_local("dag", "en")


async def test_english_source_uses_single_call():
    backend = FakeTranslationBackend({"en-tw": "Maakye"})
    orchestrator = TranslationOrchestrator(backend)

    result = await orchestrator.translate("Good morning", "en", "tw")

    assert backend.calls == [("Good morning", "en-tw")]
    assert result.translated_text == "Maakye"
    assert result.pivot_text is None


async def test_local_to_local_goes_through_english():
    backend = FakeTranslationBackend({"tw-en": "Good morning", "en-ee": "Ŋdi na wò"})
    orchestrator = TranslationOrchestrator(backend)

    result = await orchestrator.translate("Maakye", "tw", "ee")

    assert backend.calls == [("Maakye", "tw-en"), ("Good morning", "en-ee")]
    assert result.translated_text == "Ŋdi na wò"
    assert result.pivot_text == "Good morning"


async def test_pivot_uses_api_code_for_ga():
    backend = FakeTranslationBackend()
    orchestrator = TranslationOrchestrator(backend)

    await orchestrator.translate("Ojekoo", "ga", "tw")

    assert [pair for _, pair in backend.calls] == ["gaa-en", "en-tw"]


async def test_result_is_passed_through_unmodified():
    backend = FakeTranslationBackend({"en-dag": "  Dasuba  \n"})
    orchestrator = TranslationOrchestrator(backend)

    result = await orchestrator.translate("Good morning", "en", "dag")

    assert result.translated_text == "  Dasuba  \n"


async def test_whitespace_direct_result_fails():
    backend = FakeTranslationBackend({"en-tw": "   "})
    orchestrator = TranslationOrchestrator(backend)

    with pytest.raises(EmptyTranslationError) as exc:
        await orchestrator.translate("Hello", "en", "tw")
    assert exc.value.stage == "direct"


async def test_empty_pivot_stops_before_second_call():
    backend = FakeTranslationBackend({"tw-en": "\n"})
    orchestrator = TranslationOrchestrator(backend)

    with pytest.raises(EmptyTranslationError) as exc:
        await orchestrator.translate("Maakye", "tw", "ee")

    assert exc.value.stage == "pivot"
    assert "Pivot translation empty" in str(exc.value)
    assert len(backend.calls) == 1


async def test_empty_final_result_fails():
    backend = FakeTranslationBackend({"tw-en": "Good morning", "en-ee": ""})
    orchestrator = TranslationOrchestrator(backend)

    with pytest.raises(EmptyTranslationError) as exc:
        await orchestrator.translate("Maakye", "tw", "ee")

    assert exc.value.stage == "final"
    assert "Final translation empty" in str(exc.value)


@pytest.mark.parametrize("text", ["", "   ", "a" * 1001])
async def test_invalid_text_rejected_without_calls(text):
    backend = FakeTranslationBackend()
    orchestrator = TranslationOrchestrator(backend)

    with pytest.raises(InvalidInputError):
        await orchestrator.translate(text, "en", "tw")
    assert backend.calls == []


async def test_text_at_limit_is_accepted():
    backend = FakeTranslationBackend()
    orchestrator = TranslationOrchestrator(backend)

    await orchestrator.translate("a" * 1000, "en", "tw")
    assert len(backend.calls) == 1


async def test_unknown_language_rejected():
    backend = FakeTranslationBackend()
    orchestrator = TranslationOrchestrator(backend)

    with pytest.raises(InvalidInputError):
        await orchestrator.translate("Hello", "en", "fr")
    assert backend.calls == []


async def test_missing_credentials_raise_configuration_error():
    backend = FakeTranslationBackend(configured=False)
    orchestrator = TranslationOrchestrator(backend)

    with pytest.raises(ConfigurationError):
        await orchestrator.translate("Hello", "en", "tw")
    assert backend.calls == []


async def test_upstream_error_carries_status_and_body(fake_api):
    fake_api.status_code = 500
    fake_api.error_body = "model unavailable"
    client = fake_api.client()
    orchestrator = TranslationOrchestrator(client)

    with pytest.raises(UpstreamHTTPError) as exc:
        await orchestrator.translate("Hello", "en", "tw")

    assert exc.value.status_code == 500
    assert "500" in str(exc.value)
    assert "model unavailable" in str(exc.value)
    await client.aclose()


async def test_connection_failure_is_reported_as_upstream_error(fake_api):
    fake_api.transport_error = httpx.ConnectError("Connection refused")
    client = fake_api.client()
    orchestrator = TranslationOrchestrator(client)

    with pytest.raises(UpstreamTransportError) as exc:
        await orchestrator.translate("Hello", "en", "tw")

    assert "Connection refused" in str(exc.value)
    await client.aclose()


async def test_timeout_in_second_pivot_call(fake_api):
    def fail_second_call(request):
        if fake_api.translate_calls:
            raise httpx.ReadTimeout("timed out")
        return fake_api.handler(request)

    client = GhanaNLPClient(
        base_url="https://ghananlp.test",
        dev_key="dev-key",
        transport=httpx.MockTransport(fail_second_call),
    )
    orchestrator = TranslationOrchestrator(client)

    with pytest.raises(UpstreamTransportError):
        await orchestrator.translate("Maakye", "tw", "ee")
    assert [c["lang"] for c in fake_api.translate_calls] == ["tw-en"]
    await client.aclose()


async def test_successful_translation_is_logged():
    backend = FakeTranslationBackend({"en-tw": "Maakye"})
    activity_logger = RecordingActivityLogger()
    orchestrator = TranslationOrchestrator(backend, activity_logger)

    await orchestrator.translate("Good morning", "en", "tw", user_id="user-1")

    assert activity_logger.submitted == [(
        "user-1",
        ActivityKind.TRANSLATION,
        {
            "original_text": "Good morning",
            "translated_text": "Maakye",
            "source_language": "en",
            "target_language": "tw",
        },
    )]


async def test_failed_translation_is_not_logged():
    backend = FakeTranslationBackend({"en-tw": " "})
    activity_logger = RecordingActivityLogger()
    orchestrator = TranslationOrchestrator(backend, activity_logger)

    with pytest.raises(EmptyTranslationError):
        await orchestrator.translate("Good morning", "en", "tw", user_id="user-1")
    assert activity_logger.submitted == []


async def test_log_failure_does_not_change_result():
    def broken_session_factory():
        raise RuntimeError("database unavailable")

    activity_logger = ActivityLogger(broken_session_factory)
    backend = FakeTranslationBackend({"en-tw": "Maakye"})
    orchestrator = TranslationOrchestrator(backend, activity_logger)

    result = await orchestrator.translate("Good morning", "en", "tw", user_id="user-1")
    await activity_logger.drain()

    assert result.translated_text == "Maakye"
    assert activity_logger.pending_count == 0
