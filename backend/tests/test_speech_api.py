from polyglot.main import app
from tests.helpers import auth_headers


def _drain(client):
    client.portal.call(app.state.activity_logger.drain)


def test_transcribe(api_client, fake_api):
    headers = auth_headers(api_client)

    r = api_client.post(
        "/api/speech/transcribe",
        json={"audio_data_uri": "data:audio/webm;base64,AAAA", "language": "tw"},
        headers=headers,
    )

    assert r.status_code == 200
    assert r.json()["transcription"] == fake_api.transcription
    assert fake_api.requests[0].url.params["language"] == "tw"

    _drain(api_client)
    history = api_client.get("/api/history/voice_to_text", headers=headers).json()
    assert history["entries"][0]["recognized_speech"] == fake_api.transcription
    assert history["entries"][0]["detected_language"] == "tw"


def test_transcribe_invalid_payload(api_client, fake_api):
    headers = auth_headers(api_client)

    r = api_client.post(
        "/api/speech/transcribe",
        json={"audio_data_uri": "hello", "language": "tw"},
        headers=headers,
    )

    assert r.status_code == 400
    assert "Invalid payload format" in r.json()["detail"]
    assert fake_api.requests == []


def test_tts_raw_options_passthrough(api_client, fake_api):
    headers = auth_headers(api_client)

    r1 = api_client.get("/api/tts/languages", headers=headers)
    r2 = api_client.get("/api/tts/speakers", headers=headers)

    assert r1.json() == fake_api.languages
    assert r2.json() == fake_api.speakers
    assert all(r.headers["Ocp-Apim-Subscription-Key"] == "dev-key" for r in fake_api.requests)


def test_tts_options_filtered(api_client):
    headers = auth_headers(api_client)

    r = api_client.get("/api/tts/options", headers=headers)

    assert r.status_code == 200
    data = r.json()
    assert data["languages"] == [{"code": "tw", "name": "Twi"}, {"code": "ee", "name": "Ewe"}]
    assert data["speakers"]["tw"] == ["twi_speaker_4", "twi_speaker_5"]


def test_tts_options_upstream_error(api_client, fake_api):
    headers = auth_headers(api_client)
    fake_api.status_code = 500
    fake_api.error_body = "boom"

    r = api_client.get("/api/tts/languages", headers=headers)

    assert r.status_code == 502
    assert "500" in r.json()["detail"]


def test_synthesize(api_client, fake_api):
    headers = auth_headers(api_client)

    r = api_client.post(
        "/api/tts/synthesize",
        json={"text": "Maakye", "language": "tw", "speaker_id": "twi_speaker_4"},
        headers=headers,
    )

    assert r.status_code == 200
    assert r.content == fake_api.audio
    assert r.headers["content-type"].startswith("audio/wav")

    _drain(api_client)
    history = api_client.get("/api/history/text_to_speech", headers=headers).json()
    assert history["entries"][0]["spoken_text"] == "Maakye"
    assert history["entries"][0]["speaker_id"] == "twi_speaker_4"


def test_synthesize_unsupported_language(api_client, fake_api):
    headers = auth_headers(api_client)

    r = api_client.post("/api/tts/synthesize", json={"text": "Hello", "language": "dag"}, headers=headers)

    assert r.status_code == 400
    assert fake_api.requests == []


def test_transcribe_unpadded_payload(api_client, fake_api):
    headers = auth_headers(api_client)

    r = api_client.post(
        "/api/speech/transcribe",
        json={"audio_data_uri": "data:audio/webm;base64,AAA", "language": "ee"},
        headers=headers,
    )

    assert r.status_code == 200
    assert b"\r\n\r\n\x00\x00\r\n" in fake_api.requests[0].content
