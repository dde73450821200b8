"""
Speech Module

- TranscriptionService: speech-to-text proxy for data-URI recordings
- SynthesisService: TTS options proxy and synthesis
- RecordingBuffer: assembles captured chunks into one payload
"""

from polyglot.services.speech.transcription import (
    TranscriptionService,
    decode_data_uri,
    encode_data_uri,
)
from polyglot.services.speech.synthesis import SynthesisService, TtsOptions, build_tts_options
from polyglot.services.speech.capture import RecordingBuffer

__all__ = [
    "TranscriptionService",
    "decode_data_uri",
    "encode_data_uri",
    "SynthesisService",
    "TtsOptions",
    "build_tts_options",
    "RecordingBuffer",
]
