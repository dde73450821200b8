"""
Application-wide constants for configuration and tuning.

Environment-dependent settings (DB, API keys) belong in settings.py.
This file holds the language catalogue and the operational limits that
rarely change between environments.
"""

# ==============================================================================
# LANGUAGES
# ==============================================================================

# Fixed intermediate language for local-to-local translation
PIVOT_LANGUAGE: str = "en"

# Language codes accepted by the translation endpoints, with display names
SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "tw": "Twi",
    "ga": "Ga",
    "dag": "Dagbani",
    "ee": "Ewe",
}

# Codes the GhanaNLP API expects under a different name
API_LANGUAGE_ALIASES: dict[str, str] = {
    "ga": "gaa",
}

# Languages the app offers for speech synthesis (code -> API language name)
TTS_SUPPORTED_LANGUAGES: dict[str, str] = {
    "tw": "Twi",
    "ee": "Ewe",
}

# ==============================================================================
# INPUT LIMITS
# ==============================================================================

MAX_TRANSLATION_CHARS: int = 1000
MAX_SUMMARY_INPUT_CHARS: int = 5000
MAX_TTS_CHARS: int = 500

# ==============================================================================
# GHANANLP API
# ==============================================================================

SUBSCRIPTION_KEY_HEADER: str = "Ocp-Apim-Subscription-Key"
TRANSLATE_PATH: str = "/v1/translate"
TRANSCRIBE_PATH: str = "/asr/v1/transcribe"
TTS_LANGUAGES_PATH: str = "/tts/v1/languages"
TTS_SPEAKERS_PATH: str = "/tts/v1/speakers"
TTS_SYNTHESIZE_PATH: str = "/tts/v1/synthesize"

# Filename sent with multipart uploads when the mime type has no known extension
DEFAULT_RECORDING_FILENAME: str = "recording.webm"

# ==============================================================================
# ACTIVITY HISTORY
# ==============================================================================

HISTORY_PAGE_SIZE: int = 10

# ==============================================================================
# SUMMARIES (Gemini via Vertex AI)
# ==============================================================================

GEMINI_MODEL_NAME: str = "gemini-1.5-flash"
GEMINI_TEMPERATURE: float = 0.2
GEMINI_MAX_OUTPUT_TOKENS: int = 1024
GEMINI_TOP_P: float = 0.8

# Worker threads for blocking Vertex AI calls
SUMMARY_EXECUTOR_WORKERS: int = 4
