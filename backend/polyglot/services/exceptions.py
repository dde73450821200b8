"""
Service Exceptions

Error taxonomy shared by the translation, speech and summary services.
The API layer maps each class to an HTTP status.
"""
from typing import Optional


class PolyglotError(Exception):
    """Base exception for service errors"""
    pass


class ConfigurationError(PolyglotError):
    """Raised when a required credential or setting is missing"""
    pass


class InvalidInputError(PolyglotError):
    """Raised when a request is rejected locally, before any network call"""
    pass


class InvalidPayloadError(InvalidInputError):
    """Raised when an audio payload is not a base64 data URI"""

    def __init__(self, message: str = "Invalid payload format: expected 'data:<mimetype>;base64,<data>'"):
        super().__init__(message)


class UpstreamHTTPError(PolyglotError):
    """Raised when the GhanaNLP API answers with a non-success status"""

    def __init__(self, status_code: int, body: str = "", reason: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        detail = body or reason or "no response body"
        super().__init__(f"GhanaNLP API Error ({status_code}): {detail}")


class UpstreamTransportError(PolyglotError):
    """Raised when the GhanaNLP API cannot be reached or does not answer in time"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"GhanaNLP API request failed: {detail}")


class EmptyTranslationError(PolyglotError):
    """Raised when a translate call succeeds but returns only whitespace"""

    MESSAGES = {
        "direct": "Translation resulted in empty or whitespace text.",
        "pivot": "Pivot translation empty: intermediate translation to English resulted in empty or whitespace text.",
        "final": "Final translation empty: translation from English to the target language resulted in empty or whitespace text.",
    }

    def __init__(self, stage: str):
        self.stage = stage
        super().__init__(self.MESSAGES.get(stage, "Translation resulted in empty text."))


class SummaryGenerationError(PolyglotError):
    """Raised when the generative model returns no usable summary"""
    pass
