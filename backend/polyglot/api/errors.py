"""
Maps service exceptions to HTTP errors.
"""
from fastapi import HTTPException, status

from polyglot.services.exceptions import (
    PolyglotError,
    ConfigurationError,
    InvalidInputError,
    UpstreamHTTPError,
    UpstreamTransportError,
    EmptyTranslationError,
    SummaryGenerationError,
)


def to_http_exception(error: PolyglotError) -> HTTPException:
    if isinstance(error, ConfigurationError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error))
    if isinstance(error, InvalidInputError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, (UpstreamHTTPError, UpstreamTransportError, EmptyTranslationError, SummaryGenerationError)):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
