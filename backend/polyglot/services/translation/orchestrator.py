"""
Translation Orchestrator - direct and pivot translation through GhanaNLP.

When either side of a request is English the text goes out in a single
translate call. For local-to-local requests (e.g. Twi -> Ewe) the text is
first translated to English and the English result is then translated to
the target. The two calls are strictly sequential.

Usage:
    from polyglot.services.translation.orchestrator import TranslationOrchestrator

    orchestrator = TranslationOrchestrator(client, activity_logger)
    result = await orchestrator.translate("Hello", "tw", "ee", user_id=user.id)
    print(result.translated_text)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from polyglot.config.constants import (
    PIVOT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    API_LANGUAGE_ALIASES,
    MAX_TRANSLATION_CHARS,
)
from polyglot.models.activity import ActivityKind
from polyglot.services.activity.logger import ActivityLogger
from polyglot.services.exceptions import InvalidInputError, EmptyTranslationError
from polyglot.services.metrics import translations_total
from polyglot.services.protocols import TranslationBackendProtocol

logger = logging.getLogger(__name__)


def to_api_code(language: str) -> str:
    """Rewrite an app language code to the code the GhanaNLP API expects."""
    return API_LANGUAGE_ALIASES.get(language, language)


def lang_pair(source: str, target: str) -> str:
    return f"{to_api_code(source)}-{to_api_code(target)}"


def is_local_to_local(source: str, target: str) -> bool:
    return source != PIVOT_LANGUAGE and target != PIVOT_LANGUAGE


def validate_translation_input(text: str, source: str, target: str) -> None:
    if not text or not text.strip():
        raise InvalidInputError("Please enter text to translate.")
    if len(text) > MAX_TRANSLATION_CHARS:
        raise InvalidInputError(
            f"Input text must be {MAX_TRANSLATION_CHARS} characters or less."
        )
    for code in (source, target):
        if code not in SUPPORTED_LANGUAGES:
            raise InvalidInputError(f"Unsupported language: {code!r}")


@dataclass
class TranslationResult:
    """
    Outcome of one translation request.

    Attributes:
        translated_text: Final text, exactly as returned by the API
        source_language: App code of the input language
        target_language: App code of the output language
        pivot_text: Intermediate English text for local-to-local requests
    """
    translated_text: str
    source_language: str
    target_language: str
    pivot_text: Optional[str] = None


class TranslationOrchestrator:
    """
    Runs direct or pivot translations and logs completed ones.

    Whitespace-only API results count as failures; any other non-empty
    string is passed through without further checks.
    """

    def __init__(
        self,
        backend: TranslationBackendProtocol,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._backend = backend
        self._activity_logger = activity_logger

    async def translate(
        self,
        text: str,
        source: str,
        target: str,
        *,
        user_id: Optional[str] = None,
    ) -> TranslationResult:
        """
        Translate ``text`` from ``source`` to ``target``.

        Raises:
            InvalidInputError: empty/oversized text or unknown language
            ConfigurationError: no subscription key configured
            UpstreamHTTPError: either API call returned an error status
            UpstreamTransportError: either API call could not be completed
            EmptyTranslationError: a call returned only whitespace
        """
        validate_translation_input(text, source, target)
        self._backend.ensure_configured()

        mode = "pivot" if is_local_to_local(source, target) else "direct"
        try:
            if mode == "pivot":
                result = await self._translate_via_pivot(text, source, target)
            else:
                result = await self._translate_direct(text, source, target)
        except Exception:
            translations_total.labels(mode=mode, status="error").inc()
            raise

        translations_total.labels(mode=mode, status="success").inc()

        if user_id and self._activity_logger is not None:
            self._activity_logger.submit(
                user_id,
                ActivityKind.TRANSLATION,
                {
                    "original_text": text,
                    "translated_text": result.translated_text,
                    "source_language": source,
                    "target_language": target,
                },
            )

        return result

    async def _translate_direct(self, text: str, source: str, target: str) -> TranslationResult:
        translated = await self._backend.translate(text, lang_pair(source, target))
        if not translated.strip():
            raise EmptyTranslationError("direct")
        return TranslationResult(translated, source, target)

    async def _translate_via_pivot(self, text: str, source: str, target: str) -> TranslationResult:
        logger.info(f"[TranslationOrchestrator] Step 1: {source} -> {PIVOT_LANGUAGE}")
        intermediate = await self._backend.translate(text, lang_pair(source, PIVOT_LANGUAGE))
        if not intermediate.strip():
            raise EmptyTranslationError("pivot")

        logger.info(f"[TranslationOrchestrator] Step 2: {PIVOT_LANGUAGE} -> {target}")
        translated = await self._backend.translate(intermediate, lang_pair(PIVOT_LANGUAGE, target))
        if not translated.strip():
            raise EmptyTranslationError("final")

        return TranslationResult(translated, source, target, pivot_text=intermediate)
