"""
Summarizer - AI summaries of translations and long-form text.

Two prompts share one engine:
- summarize_translation: short learner-friendly summary of a translation
- summarize_text: concise summary of news, essays or transcripts

Both ask for a JSON object ``{"summary": "..."}`` and fail with
SummaryGenerationError when the model returns nothing usable.
"""

import json
import logging
from typing import Optional

from polyglot.config.constants import MAX_SUMMARY_INPUT_CHARS
from polyglot.models.activity import ActivityKind
from polyglot.services.activity.logger import ActivityLogger
from polyglot.services.exceptions import InvalidInputError, SummaryGenerationError
from polyglot.services.protocols import SummaryEngineProtocol

logger = logging.getLogger(__name__)

SUMMARIZE_TRANSLATION_PROMPT = """You are an expert translator and summarizer, skilled in helping language learners.

Please provide a concise summary of the following translated text in {language}. The summary should capture the main points and be easy to understand for someone learning the language.

Translation: {translation}
Language: {language}

Respond with a JSON object of the form {{"summary": "<summary>"}}.
"""

SUMMARIZE_TEXT_PROMPT = """You are an expert AI assistant skilled in summarizing various types of text content like news, articles, essays, or spoken transcripts.
Your goal is to provide a concise and accurate summary of the provided text.

The input text is in {language}.

Input Text:
{text}

Please generate a concise summary of the input text.
Respond with a JSON object of the form {{"summary": "<summary>"}}.
"""


def parse_summary(raw: Optional[str]) -> str:
    """Extract ``summary`` from the model's JSON answer."""
    if not raw or not raw.strip():
        raise SummaryGenerationError("No summary output received from the AI model.")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        raise SummaryGenerationError("The AI model returned a malformed summary.")
    summary = data.get("summary") if isinstance(data, dict) else None
    if not isinstance(summary, str) or not summary.strip():
        raise SummaryGenerationError("No summary output received from the AI model.")
    return summary.strip()


class Summarizer:
    def __init__(
        self,
        engine: SummaryEngineProtocol,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._engine = engine
        self._activity_logger = activity_logger

    async def summarize_translation(self, translation: str, language: str) -> str:
        """Summarize translated text; ``language`` is a display name such as "Twi"."""
        if not translation or not translation.strip():
            raise InvalidInputError("Translate text first to get a summary.")
        prompt = SUMMARIZE_TRANSLATION_PROMPT.format(translation=translation, language=language)
        return parse_summary(await self._engine.generate(prompt))

    async def summarize_text(
        self,
        text: str,
        language: str,
        *,
        language_code: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> str:
        """
        Summarize long-form text and log it to the user's summary history.

        ``language`` is the display name used in the prompt and stored as the
        entry's ``language``; ``language_code`` (e.g. "tw") is stored beside it
        so summary entries can be matched with the other kinds, which log codes.
        """
        if not text or not text.strip():
            raise InvalidInputError("Please enter text to summarize.")
        if len(text) > MAX_SUMMARY_INPUT_CHARS:
            raise InvalidInputError(
                f"Input text must be {MAX_SUMMARY_INPUT_CHARS} characters or less."
            )

        prompt = SUMMARIZE_TEXT_PROMPT.format(text=text, language=language)
        summary = parse_summary(await self._engine.generate(prompt))

        if user_id and self._activity_logger is not None:
            payload = {"original_text": text, "summarized_text": summary, "language": language}
            if language_code:
                payload["language_code"] = language_code
            self._activity_logger.submit(user_id, ActivityKind.SUMMARY, payload)

        return summary
