"""
Gemini Engine - generative model behind summaries, via Vertex AI.

Uses the GCP project credentials (GOOGLE_APPLICATION_CREDENTIALS), no
separate API key. The SDK call is blocking, so it runs in a thread pool.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from polyglot.config.settings import settings
from polyglot.config.constants import (
    GEMINI_MODEL_NAME,
    GEMINI_TEMPERATURE,
    GEMINI_MAX_OUTPUT_TOKENS,
    GEMINI_TOP_P,
    SUMMARY_EXECUTOR_WORKERS,
)
from polyglot.services.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_vertex_executor = ThreadPoolExecutor(
    max_workers=SUMMARY_EXECUTOR_WORKERS, thread_name_prefix="vertex_ai"
)


class VertexGeminiEngine:
    """
    Runs prompts on Gemini and returns the JSON text of the answer.

    Initialized lazily on first use.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        location: Optional[str] = None,
        model_name: str = GEMINI_MODEL_NAME,
    ):
        self.project_id = project_id or settings.GOOGLE_PROJECT_ID
        self.location = location or settings.VERTEX_AI_LOCATION
        self.model_name = model_name
        self._model = None

    def _initialize(self):
        if self._model is not None:
            return
        if not self.project_id:
            raise ConfigurationError(
                "GOOGLE_PROJECT_ID is not set. Summaries need a Vertex AI project."
            )

        import vertexai
        from vertexai.generative_models import GenerativeModel

        vertexai.init(project=self.project_id, location=self.location)
        self._model = GenerativeModel(self.model_name)
        logger.info(
            f"[GeminiEngine] Initialized Vertex AI Gemini "
            f"(project={self.project_id}, location={self.location}, model={self.model_name})"
        )

    async def generate(self, prompt: str) -> Optional[str]:
        self._initialize()
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_vertex_executor, self._call_gemini_sync, prompt)

    def _call_gemini_sync(self, prompt: str) -> Optional[str]:
        """Synchronous call to Gemini via Vertex AI (runs in thread pool)."""
        from vertexai.generative_models import GenerationConfig

        generation_config = GenerationConfig(
            temperature=GEMINI_TEMPERATURE,
            max_output_tokens=GEMINI_MAX_OUTPUT_TOKENS,
            top_p=GEMINI_TOP_P,
            response_mime_type="application/json",
        )

        response = self._model.generate_content(
            prompt,
            generation_config=generation_config,
        )

        # .text raises ValueError when the candidate was blocked or is empty
        try:
            text = response.text if response else None
        except ValueError as e:
            logger.warning(f"[GeminiEngine] No usable candidate: {e}")
            return None

        return text.strip() if text else None
