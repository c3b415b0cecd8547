"""Google Gemini API wrapper for the skill-gap comparison call."""

import logging

import httpx
from google import genai
from google.genai import errors, types

from config import Settings
from services.pipeline.base import AnalysisModel
from services.pipeline.errors import ModelFailure
from services.prompt_builder import SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)

# Sampling above zero produced garbled prose in the model's answers.
TEMPERATURE = 0.0


class GeminiClient(AnalysisModel):
    """Sends one prompt to Gemini and returns the raw text answer."""

    def __init__(self, settings: Settings, client: genai.Client | None = None):
        self.model = settings.gemini_model
        self._client = client or genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.request_timeout_seconds * 1000)),
        )

    def _config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            temperature=TEMPERATURE,
            response_mime_type="application/json",
        )

    async def request_analysis(self, prompt: str) -> str:
        """Run the prompt and return the model's text.

        Raises:
            ModelFailure: if the API call errors or the answer is empty.
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config(),
            )
        except errors.APIError as e:
            logger.error("Gemini API error %s: %s", e.code, e.message)
            reason = e.message or f"Request failed with status code {e.code}"
            raise ModelFailure(f"AI analysis failed: {reason}") from e
        except httpx.HTTPError as e:
            logger.error("Gemini transport error: %r", e)
            raise ModelFailure(f"AI analysis failed: {type(e).__name__}") from e

        text = response.text
        if not text or not text.strip():
            raise ModelFailure("AI analysis failed: the model returned an empty answer")
        return text
