"""Google Gemini API wrapper with error handling."""

import logging

from google import genai
from google.genai import types

from services.exceptions import GenerationFailure

logger = logging.getLogger(__name__)


class GeminiClient:
    """Long-lived handle around the Gemini SDK client.

    Built once at application start-up. Without an API key the handle still
    exists but every call fails with GenerationFailure.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ):
        self.model = model
        self._config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
        self._client: genai.Client | None = None
        if api_key:
            self._client = genai.Client(api_key=api_key)
        else:
            logger.warning("No GEMINI_API_KEY set - analysis requests will fail")

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def generate_text(self, prompt: str) -> str:
        """Send a prompt to Gemini and return the response text."""
        if self._client is None:
            raise GenerationFailure("Gemini API key is not configured")

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config,
            )
        except Exception as e:
            raise GenerationFailure(f"Gemini API error: {e}") from e

        text = response.text
        if not text:
            raise GenerationFailure("Gemini returned an empty response")
        return text

    async def aclose(self) -> None:
        """Release the SDK's async transport; called on application shutdown."""
        if self._client is None:
            return
        # aclose is only present on newer google-genai releases
        close = getattr(self._client.aio, "aclose", None)
        if close is not None:
            await close()
