"""Gemini provider implementation."""

from __future__ import annotations

from collections.abc import Sequence

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from blend_studio.config import DEFAULT_MODEL
from blend_studio.exceptions import AuthenticationError, GenerationError, RateLimitError
from blend_studio.providers.base import BaseProvider
from blend_studio.schema import BlendResponse, ChatMessage, CoffeeResult


def _raise_for_client_error(exc: errors.ClientError) -> None:
    message = str(exc).lower()
    if "rate" in message or "quota" in message:
        raise RateLimitError(f"API rate limit exceeded: {exc}") from exc
    if "auth" in message or "key" in message:
        raise AuthenticationError(f"Invalid API key: {exc}") from exc
    raise GenerationError(f"Gemini request rejected: {exc}") from exc


def _to_content(message: ChatMessage) -> types.Content:
    role = "model" if message.role == "assistant" else "user"
    return types.Content(role=role, parts=[types.Part(text=message.text)])


class GeminiProvider(BaseProvider):
    """Gemini text generation provider."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        *,
        temperature: float = 0.75,
        client=None,
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key.
            model: Model name to use.
            temperature: Sampling temperature for blend generation.
            client: Pre-built `genai.Client`, mainly for tests.

        Raises:
            AuthenticationError: If no API key is provided.
        """
        if not api_key and client is None:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        self.model = model
        self.temperature = temperature
        self.client = client if client is not None else genai.Client(api_key=api_key)

    async def generate_blend(self, prompt: str, *, system_instruction: str) -> CoffeeResult:
        """Generate a blend profile with a JSON response schema.

        Raises:
            RateLimitError: If API rate limit is exceeded
            AuthenticationError: If API key is invalid
            GenerationError: If the response is empty or does not match the schema
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=BlendResponse,
                    system_instruction=system_instruction,
                    temperature=self.temperature,
                ),
            )
        except errors.ClientError as e:
            _raise_for_client_error(e)
        except errors.APIError as e:
            raise GenerationError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise GenerationError("No response from Gemini")
        try:
            return BlendResponse.model_validate_json(text)
        except ValidationError as e:
            raise GenerationError(f"Response does not match schema: {e}") from e

    async def chat(
        self,
        history: Sequence[ChatMessage],
        message: str,
        *,
        system_instruction: str,
    ) -> str:
        try:
            session = self.client.aio.chats.create(
                model=self.model,
                config=types.GenerateContentConfig(system_instruction=system_instruction),
                history=[_to_content(turn) for turn in history],
            )
            response = await session.send_message(message)
        except errors.ClientError as e:
            _raise_for_client_error(e)
        except errors.APIError as e:
            raise GenerationError(f"Gemini chat failed: {e}") from e

        if not response.text:
            raise GenerationError("Empty chat reply from Gemini")
        return response.text

    def get_metadata(self) -> dict[str, str]:
        return {"provider": "gemini", "model": self.model}
