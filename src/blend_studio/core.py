"""Generation client: blend requests with a guaranteed result, barista chat."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from blend_studio.catalog import MAX_FLAVORS, is_known_flavor
from blend_studio.config import Settings, normalize_language
from blend_studio.exceptions import GenerationError
from blend_studio.fallback import fallback_result
from blend_studio.pad import clamp_coordinate
from blend_studio.prompts import (
    BLEND_SYSTEM_INSTRUCTION,
    build_barista_instruction,
    build_blend_prompt,
)
from blend_studio.providers.base import BaseProvider
from blend_studio.schema import BlendResponse, ChatMessage, CoffeeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationOutcome:
    result: CoffeeResult
    source: Literal["live", "fallback"]
    metadata: dict[str, str] = field(default_factory=dict)


def _build_gemini_provider(settings: Settings) -> BaseProvider:
    from blend_studio.providers.gemini import GeminiProvider

    return GeminiProvider(
        api_key=settings.require_api_key(),
        model=settings.model,
        temperature=settings.temperature,
    )


def _check_flavors(flavors: Sequence[str]) -> list[str]:
    selected = list(flavors)
    if len(selected) > MAX_FLAVORS:
        raise ValueError(f"At most {MAX_FLAVORS} flavors can be blended, got {len(selected)}")
    if len(set(selected)) != len(selected):
        raise ValueError(f"Duplicate flavors: {selected}")
    unknown = [flavor for flavor in selected if not is_known_flavor(flavor)]
    if unknown:
        raise ValueError(f"Unknown flavors: {', '.join(unknown)}")
    return selected


class GenerationClient:
    """Front door to the text generation service.

    `generate` never raises for service problems: any failure (transport,
    timeout, bad JSON, schema violation) yields the fixed fallback for the
    requested language. `chat` raises `BlendStudioError` subclasses and
    leaves the fallback text to the caller.
    """

    def __init__(
        self,
        provider: BaseProvider | None = None,
        *,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings.from_env()
        # Building the default provider reads the API key; missing keys fail here.
        self.provider = provider or _build_gemini_provider(self.settings)

    async def generate(
        self,
        flavors: Sequence[str],
        x: float,
        y: float,
        language: str = "en",
    ) -> CoffeeResult:
        """Generate a coffee blend for the selected flavors and balance.

        Args:
            flavors: Up to three distinct flavor ids from the catalog.
            x: Acidity axis in [-1, 1]; positive is bright.
            y: Body axis in [-1, 1]; positive is heavy.
            language: `en` or `zh`.

        Returns:
            A fully populated CoffeeResult, live or fallback.
        """
        outcome = await self.generate_with_metadata(flavors, x, y, language)
        return outcome.result

    async def generate_with_metadata(
        self,
        flavors: Sequence[str],
        x: float,
        y: float,
        language: str = "en",
    ) -> GenerationOutcome:
        """Generate a blend and report whether it came from the service."""
        selected = _check_flavors(flavors)
        lang = normalize_language(language)
        x, y = clamp_coordinate(x, y)
        prompt = build_blend_prompt(selected, x, y, lang)
        metadata = dict(self.provider.get_metadata() or {})

        try:
            result = await asyncio.wait_for(
                self.provider.generate_blend(prompt, system_instruction=BLEND_SYSTEM_INSTRUCTION),
                timeout=self.settings.timeout_sec,
            )
            if not isinstance(result, CoffeeResult):
                raise GenerationError(f"Provider returned {type(result).__name__}, not CoffeeResult")
            BlendResponse.model_validate(result.model_dump())
        except Exception:
            logger.exception("blend generation failed, serving %s fallback", lang)
            return GenerationOutcome(result=fallback_result(lang), source="fallback", metadata=metadata)

        return GenerationOutcome(result=result, source="live", metadata=metadata)

    async def chat(
        self,
        history: Sequence[ChatMessage],
        message: str,
        language: str = "en",
    ) -> str:
        """Ask the barista persona a question.

        Raises:
            GenerationError: On timeout or an unusable reply.
            RateLimitError: If API rate limit is exceeded.
            AuthenticationError: If API key is invalid.
        """
        lang = normalize_language(language)
        try:
            return await asyncio.wait_for(
                self.provider.chat(
                    list(history),
                    message,
                    system_instruction=build_barista_instruction(lang),
                ),
                timeout=self.settings.timeout_sec,
            )
        except asyncio.TimeoutError as e:
            raise GenerationError(f"Chat reply timed out after {self.settings.timeout_sec}s") from e
