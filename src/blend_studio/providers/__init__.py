"""Providers for blend-studio."""

from blend_studio.providers.base import BaseProvider
from blend_studio.providers.gemini import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider"]
