"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

from blend_studio.exceptions import AuthenticationError

Language = Literal["en", "zh"]
PassportReturn = Literal["origin", "welcome"]

LANGUAGES: tuple[Language, ...] = ("en", "zh")
DEFAULT_MODEL = "gemini-2.5-flash"


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def normalize_language(value: str | None) -> Language:
    lowered = (value or "").strip().lower()
    if lowered.startswith("zh"):
        return "zh"
    return "en"


def _parse_passport_return(value: str | None) -> PassportReturn:
    return "welcome" if (value or "").strip().lower() == "welcome" else "origin"


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.75
    timeout_sec: float = 30.0
    default_language: Language = "en"
    passport_return: PassportReturn = "origin"
    frontend_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = _safe_float(os.getenv("BLEND_STUDIO_TIMEOUT_SEC"), 30.0)
        raw_origins = os.getenv("FRONTEND_ORIGINS", "*")
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("BLEND_STUDIO_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            temperature=max(0.0, min(2.0, _safe_float(os.getenv("BLEND_STUDIO_TEMPERATURE"), 0.75))),
            timeout_sec=timeout if timeout > 0 else 30.0,
            default_language=normalize_language(os.getenv("BLEND_STUDIO_LANGUAGE")),
            passport_return=_parse_passport_return(os.getenv("BLEND_STUDIO_PASSPORT_RETURN")),
            frontend_origins=tuple(
                origin.strip() for origin in raw_origins.split(",") if origin.strip()
            )
            or ("*",),
        )

    def require_api_key(self) -> str:
        """Return the API key or fail with a message naming the variable."""
        if not self.api_key:
            raise AuthenticationError(
                "No API key provided. Set GEMINI_API_KEY environment variable "
                "or pass api_key parameter."
            )
        return self.api_key
