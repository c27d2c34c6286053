"""Custom exceptions for blend-studio."""


class BlendStudioError(Exception):
    """Base exception for blend-studio."""

    pass


class AuthenticationError(BlendStudioError):
    """Raised when API key is invalid or missing."""

    pass


class RateLimitError(BlendStudioError):
    """Raised when API rate limit is exceeded."""

    pass


class GenerationError(BlendStudioError):
    """Raised when the text generation service fails or returns unusable data."""

    pass


class TranslationError(BlendStudioError):
    """Raised when the content table is missing keys for a language."""

    pass
