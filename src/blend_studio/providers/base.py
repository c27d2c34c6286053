"""Base provider interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from blend_studio.schema import CoffeeResult, ChatMessage


class BaseProvider(ABC):
    """Abstract base class for text generation services."""

    @abstractmethod
    async def generate_blend(self, prompt: str, *, system_instruction: str) -> CoffeeResult:
        """Generate a structured coffee profile for a prompt.

        Args:
            prompt: Natural-language request describing the selection
            system_instruction: Persona for the model

        Returns:
            CoffeeResult validated against the schema
        """
        pass

    @abstractmethod
    async def chat(
        self,
        history: Sequence[ChatMessage],
        message: str,
        *,
        system_instruction: str,
    ) -> str:
        """Send a new user message with the prior transcript, return the reply."""
        pass

    def get_metadata(self) -> dict[str, str]:
        """Return provider-specific metadata."""
        return {}
