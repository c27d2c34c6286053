"""Barista chat overlay state."""

from __future__ import annotations

import itertools
import logging
from typing import Literal

from blend_studio.config import Language, normalize_language
from blend_studio.core import GenerationClient
from blend_studio.schema import ChatMessage
from blend_studio.translations import get_text

logger = logging.getLogger(__name__)


class ChatSession:
    """Linear transcript with at most one reply pending.

    Closing the overlay bumps an epoch counter; a reply that arrives for an
    older epoch is dropped instead of being appended.
    """

    def __init__(self, client: GenerationClient, *, language: Language = "en"):
        self.client = client
        self.language: Language = normalize_language(language)
        self.is_open = False
        self.is_typing = False
        self._messages: list[ChatMessage] = []
        self._ids = itertools.count(1)
        self._epoch = 0

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def open(self) -> None:
        self.is_open = True
        if not self._messages:
            self._append("assistant", get_text(self.language)["chat_welcome"])

    def close(self) -> None:
        self.is_open = False
        self.is_typing = False
        self._epoch += 1

    def can_send(self, text: str) -> bool:
        return self.is_open and not self.is_typing and bool(text.strip())

    async def send(self, text: str) -> ChatMessage | None:
        """Post a user message and wait for the barista's reply.

        Returns the assistant message, or None when the message was not sent
        or the overlay was closed before the reply came back.
        """
        if not self.can_send(text):
            return None

        history = list(self._messages)
        self._append("user", text)
        epoch = self._epoch
        language = self.language
        self.is_typing = True
        try:
            reply = await self.client.chat(history, text, language)
        except Exception:
            logger.exception("barista chat failed")
            reply = get_text(language)["chat_error"]
        finally:
            if epoch == self._epoch:
                self.is_typing = False

        if epoch != self._epoch:
            logger.debug("discarding chat reply that arrived after close")
            return None
        return self._append("assistant", reply)

    def _append(self, role: Literal["user", "assistant"], text: str) -> ChatMessage:
        message = ChatMessage(id=next(self._ids), role=role, text=text)
        self._messages.append(message)
        return message
