"""Tests for the Gemini provider against a stub client."""

import asyncio
import json
from types import SimpleNamespace

import pytest

from blend_studio.exceptions import AuthenticationError, GenerationError
from blend_studio.providers.gemini import GeminiProvider
from blend_studio.schema import ChatMessage, CoffeeResult

from conftest import make_result


class StubModels:
    def __init__(self, text):
        self.text = text
        self.calls = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        return SimpleNamespace(text=self.text)


class StubChat:
    def __init__(self, reply):
        self.reply = reply
        self.sent = []

    async def send_message(self, message):
        self.sent.append(message)
        return SimpleNamespace(text=self.reply)


class StubChats:
    def __init__(self, reply):
        self.reply = reply
        self.created = []

    def create(self, model, config=None, history=None):
        chat = StubChat(self.reply)
        self.created.append({"model": model, "config": config, "history": history, "chat": chat})
        return chat


def _client(text="", reply="Hello!"):
    return SimpleNamespace(aio=SimpleNamespace(models=StubModels(text), chats=StubChats(reply)))


def test_provider_requires_api_key():
    with pytest.raises(AuthenticationError):
        GeminiProvider(api_key="")


def test_generate_blend_parses_structured_response():
    client = _client(text=make_result().model_dump_json())
    provider = GeminiProvider(api_key="k", client=client, temperature=0.5)

    result = asyncio.run(provider.generate_blend("prompt", system_instruction="persona"))

    assert isinstance(result, CoffeeResult)
    assert result.title == "Velvet Dusk"
    call = client.aio.models.calls[0]
    assert call["model"] == "gemini-2.5-flash"
    assert call["contents"] == "prompt"
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].system_instruction == "persona"
    assert call["config"].temperature == 0.5


def test_generate_blend_rejects_empty_response():
    provider = GeminiProvider(api_key="k", client=_client(text=""))

    with pytest.raises(GenerationError, match="No response"):
        asyncio.run(provider.generate_blend("prompt", system_instruction="persona"))


def test_generate_blend_rejects_schema_violation():
    payload = make_result().model_dump()
    payload["radar_data"]["body"] = 42
    provider = GeminiProvider(api_key="k", client=_client(text=json.dumps(payload)))

    with pytest.raises(GenerationError):
        asyncio.run(provider.generate_blend("prompt", system_instruction="persona"))


def test_chat_maps_assistant_turns_to_model_role():
    client = _client(reply="Try a Chemex.")
    provider = GeminiProvider(api_key="k", client=client)
    history = [
        ChatMessage(id=1, role="assistant", text="Hi!"),
        ChatMessage(id=2, role="user", text="Light roast?"),
        ChatMessage(id=3, role="assistant", text="Sure."),
    ]

    reply = asyncio.run(provider.chat(history, "Which brewer?", system_instruction="barista"))

    assert reply == "Try a Chemex."
    created = client.aio.chats.created[0]
    assert [content.role for content in created["history"]] == ["model", "user", "model"]
    assert created["history"][1].parts[0].text == "Light roast?"
    assert created["config"].system_instruction == "barista"
    assert created["chat"].sent == ["Which brewer?"]


def test_chat_rejects_empty_reply():
    provider = GeminiProvider(api_key="k", client=_client(reply=""))

    with pytest.raises(GenerationError):
        asyncio.run(provider.chat([], "hello", system_instruction="barista"))


def test_metadata_names_model():
    provider = GeminiProvider(api_key="k", model="gemini-2.5-pro", client=_client())
    assert provider.get_metadata() == {"provider": "gemini", "model": "gemini-2.5-pro"}


def test_generate_blend_rejects_low_match_score():
    payload = make_result(match_score=40).model_dump()
    provider = GeminiProvider(api_key="k", client=_client(text=json.dumps(payload)))

    with pytest.raises(GenerationError, match="schema"):
        asyncio.run(provider.generate_blend("prompt", system_instruction="persona"))
