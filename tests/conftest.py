"""Shared fixtures for blend-studio tests."""

import pytest

from blend_studio import CoffeeResult, GenerationClient, RadarData
from blend_studio.config import Settings
from blend_studio.exceptions import GenerationError
from blend_studio.providers.base import BaseProvider


def make_result(**overrides) -> CoffeeResult:
    data = dict(
        title="Velvet Dusk",
        short_description="A jammy, dark-fruited cup.",
        story="Grown on volcanic slopes, this lot tastes of ripe plums.",
        origin="Kenya",
        region="Nyeri",
        altitude="1800 masl",
        process="Natural",
        roast_level="Medium",
        tasting_notes=["Plum", "Cocoa", "Molasses"],
        brewing_method="French Press",
        match_score=95,
        radar_data=RadarData(sweetness=7, acidity=6, body=8, bitterness=4, aroma=7, aftertaste=6),
    )
    data.update(overrides)
    return CoffeeResult(**data)


class FakeProvider(BaseProvider):
    """Records calls and replays a scripted result or error."""

    def __init__(self, result=None, error=None, reply="Try a washed Kenyan.", chat_error=None):
        self.result = result
        self.error = error
        self.reply = reply
        self.chat_error = chat_error
        self.prompts = []
        self.chat_calls = []

    async def generate_blend(self, prompt, *, system_instruction):
        self.prompts.append((prompt, system_instruction))
        if self.error is not None:
            raise self.error
        return self.result

    async def chat(self, history, message, *, system_instruction):
        self.chat_calls.append((list(history), message, system_instruction))
        if self.chat_error is not None:
            raise self.chat_error
        return self.reply

    def get_metadata(self):
        return {"provider": "fake"}


@pytest.fixture
def settings():
    return Settings(api_key="test-key", timeout_sec=1.0)


@pytest.fixture
def live_provider():
    return FakeProvider(result=make_result())


@pytest.fixture
def failing_provider():
    return FakeProvider(error=GenerationError("network down"))


@pytest.fixture
def live_client(live_provider, settings):
    return GenerationClient(live_provider, settings=settings)


@pytest.fixture
def failing_client(failing_provider, settings):
    return GenerationClient(failing_provider, settings=settings)
