"""Data models for blend-studio."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RADAR_AXES = ("sweetness", "acidity", "body", "bitterness", "aroma", "aftertaste")


class RadarData(BaseModel):
    """Six taste attributes on a 1-10 scale."""

    model_config = ConfigDict(frozen=True)

    sweetness: int = Field(ge=1, le=10)
    acidity: int = Field(ge=1, le=10)
    body: int = Field(ge=1, le=10)
    bitterness: int = Field(ge=1, le=10)
    aroma: int = Field(ge=1, le=10)
    aftertaste: int = Field(ge=1, le=10)


class CoffeeResult(BaseModel):
    """A generated coffee blend profile."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1, description="A creative name for this coffee blend")
    short_description: str = Field(min_length=1, description="One sentence summary (max 15 words)")
    story: str = Field(
        min_length=1,
        description=(
            "A rich, evocative paragraph describing the coffee's character, origin "
            "atmosphere, and drinking experience (approx 60-80 words)."
        ),
    )
    origin: str = Field(min_length=1, description="Country of origin")
    region: str = Field(min_length=1, description="Specific growing region (e.g. Yirgacheffe, Huila, Antigua)")
    altitude: str = Field(min_length=1, description="Growing altitude (e.g. 1900-2200 masl)")
    process: str = Field(min_length=1, description="Processing method (e.g. Washed, Natural, Honey, Anaerobic)")
    roast_level: str = Field(min_length=1, description="Light, Medium, Dark, City+, etc.")
    tasting_notes: list[str] = Field(min_length=3, max_length=4, description="3-4 specific flavor notes")
    brewing_method: str = Field(min_length=1, description="Best way to brew this bean")
    match_score: int = Field(ge=0, le=100, description="A calculated match score from 85-99")
    radar_data: RadarData


class FlavorTag(BaseModel):
    """A selectable flavor descriptor."""

    model_config = ConfigDict(frozen=True)

    id: str
    color: str
    icon: str


class ChatMessage(BaseModel):
    """One turn of the barista chat transcript."""

    model_config = ConfigDict(frozen=True)

    id: int
    role: Literal["user", "assistant"]
    text: str


class HistoryEntry(BaseModel):
    """A recorded generation, newest entries first in the log."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    result: CoffeeResult
    mood_color: Literal["bright", "deep"]
    source: Literal["live", "fallback"] = "live"


class BlendResponse(CoffeeResult):
    """What the generation service must return; stored results only need 0-100."""

    match_score: int = Field(ge=85, le=99, description="A calculated match score from 85-99")
