"""blend-studio: Generate a coffee blend story from flavor tags and a taste balance."""

from blend_studio.core import GenerationClient, GenerationOutcome
from blend_studio.flow import FlowController, Screen, Session
from blend_studio.radar import radar_geometry
from blend_studio.schema import ChatMessage, CoffeeResult, HistoryEntry, RadarData

__version__ = "0.1.0"

__all__ = [
    "GenerationClient",
    "GenerationOutcome",
    "FlowController",
    "Screen",
    "Session",
    "radar_geometry",
    "ChatMessage",
    "CoffeeResult",
    "HistoryEntry",
    "RadarData",
    "__version__",
]
