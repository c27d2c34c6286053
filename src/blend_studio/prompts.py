"""Prompt text sent to the generation service."""

from collections.abc import Sequence

from blend_studio.config import Language

BLEND_SYSTEM_INSTRUCTION = "You are a world-class Q Grader and coffee storyteller."

BARISTA_PERSONA = (
    "You are a friendly, knowledgeable coffee barista. Keep answers short, warm, "
    "and helpful. You help people discover new coffee flavors."
)

BLEND_PROMPT = """I am creating a highly personalized specialty coffee profile.
User's Flavor Tags: {flavors}.
Texture/Structure Preference: {body} and {acidity}.

Create a sophisticated coffee recommendation.
It should sound like a real, premium single-origin or master blend.
The 'story' should be poetic and transporting.
Give 3-4 tasting notes and a match score between 85 and 99.
The 'radar_data' numbers (1-10) should accurately reflect the flavors and balance chosen.

{language_instruction}"""


def _intensity(value: float) -> str:
    magnitude = abs(value)
    if magnitude < 0.33:
        return "Slightly"
    if magnitude < 0.66:
        return "Moderately"
    return "Distinctly"


def describe_balance(x: float, y: float) -> tuple[str, str]:
    """Turn pad coordinates into (body, acidity) phrases.

    y drives body (up is heavy), x drives acidity (right is bright).
    """
    body = "Heavy/Syrupy Body" if y > 0 else "Tea-like/Light Body"
    acidity = "Bright/Citric Acidity" if x > 0 else "Low/Smooth Acidity"
    return f"{_intensity(y)} {body}", f"{_intensity(x)} {acidity}"


def build_blend_prompt(flavors: Sequence[str], x: float, y: float, language: Language) -> str:
    body, acidity = describe_balance(x, y)
    if language == "zh":
        language_instruction = "IMPORTANT: Output ALL string values in Simplified Chinese (zh-CN)."
    else:
        language_instruction = "Output all string values in English."
    return BLEND_PROMPT.format(
        flavors=", ".join(flavors),
        body=body,
        acidity=acidity,
        language_instruction=language_instruction,
    )


def build_barista_instruction(language: Language) -> str:
    reply = "Reply in Simplified Chinese (zh-CN)." if language == "zh" else "Reply in English."
    return f"{BARISTA_PERSONA} {reply}"
