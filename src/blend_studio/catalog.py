"""Static flavor catalog."""

from blend_studio.exceptions import TranslationError
from blend_studio.schema import FlavorTag
from blend_studio.translations import TRANSLATIONS

MAX_FLAVORS = 3

FLAVOR_CATALOG: tuple[FlavorTag, ...] = (
    FlavorTag(id="berry", color="rose-300", icon="droplet"),
    FlavorTag(id="citrus", color="orange-300", icon="sun"),
    FlavorTag(id="floral", color="pink-200", icon="flower"),
    FlavorTag(id="sweet", color="amber-200", icon="sparkles"),
    FlavorTag(id="chocolate", color="#5D4037", icon="bean"),
    FlavorTag(id="nutty", color="#D7CCC8", icon="bean"),
)

# Cup liquid tint once a flavor lands in it.
LIQUID_COLORS: dict[str, str] = {
    "chocolate": "#5D4037",
    "berry": "rose-400",
    "citrus": "orange-300",
    "nutty": "#A1887F",
    "sweet": "amber-300",
    "floral": "pink-300",
}
EMPTY_LIQUID = "stone-100"
DEFAULT_LIQUID = "amber-700"

_BY_ID = {flavor.id: flavor for flavor in FLAVOR_CATALOG}


def get_flavor(flavor_id: str) -> FlavorTag:
    try:
        return _BY_ID[flavor_id]
    except KeyError:
        raise ValueError(f"Unknown flavor: {flavor_id}") from None


def is_known_flavor(flavor_id: str) -> bool:
    return flavor_id in _BY_ID


def liquid_color(selected: list[str] | tuple[str, ...]) -> str:
    """Tint of the cup, driven by the most recently dropped flavor."""
    if not selected:
        return EMPTY_LIQUID
    return LIQUID_COLORS.get(selected[-1], DEFAULT_LIQUID)


def _check_labels() -> None:
    for lang, table in TRANSLATIONS.items():
        missing = [flavor.id for flavor in FLAVOR_CATALOG if flavor.id not in table["flavors"]]
        if missing:
            raise TranslationError(f"Flavor labels missing for {lang}: {', '.join(missing)}")


_check_labels()
