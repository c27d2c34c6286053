"""Fixed results served whenever generation fails."""

from blend_studio.config import Language, normalize_language
from blend_studio.schema import CoffeeResult, RadarData

_RADAR = RadarData(sweetness=8, acidity=7, body=5, bitterness=3, aroma=9, aftertaste=8)

FALLBACK_RESULTS: dict[Language, CoffeeResult] = {
    "en": CoffeeResult(
        title="Mist of the Highlands",
        short_description="A balanced and mysterious cup from the cloud forests.",
        story=(
            "Born in the high-altitude mists where silence reigns, this coffee brings a "
            "moment of profound clarity. The beans are harvested at dawn, capturing the "
            "cool dew and the earth's deep resonance. Every sip unfolds like a story of "
            "ancient soils and careful hands, offering a sanctuary of flavor in your busy day."
        ),
        origin="Ethiopia",
        region="Sidama",
        altitude="2100 masl",
        process="Washed",
        roast_level="Medium-Light",
        tasting_notes=["Jasmine", "Bergamot", "Honey"],
        brewing_method="Pour Over (V60)",
        match_score=92,
        radar_data=_RADAR,
    ),
    "zh": CoffeeResult(
        title="高地迷雾",
        short_description="来自云雾森林的神秘与平衡之选。",
        story=(
            "诞生于寂静统治的高海拔迷雾中，这款咖啡带来深刻的清晰时刻。豆子在黎明时分采摘，"
            "捕捉了清凉的露水和大地的深沉共鸣。每一口都像是在讲述古老土壤和精心呵护的故事，"
            "为您忙碌的一天提供风味的避风港。"
        ),
        origin="埃塞俄比亚",
        region="西达摩",
        altitude="2100米",
        process="水洗",
        roast_level="中浅烘焙",
        tasting_notes=["茉莉花", "佛手柑", "蜂蜜"],
        brewing_method="手冲 (V60)",
        match_score=92,
        radar_data=_RADAR,
    ),
}


def fallback_result(language: str | None) -> CoffeeResult:
    """Return a private copy of the fallback for a language."""
    return FALLBACK_RESULTS[normalize_language(language)].model_copy(deep=True)
