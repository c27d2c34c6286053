"""Bilingual content table for every user-facing string."""

from __future__ import annotations

from typing import Any

from blend_studio.config import LANGUAGES, Language, normalize_language
from blend_studio.exceptions import TranslationError

TRANSLATIONS: dict[str, dict[str, Any]] = {
    "en": {
        "welcome_title": "Begin Your \nCoffee Journey",
        "welcome_subtitle": (
            "Discover the perfect bean blend tailored to your mood and taste "
            "through an artistic exploration."
        ),
        "start_btn": "Start Exploring",
        "flavor_title": "Create Profile",
        "flavor_sub": "Drag 3 flavors to brew your cup",
        "drop_hint": "Drop flavors here",
        "empty_cup": "Empty Cup",
        "more_btn_prefix": "",
        "more_btn_suffix": " more",
        "continue_btn": "Continue",
        "flavors": {
            "berry": "Berry",
            "citrus": "Citrus",
            "floral": "Floral",
            "sweet": "Sweet",
            "chocolate": "Choco",
            "nutty": "Nutty",
        },
        "radar_labels": {
            "sweetness": "Sweet",
            "acidity": "ACID",
            "body": "BODY",
            "bitterness": "BITTER",
            "aroma": "AROMA",
            "aftertaste": "FINISH",
        },
        "balance_title": "Adjust Balance",
        "balance_sub": "Fine tune the character",
        "heavy": "HEAVY BODY",
        "light": "LIGHT BODY",
        "deep": "DEEP",
        "bright": "BRIGHT",
        "reveal_btn": "Reveal My Blend",
        "brewing": "Brewing...",
        "flavor_radar": "Flavor Profile",
        "brew_another": "Brew Another Cup",
        "region": "Region",
        "altitude": "Altitude",
        "process": "Process",
        "roast": "Roast",
        "passport_title": "Bean Passport",
        "no_history": "No discoveries yet.",
        "latest_insight": "Latest Insight",
        "insight_bright": (
            "Your recent choices lean towards adventurous acidity. "
            "Consider trying washed Ethiopian beans next time."
        ),
        "insight_deep": (
            "Your recent choices lean towards smooth, deep cups. "
            "Consider trying a natural-process Brazilian next time."
        ),
        "ask_barista": "Ask Barista",
        "chat_title": "Barista Chat",
        "chat_welcome": "Hi! I'm your AI Barista. Ask me anything about coffee brewing or beans.",
        "chat_placeholder": "Ask about beans...",
        "chat_error": "Sorry, I'm having trouble brewing an answer right now.",
    },
    "zh": {
        "welcome_title": "开启您的\n咖啡之旅",
        "welcome_subtitle": "通过艺术探索发现适合您心情和口味的完美咖啡豆。",
        "start_btn": "开始探索",
        "flavor_title": "创建风味档案",
        "flavor_sub": "拖动3种风味到杯中",
        "drop_hint": "拖动风味到这里",
        "empty_cup": "空杯",
        "more_btn_prefix": "还需 ",
        "more_btn_suffix": " 种",
        "continue_btn": "继续",
        "flavors": {
            "berry": "浆果",
            "citrus": "柑橘",
            "floral": "花香",
            "sweet": "甜感",
            "chocolate": "巧克力",
            "nutty": "坚果",
        },
        "radar_labels": {
            "sweetness": "甜感",
            "acidity": "酸度",
            "body": "醇厚",
            "bitterness": "苦味",
            "aroma": "香气",
            "aftertaste": "余韵",
        },
        "balance_title": "调整平衡",
        "balance_sub": "微调咖啡性格",
        "heavy": "醇厚",
        "light": "清淡",
        "deep": "深沉",
        "bright": "明亮",
        "reveal_btn": "生成我的配方",
        "brewing": "萃取中...",
        "flavor_radar": "风味雷达",
        "brew_another": "再来一杯",
        "region": "产区",
        "altitude": "海拔",
        "process": "处理法",
        "roast": "烘焙度",
        "passport_title": "咖啡护照",
        "no_history": "暂无记录",
        "latest_insight": "最新洞察",
        "insight_bright": "您最近的选择倾向于明亮的酸度。下次不妨试试埃塞俄比亚的水洗豆。",
        "insight_deep": "您最近的选择倾向于顺滑深沉的口感。下次不妨试试巴西的日晒豆。",
        "ask_barista": "咨询咖啡师",
        "chat_title": "咖啡师对话",
        "chat_welcome": "您好！我是您的AI咖啡师。有关咖啡冲煮或豆子的问题都可以问我。",
        "chat_placeholder": "询问关于豆子的问题...",
        "chat_error": "抱歉，我现在无法回答。",
    },
}


def _key_paths(table: dict[str, Any], prefix: str = "") -> set[str]:
    paths: set[str] = set()
    for key, value in table.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            paths.update(_key_paths(value, f"{path}."))
        else:
            paths.add(path)
    return paths


def validate_translations(table: dict[str, dict[str, Any]]) -> None:
    """Check that every language defines exactly the same keys.

    Raises:
        TranslationError: If a language is absent, or if any language lacks
            a key another language defines.
    """
    missing_languages = [lang for lang in LANGUAGES if lang not in table]
    if missing_languages:
        raise TranslationError(f"Missing languages: {', '.join(missing_languages)}")

    all_paths: set[str] = set()
    per_language = {lang: _key_paths(table[lang]) for lang in LANGUAGES}
    for paths in per_language.values():
        all_paths |= paths

    problems: list[str] = []
    for lang, paths in per_language.items():
        missing = sorted(all_paths - paths)
        if missing:
            problems.append(f"{lang}: missing {', '.join(missing)}")
    if problems:
        raise TranslationError("Incomplete translations: " + "; ".join(problems))


def get_text(language: str | None) -> dict[str, Any]:
    """Return the string table for a language code."""
    return TRANSLATIONS[normalize_language(language)]


def flavor_label(flavor_id: str, language: Language) -> str:
    return get_text(language)["flavors"][flavor_id]


def remaining_hint(remaining: int, language: Language) -> str:
    """Render the "N more" button text shown until the cup is full."""
    text = get_text(language)
    return f"{text['more_btn_prefix']}{remaining}{text['more_btn_suffix']}"


validate_translations(TRANSLATIONS)
