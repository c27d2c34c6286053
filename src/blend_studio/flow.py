"""Screen flow state machine for one interactive session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from blend_studio.catalog import MAX_FLAVORS, is_known_flavor, liquid_color
from blend_studio.chat import ChatSession
from blend_studio.config import Language, PassportReturn, normalize_language
from blend_studio.core import GenerationClient
from blend_studio.drag import DragSelectionSurface, fill_ratio
from blend_studio.geometry import Rect
from blend_studio.history import HistoryLog
from blend_studio.pad import CoordinatePad, clamp_coordinate
from blend_studio.schema import CoffeeResult
from blend_studio.translations import get_text, remaining_hint

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    WELCOME = "welcome"
    FLAVOR_SELECT = "flavor_select"
    BALANCE = "balance"
    RESULT = "result"
    PASSPORT = "passport"


_BACK_EDGES = {
    Screen.FLAVOR_SELECT: Screen.WELCOME,
    Screen.BALANCE: Screen.FLAVOR_SELECT,
    Screen.RESULT: Screen.BALANCE,
    Screen.PASSPORT: Screen.WELCOME,
}


@dataclass
class Session:
    screen: Screen = Screen.WELCOME
    selected_flavors: list[str] = field(default_factory=list)
    coordinate: tuple[float, float] = (0.0, 0.0)
    language: Language = "en"
    loading: bool = False
    result: CoffeeResult | None = None
    passport_origin: Screen | None = None


class FlowController:
    """Owns the session and is the only thing that mutates it.

    Every operation returns True when it took effect. Requests that the
    current state does not allow (continuing with two flavors, a fourth
    flavor, a second reveal while one is pending) return False and change
    nothing.
    """

    def __init__(
        self,
        client: GenerationClient,
        *,
        language: str | None = None,
        passport_return: PassportReturn | None = None,
        history: HistoryLog | None = None,
    ):
        self.client = client
        self.passport_return: PassportReturn = passport_return or client.settings.passport_return
        self.session = Session(language=normalize_language(language or client.settings.default_language))
        self.history = history if history is not None else HistoryLog()
        self.chat = ChatSession(client, language=self.session.language)

    # -- read side -----------------------------------------------------

    @property
    def screen(self) -> Screen:
        return self.session.screen

    @property
    def selected_flavors(self) -> tuple[str, ...]:
        return tuple(self.session.selected_flavors)

    @property
    def text(self) -> dict[str, Any]:
        return get_text(self.session.language)

    def flavors_remaining(self) -> int:
        return MAX_FLAVORS - len(self.session.selected_flavors)

    def can_continue(self) -> bool:
        return self.screen is Screen.FLAVOR_SELECT and self.flavors_remaining() == 0

    def continue_label(self) -> str:
        if self.flavors_remaining() > 0:
            return remaining_hint(self.flavors_remaining(), self.session.language)
        return self.text["continue_btn"]

    def cup_state(self) -> dict[str, Any]:
        selected = self.session.selected_flavors
        return {"fill": fill_ratio(selected), "liquid_color": liquid_color(selected)}

    # -- input surfaces ------------------------------------------------

    def flavor_surface(self, target: Rect) -> DragSelectionSurface:
        return DragSelectionSurface(target, self)

    def balance_pad(self, region: Rect) -> CoordinatePad:
        pad = CoordinatePad(region, on_change=lambda value: self.set_coordinate(*value))
        pad.value = self.session.coordinate
        return pad

    # -- transitions ---------------------------------------------------

    def _move(self, target: Screen) -> bool:
        logger.debug("screen %s -> %s", self.session.screen.value, target.value)
        self.session.screen = target
        return True

    def _reject(self, action: str) -> bool:
        logger.debug("%s rejected on %s", action, self.session.screen.value)
        return False

    def start(self) -> bool:
        if self.screen is not Screen.WELCOME:
            return self._reject("start")
        return self._move(Screen.FLAVOR_SELECT)

    def continue_to_balance(self) -> bool:
        if not self.can_continue():
            return self._reject("continue")
        return self._move(Screen.BALANCE)

    def back(self) -> bool:
        target = _BACK_EDGES.get(self.screen)
        if target is None or self.session.loading:
            return self._reject("back")
        if self.screen is Screen.PASSPORT:
            self.session.passport_origin = None
        return self._move(target)

    def restart(self) -> bool:
        if self.screen is not Screen.RESULT:
            return self._reject("restart")
        self.session.selected_flavors = []
        self.session.coordinate = (0.0, 0.0)
        self.session.result = None
        self.session.passport_origin = None
        return self._move(Screen.WELCOME)

    def open_passport(self) -> bool:
        if self.screen in (Screen.WELCOME, Screen.PASSPORT) or self.session.loading:
            return self._reject("open_passport")
        self.session.passport_origin = self.screen
        return self._move(Screen.PASSPORT)

    def close_passport(self) -> bool:
        if self.screen is not Screen.PASSPORT:
            return self._reject("close_passport")
        origin = self.session.passport_origin
        self.session.passport_origin = None
        if self.passport_return == "origin" and origin is not None:
            return self._move(origin)
        return self._move(Screen.WELCOME)

    # -- selection -----------------------------------------------------

    def add_flavor(self, flavor_id: str) -> bool:
        selected = self.session.selected_flavors
        if (
            self.screen is not Screen.FLAVOR_SELECT
            or not is_known_flavor(flavor_id)
            or flavor_id in selected
            or len(selected) >= MAX_FLAVORS
        ):
            return self._reject(f"add_flavor({flavor_id})")
        selected.append(flavor_id)
        return True

    def remove_flavor(self, flavor_id: str) -> bool:
        if self.screen is not Screen.FLAVOR_SELECT or flavor_id not in self.session.selected_flavors:
            return self._reject(f"remove_flavor({flavor_id})")
        self.session.selected_flavors = [f for f in self.session.selected_flavors if f != flavor_id]
        return True

    def set_coordinate(self, x: float, y: float) -> bool:
        if self.screen is not Screen.BALANCE or self.session.loading:
            return self._reject("set_coordinate")
        self.session.coordinate = clamp_coordinate(x, y)
        return True

    # -- language ------------------------------------------------------

    def set_language(self, language: str) -> bool:
        lang = normalize_language(language)
        self.session.language = lang
        self.chat.language = lang
        return True

    def toggle_language(self) -> Language:
        self.set_language("zh" if self.session.language == "en" else "en")
        return self.session.language

    # -- generation ----------------------------------------------------

    async def reveal(self) -> CoffeeResult | None:
        """Generate the blend and move to the result screen.

        Only one request may be pending. The loading flag is cleared on every
        path, and because the client substitutes a fallback on failure the
        screen always advances once the call returns.
        """
        if (
            self.screen is not Screen.BALANCE
            or self.session.loading
            or len(self.session.selected_flavors) != MAX_FLAVORS
        ):
            self._reject("reveal")
            return None

        self.session.loading = True
        try:
            x, y = self.session.coordinate
            outcome = await self.client.generate_with_metadata(
                list(self.session.selected_flavors), x, y, self.session.language
            )
        finally:
            self.session.loading = False

        self.history.record(outcome.result, x=x, source=outcome.source)
        self.session.result = outcome.result
        self._move(Screen.RESULT)
        return outcome.result
