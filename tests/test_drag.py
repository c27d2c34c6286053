"""Tests for the drag-and-drop flavor surface."""

import pytest

from blend_studio import FlowController
from blend_studio.drag import fill_ratio
from blend_studio.geometry import Point, Rect

CUP = Rect(left=100, top=200, width=120, height=160)
INSIDE = Point(150, 250)
OUTSIDE = Point(10, 10)


@pytest.fixture
def controller(live_client):
    controller = FlowController(live_client)
    controller.start()
    return controller


@pytest.fixture
def surface(controller):
    return controller.flavor_surface(CUP)


def _drop(surface, flavor_id, point=INSIDE):
    surface.start_drag(flavor_id, Point(0, 0))
    surface.move(point)
    return surface.end_drag()


def test_drop_inside_cup_selects(surface, controller):
    assert _drop(surface, "berry") is True
    assert controller.selected_flavors == ("berry",)


def test_drop_outside_cup_returns_to_origin(surface, controller):
    assert _drop(surface, "berry", OUTSIDE) is False
    assert controller.selected_flavors == ()
    assert surface.active_id is None


def test_drop_on_cup_edge_counts(surface, controller):
    assert _drop(surface, "citrus", Point(CUP.right, CUP.bottom)) is True
    assert controller.selected_flavors == ("citrus",)


def test_over_target_is_derived_from_pointer(surface):
    assert surface.is_over_target is False
    surface.start_drag("berry", OUTSIDE)
    assert surface.is_over_target is False
    assert surface.move(INSIDE) is True
    assert surface.is_over_target is True
    assert surface.move(OUTSIDE) is False
    surface.end_drag()
    assert surface.is_over_target is False


def test_move_without_drag_is_ignored(surface):
    assert surface.move(INSIDE) is False


def test_drop_order_is_preserved(surface, controller):
    for flavor in ["nutty", "berry", "floral"]:
        _drop(surface, flavor)

    assert controller.selected_flavors == ("nutty", "berry", "floral")


def test_full_cup_disables_remaining_items(surface, controller):
    for flavor in ["nutty", "berry", "floral"]:
        _drop(surface, flavor)

    assert surface.is_full is True
    assert surface.is_disabled("citrus") is True
    assert surface.is_disabled("berry") is False
    assert surface.start_drag("citrus", OUTSIDE) is False
    assert len(controller.selected_flavors) == 3


def test_selected_items_are_not_draggable(surface):
    _drop(surface, "berry")

    assert surface.is_draggable("berry") is False
    assert surface.start_drag("berry", OUTSIDE) is False


def test_rapid_repeat_drops_do_not_duplicate(surface, controller):
    for _ in range(5):
        _drop(surface, "sweet")

    assert controller.selected_flavors == ("sweet",)


def test_tap_removes_selected_flavor(surface, controller):
    for flavor in ["nutty", "berry", "floral"]:
        _drop(surface, flavor)

    assert surface.tap("berry") is True
    assert controller.selected_flavors == ("nutty", "floral")
    assert surface.tap("citrus") is False


def test_listeners_receive_selection(surface):
    events = []
    surface.add_listener(events.append)

    _drop(surface, "berry")
    _drop(surface, "citrus", OUTSIDE)
    surface.tap("berry")

    assert events == [("berry",), ()]


def test_second_drag_while_active_is_rejected(surface):
    assert surface.start_drag("berry", OUTSIDE) is True
    assert surface.start_drag("citrus", OUTSIDE) is False
    surface.cancel()
    assert surface.start_drag("citrus", OUTSIDE) is True


def test_fill_ratio():
    assert fill_ratio([]) == 0.0
    assert fill_ratio(["a", "b", "c"]) == 1.0


def test_rect_requires_positive_size():
    with pytest.raises(ValueError):
        Rect(left=0, top=0, width=0, height=10)
