"""Tests for the balance pad."""

import pytest

from blend_studio import FlowController
from blend_studio.geometry import Point, Rect
from blend_studio.pad import CoordinatePad, clamp_coordinate, normalize

PAD = Rect(left=20, top=100, width=200, height=200)


def test_corners_and_center():
    assert normalize(PAD, Point(20, 100)) == pytest.approx((-1.0, 1.0))
    assert normalize(PAD, Point(220, 300)) == pytest.approx((1.0, -1.0))
    assert normalize(PAD, Point(120, 200)) == pytest.approx((0.0, 0.0))


def test_up_is_positive():
    _, y = normalize(PAD, Point(120, 150))
    assert y == pytest.approx(0.5)


@pytest.mark.parametrize(
    "point",
    [Point(-500, -500), Point(5000, 120), Point(100, 9000), Point(-1, 301), Point(1e9, -1e9)],
)
def test_output_is_clamped(point):
    x, y = normalize(PAD, point)
    assert -1.0 <= x <= 1.0
    assert -1.0 <= y <= 1.0


def test_emits_only_while_active():
    seen = []
    pad = CoordinatePad(PAD, on_change=seen.append)

    assert pad.move(Point(120, 200)) is None
    pad.press(Point(20, 100))
    pad.move(Point(220, 300))
    pad.release()
    assert pad.move(Point(120, 200)) is None

    assert seen == [pytest.approx((-1.0, 1.0)), pytest.approx((1.0, -1.0))]


def test_clamp_coordinate():
    assert clamp_coordinate(2, -7) == (1.0, -1.0)
    assert clamp_coordinate(0.25, -0.5) == (0.25, -0.5)


def test_pad_drives_session_coordinate(live_client):
    controller = FlowController(live_client)
    controller.start()
    for flavor in ["berry", "citrus", "sweet"]:
        controller.add_flavor(flavor)
    controller.continue_to_balance()
    pad = controller.balance_pad(PAD)

    pad.press(Point(220, 100))

    assert controller.session.coordinate == pytest.approx((1.0, 1.0))
