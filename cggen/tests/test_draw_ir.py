"""Tests for the drawing IR.

Validates dataclass creation, immutability, fill-rule checks and route
construction.
"""

from __future__ import annotations

import math

import pytest

from cggen.draw_ir import (
    ALL_STEP_TYPES,
    AffineTransform,
    Clip,
    ClosePath,
    DrawRoute,
    DrawStep,
    EndPath,
    Fill,
    Line,
    MoveTo,
    NamedImage,
    NonStrokeColor,
    Point,
    Rect,
    RGBColor,
    Size,
)


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class TestGeometry:
    def test_rect_size_and_origin(self) -> None:
        r = Rect(x=1.0, y=2.0, width=30.0, height=40.0)
        assert r.size == Size(30.0, 40.0)
        assert r.origin == Point(1.0, 2.0)

    def test_identity_transform(self) -> None:
        t = AffineTransform.identity()
        assert (t.a, t.b, t.c, t.d, t.tx, t.ty) == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def test_color_out_of_range_not_rejected(self) -> None:
        c = RGBColor(red=1.5, green=-0.2, blue=math.nan)
        assert c.red == 1.5
        assert math.isnan(c.blue)

    def test_frozen(self) -> None:
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 99.0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


class TestSteps:
    def test_all_step_types_are_steps(self) -> None:
        assert len(ALL_STEP_TYPES) == 18
        assert len(set(ALL_STEP_TYPES)) == len(ALL_STEP_TYPES)
        for cls in ALL_STEP_TYPES:
            assert issubclass(cls, DrawStep)

    def test_fill_rules(self) -> None:
        assert Fill("winding").rule == "winding"
        assert Fill("evenOdd").rule == "evenOdd"
        assert Clip("evenOdd").rule == "evenOdd"

    def test_fill_invalid_rule(self) -> None:
        with pytest.raises(ValueError, match="must be 'winding' or 'evenOdd'"):
            Fill("nonzero")  # type: ignore[arg-type]

    def test_clip_invalid_rule(self) -> None:
        with pytest.raises(ValueError, match="Clip rule"):
            Clip("even-odd")  # type: ignore[arg-type]

    def test_payload_free_steps_compare_equal(self) -> None:
        assert ClosePath() == ClosePath()
        assert EndPath() != ClosePath()

    def test_step_frozen(self) -> None:
        op = MoveTo(Point(0.0, 0.0))
        with pytest.raises(AttributeError):
            op.point = Point(1.0, 1.0)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


class TestDrawRoute:
    def test_list_steps_frozen_to_tuple(self) -> None:
        steps = [MoveTo(Point(0.0, 0.0)), Line(Point(1.0, 1.0))]
        route = DrawRoute(steps=steps, bounding_rect=Rect(0.0, 0.0, 5.0, 6.0))
        steps.append(ClosePath())
        assert isinstance(route.steps, tuple)
        assert len(route.steps) == 2

    def test_order_preserved(self) -> None:
        steps = [
            NonStrokeColor(RGBColor(0.0, 0.0, 0.0)),
            MoveTo(Point(0.0, 0.0)),
            Fill("winding"),
        ]
        route = DrawRoute(steps=steps, bounding_rect=Rect(0.0, 0.0, 1.0, 1.0))
        assert list(route.steps) == steps

    def test_size_from_bounding_rect(self) -> None:
        route = DrawRoute(steps=(), bounding_rect=Rect(3.0, 4.0, 24.0, 12.0))
        assert route.size == Size(24.0, 12.0)

    def test_named_image_unpacks(self) -> None:
        route = DrawRoute(steps=(), bounding_rect=Rect(0.0, 0.0, 1.0, 1.0))
        name, r = NamedImage("Icon", route)
        assert name == "Icon"
        assert r is route
