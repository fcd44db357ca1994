"""Shared fixtures for code generation tests."""

from __future__ import annotations

import pytest

from cggen.draw_ir import (
    AffineTransform,
    AppendRectangle,
    Clip,
    ClosePath,
    ConcatCTM,
    Curve,
    DrawRoute,
    DrawStep,
    EndPath,
    Fill,
    Flatness,
    Line,
    LineWidth,
    MoveTo,
    NonStrokeColor,
    NonStrokeColorSpace,
    Point,
    Rect,
    RestoreGState,
    RGBColor,
    SaveGState,
    Stroke,
    StrokeColor,
    StrokeColorSpace,
)


@pytest.fixture()
def sample_steps() -> dict[type[DrawStep], DrawStep]:
    """One instance of every step type, keyed by type."""
    return {
        SaveGState: SaveGState(),
        RestoreGState: RestoreGState(),
        MoveTo: MoveTo(Point(1.0, 2.0)),
        Curve: Curve(Point(1.0, 2.0), Point(3.0, 4.0), Point(5.0, 6.0)),
        Line: Line(Point(3.0, 4.0)),
        ClosePath: ClosePath(),
        Clip: Clip("winding"),
        EndPath: EndPath(),
        Flatness: Flatness(0.5),
        NonStrokeColorSpace: NonStrokeColorSpace(),
        NonStrokeColor: NonStrokeColor(RGBColor(1.0, 0.0, 0.0)),
        AppendRectangle: AppendRectangle(Rect(0.0, 0.0, 4.0, 8.0)),
        Fill: Fill("evenOdd"),
        StrokeColorSpace: StrokeColorSpace(),
        StrokeColor: StrokeColor(RGBColor(0.0, 0.0, 1.0)),
        ConcatCTM: ConcatCTM(AffineTransform.identity()),
        LineWidth: LineWidth(2.0),
        Stroke: Stroke(),
    }


@pytest.fixture()
def foo_route() -> DrawRoute:
    """10x10 red triangle-ish path filled with the winding rule."""
    return DrawRoute(
        steps=(
            MoveTo(Point(0.0, 0.0)),
            Line(Point(10.0, 10.0)),
            ClosePath(),
            NonStrokeColor(RGBColor(1.0, 0.0, 0.0)),
            Fill("winding"),
        ),
        bounding_rect=Rect(0.0, 0.0, 10.0, 10.0),
    )
