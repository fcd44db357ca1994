"""Numeric and argument formatting for emitted C expressions.

Float policy:
    Every number is written with Python's shortest round-trip ``repr`` of
    the value as a float (``1`` -> ``1.0``, ``0.1`` -> ``0.1``,
    ``1e-05`` -> ``1e-05``).  No rounding is applied.  Non-finite values
    come out as ``nan`` / ``inf`` / ``-inf`` and are not rejected.
"""

from __future__ import annotations

from collections.abc import Iterable

from cggen.draw_ir.geometry import AffineTransform, Point, Rect, RGBColor


def num(value: float) -> str:
    """Shortest round-trip decimal text for *value*."""
    return repr(float(value))


def cgfloat(value: float) -> str:
    """``(CGFloat)<value>`` cast expression."""
    return f"(CGFloat){num(value)}"


def points_args(points: Iterable[Point]) -> str:
    """Flatten points into ``(CGFloat)x, (CGFloat)y, ...``."""
    return ", ".join(f"{cgfloat(p.x)}, {cgfloat(p.y)}" for p in points)


def rect_expr(rect: Rect) -> str:
    return (
        f"CGRectMake({cgfloat(rect.x)}, {cgfloat(rect.y)}, "
        f"{cgfloat(rect.width)}, {cgfloat(rect.height)})"
    )


def transform_expr(t: AffineTransform) -> str:
    args = ", ".join(num(v) for v in (t.a, t.b, t.c, t.d, t.tx, t.ty))
    return f"CGAffineTransformMake({args})"


def color_components_expr(color: RGBColor) -> str:
    """Component array literal with a fixed opaque alpha of ``1``."""
    return (
        f"(CGFloat []){{{cgfloat(color.red)}, {cgfloat(color.green)}, "
        f"{cgfloat(color.blue)}, 1}}"
    )
