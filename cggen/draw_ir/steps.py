"""Drawing steps -- the instruction set between vector parsers and codegen.

Every primitive drawing or graphics-state instruction is an immutable,
slotted dataclass deriving from :class:`DrawStep`.  The set is closed:
:data:`ALL_STEP_TYPES` lists every variant, and each code generator must
handle all of them.

Replay order
------------
A :class:`DrawRoute` is an ordered tuple of steps plus the image bounds.
Order is the replay order against a graphics context; nothing downstream
reorders, merges or drops steps.

No-op markers
-------------
``EndPath``, ``NonStrokeColorSpace`` and ``StrokeColorSpace`` come straight
from the source document's operator stream.  They are kept in the route so
that it mirrors the source 1:1, but they produce no code.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Literal

from cggen.draw_ir.geometry import AffineTransform, Point, Rect, RGBColor, Size

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

FillRule = Literal["winding", "evenOdd"]
"""Non-zero winding number or even-odd path interior rule."""

FILL_RULES: tuple[str, ...] = ("winding", "evenOdd")


def _check_rule(step: str, rule: str) -> None:
    if rule not in FILL_RULES:
        raise ValueError(
            f"{step} rule must be 'winding' or 'evenOdd', got {rule!r}"
        )


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DrawStep(ABC):
    """Base class for all drawing steps."""

    pass


# ---------------------------------------------------------------------------
# Graphics state
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SaveGState(DrawStep):
    """Push a copy of the graphics state."""

    pass


@dataclass(frozen=True, slots=True)
class RestoreGState(DrawStep):
    """Pop the graphics state saved by the matching ``SaveGState``."""

    pass


@dataclass(frozen=True, slots=True)
class Flatness(DrawStep):
    """Set curve flattening tolerance (device pixels)."""

    value: float


@dataclass(frozen=True, slots=True)
class LineWidth(DrawStep):
    """Set stroke width."""

    value: float


@dataclass(frozen=True, slots=True)
class ConcatCTM(DrawStep):
    """Concatenate *transform* onto the current transformation matrix."""

    transform: AffineTransform


# ---------------------------------------------------------------------------
# Path construction
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MoveTo(DrawStep):
    """Begin a new subpath at *point*."""

    point: Point


@dataclass(frozen=True, slots=True)
class Line(DrawStep):
    """Straight segment from the current point to *point*."""

    point: Point


@dataclass(frozen=True, slots=True)
class Curve(DrawStep):
    """Cubic Bezier segment.

    Parameters
    ----------
    c1, c2 : Point
        Control points.
    end : Point
        End point; becomes the new current point.
    """

    c1: Point
    c2: Point
    end: Point


@dataclass(frozen=True, slots=True)
class ClosePath(DrawStep):
    """Close the current subpath back to its start."""

    pass


@dataclass(frozen=True, slots=True)
class AppendRectangle(DrawStep):
    """Append *rect* as a closed subpath."""

    rect: Rect


@dataclass(frozen=True, slots=True)
class EndPath(DrawStep):
    """End the path without painting.  Produces no code."""

    pass


# ---------------------------------------------------------------------------
# Painting and clipping
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Clip(DrawStep):
    """Intersect the clip region with the current path.

    Parameters
    ----------
    rule : ``"winding"`` | ``"evenOdd"``
        Interior rule used to resolve the path.
    """

    rule: FillRule

    def __post_init__(self) -> None:
        _check_rule("Clip", self.rule)


@dataclass(frozen=True, slots=True)
class Fill(DrawStep):
    """Fill the current path with the fill colour.

    Parameters
    ----------
    rule : ``"winding"`` | ``"evenOdd"``
        Interior rule used to resolve the path.
    """

    rule: FillRule

    def __post_init__(self) -> None:
        _check_rule("Fill", self.rule)


@dataclass(frozen=True, slots=True)
class Stroke(DrawStep):
    """Stroke the current path with the stroke colour and line width."""

    pass


# ---------------------------------------------------------------------------
# Colour
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NonStrokeColorSpace(DrawStep):
    """Fill colour-space selection.  Produces no code (always device RGB)."""

    pass


@dataclass(frozen=True, slots=True)
class StrokeColorSpace(DrawStep):
    """Stroke colour-space selection.  Produces no code (always device RGB)."""

    pass


@dataclass(frozen=True, slots=True)
class NonStrokeColor(DrawStep):
    """Set the fill colour."""

    color: RGBColor


@dataclass(frozen=True, slots=True)
class StrokeColor(DrawStep):
    """Set the stroke colour."""

    color: RGBColor


ALL_STEP_TYPES: tuple[type[DrawStep], ...] = (
    SaveGState,
    RestoreGState,
    MoveTo,
    Curve,
    Line,
    ClosePath,
    Clip,
    EndPath,
    Flatness,
    NonStrokeColorSpace,
    NonStrokeColor,
    AppendRectangle,
    Fill,
    StrokeColorSpace,
    StrokeColor,
    ConcatCTM,
    LineWidth,
    Stroke,
)
"""Every concrete step type, in the order the instruction set defines them."""


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DrawRoute:
    """Ordered drawing steps for one image plus its bounding rectangle.

    Parameters
    ----------
    steps : tuple[DrawStep, ...]
        Steps in replay order.  Any iterable is accepted and frozen into a
        tuple.
    bounding_rect : Rect
        Image bounds; ``bounding_rect.size`` is the logical image size.
    """

    steps: tuple[DrawStep, ...]
    bounding_rect: Rect

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def size(self) -> Size:
        return self.bounding_rect.size


@dataclass(frozen=True, slots=True)
class NamedImage:
    """An image name paired with its route.

    Names are expected to be unique within one generated file; that is the
    caller's responsibility.
    """

    name: str
    route: DrawRoute

    def __iter__(self):
        # Allows ``name, route = image`` unpacking.
        return iter((self.name, self.route))
