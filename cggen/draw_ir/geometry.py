"""Geometry value types shared by drawing steps.

All values are plain floats in the image's user space (points).  Nothing
here clamps or validates: a colour component of ``1.7`` or a ``nan``
coordinate is carried through to the generated code unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """2-D point."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Size:
    """Width/height pair."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle given by origin and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """2-D affine matrix ``[a b 0; c d 0; tx ty 1]``.

    Field order matches ``CGAffineTransformMake(a, b, c, d, tx, ty)``.
    """

    a: float
    b: float
    c: float
    d: float
    tx: float
    ty: float

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class RGBColor:
    """Device RGB colour.

    There is no alpha channel; every emitted colour is fully opaque.
    """

    red: float
    green: float
    blue: float
