"""
Drawing intermediate representation.

Defines geometry value types and every drawing step as immutable dataclasses.
This vocabulary is the contract between document parsers and code generation.

All coordinates are in image user space (points).
"""

from cggen.draw_ir.geometry import AffineTransform, Point, Rect, RGBColor, Size
from cggen.draw_ir.steps import (
    ALL_STEP_TYPES,
    FILL_RULES,
    AppendRectangle,
    Clip,
    ClosePath,
    ConcatCTM,
    Curve,
    DrawRoute,
    DrawStep,
    EndPath,
    Fill,
    FillRule,
    Flatness,
    Line,
    LineWidth,
    MoveTo,
    NamedImage,
    NonStrokeColor,
    NonStrokeColorSpace,
    RestoreGState,
    SaveGState,
    Stroke,
    StrokeColor,
    StrokeColorSpace,
)

__all__ = [
    "ALL_STEP_TYPES",
    "FILL_RULES",
    "AffineTransform",
    "AppendRectangle",
    "Clip",
    "ClosePath",
    "ConcatCTM",
    "Curve",
    "DrawRoute",
    "DrawStep",
    "EndPath",
    "Fill",
    "FillRule",
    "Flatness",
    "Line",
    "LineWidth",
    "MoveTo",
    "NamedImage",
    "NonStrokeColor",
    "NonStrokeColorSpace",
    "Point",
    "RGBColor",
    "Rect",
    "RestoreGState",
    "SaveGState",
    "Size",
    "Stroke",
    "StrokeColor",
    "StrokeColorSpace",
]
