"""Objective-C implementation generator -- drawing steps to Core Graphics calls.

Each image becomes one C function taking a ``CGContextRef``.  The function
creates a single device-RGB colour space on entry and releases it on exit;
every colour step builds its ``CGColorRef`` from that space.

Colour resources:
    Objective-C has no scoped cleanup for Core Foundation objects, so each
    colour step expands to a create / use / release triple on one local::

        CGColorRef color7 = CGColorCreate(rgbColorSpace, ...);
        CGContextSetFillColorWithColor(context, color7);
        CGColorRelease(color7);

    The ``7`` comes from the run's :class:`ResourceIDAllocator`, so local
    names are unique across the whole file.
"""

from __future__ import annotations

from dataclasses import dataclass

from cggen.codegen.base import (
    CONTEXT_PARAM,
    DEFAULT_INCLUDE,
    DEFAULT_TOOL_NAME,
    CoreGraphicsGenerator,
    UnsupportedStepError,
    function_name,
    preamble,
)
from cggen.codegen.formatting import (
    cgfloat,
    color_components_expr,
    points_args,
    rect_expr,
    transform_expr,
)
from cggen.codegen.ids import ResourceIDAllocator
from cggen.draw_ir.geometry import RGBColor, Size
from cggen.draw_ir.steps import (
    AppendRectangle,
    Clip,
    ClosePath,
    ConcatCTM,
    Curve,
    DrawStep,
    EndPath,
    Fill,
    Flatness,
    Line,
    LineWidth,
    MoveTo,
    NonStrokeColor,
    NonStrokeColorSpace,
    RestoreGState,
    SaveGState,
    Stroke,
    StrokeColor,
    StrokeColorSpace,
)

RGB_COLOR_SPACE_VAR = "rgbColorSpace"


# ---------------------------------------------------------------------------
# Statement helpers
# ---------------------------------------------------------------------------


def _cmd(name: str, args: str | None = None) -> str:
    """``  CGContext<name>(context[, args]);``"""
    arg_str = f", {args}" if args is not None else ""
    return f"  CGContext{name}(context{arg_str});"


def _color_cmd(name: str, color: RGBColor, ids: ResourceIDAllocator) -> list[str]:
    var = f"color{ids.next()}"
    return [
        f"  CGColorRef {var} = CGColorCreate("
        f"{RGB_COLOR_SPACE_VAR}, {color_components_expr(color)});",
        _cmd(name, var),
        f"  CGColorRelease({var});",
    ]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ObjcCGGenerator(CoreGraphicsGenerator):
    """Emit Objective-C drawing functions.

    Parameters
    ----------
    prefix : str
        Prepended to every function name (``<prefix>Draw<Name>ImageInContext``).
    header_import_path : str | None
        Header to ``#import`` at the top of the file.  ``None`` imports
        ``<CoreGraphics/CoreGraphics.h>`` instead.
    tool_name : str
        Name written into the ``// Generated by`` comment.
    """

    prefix: str = ""
    header_import_path: str | None = None
    tool_name: str = DEFAULT_TOOL_NAME

    # ------------------------------------------------------------------
    # File / function framing
    # ------------------------------------------------------------------

    def file_preamble(self) -> str:
        if self.header_import_path is not None:
            target = f'"{self.header_import_path}"'
        else:
            target = DEFAULT_INCLUDE
        return preamble(self.tool_name, target)

    def func_start(self, image_name: str, image_size: Size) -> list[str]:
        return [
            f"void {function_name(self.prefix, image_name)}({CONTEXT_PARAM}) {{",
            f"  CGColorSpaceRef {RGB_COLOR_SPACE_VAR} = "
            f"CGColorSpaceCreateDeviceRGB();",
        ]

    def func_end(self, image_name: str, image_size: Size) -> list[str]:
        return [f"  CGColorSpaceRelease({RGB_COLOR_SPACE_VAR});", "}"]

    # ------------------------------------------------------------------
    # Per-step dispatch
    # ------------------------------------------------------------------

    def command(self, step: DrawStep, ids: ResourceIDAllocator) -> list[str]:
        if isinstance(step, SaveGState):
            return [_cmd("SaveGState")]
        elif isinstance(step, RestoreGState):
            return [_cmd("RestoreGState")]
        elif isinstance(step, MoveTo):
            return [_cmd("MoveToPoint", points_args([step.point]))]
        elif isinstance(step, Curve):
            return [
                _cmd("AddCurveToPoint", points_args([step.c1, step.c2, step.end]))
            ]
        elif isinstance(step, Line):
            return [_cmd("AddLineToPoint", points_args([step.point]))]
        elif isinstance(step, ClosePath):
            return [_cmd("ClosePath")]
        elif isinstance(step, Clip):
            return [_cmd("Clip" if step.rule == "winding" else "EOClip")]
        elif isinstance(step, EndPath):
            return []
        elif isinstance(step, Flatness):
            return [_cmd("SetFlatness", cgfloat(step.value))]
        elif isinstance(step, NonStrokeColorSpace):
            return []
        elif isinstance(step, NonStrokeColor):
            return _color_cmd("SetFillColorWithColor", step.color, ids)
        elif isinstance(step, AppendRectangle):
            return [_cmd("AddRect", rect_expr(step.rect))]
        elif isinstance(step, Fill):
            return [_cmd("FillPath" if step.rule == "winding" else "EOFillPath")]
        elif isinstance(step, StrokeColorSpace):
            return []
        elif isinstance(step, StrokeColor):
            return _color_cmd("SetStrokeColorWithColor", step.color, ids)
        elif isinstance(step, ConcatCTM):
            return [_cmd("ConcatCTM", transform_expr(step.transform))]
        elif isinstance(step, LineWidth):
            return [_cmd("SetLineWidth", cgfloat(step.value))]
        elif isinstance(step, Stroke):
            return [_cmd("StrokePath")]
        raise UnsupportedStepError(step)
