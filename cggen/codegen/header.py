"""Objective-C header generator -- declarations only.

For each image the header carries the image's logical size as a ``CGSize``
constant and the prototype of the drawing function emitted by
:class:`~cggen.codegen.objc.ObjcCGGenerator` with the same prefix.
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
    size_constant_name,
)
from cggen.codegen.formatting import num
from cggen.codegen.ids import ResourceIDAllocator
from cggen.draw_ir.geometry import Size
from cggen.draw_ir.steps import DrawStep


@dataclass(frozen=True)
class ObjcHeaderCGGenerator(CoreGraphicsGenerator):
    """Emit size constants and function prototypes.

    Parameters
    ----------
    prefix : str
        Must match the prefix given to the implementation generator.
    tool_name : str
        Name written into the ``// Generated by`` comment.
    """

    prefix: str = ""
    tool_name: str = DEFAULT_TOOL_NAME

    def file_preamble(self) -> str:
        return preamble(self.tool_name, DEFAULT_INCLUDE)

    def func_start(self, image_name: str, image_size: Size) -> list[str]:
        return [
            f"static const CGSize {size_constant_name(image_name)} = "
            f"(CGSize){{.width = {num(image_size.width)}, "
            f".height = {num(image_size.height)}}};",
            f"void {function_name(self.prefix, image_name)}({CONTEXT_PARAM});",
        ]

    def command(self, step: DrawStep, ids: ResourceIDAllocator) -> list[str]:
        # Declarations have no bodies.
        if not isinstance(step, DrawStep):
            raise UnsupportedStepError(step)
        return []

    def func_end(self, image_name: str, image_size: Size) -> list[str]:
        return []
