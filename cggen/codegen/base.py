"""Code generator interface and generation errors.

A generator supplies four primitives -- file preamble, function start,
per-step command, function end.  Composition into a file lives in
:mod:`cggen.codegen.assembler` and is shared by every generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cggen.codegen.ids import ResourceIDAllocator
from cggen.draw_ir.geometry import Size
from cggen.draw_ir.steps import DrawStep

DEFAULT_TOOL_NAME = "cggen"
DEFAULT_INCLUDE = "<CoreGraphics/CoreGraphics.h>"
CONTEXT_PARAM = "CGContextRef context"


class CodegenError(TypeError):
    """Raised when code generation is handed something it cannot emit."""

    pass


class UnsupportedStepError(CodegenError):
    """Raised for an object that is not one of the known drawing steps."""

    def __init__(self, step: object) -> None:
        super().__init__(
            f"Unsupported draw step: {type(step).__name__}"
        )
        self.step = step


def function_name(prefix: str, image_name: str) -> str:
    """``<prefix>Draw<Name>ImageInContext``."""
    return f"{prefix}Draw{image_name}ImageInContext"


def size_constant_name(image_name: str) -> str:
    """``k<Name>ImageSize``."""
    return f"k{image_name}ImageSize"


class CoreGraphicsGenerator(ABC):
    """Emit Core Graphics source text for drawing routes.

    Implementations must be free of mutable state; anything that changes
    during a run (resource ids) is passed in by the caller.
    """

    @abstractmethod
    def file_preamble(self) -> str:
        """Text placed before the first function, ending in a blank line."""

    @abstractmethod
    def func_start(self, image_name: str, image_size: Size) -> list[str]:
        """Lines opening the per-image block."""

    @abstractmethod
    def command(self, step: DrawStep, ids: ResourceIDAllocator) -> list[str]:
        """Lines reproducing *step*; may draw identifiers from *ids*."""

    @abstractmethod
    def func_end(self, image_name: str, image_size: Size) -> list[str]:
        """Lines closing the per-image block."""


def preamble(tool_name: str, import_target: str) -> str:
    """``// Generated by <tool>``, blank, ``#import <target>``, blank."""
    return "\n".join(
        [f"// Generated by {tool_name}", "", f"#import {import_target}", "\n"]
    )
