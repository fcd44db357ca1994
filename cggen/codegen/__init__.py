"""
Core Graphics code generation module.

Converts drawing routes to Objective-C source: drawing functions for the
implementation file and size constants plus prototypes for the header.
"""

from cggen.codegen.assembler import (
    GeneratedSources,
    generate_file,
    generate_image_function,
    generate_sources,
)
from cggen.codegen.base import (
    CodegenError,
    CoreGraphicsGenerator,
    UnsupportedStepError,
)
from cggen.codegen.header import ObjcHeaderCGGenerator
from cggen.codegen.ids import ResourceIDAllocator
from cggen.codegen.objc import ObjcCGGenerator

__all__ = [
    "CodegenError",
    "CoreGraphicsGenerator",
    "GeneratedSources",
    "ObjcCGGenerator",
    "ObjcHeaderCGGenerator",
    "ResourceIDAllocator",
    "UnsupportedStepError",
    "generate_file",
    "generate_image_function",
    "generate_sources",
]
