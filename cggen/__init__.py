"""
cggen: Core Graphics code generation.

Translates drawing routes (ordered vector drawing steps plus image bounds)
into Objective-C source that replays them against a ``CGContextRef``.

Subpackages:
    draw_ir: Geometry types and the drawing step instruction set
    codegen: Implementation / header generators and file assembly
    configs: Generator configuration loading
"""

__all__ = ["draw_ir", "codegen", "configs"]
