"""File assembly -- the composition shared by every generator.

``generate_file`` is the single place where a preamble, per-image function
blocks and the trailing newline are put together.  Generators only supply
the four primitives of :class:`CoreGraphicsGenerator`; they never override
the composition.

Layout::

    <preamble>
    <image 1 block>
    <blank line>
    <image 2 block>
    ...
    <image n block>\\n
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from cggen.codegen.base import DEFAULT_TOOL_NAME, CoreGraphicsGenerator
from cggen.codegen.header import ObjcHeaderCGGenerator
from cggen.codegen.ids import ResourceIDAllocator
from cggen.codegen.objc import ObjcCGGenerator
from cggen.draw_ir.steps import DrawRoute

logger = logging.getLogger(__name__)

NamedRoute = tuple[str, DrawRoute]


def generate_image_function(
    generator: CoreGraphicsGenerator,
    image_name: str,
    route: DrawRoute,
    ids: ResourceIDAllocator,
) -> list[str]:
    """Emit the lines of one image block.

    Parameters
    ----------
    generator : CoreGraphicsGenerator
        Variant supplying start / command / end lines.
    image_name : str
        Image name used in generated identifiers.
    route : DrawRoute
        Steps to translate, in replay order.
    ids : ResourceIDAllocator
        Allocator of the current run.

    Returns
    -------
    list[str]
        ``func_start + command(step) for each step + func_end``.
    """
    size = route.bounding_rect.size
    lines = generator.func_start(image_name, size)
    for step in route.steps:
        lines.extend(generator.command(step, ids))
    lines.extend(generator.func_end(image_name, size))
    return lines


def generate_file(
    generator: CoreGraphicsGenerator,
    images: Iterable[NamedRoute],
    ids: ResourceIDAllocator | None = None,
) -> str:
    """Generate a complete source file for *images*.

    Parameters
    ----------
    generator : CoreGraphicsGenerator
        Implementation or header variant.
    images : Iterable[tuple[str, DrawRoute]]
        ``(name, route)`` pairs (or :class:`NamedImage`) in output order.
        Names must be unique; this is not checked.
    ids : ResourceIDAllocator | None
        Allocator for this run.  ``None`` creates a fresh one, which is
        what makes repeated calls produce identical text.

    Returns
    -------
    str
        Preamble, blank-line-separated image blocks, one trailing newline.
    """
    if ids is None:
        ids = ResourceIDAllocator()

    blocks: list[str] = []
    for image_name, route in images:
        first_id = ids.issued
        lines = generate_image_function(generator, image_name, route, ids)
        logger.debug(
            "Emitted %s: %d steps, %d lines, %d resource ids",
            image_name, len(route.steps), len(lines), ids.issued - first_id,
        )
        blocks.append("\n".join(lines))

    logger.info(
        "%s generated %d image(s)", type(generator).__name__, len(blocks),
    )
    return generator.file_preamble() + "\n\n".join(blocks) + "\n"


# ---------------------------------------------------------------------------
# Header + implementation pair
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratedSources:
    """Header and implementation text for one set of images."""

    header: str
    implementation: str


def generate_sources(
    images: Iterable[NamedRoute],
    prefix: str = "",
    header_import_path: str | None = None,
    tool_name: str = DEFAULT_TOOL_NAME,
) -> GeneratedSources:
    """Generate the ``.h`` / ``.m`` pair for *images*.

    Parameters
    ----------
    images : Iterable[tuple[str, DrawRoute]]
        ``(name, route)`` pairs in output order.  Consumed once.
    prefix : str
        Function-name prefix shared by both files.
    header_import_path : str | None
        Path the implementation file imports (usually the generated
        header).  ``None`` imports ``<CoreGraphics/CoreGraphics.h>``.
    tool_name : str
        Name written into the ``// Generated by`` comment.

    Returns
    -------
    GeneratedSources
        Each file is produced by its own ``generate_file`` run.
    """
    images = list(images)
    header = generate_file(
        ObjcHeaderCGGenerator(prefix=prefix, tool_name=tool_name), images,
    )
    implementation = generate_file(
        ObjcCGGenerator(
            prefix=prefix,
            header_import_path=header_import_path,
            tool_name=tool_name,
        ),
        images,
    )
    return GeneratedSources(header=header, implementation=implementation)
