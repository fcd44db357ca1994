"""Configuration loader for code generation.

Loads ``generator.yaml`` into a typed, frozen dataclass.  Naming prefix,
header import path and tool name all come from the config; the
generators themselves take them as plain constructor arguments.

Usage::

    from cggen.configs.loader import load_config
    cfg = load_config()                        # default path
    cfg = load_config("/custom/generator.yaml") # explicit path
    sources = cfg.generate_sources(images)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from cggen.codegen.assembler import GeneratedSources, NamedRoute, generate_sources
from cggen.codegen.base import DEFAULT_TOOL_NAME
from cggen.codegen.header import ObjcHeaderCGGenerator
from cggen.codegen.objc import ObjcCGGenerator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "generator.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings shared by the header and implementation generators.

    Parameters
    ----------
    prefix : str
        Function-name prefix.
    header_import_path : str | None
        Header the implementation file imports.  ``None`` imports
        ``<CoreGraphics/CoreGraphics.h>``.
    tool_name : str
        Name written into the ``// Generated by`` comment.
    """

    prefix: str = ""
    header_import_path: str | None = None
    tool_name: str = DEFAULT_TOOL_NAME

    # -- Convenience helpers ------------------------------------------------

    def implementation_generator(self) -> ObjcCGGenerator:
        return ObjcCGGenerator(
            prefix=self.prefix,
            header_import_path=self.header_import_path,
            tool_name=self.tool_name,
        )

    def header_generator(self) -> ObjcHeaderCGGenerator:
        return ObjcHeaderCGGenerator(prefix=self.prefix, tool_name=self.tool_name)

    def generate_sources(self, images: Iterable[NamedRoute]) -> GeneratedSources:
        """Generate the header / implementation pair with these settings."""
        return generate_sources(
            images,
            prefix=self.prefix,
            header_import_path=self.header_import_path,
            tool_name=self.tool_name,
        )


# ---------------------------------------------------------------------------
# Internal parsing helpers
# ---------------------------------------------------------------------------


def _require_str(key: str, value: Any, *, optional: bool = False) -> str | None:
    if value is None and optional:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"generator.{key} must be a string, got {type(value).__name__}"
        )
    return value


def _load_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML file {path}: {exc}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> GeneratorConfig:
    """Load and validate generator configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``generator.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    GeneratorConfig
        Validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If the file is empty, malformed, or a field has the wrong type.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading configuration from %s", path)

    data = _load_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {path}")

    try:
        gd = data["generator"]
        if not isinstance(gd, dict):
            raise ConfigError("generator section must be a mapping")
        config = GeneratorConfig(
            prefix=_require_str("prefix", gd.get("prefix", "")),
            header_import_path=_require_str(
                "header_import_path",
                gd.get("header_import_path"),
                optional=True,
            ),
            tool_name=_require_str(
                "tool_name", gd.get("tool_name", DEFAULT_TOOL_NAME)
            ),
        )
    except KeyError as exc:
        raise ConfigError(
            f"Missing required configuration key: {exc}"
        ) from exc

    logger.info("Configuration loaded successfully")
    return config
