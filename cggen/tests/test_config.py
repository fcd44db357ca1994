"""Tests for generator configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cggen.codegen.header import ObjcHeaderCGGenerator
from cggen.codegen.objc import ObjcCGGenerator
from cggen.configs.loader import ConfigError, GeneratorConfig, load_config
from cggen.draw_ir import DrawRoute


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "generator.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaultConfig:
    def test_loads(self) -> None:
        cfg = load_config()
        assert cfg == GeneratorConfig(
            prefix="", header_import_path=None, tool_name="cggen",
        )

    def test_builds_generators(self) -> None:
        cfg = GeneratorConfig(prefix="MY", header_import_path="Images.h")
        impl = cfg.implementation_generator()
        header = cfg.header_generator()
        assert impl == ObjcCGGenerator(prefix="MY", header_import_path="Images.h")
        assert header == ObjcHeaderCGGenerator(prefix="MY")

    def test_generate_sources(self, foo_route: DrawRoute) -> None:
        cfg = GeneratorConfig(prefix="MY", header_import_path="Images.h")
        sources = cfg.generate_sources([("Foo", foo_route)])
        assert '#import "Images.h"' in sources.implementation
        assert "void MYDrawFooImageInContext(CGContextRef context);" in sources.header


class TestCustomConfig:
    def test_all_fields(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "generator:\n"
            "  tool_name: imagegen\n"
            "  prefix: YX\n"
            "  header_import_path: Generated/Images.h\n",
        )
        cfg = load_config(path)
        assert cfg.prefix == "YX"
        assert cfg.header_import_path == "Generated/Images.h"
        assert cfg.tool_name == "imagegen"

    def test_defaults_for_missing_fields(self, tmp_path: Path) -> None:
        cfg = load_config(_write(tmp_path, "generator: {}\n"))
        assert cfg == GeneratorConfig()


class TestConfigErrors:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Empty"):
            load_config(_write(tmp_path, ""))

    def test_missing_section(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Missing required"):
            load_config(_write(tmp_path, "other: 1\n"))

    def test_prefix_wrong_type(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="prefix must be a string"):
            load_config(_write(tmp_path, "generator:\n  prefix: 12\n"))

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(_write(tmp_path, "generator: [unclosed\n"))

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            load_config(_write(tmp_path, "- a\n- b\n"))
