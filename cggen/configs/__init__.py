"""Code generation configuration loading and validation."""

from cggen.configs.loader import ConfigError, GeneratorConfig, load_config

__all__ = ["ConfigError", "GeneratorConfig", "load_config"]
