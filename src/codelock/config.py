"""Configuration resolution.

Finds the set of generated files to check. Uses environment variables when
available, falls back to conventional defaults.

Environment variables:
    CODELOCK_CONFIG — path to the YAML config (default: ./codelock.yaml)
    CODELOCK_LOG_LEVEL — log level for the CLI (default: WARNING)

Config file format:

    files:
      - "src/generated/**/*.ts"
    exclude:
      - "src/generated/legacy/*"
    encoding: utf-8

Patterns are relative to the directory holding the config file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CONFIG_NAME = "codelock.yaml"
DEFAULT_ENCODING = "utf-8"


class ConfigError(ValueError):
    """Raised when a config file is structurally invalid."""


def config_path() -> Path:
    """Return the path to the config file."""
    env = os.environ.get("CODELOCK_CONFIG")
    if env:
        return Path(env)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def log_level(default: str = "WARNING") -> str:
    """Return the log level requested via environment."""
    return os.environ.get("CODELOCK_LOG_LEVEL", default).upper()


@dataclass
class CodelockConfig:
    """Generated-file settings loaded from codelock.yaml."""

    root: Path
    files: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    encoding: str = DEFAULT_ENCODING

    def resolve_files(self) -> list[Path]:
        """Expand ``files`` globs under ``root``, minus ``exclude`` matches."""
        excluded: set[Path] = set()
        for pattern in self.exclude:
            excluded.update(self.root.glob(pattern))

        found: set[Path] = set()
        for pattern in self.files:
            found.update(p for p in self.root.glob(pattern) if p.is_file())

        return sorted(found - excluded)


def _string_list(data: dict, key: str, path: Path) -> list[str]:
    value = data.get(key) or []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: '{key}' must be a list of glob patterns")
    return value


def load_config(path: Path | str | None = None) -> CodelockConfig:
    """Load codelock.yaml.

    Args:
        path: Path to the config file. Defaults to ``config_path()``.

    Returns:
        Parsed config. A missing file yields an empty config rooted at the
        file's directory.

    Raises:
        ConfigError: If the YAML is not a mapping or has ill-typed keys.
        yaml.YAMLError: If the YAML is malformed.
    """
    cfg_path = Path(path) if path else config_path()
    root = cfg_path.resolve().parent

    if not cfg_path.is_file():
        return CodelockConfig(root=root)

    with open(cfg_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return CodelockConfig(root=root)
    if not isinstance(data, dict):
        raise ConfigError(f"{cfg_path} is not a YAML mapping")

    encoding = data.get("encoding", DEFAULT_ENCODING)
    if not isinstance(encoding, str):
        raise ConfigError(f"{cfg_path}: 'encoding' must be a string")

    return CodelockConfig(
        root=root,
        files=_string_list(data, "files", cfg_path),
        exclude=_string_list(data, "exclude", cfg_path),
        encoding=encoding,
    )
