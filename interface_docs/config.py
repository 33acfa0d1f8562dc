"""Configuration loading for interface-docs (.interface-docs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from .models import InterfaceDocsError

CONFIG_FILENAME = ".interface-docs.yml"


class ConfigError(InterfaceDocsError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class InterfaceDocsConfig:
    """Represents the settings defined in .interface-docs.yml."""

    root: Path
    format: Optional[str] = None
    force: Optional[bool] = None
    inline_types: List[str] = field(default_factory=list)
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> InterfaceDocsConfig:
    """Load configuration from a file, or from the config file inside a directory."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return InterfaceDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    log_file_str = _as_str(data.get("log_file"))
    return InterfaceDocsConfig(
        root=root,
        format=_as_str(data.get("format")),
        force=_as_bool(data.get("force")),
        inline_types=_as_str_list(data.get("inline_types")),
        log_file=root / log_file_str if log_file_str else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "InterfaceDocsConfig", "load_config"]
