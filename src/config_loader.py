"""Configuration loader that parses and validates user-provided TOML."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from .datatypes import (
    AppConfig,
    BarConfig,
    BoxConfig,
    SparkConfig,
    TableConfig,
    TerminalConfig,
)

logger = logging.getLogger(__name__)

MIN_TERMINAL_WIDTH = 4

_SECTIONS: Dict[str, type] = {
    "terminal": TerminalConfig,
    "box": BoxConfig,
    "table": TableConfig,
    "bar": BarConfig,
    "spark": SparkConfig,
}


class ConfigError(ValueError):
    """Raised when the configuration file is malformed or fails validation."""


def _coerce_bool(value: Any, dotted_key: str) -> bool:
    """Return a bool, coercing simple 0/1 representations when necessary."""

    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"0", "1"}:
            return normalized == "1"
        if normalized in {"true", "false"}:
            return normalized == "true"
    raise ConfigError(f"{dotted_key} must be a boolean (use true/false).")


def _coerce_enum(value: Any, dotted_key: str, enum_type: type[Enum]) -> Enum:
    """Return an enum member, coercing string values case-insensitively."""

    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_type:
            if normalized == str(member.value).lower():
                return member
    raise ConfigError(
        f"{dotted_key} must be one of: {', '.join(str(member.value) for member in enum_type)}"
    )


def _coerce_int(value: Any, dotted_key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{dotted_key} must be an integer")
    return value


def _coerce_str(value: Any, dotted_key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{dotted_key} must be a string")
    return value


def _field_kind(annotation: Any) -> Any:
    """Resolve a dataclass field annotation, which may be a string under PEP 563."""

    if isinstance(annotation, str):
        return {"bool": bool, "int": int, "str": str}.get(annotation, annotation)
    return annotation


def _sanitize_section(raw: Any, name: str, cls: type) -> Any:
    """
    Coerce a raw TOML table into an instance of ``cls``.

    Parameters:
        raw (Any): Raw TOML section data.
        name (str): Section name used when reporting validation errors.
        cls (type): Dataclass type used to construct the section object.

    Returns:
        Any: Instantiated dataclass populated with values from ``raw``.

    Raises:
        ConfigError: If the section is not a table or contains invalid keys or values.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    cls_fields = {item.name: _field_kind(item.type) for item in fields(cls)}
    unknown = sorted(set(raw) - set(cls_fields))
    if unknown:
        raise ConfigError(f"Invalid keys in [{name}]: {', '.join(unknown)}")

    defaults = cls()
    cleaned: Dict[str, Any] = {}
    for key, value in raw.items():
        dotted_key = f"{name}.{key}"
        kind = cls_fields[key]
        if kind is bool:
            cleaned[key] = _coerce_bool(value, dotted_key)
        elif kind is int:
            cleaned[key] = _coerce_int(value, dotted_key)
        elif kind is str:
            cleaned[key] = _coerce_str(value, dotted_key)
        else:
            enum_type = type(getattr(defaults, key))
            if not issubclass(enum_type, Enum):  # pragma: no cover - all fields are typed
                raise ConfigError(f"{dotted_key} has an unsupported type")
            cleaned[key] = _coerce_enum(value, dotted_key, enum_type)
    return cls(**cleaned)


def parse_config(raw: Dict[str, Any]) -> AppConfig:
    """Validate an already-decoded TOML mapping and build an :class:`AppConfig`."""

    unknown = sorted(set(raw) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"Unknown configuration sections: {', '.join(unknown)}")

    sections = {
        name: _sanitize_section(raw.get(name, {}), name, cls) for name, cls in _SECTIONS.items()
    }
    app = AppConfig(**sections)

    if app.terminal.width < MIN_TERMINAL_WIDTH:
        raise ConfigError(f"terminal.width must be >= {MIN_TERMINAL_WIDTH}")
    return app


def load_config(path: str | Path | None) -> AppConfig:
    """
    Load and validate a configuration from a TOML file.

    ``None`` returns the defaults. A leading UTF-8 BOM is accepted.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8, fails to parse, or
            any validation rule is violated.
    """

    if path is None:
        return AppConfig()
    try:
        with open(path, "rb") as handle:
            raw_bytes = handle.read()
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    if raw_bytes.startswith(b"\xef\xbb\xbf"):
        raw_bytes = raw_bytes[3:]
    try:
        raw = tomllib.loads(raw_bytes.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError("Configuration file must be UTF-8 encoded") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML: {exc}") from exc

    logger.debug("Loaded configuration from %s", path)
    return parse_config(raw)


__all__ = ["ConfigError", "MIN_TERMINAL_WIDTH", "load_config", "parse_config"]
