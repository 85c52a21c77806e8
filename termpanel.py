"""Public shim exposing the termpanel CLI and library surface."""

from __future__ import annotations

from src.config_loader import ConfigError, load_config, parse_config
from src.datatypes import AppConfig
from src.termpanel.cli_entry import cli, main
from src.termpanel.layout import (
    Align,
    ColumnSpec,
    allocate_widths,
    pad,
    truncate,
    visible_width,
)
from src.termpanel.widgets import Box, ProgressBar, SparkLine, Table

__all__ = (
    "main",
    "cli",
    "AppConfig",
    "ConfigError",
    "load_config",
    "parse_config",
    "Align",
    "ColumnSpec",
    "allocate_widths",
    "pad",
    "truncate",
    "visible_width",
    "Box",
    "ProgressBar",
    "SparkLine",
    "Table",
)


if __name__ == "__main__":
    main()
