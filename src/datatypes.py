"""Configuration dataclasses for the termpanel renderer."""
from dataclasses import dataclass, field
from enum import Enum


class BoxStyleName(str, Enum):
    """Border glyph presets available to boxes."""

    ROUNDED = "rounded"
    SQUARE = "square"
    ASCII = "ascii"


class BarStyleName(str, Enum):
    """Glyph presets available to progress bars."""

    BRACKET = "bracket"
    BLOCK = "block"


@dataclass
class TerminalConfig:
    """Output target settings."""

    no_color: bool = False
    width: int = 80


@dataclass
class BoxConfig:
    """Default styling for boxes."""

    style: BoxStyleName = BoxStyleName.ROUNDED
    border_color: str = "grey"
    title_color: str = "cyan.bold"


@dataclass
class TableConfig:
    """Default styling for tables."""

    separator: str = "  "
    show_header: bool = True
    header_color: str = "white.bold"
    border_color: str = "grey"


@dataclass
class BarConfig:
    """Default styling for progress bars."""

    style: BarStyleName = BarStyleName.BRACKET
    color: str = "green"
    show_value: bool = True


@dataclass
class SparkConfig:
    """Default styling for sparklines."""

    color: str = "cyan"


@dataclass
class AppConfig:
    """Top-level configuration assembled from every section."""

    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    box: BoxConfig = field(default_factory=BoxConfig)
    table: TableConfig = field(default_factory=TableConfig)
    bar: BarConfig = field(default_factory=BarConfig)
    spark: SparkConfig = field(default_factory=SparkConfig)
