"""Click CLI wiring and entry points for termpanel."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

import click
from rich.console import Console

from src.config_loader import MIN_TERMINAL_WIDTH, ConfigError, load_config
from src.datatypes import AppConfig
from src.termpanel.layout.columns import ColumnSpec
from src.termpanel.layout.terminal import AnsiColorMapper
from src.termpanel.layout.text import Align, visible_width
from src.termpanel.layout_utils import format_summary, sanitize_console_text
from src.termpanel.widgets.bar import ProgressBar
from src.termpanel.widgets.box import Box
from src.termpanel.widgets.spark import SparkLine
from src.termpanel.widgets.styles import BAR_STYLES, BOX_STYLES
from src.termpanel.widgets.table import Table

logger = logging.getLogger(__name__)

_PERCENT_SUFFIX_WIDTH = 5


@dataclass
class CliState:
    """Resolved configuration shared by every sub-command."""

    config: AppConfig
    mapper: AnsiColorMapper
    verbose: bool = False
    diagnostics: Optional[Console] = None

    def report(self, *pairs: Tuple[str, object]) -> None:
        if not self.verbose or self.diagnostics is None:
            return
        self.diagnostics.print(format_summary(pairs))


def _emit(state: CliState, rendered: str) -> None:
    # None lets click strip escapes when stdout is not a terminal.
    click.echo(rendered, color=False if state.mapper.no_color else None)


def _read_lines(stream: TextIO) -> List[str]:
    return stream.read().splitlines()


def _parse_assignments(values: Sequence[str], option: str) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {raw!r}", param_hint=option)
        parsed[name] = value
    return parsed


def _parse_widths(values: Sequence[str], option: str) -> Dict[str, int]:
    widths: Dict[str, int] = {}
    for name, value in _parse_assignments(values, option).items():
        try:
            widths[name] = int(value)
        except ValueError:
            raise click.BadParameter(f"{name}: width must be an integer", param_hint=option) from None
    return widths


def _parse_aligns(values: Sequence[str]) -> Dict[str, Align]:
    aligns: Dict[str, Align] = {}
    for name, value in _parse_assignments(values, "--align").items():
        try:
            aligns[name] = Align(value.strip().lower())
        except ValueError:
            raise click.BadParameter(
                f"{name}: alignment must be left, right, or center", param_hint="--align"
            ) from None
    return aligns


def build_columns(
    headers: Sequence[str],
    *,
    flex: Sequence[str] = (),
    fixed: Optional[Dict[str, int]] = None,
    max_widths: Optional[Dict[str, int]] = None,
    aligns: Optional[Dict[str, Align]] = None,
) -> List[ColumnSpec]:
    """Translate header names plus CLI sizing options into column specs."""

    fixed = fixed or {}
    max_widths = max_widths or {}
    aligns = aligns or {}
    columns: List[ColumnSpec] = []
    for header in headers:
        align = aligns.get(header, Align.LEFT)
        max_width = max(max_widths.get(header, 0), 0)
        if fixed.get(header, 0) > 0:
            columns.append(ColumnSpec.fixed(header, fixed[header], align))
        elif header in flex:
            columns.append(
                ColumnSpec.flex(header, visible_width(header), align, max_width=max_width)
            )
        else:
            columns.append(ColumnSpec(header=header, max_width=max_width, align=align))
    return columns


@click.group()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="TOML configuration file with terminal and widget defaults.",
)
@click.option("--width", type=int, default=None, help="Override [terminal].width.")
@click.option("--no-color", is_flag=True, help="Disable ANSI color output.")
@click.option("--verbose", is_flag=True, help="Log layout decisions to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Optional[str],
    width: Optional[int],
    no_color: bool,
    verbose: bool,
) -> None:
    """Render boxes, tables, progress bars, and sparklines for a terminal."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    if width is not None:
        if width < MIN_TERMINAL_WIDTH:
            raise click.BadParameter(f"must be >= {MIN_TERMINAL_WIDTH}", param_hint="--width")
        config.terminal.width = width
    if no_color:
        config.terminal.no_color = True
    mapper = AnsiColorMapper(no_color=config.terminal.no_color)
    logger.debug("Terminal width %d, color capability %s", config.terminal.width, mapper.capability)

    ctx.obj = CliState(
        config=config,
        mapper=mapper,
        verbose=verbose,
        diagnostics=Console(stderr=True) if verbose else None,
    )
    ctx.obj.report(("width", config.terminal.width), ("color", mapper.capability))


@main.command()
@click.option("--title", default="", help="Title drawn into the top border when it fits.")
@click.option(
    "--style",
    type=click.Choice(sorted(BOX_STYLES)),
    default=None,
    help="Override [box].style.",
)
@click.argument("lines", nargs=-1)
@click.pass_obj
def box(state: CliState, title: str, style: Optional[str], lines: Tuple[str, ...]) -> None:
    """Draw LINES (or stdin) inside a bordered box."""

    cfg = state.config
    content = list(lines) if lines else _read_lines(click.get_text_stream("stdin"))
    rendered = Box(
        width=cfg.terminal.width,
        title=sanitize_console_text(title, max_len=cfg.terminal.width),
        title_color=state.mapper.sgr(cfg.box.title_color),
        border_color=state.mapper.sgr(cfg.box.border_color),
        style=BOX_STYLES[style or cfg.box.style.value],
        content=tuple(content),
    )
    state.report(
        ("inner_width", rendered.inner_width),
        ("title_inline", rendered.title_fits()),
        ("lines", len(content)),
    )
    _emit(state, rendered.render())


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--flex", "flex", multiple=True, help="Header of a column that absorbs spare width.")
@click.option("--fixed", "fixed", multiple=True, help="NAME=WIDTH fixed column width.")
@click.option("--max", "max_widths", multiple=True, help="NAME=WIDTH maximum column width.")
@click.option("--align", "aligns", multiple=True, help="NAME=left|right|center.")
@click.option("--compact", is_flag=True, help="Omit the rule beneath the header.")
@click.pass_obj
def table(
    state: CliState,
    source: TextIO,
    flex: Tuple[str, ...],
    fixed: Tuple[str, ...],
    max_widths: Tuple[str, ...],
    aligns: Tuple[str, ...],
    compact: bool,
) -> None:
    """Render tab-separated SOURCE (first line is the header) as a table."""

    cfg = state.config
    lines = [line for line in _read_lines(source) if line.strip()]
    if not lines:
        raise click.ClickException("Table input is empty; expected a header line.")
    headers = lines[0].split("\t")
    columns = build_columns(
        headers,
        flex=flex,
        fixed=_parse_widths(fixed, "--fixed"),
        max_widths=_parse_widths(max_widths, "--max"),
        aligns=_parse_aligns(aligns),
    )
    rendered = Table(
        columns=tuple(columns),
        width=cfg.terminal.width,
        rows=tuple(tuple(line.split("\t")) for line in lines[1:]),
        separator=cfg.table.separator,
        show_header=cfg.table.show_header,
        header_color=state.mapper.sgr(cfg.table.header_color),
        border_color=state.mapper.sgr(cfg.table.border_color),
    )
    state.report(("widths", rendered.widths()), ("rows", len(rendered.rows)))
    _emit(state, rendered.render_compact() if compact else rendered.render())


@main.command()
@click.argument("percent", type=float)
@click.option("--label", default="", help="Text shown before the bar.")
@click.option("--hide-value", is_flag=True, help="Omit the percentage suffix.")
@click.pass_obj
def bar(state: CliState, percent: float, label: str, hide_value: bool) -> None:
    """Draw a progress bar at PERCENT (clamped to 0-100)."""

    cfg = state.config
    show_value = cfg.bar.show_value and not hide_value
    width = cfg.terminal.width
    if label:
        width -= visible_width(label) + 1
    if show_value:
        width -= _PERCENT_SUFFIX_WIDTH
    rendered = ProgressBar(
        width=max(width, 1),
        percent=percent,
        label=label,
        show_value=show_value,
        style=BAR_STYLES[cfg.bar.style.value],
        color=state.mapper.sgr(cfg.bar.color),
    )
    state.report(("bar_width", rendered.bar_width), ("percent", rendered.percent))
    _emit(state, rendered.render())


@main.command()
@click.argument("values", nargs=-1, type=float)
@click.option("--spark-width", type=int, default=None, help="Columns to draw; defaults to [terminal].width.")
@click.pass_obj
def spark(state: CliState, values: Tuple[float, ...], spark_width: Optional[int]) -> None:
    """Draw VALUES as a sparkline, newest sample on the right."""

    cfg = state.config
    width = cfg.terminal.width if spark_width is None else spark_width
    rendered = SparkLine(values=values, width=width, color=state.mapper.sgr(cfg.spark.color))
    state.report(("samples", len(values)), ("width", max(width, 0)))
    _emit(state, rendered.render())


cli = main

__all__ = ["CliState", "build_columns", "cli", "main"]
