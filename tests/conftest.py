from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click runner configured for CLI smoke tests."""

    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes TOML text to a temporary config file."""

    def _write(text: str) -> Path:
        path = tmp_path / "termpanel.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def plain_colors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear color-related environment so capability detection is deterministic."""

    for name in ("NO_COLOR", "COLORTERM", "TERMPANEL_FORCE_256_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TERM", "xterm")
