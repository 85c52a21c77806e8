"""ANSI escape constants and color-token handling."""
from __future__ import annotations

import os
from typing import List

ESCAPE = "\x1b"

ANSI_RESET = "\x1b[0m"
BOLD = "\x1b[1m"

FG_GREEN = "\x1b[32m"
FG_CYAN = "\x1b[36m"
FG_WHITE = "\x1b[37m"
FG_GRAY = "\x1b[90m"

FORCE_256_ENV_VAR = "TERMPANEL_FORCE_256_COLOR"


def _is_truthy_flag(raw_value: str) -> bool:
    normalized = raw_value.strip().lower()
    return bool(normalized) and normalized not in {"0", "false", "no", "off"}


class AnsiColorMapper:
    """Translate theme color tokens into ANSI SGR sequences."""

    _TOKEN_CODES_16 = {
        "cyan": 36,
        "blue": 34,
        "green": 32,
        "yellow": 33,
        "orange": 33,
        "red": 31,
        "grey": 90,
        "gray": 90,
        "white": 37,
        "black": 30,
        "magenta": 35,
        "purple": 35,
    }

    _TOKEN_CODES_256 = {
        "cyan": 51,
        "blue": 75,
        "green": 84,
        "yellow": 184,
        "orange": 214,
        "red": 203,
        "grey": 240,
        "gray": 240,
        "white": 15,
        "black": 0,
        "magenta": 201,
        "purple": 177,
    }

    def __init__(self, *, no_color: bool) -> None:
        """
        Initialize the mapper and resolve the terminal color capability.

        Color is disabled when ``no_color`` is set or the ``NO_COLOR`` environment
        variable is non-empty; in that case every lookup resolves to an empty string
        and widgets render without any SGR payload.

        Parameters:
            no_color (bool): Force-disable color output regardless of environment.
        """
        env_no_color = bool(os.environ.get("NO_COLOR"))
        self.no_color = no_color or env_no_color
        self._capability = "none"
        if not self.no_color:
            self._capability = self._detect_capability()

    @property
    def capability(self) -> str:
        return self._capability

    @staticmethod
    def _detect_capability() -> str:
        """
        Determine the terminal color capability from environment variables.

        Returns:
            capability (str): "256" if 256-color/truecolor support is likely, "16" otherwise.
        """
        if _is_truthy_flag(os.environ.get(FORCE_256_ENV_VAR, "")):
            return "256"
        colorterm = os.environ.get("COLORTERM", "").lower()
        if any(token in colorterm for token in ("truecolor", "24bit")):
            return "256"
        term = os.environ.get("TERM", "").lower()
        if "256color" in term or "truecolor" in term:
            return "256"
        return "16"

    def sgr(self, token: str) -> str:
        """
        Convert a color token into an ANSI SGR escape sequence.

        Parameters:
            token (str): Color token such as ``"green"`` or ``"white.bold"``; the first
                dot-separated segment names the color and the rest are modifiers
                (``bright``, ``bold``, ``dim``).

        Returns:
            str: The escape sequence, or an empty string when color is disabled, the
            token is empty, or the color is unknown.
        """
        token = (token or "").strip()
        if not token or self.no_color:
            return ""
        parts = token.lower().split(".")
        color = parts[0]
        modifiers = {part for part in parts[1:] if part}

        attrs: List[str] = []
        if "bold" in modifiers:
            attrs.append("1")
        if "dim" in modifiers:
            attrs.append("2")

        if self._capability == "256":
            code = self._TOKEN_CODES_256.get(color)
            if code is None:
                return ""
            attrs.append(f"38;5;{code}")
            return f"\x1b[{';'.join(attrs)}m"

        base = self._TOKEN_CODES_16.get(color)
        if base is None:
            return ""
        if "bright" in modifiers and 30 <= base <= 37:
            base += 60
        attrs.append(str(base))
        return f"\x1b[{';'.join(attrs)}m"


__all__ = [
    "ANSI_RESET",
    "AnsiColorMapper",
    "BOLD",
    "ESCAPE",
    "FG_CYAN",
    "FG_GRAY",
    "FG_GREEN",
    "FG_WHITE",
    "FORCE_256_ENV_VAR",
]
