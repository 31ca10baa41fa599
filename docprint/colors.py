"""Indentation and optional ANSI styling for rendered output."""

from __future__ import annotations

from dataclasses import dataclass

import typer

INDENT_UNIT = "  "


def indent(depth: int) -> str:
    """Return the leading whitespace for a line at the given nesting depth."""
    return INDENT_UNIT * depth


@dataclass(frozen=True)
class Styler:
    """Applies ANSI styles to output tokens, or passes them through unchanged.

    One instance is bound to a rendering pass, so color is never toggled
    globally while a report is being written.
    """

    use_color: bool = False

    def keyword(self, text: str) -> str:
        """Style a language keyword (``class``, ``extends``, ``const``...)."""
        return self._style(text, fg=typer.colors.MAGENTA)

    def name(self, text: str) -> str:
        """Style a declaration name."""
        return self._style(text, bold=True)

    def location(self, text: str) -> str:
        """Style a ``Defined in`` source location header."""
        return self._style(text, dim=True, italic=True)

    def description(self, text: str) -> str:
        """Style a line of descriptive text."""
        return self._style(text, fg=typer.colors.BRIGHT_BLACK)

    def _style(self, text: str, **styles: object) -> str:
        if not self.use_color or not text:
            return text
        return typer.style(text, **styles)
