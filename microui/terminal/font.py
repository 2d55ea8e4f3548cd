"""A monospace font measured in terminal cells."""

from __future__ import annotations


class MonospaceFont:
    """Every character is one cell wide and one row high."""

    def width(self, text: str) -> int:
        """Return the width of text in cells: one per character."""
        return len(text)

    def height(self) -> int:
        """Return the height of a line in rows."""
        return 1