"""Text sink with indentation tracking."""

from __future__ import annotations

from typing import Self


class TextStream:
    """Accumulates emitted FDF text and tracks the current indentation depth.

    All writers return the stream so calls can be chained:

        stream.write_indentation().write_line("SetAllPoints,")

    Example:
        stream = TextStream(indent="\\t")
        frame.compile_to_text(stream)
        text = stream.getvalue()
    """

    def __init__(self, indent: str = "    ") -> None:
        """Create an empty stream.

        Args:
            indent: Whitespace written once per indentation level
        """
        self.indent = indent
        self._depth = 0
        self._parts: list[str] = []

    @property
    def depth(self) -> int:
        """Current indentation depth (0 at the top level)."""
        return self._depth

    def write(self, text: str) -> Self:
        """Append text as-is."""
        self._parts.append(text)
        return self

    def write_line(self, text: str = "") -> Self:
        """Append text followed by a newline."""
        self._parts.append(text)
        self._parts.append("\n")
        return self

    def write_indentation(self) -> Self:
        """Append the whitespace for the current depth."""
        if self._depth > 0:
            self._parts.append(self.indent * self._depth)
        return self

    def push_indent(self) -> Self:
        self._depth += 1
        return self

    def pop_indent(self) -> Self:
        # Unbalanced pops are a caller bug and are not guarded.
        self._depth -= 1
        return self

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()
