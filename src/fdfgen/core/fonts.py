"""Font descriptors emitted inside frame blocks."""

from __future__ import annotations

from dataclasses import dataclass

from .stream import TextStream
from .values import format_number


@dataclass(frozen=True)
class FrameFont:
    """Font used by a frame's own text: ``FrameFont "<name>", <size>, "<flags>",``.

    Attributes:
        name: Font or font-table entry name, e.g. "MasterFont"
        size: Font height in screen units
        flags: Extra font flags, usually empty
    """

    name: str
    size: float
    flags: str = ""

    def compile_to_text(self, stream: TextStream) -> None:
        stream.write_indentation().write_line(
            f'FrameFont "{self.name}", {format_number(self.size)}, "{self.flags}",'
        )


@dataclass(frozen=True)
class Font:
    """Font of a String block: ``Font "<name>", <size>,``."""

    name: str
    size: float

    def compile_to_text(self, stream: TextStream) -> None:
        stream.write_indentation().write_line(
            f'Font "{self.name}", {format_number(self.size)},'
        )
