"""A complete FDF file: include lines followed by top-level frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .core.stream import TextStream
from .frames.base import FrameBase

logger = logging.getLogger(__name__)


@dataclass
class FdfDocument:
    """Top-level contents of one frame definition file.

    Attributes:
        includes: Paths of other FDF files the client should load first
        frames: Top-level frames, emitted in order
    """

    includes: list[str] = field(default_factory=list)
    frames: list[FrameBase] = field(default_factory=list)

    def add_frame(self, frame: FrameBase) -> FrameBase:
        """Append a top-level frame and return it."""
        self.frames.append(frame)
        return frame

    def iter_frames(self) -> Iterator[FrameBase]:
        """Iterate over every frame in the document (depth-first)."""
        for frame in self.frames:
            yield from frame.iter_frames()

    def find(self, name: str) -> FrameBase | None:
        for frame in self.iter_frames():
            if frame.name == name:
                return frame
        return None

    def compile_to_text(self, stream: TextStream) -> None:
        for include in self.includes:
            stream.write_indentation().write_line(f'IncludeFile "{include}",')
        if self.includes:
            stream.write_line()
        for frame in self.frames:
            frame.compile_to_text(stream)

    def to_text(self, indent: str = "    ") -> str:
        stream = TextStream(indent=indent)
        self.compile_to_text(stream)
        return stream.getvalue()

    def save(self, path: str | Path, indent: str = "    ") -> Path:
        """Write the document to path as UTF-8.

        Args:
            path: Output file; parent directories are created
            indent: Indentation per nesting level

        Returns:
            The path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        text = self.to_text(indent=indent)
        path.write_text(text, encoding="utf-8")
        logger.debug("Wrote %d top-level frames to %s", len(self.frames), path)
        return path
