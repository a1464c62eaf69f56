"""Frame blocks: ``Frame "<TYPE>" "<name>" { ... }``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import AlphaMode, CornerFlag
from ..core.stream import TextStream
from ..core.values import Vector4
from .base import (
    FrameBase,
    PropertyField,
    has_items,
    is_true,
    write_fields,
    write_flag,
    write_generic,
    write_set,
    write_value,
)


def _corner_flags(flags: Iterable[CornerFlag | str] | None) -> tuple[CornerFlag, ...]:
    if flags is None:
        return ()
    if isinstance(flags, (str, CornerFlag)):
        flags = [flags]
    tokens: list[CornerFlag] = []
    for flag in flags:
        if isinstance(flag, str):
            tokens.extend(CornerFlag(part) for part in flag.split("|") if part)
        else:
            tokens.append(flag)
    return tuple(dict.fromkeys(tokens))


def write_corner_flags(stream: TextStream, flags: Iterable[CornerFlag | str] | None, header: str) -> None:
    write_set(stream, _corner_flags(flags), header)


BACKDROP_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("tile_background", "BackdropTileBackground", write_flag, is_true),
    PropertyField("background", "BackdropBackground", write_generic),
    PropertyField("corner_flags", "BackdropCornerFlags", write_corner_flags, has_items),
    PropertyField("corner_size", "BackdropCornerSize", write_generic),
    PropertyField("background_size", "BackdropBackgroundSize", write_generic),
    PropertyField("background_insets", "BackdropBackgroundInsets", write_value),
    PropertyField("edge_file", "BackdropEdgeFile", write_generic),
    PropertyField("blend_all", "BackdropBlendAll", write_flag, is_true),
)

HIGHLIGHT_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("highlight_type", "HighlightType", write_generic),
    PropertyField("alpha_file", "HighlightAlphaFile", write_generic),
    PropertyField("alpha_mode", "HighlightAlphaMode", write_generic),
)

TEXT_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("text", "Text", write_generic),
)


@dataclass(eq=False, repr=False)
class Frame(FrameBase):
    """A plain container frame. frame_type picks the client-side class."""

    frame_type: str = "FRAME"

    def header_slots(self) -> tuple[str, ...]:
        return (self.frame_type, self.name)


@dataclass(eq=False, repr=False)
class Backdrop(FrameBase):
    """A textured panel with optional edges, ``Frame "BACKDROP"``.

    Attributes:
        tile_background: Tile instead of stretching the background
        background: Background texture
        corner_flags: Edge pieces to draw, written as "UL|UR|..."
        corner_size: Size of the edge pieces
        background_size: Size of one background tile
        background_insets: Background inset from each edge
        edge_file: Edge texture
        blend_all: Alpha-blend the whole backdrop
    """

    tile_background: bool = False
    background: str | None = None
    corner_flags: tuple[CornerFlag, ...] = ()
    corner_size: float | None = None
    background_size: float | None = None
    background_insets: Vector4 | None = None
    edge_file: str | None = None
    blend_all: bool = False

    def __post_init__(self) -> None:
        self.corner_flags = _corner_flags(self.corner_flags)

    def header_slots(self) -> tuple[str, ...]:
        return ("BACKDROP", self.name)

    def write_body(self, stream: TextStream) -> None:
        write_fields(self, BACKDROP_FIELDS, stream)


@dataclass(eq=False, repr=False)
class Highlight(FrameBase):
    """A hover/focus overlay, ``Frame "HIGHLIGHT"``."""

    highlight_type: str | None = None
    alpha_file: str | None = None
    alpha_mode: AlphaMode | None = None

    def __post_init__(self) -> None:
        if isinstance(self.alpha_mode, str):
            self.alpha_mode = AlphaMode(self.alpha_mode)

    def header_slots(self) -> tuple[str, ...]:
        return ("HIGHLIGHT", self.name)

    def write_body(self, stream: TextStream) -> None:
        write_fields(self, HIGHLIGHT_FIELDS, stream)


@dataclass(eq=False, repr=False)
class TextFrame(FrameBase):
    """A standalone text frame, ``Frame "TEXT"``, styled by the font block."""

    text: str | None = None

    def header_slots(self) -> tuple[str, ...]:
        return ("TEXT", self.name)

    def write_body(self, stream: TextStream) -> None:
        write_fields(self, TEXT_FIELDS, stream)
