"""Layer contents: String and Texture blocks."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AlphaMode
from ..core.fonts import Font
from ..core.stream import TextStream
from ..core.values import Vector4
from .base import FrameBase, PropertyField, write_fields, write_generic, write_object, write_value


STRING_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("font", "Font", write_object),
    PropertyField("text", "Text", write_generic),
)

TEXTURE_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("file", "File", write_generic),
    PropertyField("tex_coord", "TexCoord", write_value),
    PropertyField("alpha_mode", "AlphaMode", write_generic),
)


@dataclass(eq=False, repr=False)
class String(FrameBase):
    """A text element inside a Layer, ``String "<name>" { ... }``.

    Attributes:
        font: Font line written after the common properties
        text: Initial text
    """

    keyword = "String"

    font: Font | None = None
    text: str | None = None

    def header_slots(self) -> tuple[str, ...]:
        return (self.name,)

    def write_body(self, stream: TextStream) -> None:
        write_fields(self, STRING_FIELDS, stream)


@dataclass(eq=False, repr=False)
class Texture(FrameBase):
    """An image inside a Layer, ``Texture "<name>" { ... }``.

    Attributes:
        file: Texture path or string-table key
        tex_coord: Texture coordinates (left, right, top, bottom)
        alpha_mode: Blend mode
    """

    keyword = "Texture"

    file: str | None = None
    tex_coord: Vector4 | None = None
    alpha_mode: AlphaMode | None = None

    def __post_init__(self) -> None:
        if isinstance(self.alpha_mode, str):
            self.alpha_mode = AlphaMode(self.alpha_mode)

    def header_slots(self) -> tuple[str, ...]:
        return (self.name,)

    def write_body(self, stream: TextStream) -> None:
        write_fields(self, TEXTURE_FIELDS, stream)
