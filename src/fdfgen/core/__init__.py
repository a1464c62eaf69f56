"""Core value types, enumerations and the text sink."""

from .enums import AlphaMode, BaseFrame, ControlStyle, CornerFlag, FontJustify, FramePoint, LayerType
from .fonts import Font, FrameFont
from .refs import FrameLike, FrameRef, Named, ObjectRef, as_ref
from .stream import TextStream
from .values import RGBColor, Vector2, Vector4, format_number

__all__ = [
    "AlphaMode",
    "BaseFrame",
    "ControlStyle",
    "CornerFlag",
    "FontJustify",
    "FramePoint",
    "LayerType",
    "Font",
    "FrameFont",
    "FrameLike",
    "FrameRef",
    "Named",
    "ObjectRef",
    "as_ref",
    "TextStream",
    "RGBColor",
    "Vector2",
    "Vector4",
    "format_number",
]
