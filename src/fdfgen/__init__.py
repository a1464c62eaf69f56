"""fdfgen - typed object model for game UI frame definition (FDF) files."""

from .core import (
    AlphaMode,
    BaseFrame,
    ControlStyle,
    CornerFlag,
    Font,
    FontJustify,
    FrameFont,
    FramePoint,
    LayerType,
    Named,
    ObjectRef,
    RGBColor,
    TextStream,
    Vector2,
    Vector4,
)
from .document import FdfDocument
from .frames import (
    Backdrop,
    Button,
    CommonProperties,
    ControlProperties,
    Frame,
    FrameBase,
    GlueTextButton,
    Highlight,
    Layer,
    SetPoint,
    String,
    TextFrame,
    Texture,
)
from .layout import FrameLoader

__all__ = [
    "AlphaMode",
    "BaseFrame",
    "ControlStyle",
    "CornerFlag",
    "Font",
    "FontJustify",
    "FrameFont",
    "FramePoint",
    "LayerType",
    "Named",
    "ObjectRef",
    "RGBColor",
    "TextStream",
    "Vector2",
    "Vector4",
    "FdfDocument",
    "Backdrop",
    "Button",
    "CommonProperties",
    "ControlProperties",
    "Frame",
    "FrameBase",
    "GlueTextButton",
    "Highlight",
    "Layer",
    "SetPoint",
    "String",
    "TextFrame",
    "Texture",
    "FrameLoader",
]
