"""Frame object model: the frame base, control properties and concrete variants."""

from .base import COMMON_FIELDS, FONT_FIELDS, CommonProperties, FrameBase, PropertyField
from .buttons import Button, GlueTextButton
from .control import CONTROL_FIELDS, ControlProperties
from .frame import Backdrop, Frame, Highlight, TextFrame
from .layer import Layer
from .setpoint import SetPoint
from .strings import String, Texture

__all__ = [
    "COMMON_FIELDS",
    "FONT_FIELDS",
    "CONTROL_FIELDS",
    "CommonProperties",
    "ControlProperties",
    "FrameBase",
    "PropertyField",
    "SetPoint",
    "Layer",
    "String",
    "Texture",
    "Frame",
    "Backdrop",
    "Highlight",
    "TextFrame",
    "Button",
    "GlueTextButton",
]
