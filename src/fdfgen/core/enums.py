"""String enumerations used in frame definitions."""

from enum import Enum


class FramePoint(Enum):
    """Named anchor points on a frame's bounding box, as used by SetPoint."""
    TOPLEFT = "TOPLEFT"
    TOP = "TOP"
    TOPRIGHT = "TOPRIGHT"
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"
    BOTTOMLEFT = "BOTTOMLEFT"
    BOTTOM = "BOTTOM"
    BOTTOMRIGHT = "BOTTOMRIGHT"


class FontJustify(Enum):
    """Text justification tokens. Written bare, never quoted."""
    # Horizontal
    JUSTIFYLEFT = "JUSTIFYLEFT"
    JUSTIFYCENTER = "JUSTIFYCENTER"
    JUSTIFYRIGHT = "JUSTIFYRIGHT"

    # Vertical
    JUSTIFYTOP = "JUSTIFYTOP"
    JUSTIFYMIDDLE = "JUSTIFYMIDDLE"
    JUSTIFYBOTTOM = "JUSTIFYBOTTOM"


class ControlStyle(Enum):
    """Interaction flags for control frames, joined with '|' on output."""
    AUTOTRACK = "AUTOTRACK"
    CLICKONMOUSEDOWN = "CLICKONMOUSEDOWN"
    HIGHLIGHTONFOCUS = "HIGHLIGHTONFOCUS"
    HIGHLIGHTONMOUSEOVER = "HIGHLIGHTONMOUSEOVER"
    HIDEWHENDISABLED = "HIDEWHENDISABLED"
    EXCLUSIVE = "EXCLUSIVE"


class LayerType(Enum):
    """Draw layers a Layer block can target."""
    BACKGROUND = "BACKGROUND"
    ARTWORK = "ARTWORK"
    OVERLAY = "OVERLAY"


class AlphaMode(Enum):
    """Blend modes for textures and highlights."""
    BLEND = "BLEND"
    ADD = "ADD"
    ALPHAKEY = "ALPHAKEY"
    MOD = "MOD"


class CornerFlag(Enum):
    """Backdrop edge pieces to draw (upper-left corner, top edge, ...)."""
    UL = "UL"
    UR = "UR"
    BL = "BL"
    BR = "BR"
    T = "T"
    L = "L"
    B = "B"
    R = "R"


class BaseFrame(Enum):
    """Frames that exist in the game client before any FDF is loaded.

    These can be used as SetPoint parents or inheritance targets without
    building a frame object for them.
    """
    GAME_UI = "GameUI"
    CONSOLE_UI = "ConsoleUI"
    CONSOLE_UI_BACKDROP = "ConsoleUIBackdrop"
    MINIMAP = "Minimap"
    RESOURCE_BAR = "ResourceBarFrame"
    UPPER_BUTTON_BAR = "UpperButtonBarFrame"
    PORTRAIT = "Portrait"
    CHAT_DIALOG = "ChatDialog"
    ESC_MENU_BACKDROP = "EscMenuBackdrop"
