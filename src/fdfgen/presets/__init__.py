"""Pre-built frame definitions for fdfgen."""

from .dialog import create_dialog_document
from .status_bar import create_status_bar_document
from .tooltip import create_tooltip_document

# Preset registry - maps preset names to factory functions
PRESETS = {
    "dialog": create_dialog_document,
    "status_bar": create_status_bar_document,
    "tooltip": create_tooltip_document,
}

__all__ = [
    "PRESETS",
    "create_dialog_document",
    "create_status_bar_document",
    "create_tooltip_document",
]
