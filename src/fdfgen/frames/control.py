"""Properties shared by interactive control frames (buttons and the like)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import ControlStyle
from ..core.refs import FrameLike, as_ref
from ..core.stream import TextStream
from .base import PropertyField, has_items, write_fields, write_reference, write_set


def normalize_styles(styles: Iterable[ControlStyle | str] | None) -> tuple[ControlStyle, ...]:
    """Turn any iterable of styles into a de-duplicated tuple in first-seen order.

    A single "A|B" string is split on the separator.
    """
    if styles is None:
        return ()
    if isinstance(styles, (str, ControlStyle)):
        styles = [styles]

    tokens: list[ControlStyle] = []
    for style in styles:
        if isinstance(style, str):
            tokens.extend(ControlStyle(part) for part in style.split("|") if part)
        else:
            tokens.append(style)
    return tuple(dict.fromkeys(tokens))


def write_styles(stream: TextStream, styles: Iterable[ControlStyle | str] | None, header: str) -> None:
    """Write the style set, normalizing whatever was assigned since construction."""
    write_set(stream, normalize_styles(styles), header)


CONTROL_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("style", "ControlStyle", write_styles, has_items),
    PropertyField("backdrop", "ControlBackdrop", write_reference),
    PropertyField("pushed_backdrop", "ControlPushedBackdrop", write_reference),
    PropertyField("disabled_backdrop", "ControlDisabledBackdrop", write_reference),
    PropertyField("disabled_pushed_backdrop", "ControlDisabledPushedBackdrop", write_reference),
    PropertyField("mouse_over_highlight", "ControlMouseOverHighlight", write_reference),
)


@dataclass
class ControlProperties:
    """Style flags and state backdrops of a control frame.

    The backdrops and highlight may be frame objects (usually children of
    the control) or names of frames defined elsewhere.

    Attributes:
        style: Control style tokens, written in the order given
        backdrop: Backdrop in the normal state
        pushed_backdrop: Backdrop while pressed
        disabled_backdrop: Backdrop while disabled
        disabled_pushed_backdrop: Backdrop while disabled and pressed
        mouse_over_highlight: Highlight shown on hover
    """

    style: tuple[ControlStyle, ...] = ()
    backdrop: FrameLike | None = None
    pushed_backdrop: FrameLike | None = None
    disabled_backdrop: FrameLike | None = None
    disabled_pushed_backdrop: FrameLike | None = None
    mouse_over_highlight: FrameLike | None = None

    def __post_init__(self) -> None:
        self.style = normalize_styles(self.style)
        self.backdrop = as_ref(self.backdrop)
        self.pushed_backdrop = as_ref(self.pushed_backdrop)
        self.disabled_backdrop = as_ref(self.disabled_backdrop)
        self.disabled_pushed_backdrop = as_ref(self.disabled_pushed_backdrop)
        self.mouse_over_highlight = as_ref(self.mouse_over_highlight)

    def write(self, stream: TextStream) -> None:
        write_fields(self, CONTROL_FIELDS, stream)
