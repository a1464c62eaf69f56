"""Interactive controls: buttons built from ControlProperties."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.refs import FrameLike, as_ref
from ..core.stream import TextStream
from ..core.values import Vector2
from .base import FrameBase, PropertyField, write_fields, write_reference, write_value
from .control import ControlProperties


GLUE_TEXT_BUTTON_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("pushed_text_offset", "ButtonPushedTextOffset", write_value),
    PropertyField("button_text", "ButtonText", write_reference),
)


@dataclass(eq=False, repr=False)
class Button(FrameBase):
    """A clickable frame, ``Frame "BUTTON"``."""

    control: ControlProperties = field(default_factory=ControlProperties)

    def header_slots(self) -> tuple[str, ...]:
        return ("BUTTON", self.name)

    def write_body(self, stream: TextStream) -> None:
        self.control.write(stream)


@dataclass(eq=False, repr=False)
class GlueTextButton(FrameBase):
    """A button with a text label, ``Frame "GLUETEXTBUTTON"``.

    The label is usually a TEXT child frame named by button_text.

    Example:
        button = GlueTextButton("OkButton", control=ControlProperties(
            style=[ControlStyle.AUTOTRACK, ControlStyle.HIGHLIGHTONMOUSEOVER],
            backdrop="EscMenuButtonBackdrop",
        ))
        label = button.add_child(TextFrame("OkButtonText", text="OK"))
        button.button_text = label
    """

    control: ControlProperties = field(default_factory=ControlProperties)
    pushed_text_offset: Vector2 | None = None
    button_text: FrameLike | None = None

    def __post_init__(self) -> None:
        self.button_text = as_ref(self.button_text)

    def header_slots(self) -> tuple[str, ...]:
        return ("GLUETEXTBUTTON", self.name)

    def write_body(self, stream: TextStream) -> None:
        self.control.write(stream)
        write_fields(self, GLUE_TEXT_BUTTON_FIELDS, stream)
