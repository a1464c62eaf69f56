"""Anchor points aligning one frame to another."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import FramePoint
from ..core.refs import FrameLike, as_ref
from ..core.stream import TextStream
from ..core.values import format_number


@dataclass(frozen=True)
class SetPoint:
    """Aligns my_point of the owning frame to parent_point of parent_frame.

    The owning frame is whichever frame holds this point in its ``points``
    list; the point itself keeps no reference to it.

    Attributes:
        my_point: Anchor on the owning frame
        parent_frame: Frame object, raw frame name or BaseFrame to align to
        parent_point: Anchor on the parent frame
        x: Horizontal offset
        y: Vertical offset

    Example:
        SetPoint(FramePoint.TOPLEFT, "Parent", FramePoint.BOTTOMRIGHT, 0, -5)
        # SetPoint TOPLEFT, "Parent", BOTTOMRIGHT, 0, -5,
    """

    my_point: FramePoint | str
    parent_frame: FrameLike
    parent_point: FramePoint | str
    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        if isinstance(self.my_point, str):
            object.__setattr__(self, "my_point", FramePoint(self.my_point))
        if isinstance(self.parent_point, str):
            object.__setattr__(self, "parent_point", FramePoint(self.parent_point))
        object.__setattr__(self, "parent_frame", as_ref(self.parent_frame))

    def compile_to_text(self, stream: TextStream) -> None:
        stream.write_indentation().write(f"SetPoint {self.my_point.value}, ")
        stream.write(f'"{self.parent_frame.resolve()}", ')
        stream.write(
            f"{self.parent_point.value}, {format_number(self.x)}, {format_number(self.y)}, \n"
        )
