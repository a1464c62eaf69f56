"""References from one frame to another, by object or by name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .enums import BaseFrame

if TYPE_CHECKING:
    from ..frames.base import FrameBase


@dataclass(frozen=True)
class Named:
    """A frame referenced only by its name.

    Used for frames defined in another FDF file, built-in game frames, or
    frames that have not been constructed yet.
    """

    name: str

    def resolve(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class ObjectRef:
    """A reference to a frame object.

    The name is read at emission time, so renaming the target after the
    reference was created is reflected in the output. Two references are
    equal only if they point at the same object.
    """

    frame: FrameBase

    def resolve(self) -> str:
        return self.frame.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectRef):
            return NotImplemented
        return self.frame is other.frame

    def __hash__(self) -> int:
        return id(self.frame)


FrameRef = Union[Named, ObjectRef]

# Anything callers may pass where a frame reference is expected.
FrameLike = Union["FrameBase", str, BaseFrame, Named, ObjectRef]


def as_ref(value: FrameLike | None) -> FrameRef | None:
    """Normalize a frame, name or built-in frame into a FrameRef.

    Args:
        value: A frame object, a raw name, a BaseFrame member, an existing
            reference, or None

    Returns:
        The matching Named/ObjectRef, or None if value is None

    Raises:
        TypeError: If value is none of the accepted kinds
    """
    if value is None or isinstance(value, (Named, ObjectRef)):
        return value
    if isinstance(value, str):
        return Named(value)
    if isinstance(value, BaseFrame):
        return Named(value.value)

    from ..frames.base import FrameBase

    if isinstance(value, FrameBase):
        return ObjectRef(value)
    raise TypeError(f"Cannot reference {type(value).__name__!r} as a frame")
