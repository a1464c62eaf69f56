"""Frame base: shared properties, write helpers and the emission protocol."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Callable, Iterable, Iterator, Self

from ..core.enums import FontJustify, FramePoint
from ..core.fonts import FrameFont
from ..core.refs import FrameLike, FrameRef, as_ref
from ..core.stream import TextStream
from ..core.values import RGBColor, Vector2, format_scalar
from .setpoint import SetPoint


# Write helpers. Each takes (stream, value, header) and writes at most one
# property; None always writes nothing.

def write_generic(
    stream: TextStream, value: str | int | float | Enum | None, header: str, no_quote: bool = False
) -> None:
    """Write ``<header> "<value>",`` for strings, ``<header> <value>,`` otherwise.

    Args:
        stream: Target stream
        value: Property value; None writes nothing
        header: Property keyword
        no_quote: Write strings as bare tokens (justification and similar)
    """
    if value is None:
        return
    stream.write_indentation().write_line(f"{header} {format_scalar(value, no_quote)},")


write_bare = partial(write_generic, no_quote=True)


def write_flag(stream: TextStream, value: bool | None, header: str) -> None:
    """Write ``<header>,`` when value is True."""
    if value:
        stream.write_indentation().write_line(f"{header},")


def write_value(stream: TextStream, value: Any, header: str) -> None:
    """Write ``<header> <str(value)>,`` for colours and vectors."""
    if value is None:
        return
    stream.write_indentation().write_line(f"{header} {value},")


def write_set(stream: TextStream, values: Iterable[str | Enum] | None, header: str) -> None:
    """Write ``<header> "<a>|<b>|...",`` in iteration order; nothing if empty."""
    if not values:
        return
    stream.write_indentation().write(f'{header} "')
    first = True
    for entry in values:
        if not first:
            stream.write("|")
        stream.write(entry.value if isinstance(entry, Enum) else str(entry))
        first = False
    stream.write('",\n')


def write_reference(stream: TextStream, ref: FrameLike | None, header: str) -> None:
    """Write ``<header> "<name>",`` with the name resolved now."""
    if ref is None:
        return
    stream.write_indentation().write_line(f'{header} "{as_ref(ref).resolve()}",')


def write_object(stream: TextStream, value: Any, header: str) -> None:
    """Let a value with its own compile_to_text write itself (fonts)."""
    if value is not None:
        value.compile_to_text(stream)


def write_points(stream: TextStream, points: Iterable[SetPoint], header: str) -> None:
    for point in points:
        point.compile_to_text(stream)


def is_set(value: Any) -> bool:
    return value is not None


def is_true(value: Any) -> bool:
    return value is True


def has_items(value: Any) -> bool:
    return bool(value)


@dataclass(frozen=True)
class PropertyField:
    """One row of an emission table: where to read a property and how to write it.

    Attributes:
        attr: Attribute name on the owning properties object
        header: Keyword written in front of the value
        write: Writer called as write(stream, value, header)
        present: Predicate deciding whether the value is emitted at all
    """

    attr: str
    header: str
    write: Callable[[TextStream, Any, str], None]
    present: Callable[[Any], bool] = is_set

    def emit(self, owner: Any, stream: TextStream) -> None:
        value = getattr(owner, self.attr)
        if self.present(value):
            self.write(stream, value, self.header)


def write_fields(owner: Any, fields: Iterable[PropertyField], stream: TextStream) -> None:
    """Emit every present property of owner in table order."""
    for prop in fields:
        prop.emit(owner, stream)


# The order of these tables is the order the client's loader reads
# properties in. Do not reorder.
FONT_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("font_color", "FontColor", write_value),
    PropertyField("font_highlight_color", "FontHighlightColor", write_value),
    PropertyField("font_disabled_color", "FontDisabledColor", write_value),
    PropertyField("font_shadow_color", "FontShadowColor", write_value),
    PropertyField("font_shadow_offset", "FontShadowOffset", write_value),
    PropertyField("frame_font", "FrameFont", write_object),
    PropertyField("font_justification_offset", "FontJustificationOffset", write_value),
    PropertyField("font_justification_h", "FontJustificationH", write_bare),
    PropertyField("font_justification_v", "FontJustificationV", write_bare),
    PropertyField("font_flags", "FontFlags", write_generic),
)

LAYOUT_FIELDS: tuple[PropertyField, ...] = (
    PropertyField("decorate_file_names", "DecorateFileNames", write_flag, is_true),
    PropertyField("set_all_points", "SetAllPoints", write_flag, is_true),
    PropertyField("width", "Width", write_generic),
    PropertyField("height", "Height", write_generic),
    PropertyField("points", "SetPoint", write_points, has_items),
)

COMMON_FIELDS: tuple[PropertyField, ...] = (*LAYOUT_FIELDS, *FONT_FIELDS)


@dataclass
class CommonProperties:
    """Properties every frame variant supports.

    Every attribute left as None (or False for the two flags) is omitted
    from the output. 0 and "" still count as set.

    Attributes:
        width: Frame width
        height: Frame height
        inherits_from: Frame (object, name or BaseFrame) to copy properties from
        inherits_with_children: Also copy the inherited frame's children
        set_all_points: Stretch to all points of the parent frame
        decorate_file_names: Resolve file names through the string table
        points: Anchor points, emitted in order
        frame_font: Font for the frame's own text
        font_justification_h: Horizontal justification
        font_justification_v: Vertical justification
        font_justification_offset: Text offset from the justified position
        font_flags: Font flags string, e.g. "FIXEDSIZE"
        font_color: Text colour
        font_highlight_color: Text colour when highlighted
        font_disabled_color: Text colour when disabled
        font_shadow_color: Text shadow colour
        font_shadow_offset: Text shadow offset
    """

    width: float | None = None
    height: float | None = None
    inherits_from: FrameLike | None = None
    inherits_with_children: bool = False

    set_all_points: bool = False
    decorate_file_names: bool = False

    points: list[SetPoint] = field(default_factory=list)

    frame_font: FrameFont | None = None
    font_justification_h: FontJustify | None = None
    font_justification_v: FontJustify | None = None
    font_justification_offset: Vector2 | None = None
    font_flags: str | None = None
    font_color: RGBColor | None = None
    font_highlight_color: RGBColor | None = None
    font_disabled_color: RGBColor | None = None
    font_shadow_color: RGBColor | None = None
    font_shadow_offset: Vector2 | None = None

    def __post_init__(self) -> None:
        self.inherits_from = as_ref(self.inherits_from)
        self.points = list(self.points)
        if isinstance(self.font_justification_h, str):
            self.font_justification_h = FontJustify(self.font_justification_h)
        if isinstance(self.font_justification_v, str):
            self.font_justification_v = FontJustify(self.font_justification_v)

    @property
    def inherits(self) -> FrameRef | None:
        """The inheritance target as a reference, whatever was assigned."""
        return as_ref(self.inherits_from)

    def write(self, stream: TextStream) -> None:
        """Write flags, geometry, anchor points and the font block."""
        write_fields(self, LAYOUT_FIELDS, stream)
        self.write_font_block(stream)

    def write_font_block(self, stream: TextStream) -> None:
        """Write the FontColor family, FrameFont, justification and flags."""
        write_fields(self, FONT_FIELDS, stream)

    def write_inherits(self, stream: TextStream) -> None:
        """Write `` INHERITS [WITHCHILDREN] "<name>"`` if a target is set."""
        target = self.inherits
        if target is None:
            return
        stream.write(" INHERITS")
        if self.inherits_with_children:
            stream.write(" WITHCHILDREN")
        stream.write(f' "{target.resolve()}"')


@dataclass(eq=False)
class FrameBase(ABC):
    """A block in the frame definition tree.

    Concrete variants set ``keyword``, declare their header slots and write
    their own properties in write_body(). compile_to_text() runs the fixed
    sequence: header, indent, common properties, body, children, dedent,
    closing brace.

    Frames compare by identity, so the same frame can be found in a
    children list or referenced from elsewhere without ambiguity.

    Example:
        panel = Backdrop("MyPanel", common=CommonProperties(width=0.3, height=0.2))
        panel.add_point(FramePoint.CENTER, BaseFrame.CONSOLE_UI, FramePoint.CENTER)
        panel.add_child(String("Title", text="Hello"))
        print(panel.to_text())
    """

    keyword = "Frame"

    name: str = ""
    common: CommonProperties = field(default_factory=CommonProperties)
    children: list[FrameBase] = field(default_factory=list)

    @abstractmethod
    def header_slots(self) -> tuple[str, ...]:
        """Quoted values written after the keyword, e.g. (type tag, name)."""
        ...

    def write_body(self, stream: TextStream) -> None:
        """Write the variant's own properties after the common ones."""

    def compile_to_text(self, stream: TextStream) -> None:
        """Write this frame and all of its children to stream.

        The stream's indentation depth is the same before and after.
        """
        self.write_header(stream, self.keyword, *self.header_slots())
        stream.push_indent()
        self.common.write(stream)
        self.write_body(stream)
        self.write_children(stream)
        stream.pop_indent()
        stream.write_indentation().write_line("}")

    def write_header(self, stream: TextStream, keyword: str, *slots: str) -> None:
        stream.write_indentation()
        stream.write(keyword)
        for slot in slots:
            stream.write(f' "{slot}"')
        self.common.write_inherits(stream)
        stream.write_line(" {")

    def write_children(self, stream: TextStream) -> None:
        for child in self.children:
            child.compile_to_text(stream)

    def to_text(self, indent: str = "    ") -> str:
        """Compile this frame into a fresh stream and return the text."""
        stream = TextStream(indent=indent)
        self.compile_to_text(stream)
        return stream.getvalue()

    def add_child(self, frame: FrameBase) -> FrameBase:
        """Append a child frame.

        Returns:
            The added frame (for chaining)
        """
        self.children.append(frame)
        return frame

    def add_point(
        self,
        my_point: FramePoint | str,
        parent_frame: FrameLike,
        parent_point: FramePoint | str,
        x: float = 0,
        y: float = 0,
    ) -> SetPoint:
        """Create a SetPoint and append it to this frame's anchor list."""
        point = SetPoint(my_point, parent_frame, parent_point, x, y)
        self.common.points.append(point)
        return point

    def inherit(self, target: FrameLike, with_children: bool = False) -> Self:
        """Make this frame inherit from target. Returns self."""
        self.common.inherits_from = as_ref(target)
        self.common.inherits_with_children = with_children
        return self

    def iter_frames(self, include_self: bool = True) -> Iterator[FrameBase]:
        """Iterate over this frame and all descendants (depth-first)."""
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_frames(include_self=True)

    def find(self, name: str) -> FrameBase | None:
        """Find the first frame with the given name in this subtree."""
        for frame in self.iter_frames():
            if frame.name == name:
                return frame
        return None

    def __repr__(self) -> str:
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"{type(self).__name__}({self.name!r}{children_str})"
