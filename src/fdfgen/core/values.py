"""Value types with a canonical FDF text form: numbers, colours and vectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Self, Sequence

import numpy as np
from numpy.typing import NDArray
from PIL import ImageColor


def format_number(value: int | float) -> str:
    """Format a number the way FDF expects it.

    Integers are written as-is. Floats are written positionally (never in
    scientific notation) with trailing zeros and a dangling decimal point
    trimmed, so ``100.0`` becomes ``100`` and ``1e-05`` becomes ``0.00001``.
    """
    if isinstance(value, (bool, np.bool_)):
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return np.format_float_positional(float(value), trim="-")


def format_component(value: float) -> str:
    """Format one colour or vector component, always keeping a decimal."""
    return np.format_float_positional(float(value), trim="0")


def format_scalar(value: str | int | float | Enum, no_quote: bool = False) -> str:
    """Format a property value for a ``<Header> <value>,`` line.

    Strings are quoted unless no_quote is set. Enum members are written by
    value, so string enums follow the same quoting rule as plain strings.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value if no_quote else f'"{value}"'
    return format_number(value)


def _as_components(values: Sequence[float] | NDArray[np.float64], size: int, kind: str) -> NDArray[np.float64]:
    array = np.asarray(values, dtype=np.float64).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"{kind} needs {size} components, got {array.shape[0]}")
    return array


@dataclass
class RGBColor:
    """An RGBA colour with components in the 0..1 range.

    Written as four space-separated floats: ``1.0 0.8 0.0 1.0``.
    """

    red: float = 1.0
    green: float = 1.0
    blue: float = 1.0
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"Colour channel {channel} outside 0..1")

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: int = 255) -> Self:
        """Create a colour from 0..255 integer channels."""
        channels = np.array([red, green, blue, alpha], dtype=np.float64) / 255.0
        return cls(*np.round(channels, 4).tolist())

    @classmethod
    def parse(cls, value: str) -> Self:
        """Create a colour from a hex string or CSS colour name.

        Args:
            value: e.g. ``"#ffcc00"``, ``"#ffcc0080"`` or ``"gold"``

        Raises:
            ValueError: If Pillow cannot interpret the string
        """
        rgba = ImageColor.getrgb(value)
        if len(rgba) == 3:
            rgba = (*rgba, 255)
        return cls.from_rgb255(*rgba)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.red, self.green, self.blue, self.alpha], dtype=np.float64)

    def __str__(self) -> str:
        return " ".join(format_component(c) for c in self.to_array())


@dataclass(eq=False)
class Vector2:
    """A 2D vector, e.g. a shadow or text offset."""

    components: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.components = _as_components(self.components, 2, "Vector2")

    @classmethod
    def of(cls, x: float, y: float) -> Self:
        return cls(np.array([x, y], dtype=np.float64))

    @property
    def x(self) -> float:
        return float(self.components[0])

    @property
    def y(self) -> float:
        return float(self.components[1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self.components, other.components))

    def __str__(self) -> str:
        return " ".join(format_component(c) for c in self.components)


@dataclass(eq=False)
class Vector4:
    """A 4-component vector, used for insets and texture coordinates."""

    components: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(4, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.components = _as_components(self.components, 4, "Vector4")

    @classmethod
    def of(cls, a: float, b: float, c: float, d: float) -> Self:
        return cls(np.array([a, b, c, d], dtype=np.float64))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self.components, other.components))

    def __str__(self) -> str:
        return " ".join(format_component(c) for c in self.components)
