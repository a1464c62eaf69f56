"""Layer blocks: draw layers holding strings and textures."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LayerType
from .base import FrameBase


@dataclass(eq=False, repr=False)
class Layer(FrameBase):
    """A draw layer, ``Layer "<type>" "<name>" { ... }``.

    Layers are normally anonymous. The name slot is written even when the
    name is empty, giving ``Layer "ARTWORK" ""``.
    """

    keyword = "Layer"

    layer_type: LayerType = LayerType.ARTWORK

    def __post_init__(self) -> None:
        if isinstance(self.layer_type, str):
            self.layer_type = LayerType(self.layer_type)

    def header_slots(self) -> tuple[str, ...]:
        return (self.layer_type.value, self.name)
