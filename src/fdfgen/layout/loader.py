"""YAML loader for frame definitions."""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from ..core.fonts import Font, FrameFont
from ..core.values import RGBColor, Vector2, Vector4
from ..document import FdfDocument
from ..frames import (
    Backdrop,
    Button,
    CommonProperties,
    ControlProperties,
    Frame,
    FrameBase,
    GlueTextButton,
    Highlight,
    Layer,
    SetPoint,
    String,
    TextFrame,
    Texture,
)

logger = logging.getLogger(__name__)


# Registry of frame variants by their YAML "type"
FRAME_REGISTRY: dict[str, type[FrameBase]] = {
    "layer": Layer,
    "string": String,
    "texture": Texture,
    "frame": Frame,
    "backdrop": Backdrop,
    "highlight": Highlight,
    "text": TextFrame,
    "button": Button,
    "glue_text_button": GlueTextButton,
}

KEY_ALIASES = {
    "inherits": "inherits_from",
    "with_children": "inherits_with_children",
}

COLOR_KEYS = {"font_color", "font_highlight_color", "font_disabled_color", "font_shadow_color"}
VECTOR2_KEYS = {"font_justification_offset", "font_shadow_offset", "pushed_text_offset"}
VECTOR4_KEYS = {"background_insets", "tex_coord"}

# Keys every frame type handles itself rather than passing to its constructor
STRUCTURAL_KEYS = {"type", "name", "children", "control"}

COMMON_KEYS = {f.name for f in fields(CommonProperties)}
CONTROL_KEYS = {f.name for f in fields(ControlProperties)}


def _init_fields(cls: type) -> set[str]:
    return {f.name for f in fields(cls) if f.init}


class FrameLoader:
    """Loads frame definitions from YAML files into an FdfDocument.

    YAML format:
    ```yaml
    includes:
      - UI/FrameDef/UI/EscMenuTemplates.fdf
    frames:
      - type: backdrop
        name: MyPanel
        inherits: EscMenuBackdrop
        width: 0.3
        height: 0.2
        points:
          - [CENTER, ConsoleUI, CENTER, 0.0, 0.0]
        children:
          - type: text
            name: MyPanelTitle
            text: Hello
            font_color: "#ffcc00"
            frame_font: [MasterFont, 0.012]
    ```

    Keys that match CommonProperties fields fill the common block, a
    ``control`` mapping fills ControlProperties, and the remaining keys go
    to the variant's own fields. A file holding a single frame mapping (with
    a ``type`` key) is accepted as a document with one frame.
    """

    def load(self, path: str | Path) -> FdfDocument:
        """Load a document from a YAML file.

        Raises:
            FileNotFoundError: If path does not exist
            ValueError: If the YAML is malformed or describes an unknown
                frame type or key
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Frame definition not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = self._parse_yaml(f)

        document = self._build_document(data)
        logger.debug("Loaded %d top-level frames from %s", len(document.frames), path)
        return document

    def load_string(self, yaml_string: str) -> FdfDocument:
        """Load a document from a YAML string."""
        return self._build_document(self._parse_yaml(yaml_string))

    def _parse_yaml(self, source: Any) -> Any:
        try:
            return yaml.safe_load(source)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML: {exc}") from exc

    def _build_document(self, data: Any) -> FdfDocument:
        if not isinstance(data, dict):
            raise ValueError("Frame definition must be a mapping")
        if "type" in data:
            data = {"frames": [data]}

        unknown = set(data) - {"includes", "frames"}
        if unknown:
            raise ValueError(f"Unknown document keys: {sorted(unknown)}")

        document = FdfDocument(includes=[str(i) for i in data.get("includes") or []])
        for frame_def in data.get("frames") or []:
            document.add_frame(self._build_frame(frame_def, parent_path=""))
        return document

    def _build_frame(self, frame_def: dict[str, Any], parent_path: str) -> FrameBase:
        """Build one frame and, recursively, its children."""
        if not isinstance(frame_def, dict):
            raise ValueError(f"Frame under '{parent_path or '/'}' must be a mapping")

        name = frame_def.get("name")
        name = "" if name is None else str(name)
        path = f"{parent_path}/{name or frame_def.get('type', '?')}"

        frame_type = frame_def.get("type")
        cls = FRAME_REGISTRY.get(frame_type)
        if cls is None:
            raise ValueError(
                f"Frame '{path}': unknown type {frame_type!r}, expected one of {sorted(FRAME_REGISTRY)}"
            )

        common_args: dict[str, Any] = {}
        variant_args: dict[str, Any] = {}
        variant_keys = _init_fields(cls) - {"name", "common", "children", "control"}

        for key, value in frame_def.items():
            if key in STRUCTURAL_KEYS:
                continue
            key = KEY_ALIASES.get(key, key)
            if key in COMMON_KEYS:
                target = common_args
            elif key in variant_keys:
                target = variant_args
            else:
                raise ValueError(f"Frame '{path}': unknown key {key!r} for type {frame_type!r}")
            try:
                target[key] = self._convert(key, value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Frame '{path}': bad value for {key!r}: {exc}") from exc

        control_def = frame_def.get("control")
        if control_def is not None:
            if "control" not in _init_fields(cls):
                raise ValueError(f"Frame '{path}': type {frame_type!r} has no control properties")
            unknown = set(control_def) - CONTROL_KEYS
            if unknown:
                raise ValueError(f"Frame '{path}': unknown control keys {sorted(unknown)}")

        try:
            common = CommonProperties(**common_args)
            if control_def is not None:
                variant_args["control"] = ControlProperties(**control_def)
            frame = cls(name=name, common=common, **variant_args)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Frame '{path}': {exc}") from exc

        for child_def in frame_def.get("children") or []:
            frame.add_child(self._build_frame(child_def, path))

        return frame

    def _convert(self, key: str, value: Any) -> Any:
        """Convert YAML scalars and lists to the value types a field expects."""
        if value is None:
            return None
        if key in COLOR_KEYS:
            if isinstance(value, str):
                return RGBColor.parse(value)
            return RGBColor(*value)
        if key in VECTOR2_KEYS:
            return Vector2(value)
        if key in VECTOR4_KEYS:
            return Vector4(value)
        if key == "frame_font":
            return FrameFont(**value) if isinstance(value, dict) else FrameFont(*value)
        if key == "font":
            return Font(**value) if isinstance(value, dict) else Font(*value)
        if key == "points":
            return [self._parse_point(point) for point in value]
        return value

    def _parse_point(self, point: list[Any] | dict[str, Any]) -> SetPoint:
        """Parse ``[my_point, parent, parent_point, x, y]`` or the mapping form."""
        if isinstance(point, dict):
            return SetPoint(**point)
        return SetPoint(*point)
