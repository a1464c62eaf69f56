"""Tooltip preset, loaded from YAML."""

from pathlib import Path

from ..document import FdfDocument
from ..layout import FrameLoader


def create_tooltip_document() -> FdfDocument:
    """Create a tiled-backdrop tooltip with a single text frame.

    Returns:
        An FdfDocument loaded from the bundled tooltip.yaml.
    """
    assets_dir = Path(__file__).parent / "assets"
    loader = FrameLoader()
    return loader.load(assets_dir / "tooltip.yaml")
