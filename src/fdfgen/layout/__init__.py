"""Data-driven frame definitions."""

from .loader import FRAME_REGISTRY, FrameLoader

__all__ = ["FRAME_REGISTRY", "FrameLoader"]
