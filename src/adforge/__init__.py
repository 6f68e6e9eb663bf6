"""Adforge - structured business visuals rendered by a generative image service."""

__version__ = "0.1.0"

from adforge.core.config import AdforgeConfig, config
from adforge.core.pipeline import ImagePipeline, build_pipeline
from adforge.core.schemas import Domain

__all__ = [
    "AdforgeConfig",
    "config",
    "Domain",
    "ImagePipeline",
    "build_pipeline",
]
