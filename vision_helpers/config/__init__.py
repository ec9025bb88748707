"""Configuration management for the Vision helper clients."""

from .settings import (
    VisionConfig,
    DEFAULT_API_VERSION,
    get_secret,
    get_vision_config,
)

__all__ = [
    "VisionConfig",
    "DEFAULT_API_VERSION",
    "get_secret",
    "get_vision_config",
]
