"""Core components for the Vision helper clients."""

from .normalize import (
    MissingImageError,
    ExplicitFeaturesError,
    coerce_image,
    normalize_request,
    build_feature_request,
)
from .helpers import VisionHelpers, AsyncVisionHelpers
from .decorators import add_single_feature_methods

__all__ = [
    "MissingImageError",
    "ExplicitFeaturesError",
    "coerce_image",
    "normalize_request",
    "build_feature_request",
    "VisionHelpers",
    "AsyncVisionHelpers",
    "add_single_feature_methods",
]
