"""
Vision Helpers

Convenience layer over the generated Google Cloud Vision clients: single
image annotation from loose image references, and per-feature methods on
each API version that supports them.
"""

__version__ = "1.0.0"

from .core.normalize import ExplicitFeaturesError, MissingImageError
from .v1 import Feature, Image, ImageAnnotatorAsyncClient, ImageAnnotatorClient, ProductSearchClient, types

__all__ = [
    "ImageAnnotatorClient",
    "ImageAnnotatorAsyncClient",
    "ProductSearchClient",
    "Feature",
    "Image",
    "types",
    "MissingImageError",
    "ExplicitFeaturesError",
]
