"""Helper-enabled clients for the Cloud Vision v1 API."""

from google.cloud import vision_v1
from google.cloud.vision_v1 import types
from google.cloud.vision_v1.types import Feature, Image

from .core.decorators import add_single_feature_methods
from .core.helpers import AsyncVisionHelpers, VisionHelpers

ProductSearchClient = vision_v1.ProductSearchClient


@add_single_feature_methods
class ImageAnnotatorClient(VisionHelpers, vision_v1.ImageAnnotatorClient):
    __doc__ = vision_v1.ImageAnnotatorClient.__doc__
    Feature = Feature


@add_single_feature_methods
class ImageAnnotatorAsyncClient(AsyncVisionHelpers, vision_v1.ImageAnnotatorAsyncClient):
    __doc__ = vision_v1.ImageAnnotatorAsyncClient.__doc__
    Feature = Feature


__all__ = [
    "ImageAnnotatorClient",
    "ImageAnnotatorAsyncClient",
    "ProductSearchClient",
    "Feature",
    "Image",
    "types",
]
