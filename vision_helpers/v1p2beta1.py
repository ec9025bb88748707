"""Helper-enabled clients for the Cloud Vision v1p2beta1 API.

Product search and object localization are not available in this version.
"""

from google.cloud import vision_v1p2beta1
from google.cloud.vision_v1p2beta1 import types
from google.cloud.vision_v1p2beta1.types import Feature, Image

from .core.decorators import add_single_feature_methods
from .core.helpers import AsyncVisionHelpers, VisionHelpers


@add_single_feature_methods
class ImageAnnotatorClient(VisionHelpers, vision_v1p2beta1.ImageAnnotatorClient):
    __doc__ = vision_v1p2beta1.ImageAnnotatorClient.__doc__
    Feature = Feature


@add_single_feature_methods
class ImageAnnotatorAsyncClient(AsyncVisionHelpers, vision_v1p2beta1.ImageAnnotatorAsyncClient):
    __doc__ = vision_v1p2beta1.ImageAnnotatorAsyncClient.__doc__
    Feature = Feature


__all__ = [
    "ImageAnnotatorClient",
    "ImageAnnotatorAsyncClient",
    "Feature",
    "Image",
    "types",
]
