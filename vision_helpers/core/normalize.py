"""
Request normalization for the Vision helper methods.

Turns loose image references (bytes, file handles, paths, URLs, partial
request dicts) into the request shapes the generated client accepts.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import proto

logger = logging.getLogger(__name__)

FILE_URI_PREFIX = "file://"


class MissingImageError(ValueError):
    """Raised when an annotation request carries no image."""

    def __init__(self, message: str = "No image present."):
        super().__init__(message)


class ExplicitFeaturesError(ValueError):
    """Raised when a single-feature method receives its own feature list."""

    def __init__(
        self,
        message: str = (
            "Setting explicit features is not supported on this method. "
            "Use annotate_image instead."
        ),
    ):
        super().__init__(message)


def coerce_image(image: Any) -> Any:
    """
    Convert an image reference into the `Image` shape.

    Args:
        image: Raw bytes, a readable file object, a path, a URL string,
               a filename string, an image dict or an `Image` message.

    Returns:
        An image dict, or the `Image` message unchanged.
    """
    if isinstance(image, (bytes, bytearray, memoryview)):
        return {"content": bytes(image)}

    if hasattr(image, "read"):
        return {"content": image.read()}

    if isinstance(image, os.PathLike):
        return {"source": {"filename": os.fspath(image)}}

    if isinstance(image, str):
        if image.startswith(FILE_URI_PREFIX):
            return {"source": {"filename": image[len(FILE_URI_PREFIX):]}}
        if "://" in image:
            return {"source": {"image_uri": image}}
        return {"source": {"filename": image}}

    if isinstance(image, (dict, proto.Message)):
        return image

    raise TypeError(f"Unsupported image reference: {type(image).__name__}")


def read_image_file(filename: str) -> bytes:
    """Read a local image file as raw bytes."""
    logger.debug(f"Reading image content from {filename}")
    with open(filename, "rb") as f:
        return f.read()


def _resolve_feature_type(value: Any, feature_type: Any) -> Any:
    if isinstance(value, str):
        if feature_type is None:
            return value
        try:
            return feature_type[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown feature type: {value}") from None
    return value


def _normalize_feature(feature: Any, feature_type: Any) -> Any:
    # Generated Feature messages are already canonical
    if not isinstance(feature, dict):
        return feature

    normalized = dict(feature)
    if "type" in normalized:
        normalized["type_"] = normalized.pop("type")
    if "type_" in normalized:
        normalized["type_"] = _resolve_feature_type(normalized["type_"], feature_type)
    return normalized


def _normalize_features(features: Any, feature_type: Any) -> Any:
    if isinstance(features, dict):
        features = [features]
    return [_normalize_feature(f, feature_type) for f in features]


def _copy_message(message: proto.Message) -> proto.Message:
    message_cls = type(message)
    return message_cls.wrap(copy.deepcopy(message_cls.pb(message)))


def _is_request_message(value: Any) -> bool:
    # AnnotateImageRequest carries an image field, Image itself does not
    return isinstance(value, proto.Message) and "image" in type(value).meta.fields


def _normalize_message_request(request: proto.Message) -> proto.Message:
    request = _copy_message(request)
    if "image" not in request:
        raise MissingImageError()
    return request


def normalize_request(request: Any, feature_type: Any = None) -> Any:
    """
    Build the canonical form of a single annotation request.

    The caller's request is never modified. Local files referenced through
    `image.source.filename` are read and inlined as `image.content`.

    Args:
        request: Request dict or `AnnotateImageRequest` message
        feature_type: The client version's `Feature.Type` enum, used to
                      resolve feature names given as strings

    Returns:
        Normalized request dict, or a copy of the request message

    Raises:
        MissingImageError: If the request has no image
    """
    if isinstance(request, proto.Message):
        return _normalize_message_request(request)

    if not isinstance(request, dict):
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    normalized: Dict[str, Any] = dict(request)
    if normalized.get("image") is None:
        raise MissingImageError()

    image = coerce_image(normalized["image"])
    if isinstance(image, dict):
        source = image.get("source") or {}
        filename = source.get("filename") if isinstance(source, dict) else None
        if filename:
            image = {"content": read_image_file(filename)}
    normalized["image"] = image

    if normalized.get("features"):
        normalized["features"] = _normalize_features(normalized["features"], feature_type)

    return normalized


def build_feature_request(
    image: Any,
    feature: Any,
    max_results: Optional[int] = None,
    **kwargs: Any,
) -> Any:
    """
    Build the request sent by a single-feature method.

    Args:
        image: Any image reference accepted by `coerce_image`, a request
               dict carrying an `image` key, or an `AnnotateImageRequest`
        feature: The `Feature.Type` member to request
        max_results: Optional cap on results for the feature
        **kwargs: Extra request fields, e.g. `image_context`

    Returns:
        A request dict, or a copy of the request message

    Raises:
        ExplicitFeaturesError: If the request already lists features,
                               even an empty list
    """
    feature_request: Dict[str, Any] = {"type_": feature}
    if max_results is not None:
        feature_request["max_results"] = max_results

    if _is_request_message(image):
        request = _copy_message(image)
        if request.features:
            raise ExplicitFeaturesError()
        for key, value in kwargs.items():
            setattr(request, key, value)
        request.features = [feature_request]
        return request

    if isinstance(image, dict) and "image" in image:
        request = dict(image)
        if request.get("features") is not None:
            raise ExplicitFeaturesError()
        request.pop("features", None)
    else:
        request = {"image": coerce_image(image)}

    request.update(kwargs)
    request["features"] = [feature_request]

    return request
