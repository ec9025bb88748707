"""
Per-version single-feature methods.

Each generated client version ships its own `Feature.Type` enum. The
decorator below turns every member of that enum into a convenience method,
so a version only exposes the features its API accepts.
"""

import asyncio
import inspect
import logging
from typing import Any, List

from google.api_core import gapic_v1

from .normalize import build_feature_request

logger = logging.getLogger(__name__)

UNSPECIFIED_FEATURE = "TYPE_UNSPECIFIED"


def _feature_doc(feature: Any) -> str:
    name = feature.name.lower().replace("_", " ")
    if not name.endswith("detection"):
        name = f"{name} detection"
    return f"""Return {name} information for an image.

        Args:
            image: Image reference, or a request dict or message without features
            max_results: Optional cap on the number of results
            retry: Retry policy passed through to the generated client
            timeout: Timeout passed through to the generated client
            metadata: Call metadata passed through to the generated client
            **kwargs: Extra request fields, e.g. `image_context`

        Returns:
            The `AnnotateImageResponse` for the image
        """


def _create_single_feature_method(feature: Any, is_async: bool):
    if is_async:
        async def inner(
            self,
            image,
            *,
            max_results=None,
            retry=gapic_v1.method.DEFAULT,
            timeout=gapic_v1.method.DEFAULT,
            metadata=(),
            **kwargs,
        ):
            # File objects are read while building the request
            loop = asyncio.get_event_loop()
            request = await loop.run_in_executor(
                None,
                lambda: build_feature_request(image, feature, max_results, **kwargs)
            )
            return await self.annotate_image(
                request, retry=retry, timeout=timeout, metadata=metadata
            )
    else:
        def inner(
            self,
            image,
            *,
            max_results=None,
            retry=gapic_v1.method.DEFAULT,
            timeout=gapic_v1.method.DEFAULT,
            metadata=(),
            **kwargs,
        ):
            request = build_feature_request(image, feature, max_results, **kwargs)
            return self.annotate_image(
                request, retry=retry, timeout=timeout, metadata=metadata
            )

    inner.__name__ = feature.name.lower()
    inner.__doc__ = _feature_doc(feature)
    return inner


def _supported_features(cls) -> List[str]:
    return list(cls._feature_methods)


def add_single_feature_methods(cls):
    """
    Class decorator adding one method per feature of the client version.

    `LOGO_DETECTION` becomes `logo_detection`, `PRODUCT_SEARCH` becomes
    `product_search`, and so on. Names already defined on the class are
    not replaced.
    """
    is_async = inspect.iscoroutinefunction(cls.annotate_image)
    added = []

    for feature in cls.Feature.Type:
        if feature.name == UNSPECIFIED_FEATURE:
            continue

        method_name = feature.name.lower()
        if method_name not in vars(cls):
            method = _create_single_feature_method(feature, is_async)
            method.__qualname__ = f"{cls.__qualname__}.{method_name}"
            setattr(cls, method_name, method)
        added.append(method_name)

    cls._feature_methods = tuple(added)
    cls.supported_features = classmethod(_supported_features)
    logger.debug(f"{cls.__module__}.{cls.__name__}: {len(added)} feature methods")
    return cls
