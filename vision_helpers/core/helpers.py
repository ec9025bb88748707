"""
Helper mixins for the generated ImageAnnotator clients.

`annotate_image` wraps the batch RPC for the common case of a single image.
"""

import asyncio
import logging
from typing import Any, Sequence, Tuple

from google.api_core import gapic_v1

from .normalize import normalize_request

logger = logging.getLogger(__name__)

Metadata = Sequence[Tuple[str, str]]


class VisionHelpers:
    """
    Mixin for a synchronous generated `ImageAnnotatorClient`.

    The host class must define `batch_annotate_images` and a `Feature`
    message class carrying the version's `Feature.Type` enum.
    """

    def annotate_image(
        self,
        request: Any,
        *,
        retry: Any = gapic_v1.method.DEFAULT,
        timeout: Any = gapic_v1.method.DEFAULT,
        metadata: Metadata = (),
    ) -> Any:
        """
        Run image detection and annotation for a single image.

        Args:
            request: An `AnnotateImageRequest` message or dict. The image may
                     be raw bytes, a file object, a URL or filename string, or
                     an image dict using `content`, `source.image_uri` or
                     `source.filename`.
            retry: Retry policy passed through to the generated client
            timeout: Timeout passed through to the generated client
            metadata: Call metadata passed through to the generated client

        Returns:
            The `AnnotateImageResponse` for the image
        """
        request = normalize_request(request, self.Feature.Type)
        logger.debug(f"Sending single-image batch request via {type(self).__name__}")
        response = self.batch_annotate_images(
            requests=[request],
            retry=retry,
            timeout=timeout,
            metadata=metadata,
        )
        return response.responses[0]


class AsyncVisionHelpers:
    """Mixin for a generated `ImageAnnotatorAsyncClient`."""

    async def annotate_image(
        self,
        request: Any,
        *,
        retry: Any = gapic_v1.method.DEFAULT,
        timeout: Any = gapic_v1.method.DEFAULT,
        metadata: Metadata = (),
    ) -> Any:
        """
        Coroutine form of `VisionHelpers.annotate_image`.

        File reads done while normalizing run in the default executor.
        """
        loop = asyncio.get_event_loop()
        request = await loop.run_in_executor(
            None, normalize_request, request, self.Feature.Type
        )
        logger.debug(f"Sending single-image batch request via {type(self).__name__}")
        response = await self.batch_annotate_images(
            requests=[request],
            retry=retry,
            timeout=timeout,
            metadata=metadata,
        )
        return response.responses[0]
