"""
Client construction for the helper-enabled Vision clients.

Handles service account authentication and regional endpoints.
"""

import importlib
import json
import logging
from typing import Any, Optional

from google.api_core.client_options import ClientOptions
from google.oauth2 import service_account

from ..config.settings import VisionConfig

logger = logging.getLogger(__name__)

API_VERSIONS = ("v1", "v1p1beta1", "v1p2beta1", "v1p3beta1", "v1p4beta1")

SCOPES = [
    'https://www.googleapis.com/auth/cloud-platform',
    'https://www.googleapis.com/auth/cloud-vision',
]


def load_version(api_version: str):
    """
    Import the helper module for an API version.

    Raises:
        ValueError: If the version is not one of API_VERSIONS
    """
    if api_version not in API_VERSIONS:
        raise ValueError(
            f"Unsupported Vision API version '{api_version}'. "
            f"Expected one of: {', '.join(API_VERSIONS)}"
        )
    return importlib.import_module(f"vision_helpers.{api_version}")


def build_credentials(service_account_json: Optional[str]):
    """
    Build credentials from a service account JSON string.

    Returns None when no JSON is given so the generated client falls back
    to Application Default Credentials.
    """
    if not service_account_json:
        return None

    if isinstance(service_account_json, str):
        creds_dict = json.loads(service_account_json)
    else:
        creds_dict = service_account_json

    return service_account.Credentials.from_service_account_info(creds_dict, scopes=SCOPES)


def _client_kwargs(config: VisionConfig, credentials: Any) -> dict:
    kwargs = {}
    if credentials is None:
        credentials = build_credentials(config.service_account_json)
    if credentials is not None:
        kwargs["credentials"] = credentials
    if config.api_endpoint:
        kwargs["client_options"] = ClientOptions(api_endpoint=config.api_endpoint)
    return kwargs


def create_image_annotator_client(
    config: VisionConfig,
    use_async: bool = False,
    credentials: Any = None,
):
    """
    Create a helper-enabled ImageAnnotator client for the configured version.

    Args:
        config: Client configuration
        use_async: Return the asyncio client instead of the synchronous one
        credentials: Explicit credentials, overriding the configured ones
    """
    module = load_version(config.api_version)
    client_cls = module.ImageAnnotatorAsyncClient if use_async else module.ImageAnnotatorClient
    client = client_cls(**_client_kwargs(config, credentials))
    logger.info(f"Created {client_cls.__name__} for Vision API {config.api_version}")
    return client


def create_product_search_client(config: VisionConfig, credentials: Any = None):
    """
    Create a ProductSearch client for the configured version.

    Raises:
        ValueError: If the version has no product search API
    """
    module = load_version(config.api_version)
    client_cls = getattr(module, "ProductSearchClient", None)
    if client_cls is None:
        raise ValueError(f"Product search is not available in Vision API {config.api_version}")

    client = client_cls(**_client_kwargs(config, credentials))
    logger.info(f"Created ProductSearchClient for Vision API {config.api_version}")
    return client
