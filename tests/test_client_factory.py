"""
Client construction tests.
"""

import asyncio
from unittest import mock

import pytest

from vision_helpers import v1, v1p3beta1
from vision_helpers.config.settings import VisionConfig
from vision_helpers.core import client_factory
from vision_helpers.core.client_factory import (
    build_credentials,
    create_image_annotator_client,
    create_product_search_client,
    load_version,
)


class TestLoadVersion:

    def test_known_versions(self):
        assert load_version("v1") is v1
        assert load_version("v1p3beta1") is v1p3beta1

    def test_unknown_version(self):
        with pytest.raises(ValueError, match="Unsupported Vision API version"):
            load_version("v2")


class TestBuildCredentials:

    def test_none_means_default_credentials(self):
        assert build_credentials(None) is None
        assert build_credentials("") is None

    def test_parses_json(self):
        with mock.patch.object(
            client_factory.service_account.Credentials, "from_service_account_info"
        ) as from_info:
            creds = build_credentials('{"type": "service_account", "client_email": "bogus"}')

        assert creds is from_info.return_value
        from_info.assert_called_once_with(
            {"type": "service_account", "client_email": "bogus"}, scopes=client_factory.SCOPES
        )


class TestCreateClients:

    def test_image_annotator_client(self, credentials):
        client = create_image_annotator_client(VisionConfig(), credentials=credentials)
        assert isinstance(client, v1.ImageAnnotatorClient)
        assert hasattr(client, "logo_detection")

    def test_versioned_client(self, credentials):
        config = VisionConfig(api_version="v1p3beta1")
        client = create_image_annotator_client(config, credentials=credentials)
        assert isinstance(client, v1p3beta1.ImageAnnotatorClient)

    def test_api_endpoint(self, credentials):
        config = VisionConfig(api_endpoint="eu-vision.googleapis.com")
        client = create_image_annotator_client(config, credentials=credentials)
        assert client.api_endpoint == "eu-vision.googleapis.com"

    def test_async_client(self, credentials):
        async def run():
            return create_image_annotator_client(VisionConfig(), use_async=True, credentials=credentials)

        client = asyncio.run(run())
        assert isinstance(client, v1.ImageAnnotatorAsyncClient)

    def test_product_search_client(self, credentials):
        config = VisionConfig(api_version="v1p3beta1")
        client = create_product_search_client(config, credentials=credentials)
        assert isinstance(client, v1p3beta1.ProductSearchClient)

    def test_product_search_unavailable(self, credentials):
        config = VisionConfig(api_version="v1p1beta1")
        with pytest.raises(ValueError, match="Product search is not available"):
            create_product_search_client(config, credentials=credentials)
