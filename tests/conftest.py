"""
Pytest fixtures for the Vision helpers test suite.
"""

import pytest
from google.auth.credentials import AnonymousCredentials
from google.cloud import vision_v1

from vision_helpers import v1, v1p1beta1, v1p3beta1


LOGO_RESPONSE = {"logo_annotations": [{"description": "Google"}]}


@pytest.fixture
def credentials():
    return AnonymousCredentials()


@pytest.fixture
def client(credentials):
    """Helper-enabled v1 client; no RPC is sent unless a test patches one in."""
    return v1.ImageAnnotatorClient(credentials=credentials)


@pytest.fixture
def beta1_client(credentials):
    return v1p1beta1.ImageAnnotatorClient(credentials=credentials)


@pytest.fixture
def beta3_client(credentials):
    return v1p3beta1.ImageAnnotatorClient(credentials=credentials)


@pytest.fixture
def logo_batch_response():
    return vision_v1.BatchAnnotateImagesResponse(responses=[LOGO_RESPONSE])


@pytest.fixture
def logo_response():
    return vision_v1.AnnotateImageResponse(LOGO_RESPONSE)


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "image.jpg"
    path.write_bytes(b"fakeImage")
    return path
