"""
Product-set import tests against a mocked ProductSearchClient.
"""

import logging
from unittest import mock

from google.cloud import vision_v1p3beta1

from vision_helpers.product_search import import_product_sets


def make_client(response):
    client = mock.Mock()
    client.common_location_path.return_value = "projects/my-project/locations/us-west1"
    operation = client.import_product_sets.return_value
    operation.operation.name = "projects/my-project/locations/us-west1/operations/123"
    operation.result.return_value = response
    return client


def test_sends_csv_input_config():
    response = vision_v1p3beta1.ImportProductSetsResponse()
    client = make_client(response)

    result = import_product_sets(client, "my-project", "us-west1", "gs://bucket/products.csv")

    assert result is response
    client.common_location_path.assert_called_once_with("my-project", "us-west1")
    client.import_product_sets.assert_called_once_with(
        parent="projects/my-project/locations/us-west1",
        input_config={"gcs_source": {"csv_file_uri": "gs://bucket/products.csv"}},
    )
    client.import_product_sets.return_value.result.assert_called_once_with(timeout=None)


def test_reports_each_status(caplog):
    response = vision_v1p3beta1.ImportProductSetsResponse(
        reference_images=[{"name": "ref-1", "uri": "gs://bucket/shoe.jpg"}],
        statuses=[{"code": 0}, {"code": 3, "message": "bad line"}],
    )
    client = make_client(response)

    with caplog.at_level(logging.INFO, logger="vision_helpers.product_search"):
        import_product_sets(client, "my-project", "us-west1", "gs://bucket/products.csv", timeout=60)

    messages = [r.getMessage() for r in caplog.records]
    assert any("operations/123" in m for m in messages)
    assert any("ref-1" in m for m in messages)
    assert messages.count("No reference image.") == 1
    client.import_product_sets.return_value.result.assert_called_once_with(timeout=60)


def test_failed_line_before_imported_line(caplog):
    response = vision_v1p3beta1.ImportProductSetsResponse(
        reference_images=[{"name": "ref-2"}, {"name": "ref-4"}],
        statuses=[{"code": 3, "message": "bad line"}, {"code": 0}, {"code": 5}, {"code": 0}],
    )
    client = make_client(response)

    with caplog.at_level(logging.INFO, logger="vision_helpers.product_search"):
        result = import_product_sets(client, "my-project", "us-west1", "gs://bucket/products.csv")

    assert result is response
    messages = [r.getMessage() for r in caplog.records]
    image_lines = [m for m in messages if m.startswith("Reference image:")]
    assert len(image_lines) == 2
    assert "ref-2" in image_lines[0]
    assert "ref-4" in image_lines[1]
    assert messages.count("No reference image.") == 2
