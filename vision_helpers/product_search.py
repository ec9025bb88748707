"""
Bulk product-set import for Vision Product Search.

Imports reference images from a CSV file in Cloud Storage and reports the
per-line result of the long-running operation.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

# google.rpc.Code.OK
STATUS_OK = 0


def import_product_sets(
    client: Any,
    project_id: str,
    location: str,
    gcs_uri: str,
    timeout: Optional[float] = None,
) -> Any:
    """
    Import product sets from a CSV file in Cloud Storage.

    Args:
        client: A ProductSearchClient
        project_id: GCP project ID
        location: Product search region (e.g. us-west1)
        gcs_uri: gs:// URI of the CSV file
        timeout: Seconds to wait for the operation to finish (None waits indefinitely)

    Returns:
        The ImportProductSetsResponse of the finished operation
    """
    parent = client.common_location_path(project_id, location)

    input_config = {
        "gcs_source": {
            "csv_file_uri": gcs_uri,
        },
    }

    operation = client.import_product_sets(parent=parent, input_config=input_config)
    logger.info(f"Processing operation name: {operation.operation.name}")

    response = operation.result(timeout=timeout)
    logger.info("Processing done.")

    # statuses has one entry per CSV line, reference_images only the imported ones
    reference_images = iter(response.reference_images)

    for i, status in enumerate(response.statuses):
        logger.info(f"Status of processing line {i} of the csv: {status}")

        if status.code == STATUS_OK:
            logger.info(f"Reference image: {next(reference_images, None)}")
        else:
            logger.info("No reference image.")

    return response
