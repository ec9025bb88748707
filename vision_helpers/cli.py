"""
Command line samples for the Vision helper clients.

    vision-helpers detect logo_detection ./logo.png
    vision-helpers detect label_detection https://example.com/cat.jpg --version v1p3beta1
    vision-helpers import-product-sets my-project us-west1 gs://bucket/products.csv
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from google.api_core.exceptions import GoogleAPICallError

from .config.settings import get_vision_config
from .core.client_factory import (
    API_VERSIONS,
    create_image_annotator_client,
    create_product_search_client,
    load_version,
)
from .product_search import import_product_sets

logger = logging.getLogger(__name__)

PRODUCT_SEARCH_VERSION = "v1p3beta1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vision-helpers",
        epilog="For more information, see https://cloud.google.com/vision/docs",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="Run a single feature on an image")
    detect.add_argument("feature", help="Feature method name, e.g. logo_detection")
    detect.add_argument("image", help="Local file path or image URL")
    detect.add_argument("--version", choices=API_VERSIONS, default=None, help="Vision API version")
    detect.add_argument("--max-results", type=int, default=None)

    importer = subparsers.add_parser("import-product-sets", help="Import product sets from a CSV in Cloud Storage")
    importer.add_argument("project_id")
    importer.add_argument("location")
    importer.add_argument("gcs_uri")
    importer.add_argument("--version", choices=API_VERSIONS, default=PRODUCT_SEARCH_VERSION)

    return parser


def run_detect(args: argparse.Namespace) -> int:
    config = get_vision_config()
    if args.version:
        config = dataclasses.replace(config, api_version=args.version)

    module = load_version(config.api_version)
    if args.feature not in module.ImageAnnotatorClient.supported_features():
        logger.error(
            f"Feature '{args.feature}' is not available in Vision API {config.api_version}. "
            f"Available: {', '.join(module.ImageAnnotatorClient.supported_features())}"
        )
        return 2

    client = create_image_annotator_client(config)
    detect = getattr(client, args.feature)

    call_options = {}
    if config.timeout is not None:
        call_options["timeout"] = config.timeout

    response = detect(args.image, max_results=args.max_results, **call_options)
    print(type(response).to_json(response))
    return 0


def run_import_product_sets(args: argparse.Namespace) -> int:
    config = dataclasses.replace(get_vision_config(), api_version=args.version)
    client = create_product_search_client(config)
    import_product_sets(client, args.project_id, args.location, args.gcs_uri, timeout=config.timeout)
    return 0


COMMANDS = {
    "detect": run_detect,
    "import-product-sets": run_import_product_sets,
}


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        return COMMANDS[args.command](args)
    except GoogleAPICallError as e:
        logger.error(f"Vision API call failed: {e}")
        return 1
    except (ValueError, OSError) as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
