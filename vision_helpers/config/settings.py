"""
Configuration settings for the Vision helper clients.

Reads environment variables and fetches service account credentials
from Google Secret Manager when no local override is present.
"""

import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v1"

# Secret Manager cache to avoid repeated API calls
_secrets_cache: Dict[str, str] = {}


def get_secret(secret_name: str, project_id: Optional[str] = None) -> Optional[str]:
    """
    Fetch a secret from Google Secret Manager.

    Args:
        secret_name: Name of the secret (e.g., 'vision-service-account')
        project_id: GCP project ID. If None, uses GCP_PROJECT_ID env var.

    Returns:
        Secret value as string, or None if not found.
    """
    if secret_name in _secrets_cache:
        return _secrets_cache[secret_name]

    # Allow environment variable override for local development
    env_override = os.getenv(secret_name.upper().replace('-', '_'))
    if env_override:
        _secrets_cache[secret_name] = env_override
        return env_override

    project = project_id or os.getenv('GCP_PROJECT_ID')
    if not project:
        logger.warning(f"No project configured, cannot fetch secret '{secret_name}'")
        return None

    try:
        from google.cloud import secretmanager

        client = secretmanager.SecretManagerServiceClient()
        name = f"projects/{project}/secrets/{secret_name}/versions/latest"

        response = client.access_secret_version(request={"name": name})
        secret_value = response.payload.data.decode("UTF-8")

        _secrets_cache[secret_name] = secret_value
        logger.info(f"Loaded secret '{secret_name}' from Secret Manager")
        return secret_value

    except Exception as e:
        logger.warning(f"Could not fetch secret '{secret_name}' from Secret Manager: {e}")
        return None


@dataclass
class VisionConfig:
    """Cloud Vision client configuration."""
    project_id: Optional[str] = None
    location: str = "us-west1"  # Product search region
    api_version: str = DEFAULT_API_VERSION
    api_endpoint: Optional[str] = None  # e.g. "eu-vision.googleapis.com"
    service_account_json: Optional[str] = None  # None means Application Default Credentials
    timeout: Optional[float] = None


def _load_service_account_json(project_id: Optional[str]) -> Optional[str]:
    # Option 1: Direct JSON string in env var
    if os.getenv('VISION_SERVICE_ACCOUNT_JSON'):
        return os.getenv('VISION_SERVICE_ACCOUNT_JSON')

    # Option 2: Path to JSON file
    sa_file_path = os.getenv('VISION_SERVICE_ACCOUNT_FILE')
    if sa_file_path:
        if Path(sa_file_path).exists():
            with open(sa_file_path, 'r') as f:
                logger.info(f"Loaded service account from file: {sa_file_path}")
                return f.read()
        logger.warning(f"Service account file not found: {sa_file_path}")
        return None

    # Option 3: Secret Manager
    secret_name = os.getenv('VISION_SERVICE_ACCOUNT_SECRET')
    if secret_name:
        return get_secret(secret_name, project_id)

    # Option 4: Application Default Credentials
    return None


def get_vision_config() -> VisionConfig:
    """
    Create client configuration from environment variables and Secret Manager.

    Environment variables:
        GCP_PROJECT_ID: Google Cloud project ID
        GCP_LOCATION: Region for product search resources (default: us-west1)
        VISION_API_VERSION: Client version to use (default: v1)
        VISION_API_ENDPOINT: Regional API endpoint override
        VISION_TIMEOUT: Per-call timeout in seconds
        VISION_SERVICE_ACCOUNT_JSON: Service account JSON string
        VISION_SERVICE_ACCOUNT_FILE: Path to a service account JSON file
        VISION_SERVICE_ACCOUNT_SECRET: Secret Manager secret holding the JSON
    """
    project_id = os.getenv('GCP_PROJECT_ID')
    timeout = os.getenv('VISION_TIMEOUT')

    return VisionConfig(
        project_id=project_id,
        location=os.getenv('GCP_LOCATION', 'us-west1'),
        api_version=os.getenv('VISION_API_VERSION', DEFAULT_API_VERSION),
        api_endpoint=os.getenv('VISION_API_ENDPOINT') or None,
        service_account_json=_load_service_account_json(project_id),
        timeout=float(timeout) if timeout else None,
    )
