"""Helpers shared by the GCP sample services."""

import logging
from typing import Callable, TypeVar

from google.auth.exceptions import DefaultCredentialsError

from cloud_samples.config.settings import ensure_credentials
from cloud_samples.exceptions import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)

GCS_SCHEME = "gs://"

ClientT = TypeVar("ClientT")


def create_client(client_factory: Callable[[], ClientT]) -> ClientT:
    """Export configured credentials and build a Google Cloud client."""
    ensure_credentials()
    try:
        return client_factory()
    except DefaultCredentialsError as e:
        logger.error("Authentication failed - no valid credentials found")
        raise ConfigurationError(
            "Google Cloud credentials not found. Set GOOGLE_APPLICATION_CREDENTIALS "
            "or run `gcloud auth application-default login`."
        ) from e


def gcs_uri(bucket_name: str, file_name: str) -> str:
    """Build a gs:// URI for an object in a Cloud Storage bucket."""
    return f"{GCS_SCHEME}{bucket_name}/{file_name}"


def validate_gcs_uri(uri: str) -> str:
    if not uri.startswith(GCS_SCHEME) or len(uri) <= len(GCS_SCHEME):
        raise InvalidArgumentError(f"Expected a Cloud Storage URI like gs://bucket/file, got: {uri}")
    return uri
