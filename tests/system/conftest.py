"""
End-to-end fixtures.

These tests talk to live Google Cloud services and are skipped unless a
project id and application default credentials are available:

    export GOOGLE_PROJECT_ID=my-project
    export GOOGLE_APPLICATION_CREDENTIALS=/path/to/key.json
    pytest -m system
"""

import google.auth
import pytest
from google.auth.exceptions import DefaultCredentialsError

from cloud_samples.config.settings import ensure_credentials, settings


def _live_environment_missing() -> str | None:
    if not settings.GOOGLE_PROJECT_ID:
        return "GOOGLE_PROJECT_ID is not set"
    ensure_credentials()
    try:
        google.auth.default()
    except DefaultCredentialsError as e:
        return f"no application default credentials: {e}"
    return None


@pytest.fixture(scope="session", autouse=True)
def live_environment():
    reason = _live_environment_missing()
    if reason:
        pytest.skip(f"system tests need live Google Cloud access ({reason})")


@pytest.fixture(scope="session")
def project_id() -> str:
    return settings.GOOGLE_PROJECT_ID
