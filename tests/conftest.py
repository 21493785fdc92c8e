import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root (1 level up from tests/) to sys.path so tests can import 'cloud_samples'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from cloud_samples.config.settings import settings
from cloud_samples.services.gcp import pubsub_subscriptions, pubsub_topics


TEST_PROJECT = "test-project"


@pytest.fixture(autouse=True)
def offline_settings(request, monkeypatch):
    """Pin settings for unit tests so they never depend on the developer's environment.
    System tests keep the real configuration.
    """
    if request.node.get_closest_marker("system"):
        yield
        return
    monkeypatch.setattr(settings, "GOOGLE_PROJECT_ID", TEST_PROJECT)
    monkeypatch.setattr(settings, "GOOGLE_APPLICATION_CREDENTIALS", None)
    pubsub_topics._get_topic_service.cache_clear()
    pubsub_subscriptions._get_ordered_puller.cache_clear()
    yield
    pubsub_topics._get_topic_service.cache_clear()
    pubsub_subscriptions._get_ordered_puller.cache_clear()


# Each fixture patches a client class and yields the instance the service will create.

@pytest.fixture
def mock_publisher():
    with patch("cloud_samples.services.gcp.pubsub_topics.pubsub_v1.PublisherClient") as client_cls:
        yield client_cls.return_value


@pytest.fixture
def mock_subscriber():
    with patch("cloud_samples.services.gcp.pubsub_subscriptions.pubsub_v1.SubscriberClient") as client_cls:
        yield client_cls.return_value


@pytest.fixture
def mock_speech_client():
    with patch("cloud_samples.services.gcp.speech.speech.SpeechClient") as client_cls:
        yield client_cls.return_value


@pytest.fixture
def mock_translate_client():
    with patch("cloud_samples.services.gcp.translate.translate.TranslationServiceClient") as client_cls:
        yield client_cls.return_value


@pytest.fixture
def mock_language_client():
    with patch("cloud_samples.services.gcp.language.language_v1.LanguageServiceClient") as client_cls:
        yield client_cls.return_value
