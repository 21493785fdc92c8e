"""
GCP Pub/Sub Topic Service

Handles topic administration, publishing and topic IAM policies.
"""

import functools
import logging
from typing import Optional

from google.cloud import pubsub_v1

from cloud_samples.config.constants import (
    ORDERED_COUNTER_ATTRIBUTE,
    ORDERED_COUNTER_START,
    TOPIC_TEST_PERMISSIONS,
)
from cloud_samples.config.settings import require_project_id
from cloud_samples.services.gcp.common import create_client
from cloud_samples.services.gcp.pubsub_common import (
    encode_message_data,
    sample_policy,
    topic_path,
)

logger = logging.getLogger(__name__)


class GCPTopicService:
    """Handles Pub/Sub topic operations."""

    def __init__(self, project_id: Optional[str] = None):
        self.project_id = require_project_id(project_id)
        self._publisher = create_client(pubsub_v1.PublisherClient)
        # Sequence number attached to the next ordered message
        self.publish_counter = ORDERED_COUNTER_START

    def topic_path(self, topic_name: str) -> str:
        return topic_path(self.project_id, topic_name)

    def list_topics(self) -> list[str]:
        """Full names of all topics in the project."""
        topics = self._publisher.list_topics(request={"project": f"projects/{self.project_id}"})
        return [topic.name for topic in topics]

    def create_topic(self, topic_name: str) -> str:
        path = self.topic_path(topic_name)
        self._publisher.create_topic(request={"name": path})
        logger.info(f"✅ Created topic {path}")
        return path

    def delete_topic(self, topic_name: str) -> str:
        path = self.topic_path(topic_name)
        self._publisher.delete_topic(request={"topic": path})
        logger.info(f"🗑️ Deleted topic {path}")
        return path

    def publish_message(self, topic_name: str, message: str, **attributes: str) -> str:
        """Publish one message and wait for its server-assigned id."""
        future = self._publisher.publish(
            self.topic_path(topic_name),
            encode_message_data(message),
            **attributes,
        )
        message_id = future.result()
        logger.info(f"📨 Published message {message_id} to {topic_name}")
        return message_id

    def publish_ordered_message(self, topic_name: str, message: str) -> str:
        """
        Publish a message tagged with the next sequence number.

        The counter only advances once the publish succeeds, so a failed
        publish is retried with the same counterId.
        """
        message_id = self.publish_message(
            topic_name,
            message,
            **{ORDERED_COUNTER_ATTRIBUTE: str(self.publish_counter)},
        )
        self.publish_counter += 1
        return message_id

    def get_policy(self, topic_name: str):
        return self._publisher.get_iam_policy(request={"resource": self.topic_path(topic_name)})

    def set_policy(self, topic_name: str):
        """Replace the topic policy with the sample editor/viewer bindings."""
        return self._publisher.set_iam_policy(
            request={"resource": self.topic_path(topic_name), "policy": sample_policy()}
        )

    def test_permissions(self, topic_name: str) -> list[str]:
        """Which of the sample permissions the caller holds on the topic."""
        response = self._publisher.test_iam_permissions(
            request={
                "resource": self.topic_path(topic_name),
                "permissions": TOPIC_TEST_PERMISSIONS,
            }
        )
        return list(response.permissions)


@functools.lru_cache(maxsize=1)
def _get_topic_service() -> GCPTopicService:
    return GCPTopicService()


def publish_ordered_message(topic_name: str, message: str) -> str:
    """Publish through a process-wide service so the counter persists between calls."""
    return _get_topic_service().publish_ordered_message(topic_name, message)
