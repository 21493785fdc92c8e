"""
GCP Pub/Sub Subscription Service

Handles subscription administration, pulling, ordered delivery and
subscription IAM policies.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Optional

from google.cloud import pubsub_v1

from cloud_samples.config.constants import (
    ORDERED_COUNTER_ATTRIBUTE,
    ORDERED_COUNTER_START,
    PULL_MAX_MESSAGES,
    PUSH_ENDPOINT_TEMPLATE,
    SUBSCRIPTION_ACK_DEADLINE_SEC,
    SUBSCRIPTION_TEST_PERMISSIONS,
)
from cloud_samples.config.settings import require_project_id
from cloud_samples.services.gcp.common import create_client
from cloud_samples.services.gcp.pubsub_common import (
    PulledMessage,
    sample_policy,
    subscription_path,
    topic_path,
)

logger = logging.getLogger(__name__)


@dataclass
class SubscriptionInfo:
    """Subscription metadata shown by the `get` command."""
    name: str
    topic: str
    push_endpoint: str
    ack_deadline_seconds: int

    def format(self) -> str:
        return (
            f"Subscription: {self.name}\n"
            f"Topic: {self.topic}\n"
            f"Push config: {self.push_endpoint}\n"
            f"Ack deadline: {self.ack_deadline_seconds}s"
        )


class GCPSubscriptionService:
    """Handles Pub/Sub subscription operations."""

    def __init__(self, project_id: Optional[str] = None):
        self.project_id = require_project_id(project_id)
        self._subscriber = create_client(pubsub_v1.SubscriberClient)
        self._publisher = None

    @property
    def publisher(self) -> pubsub_v1.PublisherClient:
        # Only needed to list the subscriptions of a topic
        if self._publisher is None:
            self._publisher = create_client(pubsub_v1.PublisherClient)
        return self._publisher

    def subscription_path(self, subscription_name: str) -> str:
        return subscription_path(self.project_id, subscription_name)

    def topic_path(self, topic_name: str) -> str:
        return topic_path(self.project_id, topic_name)

    def list_subscriptions(self) -> list[str]:
        """Full names of all subscriptions in the project."""
        subscriptions = self._subscriber.list_subscriptions(
            request={"project": f"projects/{self.project_id}"}
        )
        return [subscription.name for subscription in subscriptions]

    def list_topic_subscriptions(self, topic_name: str) -> list[str]:
        """Full names of the subscriptions attached to a topic."""
        return list(
            self.publisher.list_topic_subscriptions(request={"topic": self.topic_path(topic_name)})
        )

    def create_subscription(
        self,
        topic_name: str,
        subscription_name: str,
        push_endpoint: Optional[str] = None,
    ) -> str:
        path = self.subscription_path(subscription_name)
        request = {
            "name": path,
            "topic": self.topic_path(topic_name),
            "ack_deadline_seconds": SUBSCRIPTION_ACK_DEADLINE_SEC,
        }
        if push_endpoint:
            request["push_config"] = {"push_endpoint": push_endpoint}

        self._subscriber.create_subscription(request=request)
        logger.info(f"✅ Created subscription {path} on {topic_name}")
        return path

    def create_push_subscription(self, topic_name: str, subscription_name: str) -> str:
        """Create a subscription that pushes to the project's App Engine /push handler."""
        endpoint = PUSH_ENDPOINT_TEMPLATE.format(project_id=self.project_id)
        return self.create_subscription(topic_name, subscription_name, push_endpoint=endpoint)

    def delete_subscription(self, subscription_name: str) -> str:
        path = self.subscription_path(subscription_name)
        self._subscriber.delete_subscription(request={"subscription": path})
        logger.info(f"🗑️ Deleted subscription {path}")
        return path

    def get_subscription(self, subscription_name: str) -> SubscriptionInfo:
        subscription = self._subscriber.get_subscription(
            request={"subscription": self.subscription_path(subscription_name)}
        )
        return SubscriptionInfo(
            name=subscription.name,
            topic=subscription.topic,
            push_endpoint=subscription.push_config.push_endpoint,
            ack_deadline_seconds=subscription.ack_deadline_seconds,
        )

    def pull(self, subscription_name: str, ack: bool = True) -> list[PulledMessage]:
        """Pull one batch of messages, acknowledging them unless ack is False."""
        response = self._subscriber.pull(
            request={
                "subscription": self.subscription_path(subscription_name),
                "max_messages": PULL_MAX_MESSAGES,
            }
        )
        messages = [PulledMessage.from_received(received) for received in response.received_messages]
        logger.info(f"📥 Pulled {len(messages)} message(s) from {subscription_name}")

        if ack:
            self.acknowledge(subscription_name, [message.ack_id for message in messages])
        return messages

    def acknowledge(self, subscription_name: str, ack_ids: list[str]) -> None:
        if not ack_ids:
            return
        self._subscriber.acknowledge(
            request={
                "subscription": self.subscription_path(subscription_name),
                "ack_ids": ack_ids,
            }
        )

    def get_policy(self, subscription_name: str):
        return self._subscriber.get_iam_policy(
            request={"resource": self.subscription_path(subscription_name)}
        )

    def set_policy(self, subscription_name: str):
        """Replace the subscription policy with the sample editor/viewer bindings."""
        return self._subscriber.set_iam_policy(
            request={
                "resource": self.subscription_path(subscription_name),
                "policy": sample_policy(),
            }
        )

    def test_permissions(self, subscription_name: str) -> list[str]:
        response = self._subscriber.test_iam_permissions(
            request={
                "resource": self.subscription_path(subscription_name),
                "permissions": SUBSCRIPTION_TEST_PERMISSIONS,
            }
        )
        return list(response.permissions)


class OrderedMessagePuller:
    """
    Delivers messages from one subscription in counterId order.

    Messages that arrive ahead of the next expected counter are held
    (unacknowledged) until the gap is filled by a later pull. Messages
    whose counter was already delivered are acknowledged and dropped.

    Attributes:
        next_counter: counterId of the next message to deliver
        outstanding: held messages keyed by counterId
    """

    def __init__(self, service: GCPSubscriptionService, subscription_name: str):
        self.service = service
        self.subscription_name = subscription_name
        self.next_counter = ORDERED_COUNTER_START
        self.outstanding: dict[int, PulledMessage] = {}

    def pull(self) -> list[PulledMessage]:
        """Pull a batch and return the messages that are now deliverable, in order."""
        for message in self.service.pull(self.subscription_name, ack=False):
            try:
                counter = int(message.attributes[ORDERED_COUNTER_ATTRIBUTE])
            except (KeyError, ValueError):
                logger.warning(f"⚠️ Dropping message {message.message_id} without a numeric {ORDERED_COUNTER_ATTRIBUTE}")
                self.service.acknowledge(self.subscription_name, [message.ack_id])
                continue
            held = self.outstanding.get(counter)
            if held is not None and held.ack_id != message.ack_id:
                # Only one copy per counter is kept
                self.service.acknowledge(self.subscription_name, [held.ack_id])
            self.outstanding[counter] = message

        delivered = []
        for counter in sorted(self.outstanding):
            if counter > self.next_counter:
                break

            message = self.outstanding.pop(counter)
            self.service.acknowledge(self.subscription_name, [message.ack_id])
            if counter == self.next_counter:
                delivered.append(message)
                self.next_counter += 1

        return delivered


@functools.lru_cache(maxsize=None)
def _get_ordered_puller(subscription_name: str) -> OrderedMessagePuller:
    return OrderedMessagePuller(GCPSubscriptionService(), subscription_name)


def pull_ordered_messages(subscription_name: str) -> list[PulledMessage]:
    """Ordered pull through a process-wide puller so state persists between calls."""
    return _get_ordered_puller(subscription_name).pull()
