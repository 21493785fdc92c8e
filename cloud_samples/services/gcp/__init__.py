"""
GCP Services Package

Exports the individual services.
"""

from cloud_samples.services.gcp.language import GCPLanguageService
from cloud_samples.services.gcp.pubsub_subscriptions import (
    GCPSubscriptionService,
    OrderedMessagePuller,
    SubscriptionInfo,
    pull_ordered_messages,
)
from cloud_samples.services.gcp.pubsub_topics import GCPTopicService, publish_ordered_message
from cloud_samples.services.gcp.speech import GCPSpeechService
from cloud_samples.services.gcp.translate import GCPTranslationService

__all__ = [
    "GCPLanguageService",
    "GCPSubscriptionService",
    "GCPSpeechService",
    "GCPTopicService",
    "GCPTranslationService",
    "OrderedMessagePuller",
    "SubscriptionInfo",
    "publish_ordered_message",
    "pull_ordered_messages",
]
