"""
Sample-wide constants for request defaults and output formatting.

This file centralizes the fixed values the samples send to the APIs
so that commands and tests agree on them.

Note: Environment-dependent settings (project id, credentials) belong in settings.py.
"""

# ==============================================================================
# LOGGING
# ==============================================================================

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ==============================================================================
# PUB/SUB
# ==============================================================================

# Ack deadline for newly created subscriptions (seconds)
SUBSCRIPTION_ACK_DEADLINE_SEC: int = 10

# Push endpoint template for push subscriptions
PUSH_ENDPOINT_TEMPLATE: str = "https://{project_id}.appspot.com/push"

# Maximum messages returned by a single pull
PULL_MAX_MESSAGES: int = 100

# Attribute carrying the publish sequence number for ordered messages
ORDERED_COUNTER_ATTRIBUTE: str = "counterId"

# First counter value of an ordered publish/pull sequence
ORDERED_COUNTER_START: int = 1

# IAM bindings written by set-policy, in order (role, members)
SAMPLE_POLICY_BINDINGS: list[tuple[str, list[str]]] = [
    ("roles/pubsub.editor", ["group:cloud-logs@google.com"]),
    ("roles/pubsub.viewer", ["allUsers"]),
]

TOPIC_TEST_PERMISSIONS: list[str] = [
    "pubsub.topics.attachSubscription",
    "pubsub.topics.publish",
    "pubsub.topics.update",
]

SUBSCRIPTION_TEST_PERMISSIONS: list[str] = [
    "pubsub.subscriptions.consume",
    "pubsub.subscriptions.update",
]

# ==============================================================================
# SPEECH-TO-TEXT
# ==============================================================================

DEFAULT_AUDIO_ENCODING: str = "LINEAR16"

DEFAULT_SAMPLE_RATE_HZ: int = 16000

DEFAULT_LANGUAGE_CODE: str = "en-US"

# Bytes per streaming request (~100ms of 16kHz 16-bit mono audio)
STREAM_CHUNK_BYTES: int = 3200

# Long-running recognition wait (seconds)
LONG_RUNNING_TIMEOUT_SEC: float = 300.0

# ==============================================================================
# TRANSLATION
# ==============================================================================

# Short model names accepted on the command line -> model path suffix
TRANSLATION_MODELS: dict[str, str] = {
    "nmt": "general/nmt",
    "base": "general/base",
}

# ==============================================================================
# NATURAL LANGUAGE
# ==============================================================================

# Entity type -> output group
ENTITY_GROUPS: dict[str, str] = {
    "PERSON": "people",
    "LOCATION": "places",
    "ORGANIZATION": "organizations",
    "EVENT": "events",
    "WORK_OF_ART": "art",
    "CONSUMER_GOOD": "goods",
}

DEFAULT_ENTITY_GROUP: str = "other"
