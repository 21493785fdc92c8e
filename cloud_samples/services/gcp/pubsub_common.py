"""
Pub/Sub helpers shared by the topic and subscription services.

Covers resource names, message payload encoding and the IAM policy
used by the set-policy commands.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from google.iam.v1 import policy_pb2

from cloud_samples.config.constants import SAMPLE_POLICY_BINDINGS


@dataclass
class PulledMessage:
    """A message returned by a pull, with the id needed to acknowledge it."""
    message_id: str
    data: bytes
    attributes: dict[str, str] = field(default_factory=dict)
    ack_id: str = ""

    @classmethod
    def from_received(cls, received) -> "PulledMessage":
        message = received.message
        return cls(
            message_id=message.message_id,
            data=message.data,
            attributes=dict(message.attributes),
            ack_id=received.ack_id,
        )

    def decoded_data(self) -> Any:
        return decode_message_data(self.data)

    def format_line(self) -> str:
        """Render as `* <id> <data-json> <attributes-json>`."""
        return f"* {self.message_id} {to_json(self.decoded_data())} {to_json(self.attributes)}"


def topic_path(project_id: str, topic_name: str) -> str:
    return f"projects/{project_id}/topics/{topic_name}"


def subscription_path(project_id: str, subscription_name: str) -> str:
    return f"projects/{project_id}/subscriptions/{subscription_name}"


def to_json(value: Any) -> str:
    """Compact JSON, without escaping non-ASCII characters."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def encode_message_data(message: str) -> bytes:
    """
    Encode a command-line message for publishing.

    Text that parses as JSON is re-serialized compactly; anything else
    is sent as-is.
    """
    try:
        payload = json.loads(message)
    except ValueError:
        return message.encode("utf-8")
    return to_json(payload).encode("utf-8")


def decode_message_data(data: bytes) -> Any:
    text = data.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


def sample_policy() -> policy_pb2.Policy:
    """The policy written by the set-policy commands."""
    return policy_pb2.Policy(
        bindings=[
            policy_pb2.Binding(role=role, members=members)
            for role, members in SAMPLE_POLICY_BINDINGS
        ]
    )


def bindings_json(policy: policy_pb2.Policy) -> str:
    return to_json([
        {"role": binding.role, "members": list(binding.members)}
        for binding in policy.bindings
    ])
