from types import SimpleNamespace
from typing import Optional


def received_message(message_id: str, data: bytes, attributes: Optional[dict] = None, ack_id: Optional[str] = None):
    # Shape of google.pubsub_v1.ReceivedMessage as the services read it
    return SimpleNamespace(
        ack_id=ack_id or f"ack-{message_id}",
        message=SimpleNamespace(
            message_id=message_id,
            data=data,
            attributes=attributes or {},
        ),
    )


def ordered_message(message_id: str, counter: int, data: bytes = b"Hello, world!"):
    return received_message(message_id, data, {"counterId": str(counter)})


def pull_response(*messages):
    return SimpleNamespace(received_messages=list(messages))
