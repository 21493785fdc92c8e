import json
import time

import pytest
from google.api_core.exceptions import NotFound
from google.cloud import pubsub_v1

from cloud_samples.services.gcp import pubsub_subscriptions
from tests.system.helpers import run_cli, unique_name

pytestmark = pytest.mark.system

MESSAGE = "Hello, world!"


@pytest.fixture(scope="module")
def publisher():
    return pubsub_v1.PublisherClient()


@pytest.fixture(scope="module")
def subscriber():
    return pubsub_v1.SubscriberClient()


@pytest.fixture(scope="module")
def names(publisher, subscriber, project_id):
    topic_name = unique_name()
    sub_one = unique_name("cloud-samples-test-sub")
    sub_two = unique_name("cloud-samples-test-sub")
    topic_path = publisher.topic_path(project_id, topic_name)
    publisher.create_topic(request={"name": topic_path})

    yield {
        "topic": topic_name,
        "sub_one": sub_one,
        "sub_two": sub_two,
        "full_topic": topic_path,
        "full_one": f"projects/{project_id}/subscriptions/{sub_one}",
        "full_two": f"projects/{project_id}/subscriptions/{sub_two}",
    }

    for sub in (sub_one, sub_two):
        try:
            subscriber.delete_subscription(request={"subscription": subscriber.subscription_path(project_id, sub)})
        except NotFound:
            pass
    try:
        publisher.delete_topic(request={"topic": topic_path})
    except NotFound:
        pass


def _publish(publisher, topic_path, **attributes):
    return publisher.publish(topic_path, MESSAGE.encode("utf-8"), **attributes).result()


def _exists(subscriber, path):
    try:
        subscriber.get_subscription(request={"subscription": path})
    except NotFound:
        return False
    return True


def _bindings(policy):
    return [{"role": b.role, "members": list(b.members)} for b in policy.bindings]


# Tests run in file order: subscriptions are created first and deleted last.

def test_create_subscription(subscriber, names):
    output = run_cli("subscriptions", "create", names["topic"], names["sub_one"])

    assert output == f"Subscription {names['full_one']} created."
    assert _exists(subscriber, names["full_one"])


def test_create_push_subscription(subscriber, names):
    output = run_cli("subscriptions", "create-push", names["topic"], names["sub_two"])

    assert output == f"Subscription {names['full_two']} created."
    assert _exists(subscriber, names["full_two"])


def test_get_subscription(names):
    output = run_cli("subscriptions", "get", names["sub_one"])

    assert output == (
        f"Subscription: {names['full_one']}\n"
        f"Topic: {names['full_topic']}\n"
        "Push config: \n"
        "Ack deadline: 10s"
    )


def test_list_subscriptions(names):
    # Listing is eventually consistent. Give the indexes time to update.
    time.sleep(5)

    output = run_cli("subscriptions", "list")

    assert "Subscriptions:" in output
    assert names["full_one"] in output
    assert names["full_two"] in output


def test_list_topic_subscriptions(names):
    output = run_cli("subscriptions", "list", names["topic"])

    assert f"Subscriptions for {names['topic']}:" in output
    assert names["full_one"] in output
    assert names["full_two"] in output


def test_pull_messages(publisher, names):
    message_id = _publish(publisher, names["full_topic"])

    output = run_cli("subscriptions", "pull", names["sub_one"])

    assert output == f'Received 1 messages.\n* {message_id} "{MESSAGE}" {{}}'


def test_pull_ordered_messages(publisher, names):
    pubsub_subscriptions._get_ordered_puller.cache_clear()
    pull = pubsub_subscriptions.pull_ordered_messages
    topic = names["full_topic"]

    third = _publish(publisher, topic, counterId="3")
    assert pull(names["sub_one"]) == []

    first = _publish(publisher, topic, counterId="1")
    delivered = pull(names["sub_one"])
    assert [m.message_id for m in delivered] == [first]
    assert delivered[0].format_line() == f'* {first} "{MESSAGE}" {{"counterId":"1"}}'

    _publish(publisher, topic, counterId="1")
    second = _publish(publisher, topic, counterId="2")
    delivered = pull(names["sub_one"])
    assert [m.message_id for m in delivered] == [second, third]


def test_set_policy(subscriber, names):
    run_cli("subscriptions", "set-policy", names["sub_one"])

    policy = subscriber.get_iam_policy(request={"resource": names["full_one"]})
    assert _bindings(policy) == [
        {"role": "roles/pubsub.editor", "members": ["group:cloud-logs@google.com"]},
        {"role": "roles/pubsub.viewer", "members": ["allUsers"]},
    ]


def test_get_policy(subscriber, names):
    policy = subscriber.get_iam_policy(request={"resource": names["full_one"]})

    output = run_cli("subscriptions", "get-policy", names["sub_one"])

    assert output == f"Policy for subscription: {json.dumps(_bindings(policy), separators=(',', ':'))}."


def test_test_permissions(names):
    assert "Tested permissions for subscription" in run_cli("subscriptions", "test-permissions", names["sub_one"])


def test_delete_subscription(subscriber, names):
    output = run_cli("subscriptions", "delete", names["sub_one"])

    assert output == f"Subscription {names['full_one']} deleted."
    assert not _exists(subscriber, names["full_one"])
