from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from cloud_samples.cli import topics as topics_cli
from cloud_samples.services.gcp.pubsub_common import sample_policy
from cloud_samples.services.gcp.pubsub_topics import GCPTopicService, publish_ordered_message

FULL_TOPIC = "projects/test-project/topics/my-topic"


def _published(message_id):
    future = Mock()
    future.result.return_value = message_id
    return future


def test_create_topic(mock_publisher, capsys):
    assert topics_cli.main(["create", "my-topic"]) == 0

    mock_publisher.create_topic.assert_called_once_with(request={"name": FULL_TOPIC})
    assert capsys.readouterr().out == f"Topic {FULL_TOPIC} created.\n"


def test_delete_topic(mock_publisher, capsys):
    assert topics_cli.main(["delete", "my-topic"]) == 0

    mock_publisher.delete_topic.assert_called_once_with(request={"topic": FULL_TOPIC})
    assert capsys.readouterr().out == f"Topic {FULL_TOPIC} deleted.\n"


def test_list_topics(mock_publisher, capsys):
    mock_publisher.list_topics.return_value = [
        SimpleNamespace(name="projects/test-project/topics/a"),
        SimpleNamespace(name="projects/test-project/topics/b"),
    ]

    assert topics_cli.main(["list"]) == 0

    mock_publisher.list_topics.assert_called_once_with(request={"project": "projects/test-project"})
    assert capsys.readouterr().out == (
        "Topics:\nprojects/test-project/topics/a\nprojects/test-project/topics/b\n"
    )


def test_explicit_project_id(mock_publisher, capsys):
    assert topics_cli.main(["--project-id", "other", "create", "my-topic"]) == 0

    assert "Topic projects/other/topics/my-topic created." in capsys.readouterr().out


def test_publish_simple_message(mock_publisher, capsys):
    mock_publisher.publish.return_value = _published("42")

    assert topics_cli.main(["publish", "my-topic", "Hello, world!"]) == 0

    mock_publisher.publish.assert_called_once_with(FULL_TOPIC, b"Hello, world!")
    assert capsys.readouterr().out == "Message 42 published.\n"


def test_publish_json_message(mock_publisher):
    mock_publisher.publish.return_value = _published("43")

    topics_cli.main(["publish", "my-topic", '{"data": "Hello, world!"}'])

    mock_publisher.publish.assert_called_once_with(FULL_TOPIC, b'{"data":"Hello, world!"}')


def test_ordered_publish_increments_counter(mock_publisher):
    mock_publisher.publish.side_effect = [_published("1"), _published("2")]
    service = GCPTopicService()

    service.publish_ordered_message("my-topic", "Hello, world!")
    service.publish_ordered_message("my-topic", "Hello, world!")

    calls = mock_publisher.publish.call_args_list
    assert calls[0].kwargs == {"counterId": "1"}
    assert calls[1].kwargs == {"counterId": "2"}
    assert service.publish_counter == 3


def test_ordered_publish_keeps_counter_on_failure(mock_publisher):
    failed = Mock()
    failed.result.side_effect = RuntimeError("publish failed")
    mock_publisher.publish.side_effect = [failed, _published("1")]
    service = GCPTopicService()

    with pytest.raises(RuntimeError):
        service.publish_ordered_message("my-topic", "Hello")
    service.publish_ordered_message("my-topic", "Hello")

    assert mock_publisher.publish.call_args_list[1].kwargs == {"counterId": "1"}


def test_module_level_ordered_publish_shares_counter(mock_publisher):
    mock_publisher.publish.side_effect = [_published("1"), _published("2")]

    publish_ordered_message("my-topic", "Hello")
    publish_ordered_message("my-topic", "Hello")

    assert [c.kwargs["counterId"] for c in mock_publisher.publish.call_args_list] == ["1", "2"]


def test_set_policy(mock_publisher, capsys):
    mock_publisher.set_iam_policy.return_value = sample_policy()

    assert topics_cli.main(["set-policy", "my-topic"]) == 0

    request = mock_publisher.set_iam_policy.call_args.kwargs["request"]
    assert request["resource"] == FULL_TOPIC
    assert request["policy"] == sample_policy()
    assert capsys.readouterr().out == (
        'Updated policy for topic: [{"role":"roles/pubsub.editor","members":["group:cloud-logs@google.com"]},'
        '{"role":"roles/pubsub.viewer","members":["allUsers"]}]\n'
    )


def test_get_policy(mock_publisher, capsys):
    mock_publisher.get_iam_policy.return_value = sample_policy()

    topics_cli.main(["get-policy", "my-topic"])

    mock_publisher.get_iam_policy.assert_called_once_with(request={"resource": FULL_TOPIC})
    out = capsys.readouterr().out
    assert out.startswith('Policy for topic: [{"role":"roles/pubsub.editor"')
    assert out.endswith("}].\n")


def test_test_permissions(mock_publisher, capsys):
    mock_publisher.test_iam_permissions.return_value = SimpleNamespace(
        permissions=["pubsub.topics.publish"]
    )

    topics_cli.main(["test-permissions", "my-topic"])

    request = mock_publisher.test_iam_permissions.call_args.kwargs["request"]
    assert request["permissions"] == [
        "pubsub.topics.attachSubscription",
        "pubsub.topics.publish",
        "pubsub.topics.update",
    ]
    assert capsys.readouterr().out == 'Tested permissions for topic: ["pubsub.topics.publish"]\n'
