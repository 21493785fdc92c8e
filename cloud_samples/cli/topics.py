"""
Pub/Sub topics sample.

Usage:
    pubsub-topics list
    pubsub-topics create my-topic
    pubsub-topics publish my-topic "Hello, world!"
    pubsub-topics publish my-topic '{"data": "Hello, world!"}'
    pubsub-topics get-policy my-topic
"""

import argparse
import sys

from cloud_samples.cli.common import add_project_argument, run
from cloud_samples.services.gcp.pubsub_common import bindings_json, to_json
from cloud_samples.services.gcp.pubsub_topics import GCPTopicService


def _list(args):
    topics = GCPTopicService(args.project_id).list_topics()
    print("Topics:")
    for name in topics:
        print(name)


def _create(args):
    path = GCPTopicService(args.project_id).create_topic(args.topic_name)
    print(f"Topic {path} created.")


def _delete(args):
    path = GCPTopicService(args.project_id).delete_topic(args.topic_name)
    print(f"Topic {path} deleted.")


def _publish(args):
    message_id = GCPTopicService(args.project_id).publish_message(args.topic_name, args.message)
    print(f"Message {message_id} published.")


def _publish_ordered(args):
    message_id = GCPTopicService(args.project_id).publish_ordered_message(args.topic_name, args.message)
    print(f"Message {message_id} published.")


def _get_policy(args):
    policy = GCPTopicService(args.project_id).get_policy(args.topic_name)
    print(f"Policy for topic: {bindings_json(policy)}.")


def _set_policy(args):
    policy = GCPTopicService(args.project_id).set_policy(args.topic_name)
    print(f"Updated policy for topic: {bindings_json(policy)}")


def _test_permissions(args):
    permissions = GCPTopicService(args.project_id).test_permissions(args.topic_name)
    print(f"Tested permissions for topic: {to_json(permissions)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pubsub-topics",
        description="Manage and publish to Google Cloud Pub/Sub topics.",
    )
    add_project_argument(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    sp = subparsers.add_parser("list", help="Lists all topics in the current project.")
    sp.set_defaults(handler=_list)

    for name, handler, help_text in [
        ("create", _create, "Creates a new topic."),
        ("delete", _delete, "Deletes a topic."),
        ("get-policy", _get_policy, "Gets the IAM policy for a topic."),
        ("set-policy", _set_policy, "Sets the IAM policy for a topic."),
        ("test-permissions", _test_permissions, "Tests the permissions for a topic."),
    ]:
        sp = subparsers.add_parser(name, help=help_text)
        sp.add_argument("topic_name")
        sp.set_defaults(handler=handler)

    sp = subparsers.add_parser("publish", help="Publishes a message to a topic. JSON text is sent compacted.")
    sp.add_argument("topic_name")
    sp.add_argument("message")
    sp.set_defaults(handler=_publish)

    sp = subparsers.add_parser("publish-ordered", help="Publishes a message tagged with a counterId attribute.")
    sp.add_argument("topic_name")
    sp.add_argument("message")
    sp.set_defaults(handler=_publish_ordered)

    return parser


def main(argv=None) -> int:
    return run(build_parser, argv)


if __name__ == "__main__":
    sys.exit(main())
