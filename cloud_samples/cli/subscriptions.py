"""
Pub/Sub subscriptions sample.

Usage:
    pubsub-subscriptions list [my-topic]
    pubsub-subscriptions create my-topic my-subscription
    pubsub-subscriptions create-push my-topic my-subscription
    pubsub-subscriptions pull my-subscription
"""

import argparse
import sys

from cloud_samples.cli.common import add_project_argument, run
from cloud_samples.services.gcp.pubsub_common import bindings_json, to_json
from cloud_samples.services.gcp.pubsub_subscriptions import (
    GCPSubscriptionService,
    OrderedMessagePuller,
)


def _list(args):
    service = GCPSubscriptionService(args.project_id)
    if args.topic_name:
        subscriptions = service.list_topic_subscriptions(args.topic_name)
        print(f"Subscriptions for {args.topic_name}:")
    else:
        subscriptions = service.list_subscriptions()
        print("Subscriptions:")
    for name in subscriptions:
        print(name)


def _create(args):
    path = GCPSubscriptionService(args.project_id).create_subscription(args.topic_name, args.subscription_name)
    print(f"Subscription {path} created.")


def _create_push(args):
    path = GCPSubscriptionService(args.project_id).create_push_subscription(args.topic_name, args.subscription_name)
    print(f"Subscription {path} created.")


def _delete(args):
    path = GCPSubscriptionService(args.project_id).delete_subscription(args.subscription_name)
    print(f"Subscription {path} deleted.")


def _get(args):
    info = GCPSubscriptionService(args.project_id).get_subscription(args.subscription_name)
    print(info.format())


def _pull(args):
    messages = GCPSubscriptionService(args.project_id).pull(args.subscription_name)
    print(f"Received {len(messages)} messages.")
    for message in messages:
        print(message.format_line())


def _pull_ordered(args):
    puller = OrderedMessagePuller(GCPSubscriptionService(args.project_id), args.subscription_name)
    for message in puller.pull():
        print(message.format_line())


def _get_policy(args):
    policy = GCPSubscriptionService(args.project_id).get_policy(args.subscription_name)
    print(f"Policy for subscription: {bindings_json(policy)}.")


def _set_policy(args):
    policy = GCPSubscriptionService(args.project_id).set_policy(args.subscription_name)
    print(f"Updated policy for subscription: {bindings_json(policy)}")


def _test_permissions(args):
    permissions = GCPSubscriptionService(args.project_id).test_permissions(args.subscription_name)
    print(f"Tested permissions for subscription: {to_json(permissions)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pubsub-subscriptions",
        description="Manage and pull from Google Cloud Pub/Sub subscriptions.",
    )
    add_project_argument(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    sp = subparsers.add_parser("list", help="Lists subscriptions, optionally only those of a topic.")
    sp.add_argument("topic_name", nargs="?", default=None)
    sp.set_defaults(handler=_list)

    sp = subparsers.add_parser("create", help="Creates a new pull subscription.")
    sp.add_argument("topic_name")
    sp.add_argument("subscription_name")
    sp.set_defaults(handler=_create)

    sp = subparsers.add_parser("create-push", help="Creates a new push subscription.")
    sp.add_argument("topic_name")
    sp.add_argument("subscription_name")
    sp.set_defaults(handler=_create_push)

    for name, handler, help_text in [
        ("delete", _delete, "Deletes a subscription."),
        ("get", _get, "Gets the metadata for a subscription."),
        ("pull", _pull, "Pulls and acknowledges messages."),
        ("pull-ordered", _pull_ordered, "Pulls messages and prints them in counterId order."),
        ("get-policy", _get_policy, "Gets the IAM policy for a subscription."),
        ("set-policy", _set_policy, "Sets the IAM policy for a subscription."),
        ("test-permissions", _test_permissions, "Tests the permissions for a subscription."),
    ]:
        sp = subparsers.add_parser(name, help=help_text)
        sp.add_argument("subscription_name")
        sp.set_defaults(handler=handler)

    return parser


def main(argv=None) -> int:
    return run(build_parser, argv)


if __name__ == "__main__":
    sys.exit(main())
