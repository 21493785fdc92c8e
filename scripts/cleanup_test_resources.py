"""
Cleanup script for Pub/Sub resources left behind by interrupted system tests.
Deletes every subscription and topic in the project whose short name starts
with the test prefix (subscriptions first, so no subscription outlives its topic).
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from google.api_core.exceptions import NotFound

from cloud_samples.services.gcp.pubsub_subscriptions import GCPSubscriptionService
from cloud_samples.services.gcp.pubsub_topics import GCPTopicService

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "cloud-samples-test-"


def _short_name(full_name: str) -> str:
    return full_name.rsplit("/", 1)[-1]


def cleanup_test_resources(prefix: str = DEFAULT_PREFIX, dry_run: bool = False, project_id: str | None = None) -> int:
    """Delete matching subscriptions and topics. Returns how many were (or would be) deleted."""
    subscription_service = GCPSubscriptionService(project_id)
    topic_service = GCPTopicService(project_id)

    subscriptions = [
        name for name in subscription_service.list_subscriptions() if _short_name(name).startswith(prefix)
    ]
    topics = [name for name in topic_service.list_topics() if _short_name(name).startswith(prefix)]

    if not subscriptions and not topics:
        print("✅ No leftover test resources found. Project is clean!")
        return 0

    print(f"🔍 Found {len(subscriptions)} subscription(s) and {len(topics)} topic(s):")
    for name in subscriptions + topics:
        print(f"  - {name}")

    if dry_run:
        print("\nDry run, nothing deleted.")
        return len(subscriptions) + len(topics)

    for name in subscriptions:
        try:
            subscription_service.delete_subscription(_short_name(name))
        except NotFound:
            logger.warning(f"⚠️ Subscription already gone: {name}")
    for name in topics:
        try:
            topic_service.delete_topic(_short_name(name))
        except NotFound:
            logger.warning(f"⚠️ Topic already gone: {name}")

    print(f"\n🎉 Deleted {len(subscriptions)} subscription(s) and {len(topics)} topic(s).")
    return len(subscriptions) + len(topics)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Delete Pub/Sub resources left behind by system tests")
    parser.add_argument("--prefix", default=DEFAULT_PREFIX, help="Short-name prefix to match")
    parser.add_argument("--project-id", default=None)
    parser.add_argument("--dry-run", action="store_true", help="List matches without deleting them")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    cleanup_test_resources(args.prefix, dry_run=args.dry_run, project_id=args.project_id)
