"""Shared plumbing for the sample command-line programs."""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from google.api_core.exceptions import GoogleAPIError

from cloud_samples.config.constants import LOG_FORMAT
from cloud_samples.config.settings import settings
from cloud_samples.exceptions import SampleError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    # Logs go to stderr; stdout is reserved for command output
    logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT)


def add_project_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-id",
        default=None,
        help="Google Cloud project id (defaults to GOOGLE_PROJECT_ID / GCLOUD_PROJECT)",
    )


def run(build_parser: Callable[[], argparse.ArgumentParser], argv: Optional[Sequence[str]] = None) -> int:
    """Parse argv, dispatch to the selected sub-command and map errors to exit codes."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.handler(args)
    except (SampleError, GoogleAPIError) as e:
        logger.error(f"❌ {args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
