"""
Cloud Natural Language sample.

Usage:
    language-analyze sentiment-text "President Obama is speaking at the White House."
    language-analyze entities-file my-bucket text.txt
    language-analyze syntax-text "President Obama is speaking at the White House."
"""

import argparse
import sys

from cloud_samples.cli.common import run
from cloud_samples.services.gcp.common import gcs_uri
from cloud_samples.services.gcp.language import GCPLanguageService


def _document(args):
    if args.command.endswith("-file"):
        return GCPLanguageService.document(gcs_uri=gcs_uri(args.bucket_name, args.file_name))
    return GCPLanguageService.document(text=args.text)


def _sentiment(args):
    score = GCPLanguageService().analyze_sentiment(_document(args))
    print(f"Sentiment: {'positive' if score >= 0 else 'negative'}.")


def _entities(args):
    groups = GCPLanguageService().analyze_entities(_document(args))
    print("Entities:")
    for group, names in groups.items():
        print(f"{group}: {', '.join(names)}")


def _syntax(args):
    tags = GCPLanguageService().analyze_syntax(_document(args))
    print("Tags:")
    for tag in tags:
        print(tag)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="language-analyze",
        description="Analyze sentiment, entities and syntax with Google Cloud Natural Language.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for kind, handler in [
        ("sentiment", _sentiment),
        ("entities", _entities),
        ("syntax", _syntax),
    ]:
        sp = subparsers.add_parser(f"{kind}-text", help=f"Detects {kind} of a string.")
        sp.add_argument("text")
        sp.set_defaults(handler=handler)

        sp = subparsers.add_parser(f"{kind}-file", help=f"Detects {kind} of a file in Cloud Storage.")
        sp.add_argument("bucket_name")
        sp.add_argument("file_name")
        sp.set_defaults(handler=handler)

    return parser


def main(argv=None) -> int:
    return run(build_parser, argv)


if __name__ == "__main__":
    sys.exit(main())
