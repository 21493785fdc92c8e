"""
Cloud Translation sample.

Usage:
    translate-text detect "Hello world!" "Goodbye!"
    translate-text list es
    translate-text translate ru "Hello world!"
    translate-text translate-with-model ru nmt "Hello world!"
"""

import argparse
import sys

from cloud_samples.cli.common import add_project_argument, run
from cloud_samples.services.gcp.translate import GCPTranslationService


def _print_translations(texts, translations, target):
    print("Translations:")
    for text, translation in zip(texts, translations):
        print(f"{text} => ({target}) {translation}")


def _detect(args):
    detections = GCPTranslationService(args.project_id).detect_languages(args.input)
    print("Detections:")
    for text, language in detections:
        print(f"{text} => {language}")


def _list(args):
    languages = GCPTranslationService(args.project_id).list_languages(args.target)
    print("Languages:")
    for code, name in languages:
        print(f"{{ code: '{code}', name: '{name}' }}")


def _translate(args):
    translations = GCPTranslationService(args.project_id).translate_texts(args.input, args.to_lang)
    _print_translations(args.input, translations, args.to_lang)


def _translate_with_model(args):
    translations = GCPTranslationService(args.project_id).translate_texts(
        args.input, args.to_lang, model=args.model
    )
    _print_translations(args.input, translations, args.to_lang)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translate-text",
        description="Detect, list and translate languages with Google Cloud Translation.",
    )
    add_project_argument(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    sp = subparsers.add_parser("detect", help="Detects the language of one or more strings.")
    sp.add_argument("input", nargs="+")
    sp.set_defaults(handler=_detect)

    sp = subparsers.add_parser("list", help="Lists available languages, names shown in the target language.")
    sp.add_argument("target", nargs="?", default=None)
    sp.set_defaults(handler=_list)

    sp = subparsers.add_parser("translate", help="Translates one or more strings into the target language.")
    sp.add_argument("to_lang")
    sp.add_argument("input", nargs="+")
    sp.set_defaults(handler=_translate)

    sp = subparsers.add_parser("translate-with-model", help="Translates using a specific model (nmt or base).")
    sp.add_argument("to_lang")
    sp.add_argument("model")
    sp.add_argument("input", nargs="+")
    sp.set_defaults(handler=_translate_with_model)

    return parser


def main(argv=None) -> int:
    return run(build_parser, argv)


if __name__ == "__main__":
    sys.exit(main())
