"""
Speech-to-Text sample.

Usage:
    speech-recognize sync ./resources/audio.raw
    speech-recognize async-gcs gs://my-bucket/audio.raw
    speech-recognize -e FLAC -r 44100 -l es-ES stream ./resources/audio.flac
    speech-recognize sync ./resources/audio.raw -r 44100
"""

import argparse
import sys

from cloud_samples.cli.common import run
from cloud_samples.config.constants import (
    DEFAULT_AUDIO_ENCODING,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_SAMPLE_RATE_HZ,
)
from cloud_samples.services.gcp.speech import GCPSpeechService


def _service(args) -> GCPSpeechService:
    return GCPSpeechService(
        encoding=args.encoding,
        sample_rate_hertz=args.sample_rate,
        language_code=args.language_code,
    )


def _sync(args):
    print(f"Transcription: {_service(args).recognize_file(args.filename)}")


def _sync_gcs(args):
    print(f"Transcription: {_service(args).recognize_gcs(args.gcs_uri)}")


def _async(args):
    print(f"Transcription: {_service(args).long_running_recognize_file(args.filename)}")


def _async_gcs(args):
    print(f"Transcription: {_service(args).long_running_recognize_gcs(args.gcs_uri)}")


def _stream(args):
    for transcript in _service(args).streaming_recognize_file(args.filename):
        print(f"Transcription: {transcript}")


def _add_audio_options(parser: argparse.ArgumentParser, suppress_defaults: bool = False) -> None:
    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    parser.add_argument("-e", "--encoding", default=default(DEFAULT_AUDIO_ENCODING),
                        help="Audio encoding, e.g. LINEAR16, FLAC, MULAW")
    parser.add_argument("-r", "--sample-rate", type=int, default=default(DEFAULT_SAMPLE_RATE_HZ),
                        help="Sample rate in Hertz")
    parser.add_argument("-l", "--language-code", default=default(DEFAULT_LANGUAGE_CODE),
                        help="BCP-47 language code, e.g. en-US")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speech-recognize",
        description="Transcribe audio with Google Cloud Speech-to-Text.",
    )
    _add_audio_options(parser)

    # Same options after the sub-command; suppressed defaults keep values given before it
    audio_options = argparse.ArgumentParser(add_help=False)
    _add_audio_options(audio_options, suppress_defaults=True)

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in [
        ("sync", _sync, "Detects speech in a local audio file."),
        ("async", _async, "Detects speech in a local audio file with a long-running operation."),
        ("stream", _stream, "Detects speech in a local audio file by streaming it."),
    ]:
        sp = subparsers.add_parser(name, help=help_text, parents=[audio_options])
        sp.add_argument("filename")
        sp.set_defaults(handler=handler)

    for name, handler, help_text in [
        ("sync-gcs", _sync_gcs, "Detects speech in an audio file in Cloud Storage."),
        ("async-gcs", _async_gcs, "Detects speech in an audio file in Cloud Storage with a long-running operation."),
    ]:
        sp = subparsers.add_parser(name, help=help_text, parents=[audio_options])
        sp.add_argument("gcs_uri")
        sp.set_defaults(handler=handler)

    return parser


def main(argv=None) -> int:
    return run(build_parser, argv)


if __name__ == "__main__":
    sys.exit(main())
