"""
GCP Speech Service

Handles Google Cloud Speech-to-Text operations.
"""

import logging
import os
from typing import Generator, Iterable, Iterator

from google.cloud import speech

from cloud_samples.config.constants import (
    DEFAULT_AUDIO_ENCODING,
    DEFAULT_LANGUAGE_CODE,
    DEFAULT_SAMPLE_RATE_HZ,
    LONG_RUNNING_TIMEOUT_SEC,
    STREAM_CHUNK_BYTES,
)
from cloud_samples.exceptions import AudioFileNotFoundError, InvalidArgumentError
from cloud_samples.services.gcp.common import create_client, validate_gcs_uri

logger = logging.getLogger(__name__)


class GCPSpeechService:
    """Handles Speech-to-Text operations."""

    def __init__(
        self,
        encoding: str = DEFAULT_AUDIO_ENCODING,
        sample_rate_hertz: int = DEFAULT_SAMPLE_RATE_HZ,
        language_code: str = DEFAULT_LANGUAGE_CODE,
    ):
        self.encoding = encoding
        self.sample_rate_hertz = sample_rate_hertz
        self.language_code = language_code
        self._client = create_client(speech.SpeechClient)

    def _recognition_config(self) -> speech.RecognitionConfig:
        try:
            encoding = speech.RecognitionConfig.AudioEncoding[self.encoding.upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown audio encoding: {self.encoding}") from None

        return speech.RecognitionConfig(
            encoding=encoding,
            sample_rate_hertz=self.sample_rate_hertz,
            language_code=self.language_code,
        )

    @staticmethod
    def _read_audio(filename: str) -> bytes:
        if not os.path.isfile(filename):
            raise AudioFileNotFoundError(f"Audio file not found: {filename}")
        with open(filename, "rb") as f:
            return f.read()

    @staticmethod
    def _join_results(results) -> str:
        return " ".join(
            result.alternatives[0].transcript.strip()
            for result in results
            if result.alternatives
        ).strip()

    def recognize_file(self, filename: str) -> str:
        """Transcribe a local audio file with a synchronous request."""
        audio = speech.RecognitionAudio(content=self._read_audio(filename))
        return self._recognize(audio)

    def recognize_gcs(self, gcs_uri: str) -> str:
        """Transcribe an audio file in Cloud Storage with a synchronous request."""
        audio = speech.RecognitionAudio(uri=validate_gcs_uri(gcs_uri))
        return self._recognize(audio)

    def _recognize(self, audio: speech.RecognitionAudio) -> str:
        logger.info(f"🎙️ Recognizing audio ({self.language_code}, {self.sample_rate_hertz}Hz)")
        response = self._client.recognize(config=self._recognition_config(), audio=audio)
        if not response.results:
            return ""
        return self._join_results(response.results)

    def long_running_recognize_file(self, filename: str) -> str:
        """Transcribe a local audio file with a long-running operation."""
        audio = speech.RecognitionAudio(content=self._read_audio(filename))
        return self._long_running_recognize(audio)

    def long_running_recognize_gcs(self, gcs_uri: str) -> str:
        """Transcribe an audio file in Cloud Storage with a long-running operation."""
        audio = speech.RecognitionAudio(uri=validate_gcs_uri(gcs_uri))
        return self._long_running_recognize(audio)

    def _long_running_recognize(self, audio: speech.RecognitionAudio) -> str:
        operation = self._client.long_running_recognize(
            config=self._recognition_config(),
            audio=audio,
        )
        logger.info("⏳ Waiting for long-running recognition to complete...")
        response = operation.result(timeout=LONG_RUNNING_TIMEOUT_SEC)
        if not response.results:
            return ""
        return self._join_results(response.results)

    @staticmethod
    def iter_file_chunks(filename: str, chunk_size: int = STREAM_CHUNK_BYTES) -> Iterator[bytes]:
        """Yield a local audio file in fixed-size chunks."""
        if not os.path.isfile(filename):
            raise AudioFileNotFoundError(f"Audio file not found: {filename}")
        with open(filename, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                yield chunk

    def streaming_recognize_file(self, filename: str) -> Generator[str, None, None]:
        """Stream a local audio file to the API, yielding final transcripts."""
        # Check up front so the error is raised before the stream opens
        if not os.path.isfile(filename):
            raise AudioFileNotFoundError(f"Audio file not found: {filename}")
        return self.streaming_transcribe(self.iter_file_chunks(filename))

    def streaming_transcribe(
        self,
        audio_generator: Iterable[bytes],
    ) -> Generator[str, None, None]:
        """
        Transcribe audio stream using Google Cloud Speech-to-Text Streaming API.

        Args:
            audio_generator: Iterator that yields bytes chunks.

        Yields:
            str: Final transcriptions.
        """
        streaming_config = speech.StreamingRecognitionConfig(
            config=self._recognition_config(),
            interim_results=False,
        )

        # Generator to yield StreamingRecognizeRequest
        def request_generator():
            for chunk in audio_generator:
                yield speech.StreamingRecognizeRequest(audio_content=chunk)

        responses = self._client.streaming_recognize(
            config=streaming_config,
            requests=request_generator(),
        )

        for response in responses:
            if not response.results:
                continue

            result = response.results[0]
            if not result.alternatives:
                continue

            if result.is_final:
                transcript = result.alternatives[0].transcript.strip()
                if transcript:
                    yield transcript
