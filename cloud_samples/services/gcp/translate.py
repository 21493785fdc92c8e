"""
GCP Translation Service

Handles Google Cloud Translation operations.
"""

import logging
from typing import Optional

from google.cloud import translate

from cloud_samples.config.constants import TRANSLATION_MODELS
from cloud_samples.config.settings import require_project_id, settings
from cloud_samples.exceptions import InvalidArgumentError
from cloud_samples.services.gcp.common import create_client

logger = logging.getLogger(__name__)

# Language used for display names when no target is given
DEFAULT_DISPLAY_LANGUAGE = "en"


class GCPTranslationService:
    """Handles translation operations."""

    def __init__(self, project_id: Optional[str] = None, location: Optional[str] = None):
        self.project_id = require_project_id(project_id)
        self.location = location or settings.TRANSLATE_LOCATION
        self._client = create_client(translate.TranslationServiceClient)

    @property
    def parent(self) -> str:
        return f"projects/{self.project_id}/locations/{self.location}"

    def model_path(self, model: str) -> str:
        """Expand a short model name ("nmt", "base") to its resource path."""
        try:
            suffix = TRANSLATION_MODELS[model]
        except KeyError:
            raise InvalidArgumentError(
                f"Unknown translation model: {model} (expected one of {', '.join(TRANSLATION_MODELS)})"
            ) from None
        return f"{self.parent}/models/{suffix}"

    def detect_languages(self, texts: list[str]) -> list[tuple[str, str]]:
        """Detect the language of each text. Returns (text, language_code) pairs."""
        detections = []
        for text in texts:
            response = self._client.detect_language(
                request={
                    "parent": self.parent,
                    "content": text,
                    "mime_type": "text/plain",
                }
            )
            language = response.languages[0].language_code if response.languages else "und"
            detections.append((text, language))
        return detections

    def list_languages(self, display_language_code: Optional[str] = None) -> list[tuple[str, str]]:
        """List supported languages as (code, display name) pairs."""
        response = self._client.get_supported_languages(
            request={
                "parent": self.parent,
                "display_language_code": display_language_code or DEFAULT_DISPLAY_LANGUAGE,
            }
        )
        return [(language.language_code, language.display_name) for language in response.languages]

    def translate_texts(
        self,
        texts: list[str],
        target_language_code: str,
        model: Optional[str] = None,
    ) -> list[str]:
        """Translate texts into the target language, preserving input order."""
        request = {
            "parent": self.parent,
            "contents": texts,
            "mime_type": "text/plain",
            "target_language_code": target_language_code,
        }
        if model:
            request["model"] = self.model_path(model)

        logger.info(f"🔄 Translating {len(texts)} text(s) to {target_language_code}")
        response = self._client.translate_text(request=request)

        return [translation.translated_text for translation in response.translations]
