"""
GCP Natural Language Service

Handles sentiment, entity and syntax analysis with the Natural Language API.
Documents come either from inline text or from a file in Cloud Storage.
"""

import logging
from typing import Optional

from google.cloud import language_v1

from cloud_samples.config.constants import DEFAULT_ENTITY_GROUP, ENTITY_GROUPS
from cloud_samples.services.gcp.common import create_client, validate_gcs_uri

logger = logging.getLogger(__name__)


class GCPLanguageService:
    """Handles Natural Language operations."""

    def __init__(self):
        self._client = create_client(language_v1.LanguageServiceClient)

    @staticmethod
    def document(text: Optional[str] = None, gcs_uri: Optional[str] = None) -> language_v1.Document:
        """Build a plain-text document from inline text or a gs:// URI."""
        if gcs_uri is not None:
            return language_v1.Document(
                gcs_content_uri=validate_gcs_uri(gcs_uri),
                type_=language_v1.Document.Type.PLAIN_TEXT,
            )
        return language_v1.Document(
            content=text,
            type_=language_v1.Document.Type.PLAIN_TEXT,
        )

    def analyze_sentiment(self, document: language_v1.Document) -> float:
        """Return the overall sentiment score of the document (-1.0 to 1.0)."""
        response = self._client.analyze_sentiment(request={"document": document})
        sentiment = response.document_sentiment
        logger.info(f"Sentiment score={sentiment.score} magnitude={sentiment.magnitude}")
        return sentiment.score

    def analyze_entities(self, document: language_v1.Document) -> dict[str, list[str]]:
        """
        Detect entities and group their names by kind.

        Returns:
            Ordered mapping of group ("people", "places", ...) to unique names,
            with groups in the order they first appear in the text.
        """
        response = self._client.analyze_entities(
            request={
                "document": document,
                "encoding_type": language_v1.EncodingType.UTF8,
            }
        )

        groups: dict[str, list[str]] = {}
        for entity in response.entities:
            type_name = language_v1.Entity.Type(entity.type_).name
            group = groups.setdefault(ENTITY_GROUPS.get(type_name, DEFAULT_ENTITY_GROUP), [])
            if entity.name not in group:
                group.append(entity.name)
        return groups

    def analyze_syntax(self, document: language_v1.Document) -> list[str]:
        """Return the part-of-speech tag name of each token."""
        response = self._client.analyze_syntax(
            request={
                "document": document,
                "encoding_type": language_v1.EncodingType.UTF8,
            }
        )
        return [
            language_v1.PartOfSpeech.Tag(token.part_of_speech.tag).name
            for token in response.tokens
        ]
