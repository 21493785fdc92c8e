"""Command-line samples for Google Cloud Pub/Sub, Speech, Translation and Natural Language."""

__version__ = "0.1.0"
