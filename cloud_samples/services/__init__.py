"""Service layer.

Each service wraps one Google Cloud client library and returns plain
Python values; formatting for the terminal happens in cloud_samples.cli.
"""
