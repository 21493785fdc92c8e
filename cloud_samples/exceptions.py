"""
Sample Exceptions

Custom exceptions raised by the samples before or around API calls.
API failures themselves surface as google.api_core exceptions.
"""


class SampleError(Exception):
    """Base exception for sample errors"""
    pass


class ConfigurationError(SampleError):
    """Raised when the project id or credentials are missing"""
    pass


class AudioFileNotFoundError(SampleError):
    """Raised when a local audio file does not exist"""
    pass


class InvalidArgumentError(SampleError):
    """Raised when a command-line argument is malformed (bad gs:// URI, unknown model)"""
    pass
