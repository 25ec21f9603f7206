"""
Stream Adaptor - JSON response deserialization for HTTP API clients.

This package turns HTTP response bodies into in-memory values, validating
status codes and content types and renaming JSON keys to the property names
the caller's models expect.
"""

from stream_adaptor.adapters.serializers import JSONResponseSerializer, MappedJSONResponseSerializer
from stream_adaptor.core.exceptions import (
    ParseError,
    ResponseSerializationError,
    UnacceptableContentTypeError,
    UnacceptableStatusCodeError,
)
from stream_adaptor.domain.models import PathMapping

__version__ = "0.1.0"

__all__ = [
    "JSONResponseSerializer",
    "MappedJSONResponseSerializer",
    "PathMapping",
    "ParseError",
    "ResponseSerializationError",
    "UnacceptableContentTypeError",
    "UnacceptableStatusCodeError",
]
