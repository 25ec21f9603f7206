"""
Interfaces package for the Stream Adaptor.

This package contains the abstract base interfaces used to standardize how
HTTP response bodies are turned into in-memory values.
"""

from .serializer import DataFormat, ResponseLike, ResponseSerializer

__all__ = [
    'DataFormat',
    'ResponseLike',
    'ResponseSerializer',
]
