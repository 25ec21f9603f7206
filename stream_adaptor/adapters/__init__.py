"""
Adapters package for the Stream Adaptor.

This package contains components for turning HTTP responses into values:
- Abstract interfaces that define the serializer contract
- Concrete JSON and mapped JSON serializers
- Factory and registry for managing serializer instances
"""

from . import interfaces

from .factory import SerializerFactory, default_registry
from .registry import SerializerRegistry

__all__ = [
    'interfaces',
    'SerializerFactory',
    'SerializerRegistry',
    'default_registry',
]
