"""
Concrete response serializers.
"""

from .json_serializer import JSONResponseSerializer, parse_content_type, remove_keys_with_null_values
from .key_mapping import apply_path_mapping
from .mapped_json import MappedJSONResponseSerializer

__all__ = [
    'JSONResponseSerializer',
    'MappedJSONResponseSerializer',
    'apply_path_mapping',
    'parse_content_type',
    'remove_keys_with_null_values',
]
