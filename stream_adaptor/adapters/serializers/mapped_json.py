"""
Mapped JSON response serializer.

Decodes a JSON response through a composed JSONResponseSerializer, then
renames keys with a PathMapping so the result lines up with the property
names the caller's models use.
"""

from typing import Any, Mapping, Optional, Union

from stream_adaptor.adapters.interfaces.serializer import DataFormat, ResponseLike, ResponseSerializer
from stream_adaptor.adapters.serializers.json_serializer import JSONResponseSerializer
from stream_adaptor.adapters.serializers.key_mapping import apply_path_mapping
from stream_adaptor.core.config import get_settings
from stream_adaptor.core.logging import get_logger
from stream_adaptor.domain.models.path_mapping import PathMapping

logger = get_logger(__name__)


class MappedJSONResponseSerializer(ResponseSerializer):
    """
    Serializer that renames JSON keys after decoding.

    Parsing, response validation and error reporting all come from the
    composed serializer; errors it raises are propagated unchanged.

    Example:
        >>> serializer = MappedJSONResponseSerializer({"track_id": "id"})
        >>> serializer.serialize(b'{"track_id": 5, "title": "x"}')
        {'id': 5, 'title': 'x'}
    """

    def __init__(
        self,
        mapping: Union[PathMapping, Mapping[str, str], None] = None,
        serializer: Optional[JSONResponseSerializer] = None,
        recursive: Optional[bool] = None,
    ):
        """
        Initialize the serializer.

        Args:
            mapping: Source JSON key to destination property name table
            serializer: JSON serializer to decode with; a default one is
                        built from settings when omitted
            recursive: Whether nested objects are renamed too; defaults to
                       the RECURSIVE_KEY_MAPPING setting

        Raises:
            ValidationException: If the mapping holds empty or non-string keys
        """
        self._mapping = PathMapping.coerce(mapping)
        self._serializer = serializer if serializer is not None else JSONResponseSerializer()
        self._recursive = get_settings().RECURSIVE_KEY_MAPPING if recursive is None else recursive
        logger.debug(
            f"Initialized {self.__class__.__name__} with {len(self._mapping)} mapped keys "
            f"(recursive={self._recursive})"
        )

    @property
    def mapping(self) -> PathMapping:
        return self._mapping

    @property
    def serializer(self) -> JSONResponseSerializer:
        return self._serializer

    @property
    def recursive(self) -> bool:
        return self._recursive

    def supports_data_format(self, data_format: DataFormat) -> bool:
        return self._serializer.supports_data_format(data_format)

    def serialize(self, data: Optional[bytes], response: Optional[ResponseLike] = None) -> Any:
        """
        Decode a response body and rename its keys.

        Args:
            data: Raw response body
            response: Response metadata, if any

        Returns:
            Any: Decoded value with mapped keys renamed

        Raises:
            ParseError: If the body is not valid JSON
            UnacceptableContentTypeError: If the content type is not accepted
            UnacceptableStatusCodeError: If the status code is not accepted
        """
        value = self._serializer.serialize(data, response)
        return apply_path_mapping(value, self._mapping, recursive=self._recursive)
