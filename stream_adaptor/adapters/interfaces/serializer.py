from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class DataFormat(str, Enum):
    """Enum defining data formats a serializer may produce values from."""
    JSON = "json"
    TEXT = "text"
    BINARY = "binary"


@runtime_checkable
class ResponseLike(Protocol):
    """
    Minimal view of an HTTP response used by serializers.

    httpx.Response and requests.Response both satisfy it.
    """

    status_code: int
    headers: Any


class ResponseSerializer(ABC):
    """
    Abstract base interface for response serializers.

    A response serializer turns the raw body of an HTTP response into a
    structured in-memory value, validating the response metadata on the way.
    Implementations must be stateless after construction so a single
    instance can be shared by every request an HTTP client makes.
    """

    @abstractmethod
    def serialize(self, data: Optional[bytes], response: Optional[ResponseLike] = None) -> Any:
        """
        Converts a response body into a structured value.

        Args:
            data: Raw response body
            response: Response metadata (status code and headers), if any

        Returns:
            Any: The deserialized value, or None for an empty body

        Raises:
            ResponseSerializationError: If the response is unacceptable or
                                        the body cannot be decoded
        """
        pass

    def supports_data_format(self, data_format: DataFormat) -> bool:
        """
        Checks if this serializer produces values from a specific data format.

        Args:
            data_format: The format to check support for

        Returns:
            bool: True if the format is supported, False otherwise
        """
        return False
