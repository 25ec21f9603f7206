import logging
from typing import Dict, Type, List, Optional

from stream_adaptor.adapters.interfaces.serializer import ResponseSerializer

logger = logging.getLogger(__name__)


class SerializerRegistry:
    """
    Registry of available response serializer implementations.
    Maps serializer type strings to their implementing classes.
    """

    def __init__(self):
        """
        Initialize an empty serializer registry.
        """
        self._serializers: Dict[str, Type[ResponseSerializer]] = {}
        logger.debug("Initialized SerializerRegistry")

    def register(self, serializer_type: str, serializer_class: Type[ResponseSerializer]) -> None:
        """
        Register a serializer implementation.

        Args:
            serializer_type: Type identifier for the serializer
            serializer_class: Class to instantiate for this serializer type

        Raises:
            ValueError: If the serializer_type is invalid or already registered
        """
        if not serializer_type or not isinstance(serializer_type, str):
            raise ValueError("Serializer type must be a non-empty string")

        if not isinstance(serializer_class, type) or not issubclass(serializer_class, ResponseSerializer):
            raise ValueError(
                "Serializer class must be a subclass of ResponseSerializer"
            )

        if serializer_type in self._serializers:
            raise ValueError(f"Serializer type '{serializer_type}' is already registered")

        self._serializers[serializer_type] = serializer_class
        logger.info(f"Registered serializer type: {serializer_type}")

    def get(self, serializer_type: str) -> Optional[Type[ResponseSerializer]]:
        """
        Retrieve a serializer implementation by type.

        Returns:
            The serializer class if found, None otherwise
        """
        return self._serializers.get(serializer_type)

    def list(self) -> List[str]:
        """List all registered serializer types."""
        return list(self._serializers.keys())

    def is_registered(self, serializer_type: str) -> bool:
        return serializer_type in self._serializers

    def clear(self) -> None:
        """
        Clear all registered serializers.
        Primarily used for testing purposes.
        """
        self._serializers.clear()
        logger.debug("Cleared all registered serializers")
