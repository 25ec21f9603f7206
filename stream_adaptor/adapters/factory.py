import logging
from typing import Dict, Any, Optional, Type, List

from stream_adaptor.adapters.interfaces.serializer import ResponseSerializer
from stream_adaptor.adapters.registry import SerializerRegistry
from stream_adaptor.adapters.serializers import JSONResponseSerializer, MappedJSONResponseSerializer
from stream_adaptor.core.exceptions import (
    SerializerConfigError,
    SerializerNotFoundError,
    ValidationException,
)

logger = logging.getLogger(__name__)

JSON_OPTIONS = ("acceptable_content_types", "acceptable_status_codes", "removes_keys_with_null_values")
MAPPED_OPTIONS = ("path_mapping", "recursive")


def _build_json(config: Dict[str, Any]) -> JSONResponseSerializer:
    return JSONResponseSerializer(**{k: config[k] for k in JSON_OPTIONS if k in config})


def _build_mapped_json(config: Dict[str, Any]) -> MappedJSONResponseSerializer:
    return MappedJSONResponseSerializer(
        config.get("path_mapping"),
        serializer=_build_json(config),
        recursive=config.get("recursive"),
    )


# Builders for the serializers shipped with the package
_BUILDERS = {
    JSONResponseSerializer: (_build_json, JSON_OPTIONS),
    MappedJSONResponseSerializer: (_build_mapped_json, JSON_OPTIONS + MAPPED_OPTIONS),
}


def default_registry() -> SerializerRegistry:
    """Registry preloaded with the built-in serializers."""
    registry = SerializerRegistry()
    registry.register("json", JSONResponseSerializer)
    registry.register("mapped_json", MappedJSONResponseSerializer)
    return registry


class SerializerFactory:
    """
    Factory for creating response serializer instances.
    Uses a registry to instantiate the appropriate serializer based on type.
    """

    def __init__(self, registry: Optional[SerializerRegistry] = None):
        """
        Initialize the serializer factory with an optional registry.

        Args:
            registry: Optional registry of available serializers; defaults to
                      one holding the built-in "json" and "mapped_json" types
        """
        self.registry = registry or default_registry()
        logger.info("Initialized SerializerFactory")

    def create_serializer(self, serializer_type: str, config: Optional[Dict[str, Any]] = None) -> ResponseSerializer:
        """
        Create a serializer instance of the specified type with the given configuration.

        Args:
            serializer_type: Type of serializer to create (e.g., 'json', 'mapped_json')
            config: Configuration for the serializer

        Returns:
            An instance of the requested serializer

        Raises:
            SerializerNotFoundError: If the serializer type is not registered
            SerializerConfigError: If the configuration is invalid
        """
        config = dict(config or {})
        serializer_class = self.registry.get(serializer_type)

        if not serializer_class:
            logger.error(f"Serializer type '{serializer_type}' not found in registry")
            raise SerializerNotFoundError(
                detail=f"Serializer type '{serializer_type}' not found in registry",
                context={"serializer_type": serializer_type},
            )

        builder, allowed = _BUILDERS.get(serializer_class, (None, None))
        if allowed is not None:
            unknown = sorted(set(config) - set(allowed))
            if unknown:
                logger.error(f"Invalid configuration for {serializer_type} serializer: unknown options {unknown}")
                raise SerializerConfigError(
                    detail=f"Unknown options for {serializer_type} serializer: {', '.join(unknown)}",
                    context={"serializer_type": serializer_type, "options": unknown},
                )

        try:
            if builder is not None:
                serializer = builder(config)
            else:
                serializer = serializer_class(**config)
        except (TypeError, ValueError, ValidationException) as e:
            logger.error(f"Invalid configuration for {serializer_type} serializer: {str(e)}")
            raise SerializerConfigError(
                detail=f"Failed to create {serializer_type} serializer: {str(e)}",
                context={"serializer_type": serializer_type},
            ) from e

        logger.info(f"Created {serializer_type} serializer")
        return serializer

    def register_serializer(self, serializer_type: str, serializer_class: Type[ResponseSerializer]) -> None:
        """
        Register a new serializer implementation with the factory.

        Args:
            serializer_type: Type identifier for the serializer
            serializer_class: Class to instantiate for this serializer type
        """
        self.registry.register(serializer_type, serializer_class)

    def get_serializer_types(self) -> List[str]:
        """
        List all available serializer types.

        Returns:
            List of registered serializer type strings
        """
        return self.registry.list()
