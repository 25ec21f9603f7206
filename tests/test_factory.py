"""Tests for the serializer registry and factory."""

import pytest

from stream_adaptor.adapters import SerializerFactory, SerializerRegistry
from stream_adaptor.adapters.interfaces import ResponseSerializer
from stream_adaptor.adapters.serializers import JSONResponseSerializer, MappedJSONResponseSerializer
from stream_adaptor.core.exceptions import SerializerConfigError, SerializerNotFoundError


class TextSerializer(ResponseSerializer):
    def __init__(self, encoding="utf-8"):
        self.encoding = encoding

    def serialize(self, data, response=None):
        return data.decode(self.encoding) if data else None


class TestSerializerRegistry:
    def setup_method(self):
        self.registry = SerializerRegistry()

    def test_register_and_get(self):
        self.registry.register("text", TextSerializer)

        assert self.registry.get("text") is TextSerializer
        assert self.registry.is_registered("text")
        assert self.registry.list() == ["text"]

    def test_get_unknown_returns_none(self):
        assert self.registry.get("xml") is None

    def test_rejects_duplicates(self):
        self.registry.register("text", TextSerializer)

        with pytest.raises(ValueError):
            self.registry.register("text", TextSerializer)

    @pytest.mark.parametrize("name", ["", None, 3])
    def test_rejects_bad_names(self, name):
        with pytest.raises(ValueError):
            self.registry.register(name, TextSerializer)

    def test_rejects_non_serializer_classes(self):
        with pytest.raises(ValueError):
            self.registry.register("dict", dict)

    def test_clear(self):
        self.registry.register("text", TextSerializer)
        self.registry.clear()

        assert self.registry.list() == []


class TestSerializerFactory:
    def setup_method(self):
        self.factory = SerializerFactory()

    def test_builtin_types(self):
        assert self.factory.get_serializer_types() == ["json", "mapped_json"]

    def test_create_json(self):
        serializer = self.factory.create_serializer("json", {"acceptable_status_codes": [200]})

        assert isinstance(serializer, JSONResponseSerializer)
        assert serializer.acceptable_status_codes == frozenset({200})

    def test_create_mapped_json(self):
        serializer = self.factory.create_serializer(
            "mapped_json",
            {"path_mapping": {"track_id": "id"}, "recursive": False, "removes_keys_with_null_values": True},
        )

        assert isinstance(serializer, MappedJSONResponseSerializer)
        assert serializer.recursive is False
        assert serializer.serializer.removes_keys_with_null_values is True
        assert serializer.serialize(b'{"track_id": 1, "genre": null}') == {"id": 1}

    def test_create_without_config(self):
        assert isinstance(self.factory.create_serializer("mapped_json"), MappedJSONResponseSerializer)

    def test_unknown_type(self):
        with pytest.raises(SerializerNotFoundError) as exc_info:
            self.factory.create_serializer("xml", {})

        assert exc_info.value.context == {"serializer_type": "xml"}

    def test_unknown_option(self):
        with pytest.raises(SerializerConfigError):
            self.factory.create_serializer("json", {"path_mapping": {"a": "b"}})

    def test_invalid_mapping(self):
        with pytest.raises(SerializerConfigError):
            self.factory.create_serializer("mapped_json", {"path_mapping": {"a": ""}})

    def test_custom_serializer(self):
        self.factory.register_serializer("text", TextSerializer)

        serializer = self.factory.create_serializer("text", {"encoding": "ascii"})

        assert serializer.serialize(b"ok") == "ok"

    def test_custom_serializer_bad_config(self):
        self.factory.register_serializer("text", TextSerializer)

        with pytest.raises(SerializerConfigError):
            self.factory.create_serializer("text", {"charset": "ascii"})
