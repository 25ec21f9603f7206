"""Tests for the PathMapping domain model."""

import pytest

from stream_adaptor.core.exceptions import ValidationException
from stream_adaptor.domain.models import PathMapping


class TestPathMapping:
    """Test cases for PathMapping construction and lookups."""

    def test_behaves_like_a_mapping(self):
        mapping = PathMapping({"track_id": "id", "user_id": "userID"})

        assert len(mapping) == 2
        assert mapping["track_id"] == "id"
        assert "user_id" in mapping
        assert mapping.get("missing") is None
        assert mapping == {"track_id": "id", "user_id": "userID"}

    def test_none_gives_empty_mapping(self):
        assert len(PathMapping(None)) == 0
        assert len(PathMapping()) == 0

    def test_rename_passes_unmapped_keys_through(self):
        mapping = PathMapping({"track_id": "id"})

        assert mapping.rename("track_id") == "id"
        assert mapping.rename("title") == "title"

    def test_copies_source_table(self):
        source = {"track_id": "id"}
        mapping = PathMapping(source)
        source["track_id"] = "changed"
        source["extra"] = "x"

        assert mapping["track_id"] == "id"
        assert "extra" not in mapping

    def test_is_immutable(self):
        mapping = PathMapping({"a": "b"})

        with pytest.raises(TypeError):
            mapping["a"] = "c"
        with pytest.raises(AttributeError):
            mapping._table = {}

    def test_is_hashable(self):
        assert hash(PathMapping({"a": "b"})) == hash(PathMapping({"a": "b"}))

    @pytest.mark.parametrize("bad", [{"": "id"}, {1: "id"}, {"a": ""}, {"a": None}, {"a": 3}])
    def test_rejects_non_string_or_empty_entries(self, bad):
        with pytest.raises(ValidationException) as exc_info:
            PathMapping(bad)
        assert exc_info.value.code == "validation_error"

    def test_coerce_returns_same_instance(self):
        mapping = PathMapping({"a": "b"})

        assert PathMapping.coerce(mapping) is mapping
        assert PathMapping.coerce({"a": "b"}) == mapping

    def test_inverse(self):
        mapping = PathMapping({"track_id": "id", "user_id": "userID"})

        assert mapping.inverse() == {"id": "track_id", "userID": "user_id"}

    def test_inverse_rejects_shared_destination(self):
        mapping = PathMapping({"track_id": "id", "playlist_id": "id"})

        with pytest.raises(ValidationException):
            mapping.inverse()
