from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from stream_adaptor.core.exceptions import ValidationException


class PathMapping(Mapping[str, str]):
    """
    Domain model for a key-renaming table.

    Maps source JSON key names to destination property names. The table is
    copied on construction and cannot be changed afterwards.
    """

    __slots__ = ("_table",)

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        """
        Initialize the mapping from any mapping of strings to strings.

        Args:
            mapping: Source key to destination key table, or None for an
                     empty mapping

        Raises:
            ValidationException: If a key or value is not a non-empty string
        """
        table: Dict[str, str] = {}
        for source, destination in (mapping or {}).items():
            if not isinstance(source, str) or not source:
                raise ValidationException(
                    detail=f"Path mapping keys must be non-empty strings, got {source!r}",
                    field="mapping",
                )
            if not isinstance(destination, str) or not destination:
                raise ValidationException(
                    detail=f"Path mapping for '{source}' must be a non-empty string, got {destination!r}",
                    field=source,
                )
            table[source] = destination
        self._table = MappingProxyType(table)

    @classmethod
    def coerce(cls, mapping: Union["PathMapping", Mapping[str, str], None]) -> "PathMapping":
        """Return mapping unchanged if it already is a PathMapping."""
        if isinstance(mapping, cls):
            return mapping
        return cls(mapping)

    def __getitem__(self, key: str) -> str:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __hash__(self) -> int:
        return hash(frozenset(self._table.items()))

    def __setattr__(self, name, value):
        if hasattr(self, "_table"):
            raise AttributeError("PathMapping is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._table)!r})"

    def rename(self, key: str) -> str:
        """Destination name for key, or key itself when it is not mapped."""
        return self._table.get(key, key)

    def inverse(self) -> "PathMapping":
        """
        Build the reverse mapping, destination name to source key.

        Raises:
            ValidationException: If two source keys share a destination
        """
        reverse: Dict[str, str] = {}
        for source, destination in self._table.items():
            if destination in reverse:
                raise ValidationException(
                    detail=(
                        f"Cannot invert path mapping: '{reverse[destination]}' and "
                        f"'{source}' both map to '{destination}'"
                    ),
                    field=destination,
                )
            reverse[destination] = source
        return PathMapping(reverse)
