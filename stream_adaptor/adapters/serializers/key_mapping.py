from typing import Any, Mapping

from stream_adaptor.domain.models.path_mapping import PathMapping


def apply_path_mapping(value: Any, mapping: Mapping[str, str], recursive: bool = True) -> Any:
    """
    Rename keys of decoded JSON objects according to a path mapping.

    Keys missing from the mapping are kept as they are. A renamed key takes
    the position of its source key. When a renamed key lands on a name the
    object already has, the renamed value wins. The input is never modified;
    a new structure is returned.

    Args:
        value: Decoded JSON value (dict, list or scalar)
        mapping: Source key to destination key table
        recursive: Rename keys in nested objects and in objects inside arrays;
                   when False only a top-level object is renamed

    Returns:
        Any: The value with keys renamed
    """
    mapping = PathMapping.coerce(mapping)
    if not mapping:
        return value
    if isinstance(value, list) and not recursive:
        return value
    return _walk(value, mapping, recursive)


def _empty_like(value: Any) -> Any:
    if isinstance(value, dict):
        return {}
    if isinstance(value, list):
        return []
    return value


def _walk(value: Any, mapping: PathMapping, recursive: bool) -> Any:
    # Iterative so nesting depth is bounded by memory, not the call stack
    root = _empty_like(value)
    if root is value:
        return value

    pending = [(value, root)]
    while pending:
        source, target = pending.pop()

        if isinstance(source, dict):
            renamed = set()
            for key, item in source.items():
                child = _empty_like(item) if recursive else item
                if child is not item:
                    pending.append((item, child))
                if key in mapping:
                    destination = mapping[key]
                    target[destination] = child
                    renamed.add(destination)
                elif key not in renamed:
                    target[key] = child
        else:
            for item in source:
                child = _empty_like(item)
                if child is not item:
                    pending.append((item, child))
                target.append(child)

    return root
