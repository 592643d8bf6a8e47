"""Helper functions for working with records.

Records are plain dictionaries; fields inside nested dictionaries are
addressed with dot notation such as ``"contact.email"``.
"""

from typing import Any, Dict

_MISSING = object()


def get_nested_value(
    data: Dict[str, Any], path: str, default: Any = None, separator: str = "."
) -> Any:
    """Get a value from a nested dictionary using dot notation.

    Args:
        data: The dictionary to traverse.
        path: Dot-separated path to the value.
        default: Returned when any key along the path is missing.
        separator: Separator used in the path.

    Returns:
        The value at the specified path, or ``default`` if not found.

    Example:
        >>> get_nested_value({"user": {"email": "a@b.io"}}, "user.email")
        'a@b.io'
    """
    current: Any = data

    for key in path.split(separator):
        if isinstance(current, dict) and key in current:
            current = current[key]
        else:
            return default

    return current


def has_nested_value(data: Dict[str, Any], path: str, separator: str = ".") -> bool:
    """Return True if every key along ``path`` exists."""
    return get_nested_value(data, path, _MISSING, separator) is not _MISSING


def copy_with_nested_value(
    data: Dict[str, Any], path: str, value: Any, separator: str = "."
) -> Dict[str, Any]:
    """Return a copy of ``data`` with the value at ``path`` replaced.

    Every dictionary along the path is shallow-copied, so the original
    record and its nested dictionaries are left untouched.

    Args:
        data: The dictionary to copy.
        path: Dot-separated path to the value.
        value: The value to set.
        separator: Separator used in the path.

    Returns:
        The updated copy.

    Example:
        >>> record = {"user": {"email": "a@b.io"}}
        >>> copy_with_nested_value(record, "user.email", "*@b.io")
        {'user': {'email': '*@b.io'}}
        >>> record
        {'user': {'email': 'a@b.io'}}
    """
    keys = path.split(separator)
    result = dict(data)
    current = result

    for key in keys[:-1]:
        child = current.get(key)
        child = dict(child) if isinstance(child, dict) else {}
        current[key] = child
        current = child

    current[keys[-1]] = value
    return result
