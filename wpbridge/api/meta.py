"""Object metadata (user meta, post meta, ...)."""

from dataclasses import dataclass, field
from typing import Union

from wpbridge.runtime import PhpValue, WpApp


@dataclass(frozen=True)
class SingleMeta:
    """Result of a metadata read with ``single=True``."""

    value: PhpValue


@dataclass(frozen=True)
class MetaList:
    """Result of a metadata read with ``single=False``."""

    values: list[PhpValue] = field(default_factory=list)


@dataclass(frozen=True)
class MetaMap:
    """Result of a metadata read with an empty key: every key of the object."""

    values: dict[str, PhpValue] = field(default_factory=dict)


MetaResult = Union[SingleMeta, MetaList, MetaMap]


def _is_php_list(result: dict) -> bool:
    """True when a PHP array has keys 0..n-1 in order."""
    return list(result.keys()) == list(range(len(result)))


def _as_list(result: PhpValue) -> list[PhpValue]:
    """Coerce a PHP array result into a list of values."""
    if isinstance(result, dict):
        if _is_php_list(result):
            return list(result.values())
        # an associative array is one value, not a list of them
        return [result]
    if isinstance(result, (list, tuple)):
        return list(result)
    if not result:
        # false for an invalid object id, empty array for a missing key
        return []
    return [result]


def get_metadata(
    app: WpApp, meta_type: str, object_id: int, meta_key: str, single: bool = False
) -> MetaResult:
    """Retrieve metadata for an object.

    Parameters
    ----------
    app : WpApp
        WordPress instance.
    meta_type : str
        Object type: "user", "post", "comment", "term".
    object_id : int
        ID of the object.
    meta_key : str
        Metadata key. Empty to read every key of the object.
    single : bool
        Ask for the first value only.

    Returns
    -------
    MetaResult
        ``MetaMap`` of key to values when ``meta_key`` is empty (WordPress
        ignores ``single`` then), else ``SingleMeta`` when ``single`` is True,
        otherwise ``MetaList``. The arguments alone decide the variant, never
        the shape of the raw result.
    """
    result = app.invoke("get_metadata", meta_type, object_id, meta_key, single)
    if not meta_key:
        return MetaMap(dict(result) if isinstance(result, dict) else {})
    if single:
        return SingleMeta(result)
    return MetaList(_as_list(result))


def get_user_meta(app: WpApp, user_id: int, meta_key: str, single: bool = False) -> MetaResult:
    """Retrieve a user meta field."""
    return get_metadata(app, "user", user_id, meta_key, single)


def add_user_meta(app: WpApp, user_id: int, meta_key: str, meta_value: PhpValue, unique: bool = False) -> bool:
    """Add a meta field to a user.

    Returns True when WordPress answered with the new meta id.
    """
    result = app.invoke("add_user_meta", user_id, meta_key, meta_value, unique)
    return isinstance(result, int) and not isinstance(result, bool)


def update_user_meta(
    app: WpApp, user_id: int, meta_key: str, meta_value: PhpValue, prev_value: PhpValue = ""
) -> bool:
    """Update a user meta field, adding it if missing."""
    return bool(app.invoke("update_user_meta", user_id, meta_key, meta_value, prev_value))


def delete_user_meta(app: WpApp, user_id: int, meta_key: str, meta_value: PhpValue = "") -> bool:
    """Remove a user meta field, or only the entries matching ``meta_value``."""
    return bool(app.invoke("delete_user_meta", user_id, meta_key, meta_value))
