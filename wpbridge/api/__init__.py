"""Typed accessors for WordPress API calls."""

from .assets import enqueue_script, enqueue_scripts, enqueue_style
from .meta import (
    MetaList,
    MetaMap,
    MetaResult,
    SingleMeta,
    add_user_meta,
    delete_user_meta,
    get_metadata,
    get_user_meta,
    update_user_meta,
)
from .options import get_admin_email, get_option, get_site_url, get_version, update_option

__all__ = [
    "SingleMeta",
    "MetaList",
    "MetaMap",
    "MetaResult",
    "get_metadata",
    "get_user_meta",
    "add_user_meta",
    "update_user_meta",
    "delete_user_meta",
    "get_option",
    "update_option",
    "get_admin_email",
    "get_site_url",
    "get_version",
    "enqueue_script",
    "enqueue_scripts",
    "enqueue_style",
]
