"""Site options and global site information."""

from typing import Optional

from wpbridge.runtime import PhpValue, WpApp


def _to_str(value: PhpValue) -> str:
    """Convert like PHP string conversion, where null is ''."""
    return "" if value is None else str(value)


def get_version(app: WpApp) -> str:
    """Get the WordPress version string."""
    return _to_str(app.get_global("wp_version"))


def get_site_url(app: WpApp, path: str = "", scheme: Optional[str] = None) -> str:
    """Get the site URL, optionally with ``path`` appended."""
    return _to_str(app.invoke("site_url", path, scheme))


def get_option(app: WpApp, option: str, default: PhpValue = None) -> PhpValue:
    """Get an option value, or ``default`` when the option does not exist."""
    return app.invoke("get_option", option, default)


def update_option(app: WpApp, option: str, value: PhpValue) -> bool:
    """Update (or add) an option.

    Returns False when the value was unchanged or the update failed.
    """
    return bool(app.invoke("update_option", option, value))


def get_admin_email(app: WpApp) -> Optional[str]:
    """Get the ``admin_email`` option, or None if it is not a string."""
    email = get_option(app, "admin_email")
    return email if isinstance(email, str) else None
