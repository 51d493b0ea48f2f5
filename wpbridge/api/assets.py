"""Script and stylesheet enqueueing."""

from typing import Callable, Optional, Union

from wpbridge.runtime import WpApp


def enqueue_script(
    app: WpApp,
    handle: str,
    src: str,
    deps: Optional[list[str]] = None,
    version: Union[str, bool, None] = False,
    in_footer: bool = False,
) -> None:
    """Enqueue a .js script.

    Parameters
    ----------
    app : WpApp
        WordPress instance.
    handle : str
        Name of the script. Should be unique.
    src : str
        Full URL of the script, or path relative to the WordPress root.
    deps : list[str], optional
        Handles of scripts this one depends on.
    version : str, bool or None
        Version query string; False uses the WordPress version, None adds none.
    in_footer : bool
        Print the script before </body> instead of in <head>.
    """
    app.invoke("wp_enqueue_script", handle, src, list(deps or []), version, in_footer)


def enqueue_scripts(app: WpApp, callback: Callable[[], None]) -> None:
    """Register a ``wp_enqueue_scripts`` action."""
    app.add_filter("wp_enqueue_scripts", callback)


def enqueue_style(app: WpApp, handle: str, src: str) -> None:
    """Enqueue a stylesheet."""
    app.invoke("wp_enqueue_style", handle, src)
