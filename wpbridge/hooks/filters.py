"""Typed registration of WordPress content filters and shortcodes."""

from typing import Any, Callable, Optional, Union

from loguru import logger

from wpbridge.runtime import WpApp

# (content) -> content
ContentFilter = Callable[[str], str]

# (title, post_id) -> title
TitleFilter = Callable[[str, int], str]

# (link, post_id) -> link
PermalinkFilter = Callable[[str, int], str]

# (attrs, content) -> replacement text
ShortcodeHandler = Callable[[dict[str, Any], str], str]


def filter_content(app: WpApp, callback: ContentFilter, priority: Optional[int] = None) -> None:
    """Register a ``the_content`` filter."""
    app.add_filter("the_content", callback, priority)


def filter_title(app: WpApp, callback: TitleFilter, priority: Optional[int] = None) -> None:
    """Register a ``the_title`` filter."""
    app.add_filter("the_title", callback, priority)


def filter_permalink(app: WpApp, callback: PermalinkFilter, priority: Optional[int] = None) -> None:
    """Register a ``the_permalink`` filter."""
    app.add_filter("the_permalink", callback, priority)


def add_shortcode(app: WpApp, tag: str, handler: ShortcodeHandler) -> None:
    """Register a handler for ``[tag]`` shortcodes.

    WordPress calls shortcode handlers with ``(attrs, content, tag)``, where
    ``attrs`` is an empty string for a bare ``[tag]`` and ``content`` is null
    for self-closing shortcodes. The handler always sees a dict and a string.

    Parameters
    ----------
    app : WpApp
        WordPress instance.
    tag : str
        Shortcode tag, without brackets.
    handler : ShortcodeHandler
        Returns the text that replaces the shortcode in the post.
    """

    def render(
        attrs: Union[dict[str, Any], str, None],
        content: Optional[str] = None,
        shortcode_tag: Optional[str] = None,
    ) -> str:
        return handler(attrs if isinstance(attrs, dict) else {}, content or "")

    app.invoke("add_shortcode", tag, render)
    logger.debug(f"Registered shortcode [{tag}]")
