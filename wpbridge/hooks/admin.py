"""Dashboard, admin screen and footer hooks.

Writer callbacks receive the response stream and write HTML to it directly.
"""

from typing import Callable, Optional, TextIO

from loguru import logger

from wpbridge.config import config
from wpbridge.runtime import WpApp

HtmlWriter = Callable[[TextIO], None]


def dashboard_right_now(app: WpApp, writer: HtmlWriter) -> None:
    """Add content to the end of the dashboard "At a Glance" box (``rightnow_end``)."""
    app.add_filter("rightnow_end", lambda: writer(app.output))


def dashboard_widget(app: WpApp, widget_id: str, widget_name: str, writer: HtmlWriter) -> None:
    """Register a dashboard widget.

    Hooks ``wp_dashboard_setup`` and, when it fires, calls
    ``wp_add_dashboard_widget`` with a render callback that hands the response
    stream to ``writer``.
    """

    def setup() -> None:
        app.invoke("wp_add_dashboard_widget", widget_id, widget_name, lambda: writer(app.output))

    app.add_filter("wp_dashboard_setup", setup)


def on_admin_init(app: WpApp, callback: Callable[[], None]) -> None:
    """Register an ``admin_init`` action."""
    app.add_filter("admin_init", callback)


def admin_menu(app: WpApp, callback: Callable[[], None]) -> None:
    """Register an ``admin_menu`` action."""
    app.add_filter("admin_menu", callback)


def admin_notices(app: WpApp, callback: Callable[[], str]) -> None:
    """Register an ``admin_notices`` action whose returned HTML is echoed."""
    app.add_filter("admin_notices", lambda: app.echo(callback()))


def add_management_page(
    app: WpApp,
    page_title: str,
    menu_title: str,
    capability: str,
    slug: str,
    writer: HtmlWriter,
    position: Optional[int] = None,
) -> Optional[str]:
    """Add a submenu page under Tools.

    Parameters
    ----------
    app : WpApp
        WordPress instance.
    page_title : str
        Text of the page <title>.
    menu_title : str
        Text of the menu entry.
    capability : str
        Capability required to see the page.
    slug : str
        Unique menu slug.
    writer : HtmlWriter
        Renders the page body.
    position : int, optional
        Position in the Tools menu.

    Returns
    -------
    str or None
        The page hook suffix, or None when WordPress rejected the page
        (e.g. the current user lacks ``capability``).
    """
    hook = app.invoke(
        "add_management_page",
        page_title,
        menu_title,
        capability,
        slug,
        lambda: writer(app.output),
        position,
    )
    if not hook:
        logger.warning(f"Management page '{slug}' was not registered (capability: {capability})")
        return None
    return str(hook)


def footer(app: WpApp, writer: HtmlWriter, priority: Optional[int] = None) -> None:
    """Register a ``wp_footer`` writer."""
    if priority is None:
        priority = config.priorities.footer
    app.add_filter("wp_footer", lambda: writer(app.output), priority)


def admin_footer_text(app: WpApp, writer: HtmlWriter, priority: Optional[int] = None) -> None:
    """Register an ``admin_footer_text`` writer."""
    if priority is None:
        priority = config.priorities.footer
    app.add_filter("admin_footer_text", lambda: writer(app.output), priority)
