"""Typed registration of WordPress actions and filters."""

from .admin import (
    HtmlWriter,
    add_management_page,
    admin_footer_text,
    admin_menu,
    admin_notices,
    dashboard_right_now,
    dashboard_widget,
    footer,
    on_admin_init,
)
from .ajax import add_ajax_action, ajax_hook_name
from .filters import (
    ContentFilter,
    PermalinkFilter,
    ShortcodeHandler,
    TitleFilter,
    add_shortcode,
    filter_content,
    filter_permalink,
    filter_title,
)

__all__ = [
    "ContentFilter",
    "TitleFilter",
    "PermalinkFilter",
    "ShortcodeHandler",
    "HtmlWriter",
    "filter_content",
    "filter_title",
    "filter_permalink",
    "add_shortcode",
    "dashboard_right_now",
    "dashboard_widget",
    "on_admin_init",
    "admin_menu",
    "admin_notices",
    "add_management_page",
    "footer",
    "admin_footer_text",
    "add_ajax_action",
    "ajax_hook_name",
]
