# wpbridge: typed Python adapters for WordPress hooks and API calls

from wpbridge.api import (
    MetaList,
    MetaMap,
    MetaResult,
    SingleMeta,
    add_user_meta,
    delete_user_meta,
    enqueue_script,
    enqueue_scripts,
    enqueue_style,
    get_admin_email,
    get_metadata,
    get_option,
    get_site_url,
    get_user_meta,
    get_version,
    update_option,
    update_user_meta,
)
from wpbridge.hooks import (
    add_ajax_action,
    add_management_page,
    add_shortcode,
    admin_footer_text,
    admin_menu,
    admin_notices,
    dashboard_right_now,
    dashboard_widget,
    filter_content,
    filter_permalink,
    filter_title,
    footer,
    on_admin_init,
)
from wpbridge.runtime import PhpValue, WpApp, WpRuntime

__all__ = [
    "WpApp",
    "WpRuntime",
    "PhpValue",
    "SingleMeta",
    "MetaList",
    "MetaMap",
    "MetaResult",
    "get_version",
    "get_site_url",
    "get_option",
    "update_option",
    "get_admin_email",
    "get_metadata",
    "get_user_meta",
    "add_user_meta",
    "update_user_meta",
    "delete_user_meta",
    "enqueue_script",
    "enqueue_scripts",
    "enqueue_style",
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
]
