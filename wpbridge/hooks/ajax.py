"""Ajax action registration."""

from typing import Callable

from loguru import logger

from wpbridge.config import config
from wpbridge.runtime import WpApp


def ajax_hook_name(action: str, nopriv: bool = False) -> str:
    """Name of the hook WordPress fires for an ajax ``action``."""
    prefix = config.AJAX_NOPRIV_HOOK_PREFIX if nopriv else config.AJAX_HOOK_PREFIX
    return prefix + action


def add_ajax_action(app: WpApp, action: str, callback: Callable[[], str], nopriv: bool = False) -> None:
    """Register an ajax handler.

    When ``admin-ajax.php`` receives ``action``, the returned string is echoed
    and ``wp_die`` is called, ending the request. Termination is unconditional.

    Parameters
    ----------
    app : WpApp
        WordPress instance.
    action : str
        Ajax action name; the hook is ``wp_ajax_<action>``.
    callback : Callable[[], str]
        Produces the response body.
    nopriv : bool
        Also answer logged-out visitors (``wp_ajax_nopriv_<action>``).
    """

    def handle() -> None:
        app.echo(callback())
        logger.debug(f"Ajax action '{action}' answered, terminating request")
        app.invoke("wp_die")

    app.add_filter(ajax_hook_name(action), handle)
    if nopriv:
        app.add_filter(ajax_hook_name(action, nopriv=True), handle)
