"""The seam between wpbridge and the host runtime running WordPress."""

import inspect
from typing import Any, Callable, Mapping, Optional, Protocol, TextIO

from loguru import logger

from wpbridge.config import config

# Any value exchanged with PHP: str, int, float, bool, dict, list or None.
PhpValue = Any

# accepted_args reported for callbacks taking *args
VARIADIC_ACCEPTED_ARGS = 99


class WpRuntime(Protocol):
    """Host runtime that has WordPress loaded.

    ``invoke`` calls a PHP function by name with positional arguments.
    ``output`` is the response stream of the current request.
    ``globals`` exposes PHP globals such as ``wp_version``.
    """

    output: TextIO
    globals: Mapping[str, PhpValue]

    def invoke(self, name: str, *args: PhpValue) -> PhpValue: ...


def count_accepted_args(callback: Callable[..., Any]) -> int:
    """Count the positional arguments a callback wants from WordPress.

    Parameters
    ----------
    callback : Callable
        The callable about to be registered on a hook.

    Returns
    -------
    int
        Number of positional parameters, ``VARIADIC_ACCEPTED_ARGS`` when the
        callable takes ``*args``, or 1 (the WordPress default) when the
        signature cannot be inspected.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return VARIADIC_ACCEPTED_ARGS
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


class WpApp:
    """Handle on a WordPress instance, passed to every adapter function."""

    def __init__(self, runtime: WpRuntime):
        self.runtime = runtime

    @property
    def output(self) -> TextIO:
        """Response stream of the current request."""
        return self.runtime.output

    def invoke(self, name: str, *args: PhpValue) -> PhpValue:
        """Call a WordPress function and return its raw result."""
        if config.LOG_RUNTIME_CALLS:
            logger.debug(f"invoke {name}{args!r}")
        return self.runtime.invoke(name, *args)

    def get_global(self, name: str, default: PhpValue = None) -> PhpValue:
        """Read a PHP global variable."""
        return self.runtime.globals.get(name, default)

    def echo(self, text: Optional[str]) -> None:
        """Write text to the response stream, like PHP ``echo``."""
        if text is None:
            return
        self.runtime.output.write(str(text))

    def add_filter(
        self,
        hook_name: str,
        callback: Callable[..., Any],
        priority: Optional[int] = None,
    ) -> None:
        """Register ``callback`` on a WordPress hook.

        Actions and filters share one table in WordPress, so this is used for
        both. The number of arguments WordPress passes is taken from the
        callback's signature.

        Parameters
        ----------
        hook_name : str
            Name of the action or filter.
        callback : Callable
            Called by WordPress when the hook fires.
        priority : int, optional
            Order within the hook; ``config.priorities.default`` when omitted.
        """
        if priority is None:
            priority = config.priorities.default
        accepted_args = count_accepted_args(callback)
        self.invoke("add_filter", hook_name, callback, priority, accepted_args)
        logger.debug(f"Registered {hook_name} at priority {priority}")
