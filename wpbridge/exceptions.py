"""Exceptions raised by wpbridge and its runtime doubles."""

from typing import Optional


class BridgeError(Exception):
    """Base class for wpbridge errors."""

    pass


class RequestTerminated(BridgeError):
    """Raised when the runtime ends the current request (``wp_die``).

    The adapter never catches this; it unwinds through the hook that called
    ``wp_die`` up to whoever is driving the request.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message or ""
        super().__init__(self.message or "Request terminated")


class UnknownFunctionError(BridgeError):
    """Raised by a strict runtime double for a function it cannot answer."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No handler or canned result for runtime function: {name}")
