"""In-process stand-in for a WordPress runtime.

``RecordingRuntime`` records every invoke, answers the WordPress functions the
adapters use from in-memory tables, and can fire registered hooks so callbacks
run the way WordPress would run them.
"""

import io
import itertools
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Optional

from loguru import logger

from wpbridge.exceptions import RequestTerminated, UnknownFunctionError
from wpbridge.runtime import PhpValue

SITE_URL = "http://example.org"


@dataclass(frozen=True)
class RuntimeCall:
    """One recorded invoke."""

    name: str
    args: tuple[PhpValue, ...]


@dataclass(frozen=True)
class HookEntry:
    """A callback registered on a hook."""

    priority: int
    sequence: int
    callback: Callable[..., Any]
    accepted_args: int

    def call(self, args: tuple[PhpValue, ...]) -> Any:
        if self.accepted_args <= 0:
            return self.callback()
        return self.callback(*args[: self.accepted_args])


@dataclass(frozen=True)
class EnqueuedScript:
    """A script passed to ``wp_enqueue_script``."""

    handle: str
    src: str
    deps: list[str]
    version: PhpValue
    in_footer: bool


class RecordingRuntime:
    """Runtime double that records calls and keeps WordPress-like state.

    Parameters
    ----------
    wp_version : str
        Value of the ``wp_version`` global.
    strict : bool
        Raise ``UnknownFunctionError`` for functions with no handler or
        canned result instead of returning None.
    """

    def __init__(self, wp_version: str = "6.4.2", strict: bool = False):
        self.output = io.StringIO()
        self.globals: dict[str, PhpValue] = {"wp_version": wp_version}
        self.strict = strict
        self.calls: list[RuntimeCall] = []

        self.hooks: dict[str, list[HookEntry]] = defaultdict(list)
        self.options: dict[str, PhpValue] = {}
        self.metadata: dict[tuple[str, int, str], list[PhpValue]] = defaultdict(list)
        self.shortcodes: dict[str, Callable[..., str]] = {}
        self.dashboard_widgets: dict[str, tuple[str, Callable[[], None]]] = {}
        self.management_pages: dict[str, Callable[[], None]] = {}
        self.scripts: dict[str, EnqueuedScript] = {}
        self.styles: dict[str, str] = {}

        self._sequence = itertools.count()
        self._meta_ids = itertools.count(1)
        self._canned: dict[str, PhpValue] = {}
        self._handlers: dict[str, Callable[..., PhpValue]] = {
            "add_filter": self._add_filter,
            "add_action": self._add_filter,
            "get_option": self._get_option,
            "update_option": self._update_option,
            "site_url": self._site_url,
            "get_metadata": self._get_metadata,
            "add_user_meta": self._add_user_meta,
            "update_user_meta": self._update_user_meta,
            "delete_user_meta": self._delete_user_meta,
            "add_shortcode": self._add_shortcode,
            "wp_add_dashboard_widget": self._add_dashboard_widget,
            "add_management_page": self._add_management_page,
            "wp_enqueue_script": self._enqueue_script,
            "wp_enqueue_style": self._enqueue_style,
            "wp_die": self._wp_die,
        }

    # Runtime surface

    def invoke(self, name: str, *args: PhpValue) -> PhpValue:
        self.calls.append(RuntimeCall(name, args))
        if name in self._canned:
            return self._canned[name]
        handler = self._handlers.get(name)
        if handler is not None:
            return handler(*args)
        if self.strict:
            raise UnknownFunctionError(name)
        logger.debug(f"No handler for runtime function {name}, returning None")
        return None

    def set_result(self, name: str, value: PhpValue) -> None:
        """Answer every invoke of ``name`` with ``value``."""
        self._canned[name] = value

    def set_handler(self, name: str, handler: Callable[..., PhpValue]) -> None:
        """Answer invokes of ``name`` by calling ``handler(*args)``."""
        self._canned.pop(name, None)
        self._handlers[name] = handler

    # Inspection

    def calls_to(self, name: str) -> list[RuntimeCall]:
        """Recorded invokes of one function, in call order."""
        return [call for call in self.calls if call.name == name]

    def registrations(self, hook_name: str) -> list[HookEntry]:
        """Callbacks on a hook in the order WordPress would run them."""
        return sorted(self.hooks.get(hook_name, []), key=lambda e: (e.priority, e.sequence))

    def has_filter(self, hook_name: str) -> bool:
        return bool(self.hooks.get(hook_name))

    # Firing hooks

    def apply_filters(self, hook_name: str, value: PhpValue, *args: PhpValue) -> PhpValue:
        """Pass ``value`` through every filter on ``hook_name``."""
        for entry in self.registrations(hook_name):
            value = entry.call((value, *args))
        return value

    def do_action(self, hook_name: str, *args: PhpValue) -> None:
        """Run every callback on ``hook_name``."""
        for entry in self.registrations(hook_name):
            entry.call(args)

    def do_shortcode(self, tag: str, attrs: PhpValue = "", content: Optional[str] = None) -> str:
        """Render one shortcode the way WordPress calls its handler."""
        return self.shortcodes[tag](attrs, content, tag)

    # WordPress functions

    def _add_filter(
        self, hook_name: str, callback: Callable[..., Any], priority: int = 10, accepted_args: int = 1
    ) -> bool:
        entry = HookEntry(int(priority), next(self._sequence), callback, int(accepted_args))
        self.hooks[hook_name].append(entry)
        return True

    def _get_option(self, option: str, default: PhpValue = False) -> PhpValue:
        return self.options.get(option, default)

    def _update_option(self, option: str, value: PhpValue, autoload: PhpValue = None) -> bool:
        if option in self.options and self.options[option] == value:
            return False
        self.options[option] = value
        return True

    def _site_url(self, path: str = "", scheme: Optional[str] = None) -> str:
        url = SITE_URL
        if scheme == "https":
            url = "https://" + url.split("://", 1)[1]
        if path:
            url += "/" + path.lstrip("/")
        return url

    def _get_metadata(self, meta_type: str, object_id: int, meta_key: str = "", single: bool = False) -> PhpValue:
        if not object_id:
            return False
        if not meta_key:
            return {
                key: list(values)
                for (kind, oid, key), values in self.metadata.items()
                if kind == meta_type and oid == object_id and values
            }
        values = self.metadata.get((meta_type, object_id, meta_key), [])
        if single:
            return values[0] if values else ""
        return list(values)

    def _add_user_meta(self, user_id: int, meta_key: str, meta_value: PhpValue, unique: bool = False) -> PhpValue:
        values = self.metadata[("user", user_id, meta_key)]
        if unique and values:
            return False
        values.append(meta_value)
        return next(self._meta_ids)

    def _update_user_meta(self, user_id: int, meta_key: str, meta_value: PhpValue, prev_value: PhpValue = "") -> PhpValue:
        values = self.metadata[("user", user_id, meta_key)]
        if not values:
            return self._add_user_meta(user_id, meta_key, meta_value)
        changed = False
        for i, current in enumerate(values):
            if prev_value != "" and current != prev_value:
                continue
            if current != meta_value:
                values[i] = meta_value
                changed = True
        return changed

    def _delete_user_meta(self, user_id: int, meta_key: str, meta_value: PhpValue = "") -> bool:
        values = self.metadata.get(("user", user_id, meta_key))
        if not values:
            return False
        if meta_value == "":
            values.clear()
            return True
        remaining = [v for v in values if v != meta_value]
        if len(remaining) == len(values):
            return False
        values[:] = remaining
        return True

    def _add_shortcode(self, tag: str, callback: Callable[..., str]) -> None:
        self.shortcodes[tag] = callback

    def _add_dashboard_widget(self, widget_id: str, widget_name: str, callback: Callable[[], None], *args: PhpValue) -> None:
        self.dashboard_widgets[widget_id] = (widget_name, callback)

    def _add_management_page(
        self,
        page_title: str,
        menu_title: str,
        capability: str,
        slug: str,
        callback: Callable[[], None],
        position: Optional[int] = None,
    ) -> str:
        hook = f"tools_page_{slug}"
        self.management_pages[hook] = callback
        return hook

    def _enqueue_script(
        self, handle: str, src: str = "", deps: Optional[list[str]] = None, ver: PhpValue = False, in_footer: bool = False
    ) -> None:
        self.scripts[handle] = EnqueuedScript(handle, src, list(deps or []), ver, bool(in_footer))

    def _enqueue_style(self, handle: str, src: str = "", *args: PhpValue) -> None:
        self.styles[handle] = src

    def _wp_die(self, message: str = "", *args: PhpValue) -> None:
        raise RequestTerminated(message)
