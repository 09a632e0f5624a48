from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

log = logging.getLogger("sitemaps.stylesheet")

STYLESHEET_COLUMNS = "stylesheet_columns"
STYLESHEET_CSS = "stylesheet_css"
STYLESHEET_CONTENT = "stylesheet_content"
STYLESHEET_INDEX_CONTENT = "stylesheet_index_content"

HOOK_NAMES: tuple[str, ...] = (
    STYLESHEET_COLUMNS,
    STYLESHEET_CSS,
    STYLESHEET_CONTENT,
    STYLESHEET_INDEX_CONTENT,
)

DEFAULT_PRIORITY = 10

Filter = Callable[[Any], Any]
HandlerSpec = Union[Filter, Iterable[Filter]]


class UnknownHookError(ValueError):
    pass


@dataclass(frozen=True)
class _Handler:
    fn: Filter
    priority: int
    seq: int


class StylesheetHooks:
    """
    Named filter chains for the stylesheet pipeline.

    Hook contracts:
      stylesheet_columns        ColumnMap -> ColumnMap
      stylesheet_css            str -> str
      stylesheet_content        str -> str   (leaf sitemap stylesheet)
      stylesheet_index_content  str -> str   (sitemap index stylesheet)

    Handlers run in registration order (stable-sorted by priority, lower first);
    each receives the previous handler's output. A hook with no handlers is
    the identity function.
    """

    def __init__(self, handlers: Optional[Mapping[str, HandlerSpec]] = None):
        self._handlers: Dict[str, List[_Handler]] = {name: [] for name in HOOK_NAMES}
        self._seq = 0
        for name, spec in (handlers or {}).items():
            self.add_all(name, spec)

    def add(self, name: str, fn: Filter, *, priority: int = DEFAULT_PRIORITY) -> None:
        if name not in self._handlers:
            raise UnknownHookError(f"Unknown stylesheet hook: {name!r} (expected one of {', '.join(HOOK_NAMES)})")
        if not callable(fn):
            raise UnknownHookError(f"Handler for hook {name!r} must be callable, got {type(fn).__name__}")

        self._handlers[name].append(_Handler(fn=fn, priority=int(priority), seq=self._seq))
        self._seq += 1

    def add_all(self, name: str, spec: HandlerSpec, *, priority: int = DEFAULT_PRIORITY) -> None:
        # tolerate a single callable or a list of them
        if callable(spec):
            self.add(name, spec, priority=priority)
            return
        for fn in spec:
            self.add(name, fn, priority=priority)

    def handlers(self, name: str) -> List[Filter]:
        chain = self._handlers.get(name) or []
        return [h.fn for h in sorted(chain, key=lambda h: (h.priority, h.seq))]

    def apply(self, name: str, value: Any) -> Any:
        if name not in self._handlers:
            raise UnknownHookError(f"Unknown stylesheet hook: {name!r}")

        chain = self.handlers(name)
        for fn in chain:
            value = fn(value)

        if chain:
            log.debug("hook.applied name=%s handlers=%s", name, len(chain))
        return value
