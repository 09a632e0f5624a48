from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Protocol, Union


class StylesheetPlugin(Protocol):
    """
    Minimal stable plugin contract for stylesheet hooks.
    Plugin modules must export: PLUGIN (instance implementing this protocol)

    `hooks` maps a hook name (see sitemap_styles.core.stylesheet.hooks) to a
    filter callable or a list of them. An optional integer `priority`
    (default 10) orders the plugin's handlers against other plugins.
    """
    name: str
    version: str
    enabled_by_default: bool

    @property
    def hooks(self) -> Mapping[str, Union[Callable[[Any], Any], Iterable[Callable[[Any], Any]]]]:
        ...
