from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from sitemap_styles.core.config import StylesheetConfig
from sitemap_styles.core.plugins.contracts import StylesheetPlugin
from sitemap_styles.core.stylesheet.hooks import DEFAULT_PRIORITY, StylesheetHooks

log = logging.getLogger("sitemaps.plugins")


@dataclass(frozen=True)
class PluginInfo:
    name: str
    version: str
    enabled_by_default: bool
    module_path: str


@dataclass
class PluginResolution:
    plugins: List[PluginInfo]
    fingerprint: str
    warnings: List[Dict[str, Any]]
    objects: Dict[str, StylesheetPlugin] = field(default_factory=dict)


def _warning(code: str, message: str, **data: Any) -> Dict[str, Any]:
    return {"code": code, "severity": "warn", "message": message, "data": data}


class PluginRegistry:
    """
    Stylesheet plugin registry.

    Discovers plugins from:
      <package_root>/plugins/stylesheet/*.py

    Each plugin module must expose:
      PLUGIN = <object with fields: name, version, enabled_by_default, hooks>
    """

    def __init__(self, plugins_dir: Optional[Path] = None):
        if plugins_dir is None:
            # sitemap_styles/core/plugins/registry.py -> parents[2] = sitemap_styles
            plugins_dir = Path(__file__).resolve().parents[2] / "plugins" / "stylesheet"
        self.plugins_dir = Path(plugins_dir)

    def discover(self) -> Tuple[List[PluginInfo], Dict[str, Any], List[Dict[str, Any]]]:
        """
        Returns (plugins, objects_by_name, warnings). Never raises for a single
        bad plugin; bad ones are skipped with a warning.
        """
        warnings: List[Dict[str, Any]] = []
        plugins: List[PluginInfo] = []
        objects: Dict[str, Any] = {}

        if not self.plugins_dir.exists():
            return [], {}, [_warning(
                "plugins.dir_missing",
                f"No stylesheet plugin directory found at {self.plugins_dir}",
                path=str(self.plugins_dir),
            )]

        for py in sorted(self.plugins_dir.glob("*.py")):
            if py.name.startswith("_"):
                continue

            try:
                plugin = self._load_symbol(py, symbol="PLUGIN")
            except Exception as e:
                log.warning("plugin load failed path=%s err=%s", py, e)
                warnings.append(_warning(
                    "plugins.load_failed",
                    f"Failed to load plugin {py.name}: {e}",
                    module_path=str(py),
                ))
                continue

            if plugin is None:
                warnings.append(_warning(
                    "plugins.missing_symbol",
                    f"Plugin {py.name} missing PLUGIN symbol; skipped",
                    module_path=str(py),
                ))
                continue

            name = str(getattr(plugin, "name", None) or py.stem)
            if name in objects:
                warnings.append(_warning(
                    "plugins.duplicate_name",
                    f"Duplicate plugin name '{name}' in {py.name}; skipped",
                    module_path=str(py),
                ))
                continue

            plugins.append(PluginInfo(
                name=name,
                version=str(getattr(plugin, "version", None) or "0.0.0"),
                enabled_by_default=bool(getattr(plugin, "enabled_by_default", True)),
                module_path=str(py),
            ))
            objects[name] = plugin

        return plugins, objects, warnings

    def resolve(self, cfg: Optional[StylesheetConfig] = None) -> PluginResolution:
        """Resolve active plugins + compute fingerprint."""
        cfg = cfg or StylesheetConfig()
        plugins, objects, warnings = self.discover()

        active = [
            p for p in plugins
            if cfg.is_plugin_enabled(p.name, enabled_by_default=p.enabled_by_default)
        ]
        return PluginResolution(
            plugins=active,
            fingerprint=self._fingerprint(active),
            warnings=warnings,
            objects={p.name: objects[p.name] for p in active},
        )

    def build_hooks(self, cfg: Optional[StylesheetConfig] = None) -> Tuple[StylesheetHooks, PluginResolution]:
        """Register every active plugin's handlers on a fresh StylesheetHooks."""
        res = self.resolve(cfg)
        hooks = StylesheetHooks()

        for info in res.plugins:
            plugin = res.objects[info.name]
            priority = int(getattr(plugin, "priority", DEFAULT_PRIORITY))
            try:
                for hook_name, spec in dict(getattr(plugin, "hooks", None) or {}).items():
                    hooks.add_all(hook_name, spec, priority=priority)
            except (TypeError, ValueError) as e:
                res.warnings.append(_warning(
                    "plugins.register_failed",
                    f"Failed to register hooks for plugin '{info.name}': {e}",
                    module_path=info.module_path,
                ))

        log.debug(
            "plugins.resolved active=%s fingerprint=%s warnings=%s",
            [p.name for p in res.plugins],
            res.fingerprint,
            len(res.warnings),
        )
        return hooks, res

    def _fingerprint(self, plugins: List[PluginInfo]) -> str:
        """
        Stable fingerprint for the active plugin set.
        Uses paths relative to the plugin dir so it is identical across machines.
        """
        h = hashlib.sha256()
        root = self.plugins_dir.resolve()

        for p in sorted(plugins, key=lambda x: (x.name, x.version, x.module_path)):
            mp = Path(p.module_path).resolve()
            try:
                rel = mp.relative_to(root).as_posix()
            except ValueError:
                rel = mp.as_posix()
            h.update(f"{p.name}:{p.version}:{rel}".encode("utf-8"))

        return h.hexdigest()[:16]

    def _load_symbol(self, module_path: Path, symbol: str):
        module_path = Path(module_path).resolve()

        # module name must be deterministic across interpreter restarts
        path_key = str(module_path).replace("\\", "/").lower().encode("utf-8")
        path_hash = hashlib.sha1(path_key).hexdigest()[:16]
        module_name = f"sitemaps_plugin_{module_path.stem}_{path_hash}"

        spec = importlib.util.spec_from_file_location(module_name, str(module_path))
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot create module spec for {module_path}")

        mod = importlib.util.module_from_spec(spec)

        # register before exec_module; dataclasses looks the module up in sys.modules
        sys.modules[module_name] = mod
        try:
            spec.loader.exec_module(mod)
        except Exception:
            sys.modules.pop(module_name, None)
            raise

        return getattr(mod, symbol, None)
