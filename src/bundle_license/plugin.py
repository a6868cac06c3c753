"""Bundler plugin shim forwarding lifecycle hooks to a license engine."""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Optional

from .core.config import load_options
from .core.engine import LicenseEngine
from .core.models import PluginOptions, effective_source_map, source_map_disabled
from .core.registry import resolve_engine

logger = logging.getLogger(__name__)


class LicensePlugin:
    """
    Hook descriptor handed to the bundler host.

    Exposes the engine's name and the four lifecycle hooks. The host calls
    them in order: load (per module), options (at most once),
    transform_bundle, on_generate.
    """

    def __init__(self, options: PluginOptions, engine: LicenseEngine):
        self._options = options
        self.engine = engine

    @property
    def name(self) -> str:
        """Plugin name, as reported by the engine."""
        return self.engine.name

    def load(self, module_id: str) -> None:
        """
        Called by the host when a module is loaded: scan it as a dependency.

        Args:
            module_id: Module file path
        """
        logger.debug(f"Scanning dependency: {module_id}")
        self.engine.scan_dependency(module_id)

    def options(self, opts: Any) -> None:
        """
        Called by the host with its global build options.

        Disables source maps on the engine when the build disables them,
        unless the plugin options already set the flag. Never re-enables.

        Args:
            opts: Host build options (may be None)
        """
        if opts is None:
            return

        if self._options.source_map_explicit:
            # Source map has been set on the plugin itself.
            return

        if source_map_disabled(opts):
            logger.info("Source maps disabled by build options")
            self.engine.disable_source_map()

    def transform_bundle(
        self, code: str, output_options: Any = None
    ) -> Any:
        """
        Called by the host with the final bundle: prepend the license banner.

        Args:
            code: Bundle content
            output_options: Options for this output (None means defaults)

        Returns:
            Whatever the engine's prepend_banner returns
        """
        source_map = effective_source_map(output_options)
        logger.debug(f"Prepending banner (source map: {source_map})")
        return self.engine.prepend_banner(code, source_map)

    def on_generate(self) -> None:
        """Called by the host once output is generated: export third parties."""
        logger.debug("Exporting third-party report")
        self.engine.export_third_parties()

    def hooks(self) -> dict[str, Any]:
        """
        Return the descriptor keyed by generic lifecycle hook names.

        Returns:
            Dictionary with name, load, options, transformBundle, onGenerate
        """
        return {
            "name": self.name,
            "load": self.load,
            "options": self.options,
            "transformBundle": self.transform_bundle,
            "onGenerate": self.on_generate,
        }


def license_plugin(
    options: Optional[Mapping[str, Any]] = None,
    engine: Optional[Callable[[Mapping[str, Any]], LicenseEngine] | str] = None,
) -> LicensePlugin:
    """
    Create a license plugin for a bundler host.

    Args:
        options: Plugin configuration (sourceMap/sourcemap, engine keys, ...)
        engine: Engine class, factory or import path;
            falls back to the 'engine' option

    Returns:
        LicensePlugin wired to a freshly constructed engine
    """
    plugin_options = PluginOptions.from_mapping(options)
    factory = resolve_engine(engine if engine is not None else plugin_options.engine)
    instance = factory(plugin_options.raw)
    logger.info(f"Created license plugin: {instance.name}")
    return LicensePlugin(plugin_options, instance)


def license_plugin_from_file(
    path: Path | str,
    engine: Optional[Callable[[Mapping[str, Any]], LicenseEngine] | str] = None,
) -> LicensePlugin:
    """Create a license plugin from a YAML or JSON options file."""
    return license_plugin(load_options(path), engine=engine)
