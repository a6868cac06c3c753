"""Base interface for license engines."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class LicenseEngine(ABC):
    """
    Abstract base class for license engines.

    An engine owns all scanning state (the discovered dependencies) and the
    source map flag. The bundler shim creates exactly one engine per plugin
    instance and only ever forwards lifecycle events to it.
    """

    def __init__(self, options: Mapping[str, Any]):
        """
        Initialize engine with the raw plugin options.

        Args:
            options: Read-only option mapping, engine-specific keys included
        """
        self.options = options

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the plugin name reported to the bundler host.

        Example:
            ```python
            @property
            def name(self) -> str:
                return self.options.get("name") or "bundle-license"
            ```
        """
        ...

    @abstractmethod
    def scan_dependency(self, module_id: str) -> None:
        """
        Record a module loaded by the host as a scanned dependency.

        Called once per loaded module, possibly several times for the same
        id and in no particular order. Deduplication is up to the engine.

        Args:
            module_id: Opaque module path supplied by the host
        """
        ...

    @abstractmethod
    def disable_source_map(self) -> None:
        """Stop producing source maps for banner insertion."""
        ...

    @abstractmethod
    def prepend_banner(self, code: str, source_map: bool) -> Any:
        """
        Prepend the license banner to generated bundle code.

        Must return a new value and leave ``code`` untouched.

        Args:
            code: Bundle text
            source_map: Whether a source map should reflect the banner

        Returns:
            New bundle text, or a mapping with ``code`` and ``map`` keys
            when a source map is produced

        Example:
            ```python
            def prepend_banner(self, code: str, source_map: bool) -> Any:
                banner = "/* third-party licenses */\\n"
                if not source_map:
                    return banner + code
                return {"code": banner + code, "map": self._shift_map(banner)}
            ```
        """
        ...

    @abstractmethod
    def export_third_parties(self) -> None:
        """
        Write the aggregated third-party report.

        Failures (unwritable destination, etc.) must be raised, not logged
        and swallowed: the host reports them as build failures.
        """
        ...
