"""Core data models for Bundle License."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Bundlers renamed `sourceMap` to `sourcemap` at some point; both are honoured.
SOURCE_MAP_KEYS = ("sourceMap", "sourcemap")


def _lookup(opts: Any, key: str) -> Any:
    """Read a flag from a mapping or an attribute-style options object."""
    if isinstance(opts, Mapping):
        return opts.get(key)
    return getattr(opts, key, None)


def source_map_disabled(opts: Any) -> bool:
    """
    Check whether host options explicitly turn source maps off.

    Only an exact ``False`` under either alias counts. ``None``, ``True``,
    missing keys and falsy non-booleans leave source maps alone.

    Args:
        opts: Host options (mapping, object with attributes, or None)

    Returns:
        True if either alias key is set to False
    """
    if opts is None:
        return False
    return any(_lookup(opts, key) is False for key in SOURCE_MAP_KEYS)


def effective_source_map(opts: Any) -> bool:
    """Per-call source map flag: enabled unless explicitly disabled."""
    return not source_map_disabled(opts)


class PluginOptions(BaseModel):
    """
    Normalised plugin configuration.

    Collapses the ``sourceMap``/``sourcemap`` aliases into one canonical
    ``source_map`` field and remembers whether the user set it. Every other
    key is engine-specific and kept verbatim in ``raw``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Values are engine-owned and left unvalidated.
    name: Any = Field(None, description="Name handed to the license engine")
    source_map: Any = Field(
        None,
        validation_alias=AliasChoices(*SOURCE_MAP_KEYS),
        description="Explicit source map setting (None when unset)",
    )
    engine: Any = Field(
        None, description="License engine class, factory or import path"
    )
    raw: Mapping[str, Any] = Field(
        default_factory=dict, description="Original option mapping, read-only"
    )

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> "PluginOptions":
        """
        Build options from a user supplied mapping.

        Args:
            options: Configuration mapping (None is treated as empty)

        Returns:
            Frozen PluginOptions instance
        """
        data = dict(options or {})
        # `raw` is filled below; a user key of that name stays engine-owned.
        model = cls.model_validate({k: v for k, v in data.items() if k != "raw"})
        return model.model_copy(update={"raw": MappingProxyType(data)})

    @property
    def source_map_explicit(self) -> bool:
        """True when either alias key was present, whatever its value."""
        return "source_map" in self.model_fields_set
