"""Engine resolution: find the license engine a plugin should construct."""

import importlib
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .engine import LicenseEngine

logger = logging.getLogger(__name__)

EngineFactory = Callable[[Mapping[str, Any]], LicenseEngine]


def _import_engine(path: str) -> Any:
    """
    Import an engine from ``package.module:Attribute`` or ``package.module``.

    A bare module path must expose an ENGINE_CLASS variable pointing to the
    engine class.
    """
    module_path, _, attribute = path.partition(":")
    module = importlib.import_module(module_path)
    attribute = attribute or "ENGINE_CLASS"

    try:
        return getattr(module, attribute)
    except AttributeError:
        raise ValueError(
            f"Module '{module_path}' has no attribute '{attribute}'"
        ) from None


def resolve_engine(spec: Any) -> EngineFactory:
    """
    Turn an engine specification into a factory.

    Accepted specifications:
    - a LicenseEngine subclass or any callable taking the options mapping
    - an import path ``package.module:Attribute``
    - an import path ``package.module`` exposing ENGINE_CLASS

    Args:
        spec: Engine specification

    Returns:
        Callable building an engine from the option mapping

    Raises:
        ValueError: If no engine is given or the specification is unknown
    """
    if spec is None:
        raise ValueError(
            "No license engine configured: pass `engine=` or set the 'engine' option"
        )

    if isinstance(spec, str):
        if "." not in spec and ":" not in spec:
            raise ValueError(
                f"Unknown license engine '{spec}': expected an import path"
            )
        target = _import_engine(spec)
        logger.info(f"Loaded license engine from {spec}")
        return resolve_engine(target)

    if not callable(spec):
        raise ValueError(f"Invalid license engine specification: {spec!r}")

    return spec
