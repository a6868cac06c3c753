"""Load plugin options from YAML or JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


def load_options(path: Path | str) -> dict[str, Any]:
    """
    Read a plugin option mapping from disk.

    Args:
        path: YAML (.yaml/.yml) or JSON (.json) file

    Returns:
        Option mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed or is not a mapping
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise ValueError(f"Unsupported options file type: {path}")

    with open(path, encoding="utf-8") as f:
        text = f.read()

    if not text.strip():
        logger.debug(f"Options file {path} is empty")
        return {}

    try:
        if suffix in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Malformed options file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Options file {path} must contain a mapping, got {type(data).__name__}"
        )

    logger.info(f"Loaded {len(data)} option(s) from {path}")
    return data
