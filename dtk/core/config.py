# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for DTK front ends.

Provides a DtkConfig dataclass with display and tool defaults (rounding
precision, default digest, JSON indent, identifier batch size). The config
file is located by the ``DTK_CONFIG_PATH`` environment variable, falling
back to ~/.dtk/dtk_config.json; defaults are used when it is absent.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

# DTK internal
from dtk.core.digest import HashAlgorithm

logger = logging.getLogger(__name__)

_ENV_VAR = "DTK_CONFIG_PATH"
_CONFIG_DIR = ".dtk"
_CONFIG_FILE = "dtk_config.json"

# Smallest accepted value per integer field
_INT_MINIMUMS = {
    "distance_decimals": 0,
    "rate_decimals": 0,
    "json_indent": 0,
    "uuid_count": 1,
}


@dataclass
class DtkConfig:
    """Global DTK configuration with defaults.

    Attributes
    ----------
    distance_decimals : int
        Decimal places when displaying kilometers and miles.
    rate_decimals : int
        Decimal places when displaying requests per second.
    hash_algorithm : str
        Default digest name, resolved with ``HashAlgorithm.from_name``.
    json_indent : int
        Spaces per level for pretty-printed JSON.
    uuid_count : int
        Default number of UUIDs or ULIDs generated per request.
    """

    distance_decimals: int = 2
    rate_decimals: int = 6
    hash_algorithm: str = "sha256"
    json_indent: int = 2
    uuid_count: int = 1

    def save(self, path: Optional[Path] = None) -> Path:
        """Write the config as sorted, indented JSON and return the path.

        Parent directories are created as needed.
        """
        path = path or resolve_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(asdict(self), indent=2, sort_keys=True)
        path.write_text(text + "\n", encoding="utf-8")
        logger.debug("Saved config to %s", path)
        return path


def resolve_config_path() -> Path:
    """Resolve the config file path.

    Priority:
    1. ``DTK_CONFIG_PATH`` environment variable
    2. ``~/.dtk/dtk_config.json`` (default)

    Returns
    -------
    Path
    """
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / _CONFIG_DIR / _CONFIG_FILE


def _field_problem(name: str, value: Any) -> Optional[str]:
    """Describe why ``value`` is unacceptable for field ``name``, if it is."""
    if name in _INT_MINIMUMS:
        # bool is an int subclass but never a meaningful count
        if isinstance(value, bool) or not isinstance(value, int):
            return f"expected an integer, got {value!r}"
        minimum = _INT_MINIMUMS[name]
        if value < minimum:
            return f"must be >= {minimum}, got {value}"
        return None
    if name == "hash_algorithm":
        if not isinstance(value, str):
            return f"expected a string, got {value!r}"
        try:
            HashAlgorithm.from_name(value)
        except ValueError as e:
            return str(e)
    return None


def _validated_fields(data: Dict[str, Any], path: Path) -> Dict[str, Any]:
    """Keep the known, well-typed fields of ``data``.

    Unknown keys are ignored silently. Known keys with a bad value are
    dropped with a warning, so the dataclass default applies to them.
    """
    fields: Dict[str, Any] = {}
    for name, value in data.items():
        if name not in DtkConfig.__dataclass_fields__:
            continue
        problem = _field_problem(name, value)
        if problem is not None:
            logger.warning(
                "Ignoring config field %r in %s: %s", name, path, problem
            )
            continue
        fields[name] = value
    return fields


def load_config(path: Optional[Path] = None) -> DtkConfig:
    """Load configuration from file, or return defaults.

    A missing, unreadable or non-object file yields all defaults. Fields
    with a wrong type or out-of-range value fall back to their default
    individually, each with a logged warning.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to :func:`resolve_config_path`.

    Returns
    -------
    DtkConfig
        Loaded or default configuration.
    """
    path = path or resolve_config_path()
    if not path.exists():
        return DtkConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return DtkConfig()
    if not isinstance(data, dict):
        logger.warning(
            "Failed to load config from %s: expected a JSON object, got %s",
            path, type(data).__name__,
        )
        return DtkConfig()

    return DtkConfig(**_validated_fields(data, path))
