"""Logic for loading the YAML configuration file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "modules": {
        "suffixes": [".ko"],
        "modinfo": "modinfo",
        "query_timeout": None,
    },
    "attribution": {
        "max_depth": 1024,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file on top of the defaults.

    Each section is updated key by key. Module suffixes from the file are
    added to the default ``.ko`` rather than replacing it, so plain modules
    are always found.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.is_file():
        msg = f"Configuration file {path} does not exist"
        raise SystemExit(msg)
    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        msg = f"Configuration file {path} must contain a mapping"
        raise SystemExit(msg)

    for section, values in user_config.items():
        if section not in config:
            logger.warning("Ignoring unknown configuration section %r", section)
            continue
        if values is None:
            continue
        if not isinstance(values, dict):
            msg = f"Configuration section {section!r} must be a mapping"
            raise SystemExit(msg)
        config[section].update(values)

    suffixes = (user_config.get("modules") or {}).get("suffixes")
    if suffixes is not None:
        config["modules"]["suffixes"] = sorted(
            set(DEFAULT_CONFIG["modules"]["suffixes"]) | set(suffixes)
        )
    return config
