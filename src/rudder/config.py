"""
rudder.config - Global config management.

~/.rudder/config.yaml:

    host: tiller.internal:44134

The release service address is resolved with this precedence:
  --host flag → $RUDDER_HOST → config.yaml host → ":44134"
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from rudder.errors import ConfigError


RUDDER_HOME = Path.home() / ".rudder"
HOST_ENV = "RUDDER_HOST"
DEFAULT_HOST = ":44134"


@dataclass
class RudderConfig:
    """Global rudder config."""
    host: str = ""


def config_path() -> Path:
    return RUDDER_HOME / "config.yaml"


def load_config(path: str | Path | None = None) -> RudderConfig:
    """Read ~/.rudder/config.yaml."""
    cp = Path(path) if path else config_path()
    if not cp.exists():
        return RudderConfig()

    try:
        with open(cp) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {cp}: {e}") from e

    if data is None:
        return RudderConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping: {cp}")

    return RudderConfig(host=str(data.get("host") or ""))


def resolve_host(flag: str = "", cfg: RudderConfig | None = None) -> str:
    """Pick the release service address."""
    if flag:
        return flag
    env = os.environ.get(HOST_ENV, "")
    if env:
        return env
    if cfg is None:
        cfg = load_config()
    return cfg.host or DEFAULT_HOST
