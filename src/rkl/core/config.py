#!/usr/bin/env python3
"""
RKL SETTINGS - Startup Configuration
------------------------------------
Builds the immutable run settings from four layers, later layers winning:
built-in defaults, the optional YAML config file, the environment, and
finally explicit CLI flags.

Config file keys (all optional):
    kubectl:    base kubectl command, including any server/cert flags
    middle:     default middle-name infix (e.g. '-sophon')
    exec_shell: shell started by `rkl exec` (default 'sh')

Author: RKL Team
Date: 2026-10-19
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from rkl.core.errors import ConfigError
from rkl.core.models import DEFAULT_CANDIDATE_SIZE, MAX_CANDIDATE_SIZE, ResolutionConfig

logger = logging.getLogger("rkl.config")

CANDIDATE_SIZE_ENV = "RKL_CANDIDATE_SIZE"
CONFIG_PATH_ENV = "RKL_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/rkl/config.yaml")
KNOWN_KEYS = ("kubectl", "middle", "exec_shell")


@dataclass(frozen=True)
class RklSettings:
    kubectl: str = "kubectl"
    exec_shell: str = "sh"
    resolution: ResolutionConfig = field(default_factory=ResolutionConfig)


def resolve_candidate_size(raw: Optional[str]) -> int:
    """
    Interprets RKL_CANDIDATE_SIZE. Anything absent, unparsable or below 1
    falls back to the default; large values are clamped to the maximum.
    """
    if raw is None:
        return DEFAULT_CANDIDATE_SIZE
    try:
        size = int(raw.strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric {CANDIDATE_SIZE_ENV}={raw!r}")
        return DEFAULT_CANDIDATE_SIZE
    if size < 1:
        return DEFAULT_CANDIDATE_SIZE
    return min(size, MAX_CANDIDATE_SIZE)


def load_config_file(path: Path) -> Dict[str, Any]:
    """Reads the YAML config file. A missing file yields an empty mapping."""
    path = path.expanduser()
    if not path.exists():
        logger.debug(f"No config file at {path}")
        return {}

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(path)
    except (YAMLError, OSError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    values = {}
    for key, value in data.items():
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown config key '{key}' in {path}")
            continue
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            raise ConfigError(f"Config key '{key}' in {path} must be a single value, got {type(value).__name__}")
        values[key] = str(value)
    return values


def load_settings(env: Optional[Mapping[str, str]] = None,
                  config_path: Optional[Path] = None,
                  middle: Optional[str] = None,
                  kubectl: Optional[str] = None) -> RklSettings:
    """
    Assembles RklSettings once at startup. `middle` and `kubectl` are the
    CLI overrides; None means the flag was not given.
    """
    env = os.environ if env is None else env

    if config_path is None:
        config_path = Path(env.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
    file_values = load_config_file(config_path)

    middle_name = middle if middle is not None else file_values.get("middle")
    resolution = ResolutionConfig(
        candidate_window_size=resolve_candidate_size(env.get(CANDIDATE_SIZE_ENV)),
        # An empty infix behaves as if none was configured
        middle_name=middle_name or None,
    )

    return RklSettings(
        kubectl=kubectl or file_values.get("kubectl", "kubectl"),
        exec_shell=file_values.get("exec_shell", "sh"),
        resolution=resolution,
    )
