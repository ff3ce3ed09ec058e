"""
Configuration helpers for subcomb
"""

import re
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv


DEFAULT_CONFIG_PATH = "config/subcomb.yaml"
USER_CONFIG_PATH = Path.home() / ".subcomb" / "subcomb.yaml"

DEFAULT_OPTIONS = {
    "unique": True,
    "verbose": False,
    "format": "plain",
}


def _resolve_config_path(path: str) -> Path:
    p = Path(path).expanduser()
    if p.exists():
        return p

    # Outside the repo the bundled config is missing; use the one from `subcomb init`.
    if path == DEFAULT_CONFIG_PATH and USER_CONFIG_PATH.exists():
        return USER_CONFIG_PATH

    return p


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in config values"""
    if isinstance(value, str):
        pattern = r'\$\{([^:}]+)(?::-(.*?))?\}'

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.getenv(var_name, default_value)

        return re.sub(pattern, replacer, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration from YAML file with environment variable expansion"""
    load_dotenv()

    resolved = _resolve_config_path(config_path)
    if not resolved.exists():
        return {}

    env_candidate = resolved.parent / ".env"
    if env_candidate.exists():
        load_dotenv(env_candidate)

    try:
        with open(resolved, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        # stdout is reserved for results
        print(f"Warning: Could not load config from {config_path}: {e}", file=sys.stderr)
        return {}

    if not isinstance(config, dict):
        return {}
    return _expand_env_vars(config)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def resolve_options(config: Optional[Dict[str, Any]], **overrides: Any) -> Dict[str, Any]:
    """
    Merge run options: explicit overrides (non-None) win over the config
    file's `defaults` section, which wins over DEFAULT_OPTIONS.
    """
    options = dict(DEFAULT_OPTIONS)
    defaults_cfg = (config or {}).get("defaults") or {}
    if isinstance(defaults_cfg, dict):
        for key in DEFAULT_OPTIONS:
            if defaults_cfg.get(key) not in (None, ""):
                options[key] = defaults_cfg[key]

    for key, value in overrides.items():
        if value is not None:
            options[key] = value

    options["unique"] = _as_bool(options["unique"])
    options["verbose"] = _as_bool(options["verbose"])
    options["format"] = str(options["format"]).strip().lower()
    return options
