import os
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")

_config_cache: Dict[str, Dict[str, Any]] = {}


# ==================================================
# Expand ${ENV_VAR} into real environment values
# ==================================================
def _resolve_env_value(value: Any):
    """Replace ${VAR} with environment variable value."""
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        env_var = value[2:-1]
        return os.getenv(env_var)
    return value


def resolve_env_values(obj: Any):
    """Recursively resolve values inside config dict."""
    if isinstance(obj, dict):
        return {k: resolve_env_values(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [resolve_env_values(v) for v in obj]
    else:
        return _resolve_env_value(obj)


def as_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


# ==================================================
# Load config.yaml
# ==================================================
def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Read the YAML config and expand environment placeholders."""
    load_dotenv()

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return resolve_env_values(raw)


def get_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Cached variant of load_config()."""
    path = os.path.abspath(config_path)
    if path not in _config_cache:
        _config_cache[path] = load_config(path)
    return _config_cache[path]
