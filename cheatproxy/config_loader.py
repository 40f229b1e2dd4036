"""Configuration loading from YAML files with environment variable support."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import dotenv_values

from .core.exceptions import ConfigurationError

logger = logging.getLogger("cheat-proxy")

# Default path to the config file (relative to project root)
DEFAULT_CONFIG_PATH = "configs/config_default.yaml"

API_KEY_ENV = "OPENAI_API_KEY"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_PLATFORM = "python-fastapi"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_API_BASE = "https://api.openai.com/v1"
DEFAULT_TIMEOUT = 60.0

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class ProxySettings:
    """Startup settings for the proxy; the API key is read per request instead."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    platform: str = DEFAULT_PLATFORM
    log_level: str = DEFAULT_LOG_LEVEL
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: float = DEFAULT_TIMEOUT

    @property
    def completions_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/chat/completions"


def config_path_from_env() -> str:
    return os.getenv("CHEAT_PROXY_CONFIG") or DEFAULT_CONFIG_PATH


def resolve_config_path(path: str) -> Path:
    """Resolve config path relative to project root if needed."""
    if Path(path).is_absolute():
        return Path(path)
    project_root = Path(__file__).parent.parent
    return project_root / path


def resolve_env_path(config_path: Path, env_path: str | None = None) -> Path:
    """Resolve the env file path for a config file."""
    if env_path:
        return resolve_config_path(env_path)
    return config_path.with_name(".env")


def default_env_path() -> Path:
    """The .env beside the active config file (configs/.env by default)."""
    return resolve_env_path(resolve_config_path(config_path_from_env()))


def load_env_values(env_path: Path) -> dict[str, str]:
    """Load environment values from a .env file without mutating os.environ."""
    if not env_path.exists():
        return {}
    raw_values = dotenv_values(env_path)
    return {key: value for key, value in raw_values.items() if value is not None}


def load_config(
    path: str | None = None,
    env_path: str | None = None,
    substitute_env: bool = True,
) -> dict:
    """Load configuration from a YAML file.

    Args:
        path: Path to the config file. Defaults to CHEAT_PROXY_CONFIG,
              or configs/config_default.yaml in the project root.
        env_path: Optional .env path override for env substitution.
        substitute_env: Whether to substitute environment variables in the config.

    Returns:
        Parsed configuration dictionary.

    Raises:
        RuntimeError: If the config file does not exist.
    """
    if path is None:
        path = config_path_from_env()

    config_path = resolve_config_path(path)

    logger.info(f"Loading configuration from {config_path}")

    if not config_path.exists():
        logger.error(f"Config file not found: {config_path}")
        raise RuntimeError(f"Config file not found: {config_path}")

    env_values: dict[str, str] = {}
    if substitute_env:
        env_file = resolve_env_path(config_path, env_path)
        if env_file.exists():
            logger.info(f"Loading environment variables from {env_file}")
            env_values = load_env_values(env_file)

    with config_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise RuntimeError(f"Config file must contain a mapping: {config_path}")

    if substitute_env:
        data = _substitute_env_vars(data, env_values)

    logger.info(f"Configuration loaded successfully from {config_path}")
    return data


def _substitute_env_vars(
    obj: Any, env_values: Mapping[str, str] | None = None
) -> Any:
    """Recursively substitute environment variables in configuration values.

    Supports ``${VAR_NAME}`` and ``$VAR_NAME``. Values from the .env file win
    over the process environment; unresolved placeholders are left in place.
    """
    env_values = env_values or {}

    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v, env_values) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_substitute_env_vars(item, env_values) for item in obj]
    if isinstance(obj, str):

        def replace_var(match):
            var_name = match.group(1) or match.group(2)
            value = env_values.get(var_name)
            if value is None:
                value = os.getenv(var_name)
            if value is None:
                logger.warning(
                    f"CONFIG ERROR: Environment variable '${var_name}' is not set! "
                    f"The literal placeholder will be used."
                )
                return match.group(0)
            return value

        return _ENV_PATTERN.sub(replace_var, obj)
    return obj


def _get(cfg: Mapping, *keys: str):
    cur: Any = cfg
    for key in keys:
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(key)
    return cur


def _to_int(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_float(value) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_str(value) -> Optional[str]:
    if value is None:
        return None
    value_str = str(value).strip()
    return value_str or None


def settings_from_config(cfg: Mapping[str, Any]) -> ProxySettings:
    """Build ProxySettings from a parsed config mapping plus env overrides."""
    host = _to_str(_get(cfg, "proxy_settings", "server", "host")) or DEFAULT_HOST
    port = _to_int(_get(cfg, "proxy_settings", "server", "port")) or DEFAULT_PORT
    platform = _to_str(_get(cfg, "proxy_settings", "platform")) or DEFAULT_PLATFORM
    log_level = _to_str(_get(cfg, "proxy_settings", "log_level")) or DEFAULT_LOG_LEVEL
    api_base = _to_str(_get(cfg, "upstream", "api_base")) or DEFAULT_API_BASE

    timeout_seconds = _to_float(_get(cfg, "upstream", "timeout_seconds"))
    if timeout_seconds is None or timeout_seconds <= 0:
        timeout_seconds = DEFAULT_TIMEOUT

    # Env overrides
    host = os.getenv("CHEAT_PROXY_HOST") or host
    port_env = os.getenv("CHEAT_PROXY_PORT")
    if port_env is not None:
        parsed_port = _to_int(port_env)
        if parsed_port is None:
            logger.warning("Invalid CHEAT_PROXY_PORT=%s", port_env)
        else:
            port = parsed_port

    return ProxySettings(
        host=host,
        port=port,
        platform=platform,
        log_level=log_level.upper(),
        api_base=api_base,
        timeout_seconds=timeout_seconds,
    )


def get_openai_api_key() -> str:
    """Read the upstream credential from the environment at call time.

    Raises:
        ConfigurationError: If OPENAI_API_KEY is unset or empty.
    """
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        logger.error(f"{API_KEY_ENV} not configured")
        raise ConfigurationError(f"{API_KEY_ENV} not configured")
    return api_key


def load_settings(path: str | None = None) -> ProxySettings:
    """Load ProxySettings, falling back to defaults when no config file exists."""
    cfg: dict = {}
    try:
        cfg = load_config(path)
    except Exception as exc:
        logger.warning("Failed to load config; using defaults. (%s)", exc)
    return settings_from_config(cfg)
