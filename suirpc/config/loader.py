"""Read and write ClientConfig as JSON under ``~/.suirpc``."""

import json
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_snake

from suirpc.config.schema import ClientConfig
from suirpc.utils.exceptions import ConfigError


def get_config_path() -> Path:
    return Path.home() / ".suirpc" / "config.json"


def load_config(config_path: Path | None = None) -> ClientConfig:
    """
    Build a ClientConfig from a JSON file.

    Keys may be camelCase (``customUrl``) or snake_case. Anything the file
    leaves out comes from ``SUIRPC_*`` environment variables, then defaults;
    a missing file means environment and defaults only.

    Raises:
        ConfigError: the file is unreadable or does not hold a valid config object.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return _build(path, {})

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}", path=str(path)) from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must be a JSON object: {path}", path=str(path))
    return _build(path, convert_keys(raw))


def _build(path: Path, fields: dict[str, Any]) -> ClientConfig:
    fields.pop("http_client", None)  # never read from disk
    try:
        return ClientConfig(**fields)
    except (ValidationError, ValueError) as e:
        raise ConfigError(f"Invalid client config in {path}: {e}", path=str(path)) from e


def save_config(config: ClientConfig, config_path: Path | None = None) -> Path:
    """Write ``config`` as camelCase JSON and return the path written."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = convert_to_camel(config.model_dump(mode="json"))
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def _rename_keys(value: Any, rename: Callable[[str], str]) -> Any:
    if isinstance(value, dict):
        return {rename(k): _rename_keys(v, rename) for k, v in value.items()}
    if isinstance(value, list):
        return [_rename_keys(item, rename) for item in value]
    return value


def convert_keys(data: Any) -> Any:
    """camelCase keys -> snake_case, recursively."""
    return _rename_keys(data, camel_to_snake)


def convert_to_camel(data: Any) -> Any:
    """snake_case keys -> camelCase, recursively."""
    return _rename_keys(data, snake_to_camel)


def camel_to_snake(name: str) -> str:
    return to_snake(name)


def snake_to_camel(name: str) -> str:
    return to_camel(name)
