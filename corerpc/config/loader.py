"""Settings loading utilities."""

import json
from pathlib import Path
from typing import Any

from corerpc.config.schema import RpcSettings


def get_config_path() -> Path:
    """Get the default settings file path."""
    return Path.home() / ".corerpc" / "config.json"


def load_settings(config_path: Path | None = None) -> RpcSettings:
    """
    Load settings from a JSON file, falling back to environment and defaults.

    Keys may be camelCase (``cookieFile``) or snake_case. Environment
    variables fill whatever the file leaves out.

    Raises:
        ValueError: the file exists but is not valid JSON or not valid settings.
    """
    path = Path(config_path) if config_path else get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("settings file must contain a JSON object")
            return RpcSettings(**convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(f"Failed to load settings from {path}: {e}") from e

    return RpcSettings()


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
