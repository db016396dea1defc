"""Configuration loading.

Settings live in a YAML file and are merged key by key over the dataclass
defaults, so a config file only needs the keys it changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CONFIG_NAME = "config"


def _get_user_data_dir() -> Path:
    """Get the user's clipmade data directory ($HOME/.clipmade)."""
    return Path.home() / ".clipmade"


def _default_history_file() -> str:
    return str(_get_user_data_dir() / "history.yml")


@dataclass
class StorageConfig:
    history_file: str = field(default_factory=_default_history_file)


@dataclass
class SearchConfig:
    phonetic: bool = True


@dataclass
class UIConfig:
    title: str = "clipmade"
    poll_interval_ms: int = 250
    zebra: bool = True


@dataclass
class Config:
    storage: StorageConfig = field(default_factory=StorageConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    @property
    def history_path(self) -> Path:
        return Path(self.storage.history_file).expanduser()

    @property
    def lock_path(self) -> Path:
        return _get_user_data_dir() / "clipmade.lock"


def _is_path(config_name_or_path: str) -> bool:
    return (
        "/" in config_name_or_path
        or "\\" in config_name_or_path
        or config_name_or_path.endswith((".yml", ".yaml"))
    )


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.clipmade/<name>.yml
    3. Current working directory <name>.yml
    """
    if _is_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    config_filename = f"{config_name_or_path}.yml"
    for candidate in (_get_user_data_dir() / config_filename, Path.cwd() / config_filename):
        if candidate.is_file():
            return candidate
    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    config_filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / config_filename),
        str(Path.cwd() / config_filename),
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Config name (without .yml) or a path. The default
            name is optional; any other name must resolve to a file.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
        ValueError: If the file is not valid YAML.
    """
    if not config_name_or_path:
        config_name_or_path = DEFAULT_CONFIG_NAME

    config = Config()
    config_path = _find_config_file(config_name_or_path)

    if config_path is None:
        if config_name_or_path == DEFAULT_CONFIG_NAME:
            return config
        if _is_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(_get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e
    _merge_config(config, data)
    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    if "storage" in data and isinstance(data["storage"], dict):
        st = data["storage"]
        if st.get("history_file"):
            config.storage.history_file = str(st["history_file"])

    if "search" in data and isinstance(data["search"], dict):
        se = data["search"]
        if "phonetic" in se:
            config.search.phonetic = bool(se["phonetic"])

    if "ui" in data and isinstance(data["ui"], dict):
        ui = data["ui"]
        if "title" in ui and ui["title"] is not None:
            config.ui.title = str(ui["title"])
        if "poll_interval_ms" in ui:
            config.ui.poll_interval_ms = max(1, int(ui["poll_interval_ms"]))
        if "zebra" in ui:
            config.ui.zebra = bool(ui["zebra"])
