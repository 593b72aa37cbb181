"""
配置加载器：将 YAML 配置文件解析为 Pydantic 模型。
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# ── 共享容器配置 ──────────────────────────────────────

class StorageConfig(BaseModel):
    # Directory that holds one folder per app group
    containers_root: str = "data/containers"
    app_group_id: str = "group.vaynerov.Bible-v1"
    projects_folder: str = "widget_projects"
    index_file: str = "index.json"
    preferences_file: str = "preferences.json"

    def containers_path(self, base: Optional[Path] = None) -> Path:
        root = Path(self.containers_root)
        if base is not None and not root.is_absolute():
            root = base / root
        return root


class PreferenceKeys(BaseModel):
    widget_data: str = "widget_data"
    widget_configs_simplified: str = "widget_configs_simplified"


# ── 服务配置 ──────────────────────────────────────────

class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8400
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )


# ── 顶层配置 ──────────────────────────────────────────

class AppConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    preference_keys: PreferenceKeys = Field(default_factory=PreferenceKeys)
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Directory the config was loaded from; relative storage paths resolve against it
    base_dir: Path = Field(default=Path("."), exclude=True)

    def containers_path(self) -> Path:
        return self.storage.containers_path(self.base_dir)


# ── Loading ──────────────────────────────────────────

_CONFIG_SEARCH_PATHS = [
    "config/config.yaml",
    "config.yaml",
]


def find_project_root() -> Path:
    return Path(os.getenv("BIBLE_WIDGETS_ROOT", "."))


def find_config_file(base: Optional[Path] = None) -> Optional[Path]:
    """Find the config file under the project root, if any."""
    if base is None:
        base = find_project_root()
    for p in _CONFIG_SEARCH_PATHS:
        path = base / p
        if path.is_file():
            return path
    return None


def load_yaml(path: Path) -> dict:
    """Load a single YAML file; empty or unreadable files yield an empty dict."""
    try:
        with open(path, "r", encoding="utf-8") as fp:
            content = yaml.safe_load(fp)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading {path}: {e}")
        return {}
    if not isinstance(content, dict):
        return {}
    return content


def load_config(path: Optional[str | Path] = None) -> AppConfig:
    """
    Load configuration from YAML.

    Without an explicit path the project root (``BIBLE_WIDGETS_ROOT``) is
    searched; when no file exists the defaults are used.
    """
    base = find_project_root()
    if path is None:
        path = find_config_file(base)
    else:
        path = Path(path)

    raw: dict = {}
    if path is not None:
        raw = load_yaml(path)
        # config/config.yaml lives one level below the project root
        base = path.parent.parent if path.parent.name == "config" else path.parent
        logger.info(f"已加载配置文件: {path}")

    config = AppConfig.model_validate(raw)
    config.base_dir = base
    return config
