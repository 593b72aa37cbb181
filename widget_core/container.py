"""
Shared container: app-group scoped storage visible to the app and its widgets.

Each app group owns one directory under the containers root. Files inside it
are addressed by relative path; the preference suite is a TinyDB file kept in
the same directory.
"""

import json
import logging
from pathlib import Path, PurePosixPath
from typing import Any, List, Optional

from widget_core.config_loader import AppConfig
from widget_core.errors import DecodeFailure, NotFound, StorageUnavailable
from widget_core.preference_store import PreferenceStore

logger = logging.getLogger(__name__)


class SharedContainer:
    """File-blob and preference access for one app group."""

    def __init__(self, containers_root: str | Path, group_id: str, preferences_file: str = "preferences.json"):
        self.containers_root = Path(containers_root)
        self.group_id = group_id
        self.preferences_file = preferences_file
        self._preferences: Optional[PreferenceStore] = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "SharedContainer":
        return cls(
            config.containers_path(),
            config.storage.app_group_id,
            preferences_file=config.storage.preferences_file,
        )

    # ── Container ────────────────────────────────────────

    @property
    def url(self) -> Optional[Path]:
        """Container directory, or None when the group has no container."""
        if not self.group_id:
            return None
        path = self.containers_root / self.group_id
        if not path.is_dir():
            return None
        return path

    def _require_url(self) -> Path:
        url = self.url
        if url is None:
            raise StorageUnavailable(f"No container for app group '{self.group_id}'")
        return url

    def _resolve(self, relative: str) -> Path:
        parts = PurePosixPath(relative).parts
        if "\x00" in relative or PurePosixPath(relative).is_absolute() or ".." in parts:
            raise NotFound(f"Invalid container path: {relative}")
        return self._require_url().joinpath(*parts)

    def create(self) -> Path:
        """Create the container directory (main-app side setup)."""
        path = self.containers_root / self.group_id
        path.mkdir(parents=True, exist_ok=True)
        return path

    # ── Files ────────────────────────────────────────────

    def exists(self, relative: str) -> bool:
        try:
            return self._resolve(relative).is_file()
        except (StorageUnavailable, NotFound):
            return False

    def read_bytes(self, relative: str) -> bytes:
        path = self._resolve(relative)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFound(f"File not found: {relative}") from e
        except OSError as e:
            raise StorageUnavailable(f"Failed to read {relative}: {e}") from e

    def read_json(self, relative: str) -> Any:
        data = self.read_bytes(relative)
        try:
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeFailure(f"Malformed JSON in {relative}: {e}") from e

    def write_json(self, relative: str, payload: Any):
        path = self._resolve(relative)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)

    def list_files(self, folder: str = "", suffix: str = ".json") -> List[str]:
        """List relative paths of files directly inside a folder."""
        try:
            path = self._resolve(folder) if folder else self._require_url()
        except (StorageUnavailable, NotFound):
            return []
        if not path.is_dir():
            return []
        prefix = f"{folder.rstrip('/')}/" if folder else ""
        return sorted(f"{prefix}{p.name}" for p in path.iterdir() if p.is_file() and p.name.endswith(suffix))

    # ── Preferences ──────────────────────────────────────

    def preferences(self, create: bool = False) -> PreferenceStore:
        """
        Open (once) the app group's preference suite.

        Readers leave the container untouched: a suite that was never written
        raises NotFound unless ``create`` is set.
        """
        if self._preferences is None:
            path = self._require_url() / self.preferences_file
            if not create and not path.is_file():
                raise NotFound(f"No preference suite in app group '{self.group_id}'")
            self._preferences = PreferenceStore(path)
        return self._preferences

    def close(self):
        if self._preferences is not None:
            self._preferences.close()
            self._preferences = None
