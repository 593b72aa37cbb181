"""
Legacy widget configs: entries the main app exports to the preference suite.
"""

import json
import logging
from typing import Iterable, List, Optional, Protocol

from pydantic import ValidationError

from widget_core.container import SharedContainer
from widget_core.errors import NotFound, WidgetStorageError
from widget_core.models import DisplayEntity, LegacyWidgetConfig

logger = logging.getLogger(__name__)

SIMPLIFIED_CONFIGS_KEY = "widget_configs_simplified"


class WidgetConfigSource(Protocol):
    def fetch_widget_configs(self) -> List[LegacyWidgetConfig]: ...


class WidgetConfigProvider:
    """Reads the simplified config export from the app group preferences."""

    def __init__(self, container: SharedContainer, key: str = SIMPLIFIED_CONFIGS_KEY):
        self.container = container
        self.key = key

    def _load_raw(self):
        try:
            raw = self.container.preferences().get(self.key)
        except NotFound:
            logger.debug(f"Preference suite not written yet, no '{self.key}'")
            return None
        except (WidgetStorageError, OSError, ValueError) as e:
            logger.warning(f"Failed to read preference '{self.key}': {e}")
            return None

        # Stored either as decoded JSON or as the JSON text itself
        if isinstance(raw, (str, bytes)):
            try:
                raw = json.loads(raw)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning(f"Malformed JSON in preference '{self.key}': {e}")
                return None
        return raw

    def fetch_widget_configs(self) -> List[LegacyWidgetConfig]:
        raw = self._load_raw()
        if not isinstance(raw, list):
            return []

        configs = []
        for item in raw:
            try:
                configs.append(LegacyWidgetConfig.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed legacy config: {e}")
        return configs


class LegacyConfigResolver:
    """Maps legacy configs 1:1 into display entities."""

    def __init__(self, provider: WidgetConfigSource):
        self.provider = provider

    def resolve(self) -> List[DisplayEntity]:
        return [DisplayEntity.from_legacy(c) for c in self.provider.fetch_widget_configs()]


class SavedConfigQuery:
    """Saved config picker lookups, backed by the same provider."""

    def __init__(self, provider: WidgetConfigSource):
        self.provider = provider

    def entities_for(self, identifiers: Iterable[str]) -> List[LegacyWidgetConfig]:
        wanted = set(identifiers)
        return [c for c in self.provider.fetch_widget_configs() if c.id in wanted]

    def suggested_entities(self) -> List[LegacyWidgetConfig]:
        return self.provider.fetch_widget_configs()

    def default_result(self) -> Optional[LegacyWidgetConfig]:
        configs = self.provider.fetch_widget_configs()
        return configs[0] if configs else None
