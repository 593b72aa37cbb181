"""
Widget choices: the saved widget styles a host can offer the user.

Sources are tried in priority order (project index, legacy configs) and the
first non-empty result wins; the built-in default covers the rest.
"""

import logging
from typing import Callable, Iterable, List, Sequence, TypeVar

from widget_core.config_loader import AppConfig
from widget_core.container import SharedContainer
from widget_core.legacy_config import LegacyConfigResolver, WidgetConfigProvider
from widget_core.models import DEFAULT_WIDGET, DisplayEntity
from widget_core.project_index import ProjectIndexResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_non_empty(providers: Iterable[Callable[[], List[T]]], default: Sequence[T]) -> List[T]:
    """Call providers in order; return the first non-empty result, else ``default``."""
    for provider in providers:
        result = provider()
        if result:
            return list(result)
    return list(default)


class WidgetChoiceResolver:
    """Resolves saved widget choices with project → legacy → default fallback."""

    def __init__(self, projects: ProjectIndexResolver, legacy: LegacyConfigResolver):
        self.projects = projects
        self.legacy = legacy

    @classmethod
    def from_container(cls, container: SharedContainer, config: AppConfig | None = None) -> "WidgetChoiceResolver":
        if config is None:
            config = AppConfig()
        projects = ProjectIndexResolver(
            container,
            projects_folder=config.storage.projects_folder,
            index_file=config.storage.index_file,
        )
        provider = WidgetConfigProvider(container, key=config.preference_keys.widget_configs_simplified)
        return cls(projects, LegacyConfigResolver(provider))

    def resolve_widget_choices(self) -> List[DisplayEntity]:
        choices = first_non_empty([self.projects.resolve, self.legacy.resolve], [DEFAULT_WIDGET])
        logger.debug(f"Resolved {len(choices)} widget choice(s)")
        return choices

    # ── Query ────────────────────────────────────────────

    def entities_for(self, identifiers: Iterable[str]) -> List[DisplayEntity]:
        wanted = set(identifiers)
        return [e for e in self.resolve_widget_choices() if e.id in wanted]

    def suggested_entities(self) -> List[DisplayEntity]:
        return self.resolve_widget_choices()

    def default_result(self) -> DisplayEntity:
        return self.resolve_widget_choices()[0]
