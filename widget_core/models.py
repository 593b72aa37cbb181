"""
Data models for saved widget projects and the widget choices shown to the host.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# The main app encodes dates as seconds since this instant
REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)


def _coerce_reference_date(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return REFERENCE_DATE + timedelta(seconds=value)
        except OverflowError as e:
            raise ValueError(f"Date value out of range: {value}") from e
    return value


StoredDate = Annotated[datetime, BeforeValidator(_coerce_reference_date)]


class ProjectIndex(BaseModel):
    """Pointer table listing saved widget projects in display order."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    project_ids: List[str] = Field(alias="projectIds")
    last_modified: StoredDate = Field(alias="lastModified")

    @field_validator("project_ids")
    @classmethod
    def unique_ids(cls, ids: List[str]) -> List[str]:
        seen = set()
        unique = []
        for project_id in ids:
            if project_id in seen:
                logger.warning(f"Duplicate project id in index: {project_id}")
                continue
            seen.add(project_id)
            unique.append(project_id)
        return unique


class WidgetProjectRecord(BaseModel):
    """The part of a saved project blob needed to list it."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    widget_type: str = Field(alias="widgetType")
    size: str


class LegacyWidgetConfig(BaseModel):
    """A widget configuration saved before the project-based storage existed."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    widget_type: str = Field(alias="widgetType")
    size: Optional[str] = None
    preset_id: Optional[str] = Field(default=None, alias="presetId")


class DisplayEntity(BaseModel):
    """Uniform widget choice handed to the host for display."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    widget_type: str = Field(alias="widgetType")
    size: str

    @property
    def title(self) -> str:
        return self.name

    @property
    def subtitle(self) -> str:
        return f"{self.widget_type} • {self.size}"

    @classmethod
    def from_project(cls, project: WidgetProjectRecord) -> "DisplayEntity":
        return cls(id=project.id, name=project.name, widget_type=project.widget_type, size=project.size)

    @classmethod
    def from_legacy(cls, config: LegacyWidgetConfig) -> "DisplayEntity":
        return cls(
            id=config.id,
            name=config.name,
            widget_type=config.widget_type,
            size=config.size or DEFAULT_SIZE,
        )

    def to_display(self) -> dict[str, str]:
        """Wire shape plus the title/subtitle pair."""
        data = self.model_dump(by_alias=True)
        data["title"] = self.title
        data["subtitle"] = self.subtitle
        return data


DEFAULT_SIZE = "Medium"

# Shown when nothing has been saved; never persisted
DEFAULT_WIDGET = DisplayEntity(
    id="default",
    name="Default Style",
    widget_type="Verse of Day",
    size=DEFAULT_SIZE,
)
