"""
Project style: derive widget colors from a saved project's background.

Only the fields needed for styling are decoded. Fills are written by the main
app as tagged unions (``{"solid": {"_0": {...}}}``); the ``_0`` wrapper is
optional here.
"""

import logging
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from widget_core.container import SharedContainer
from widget_core.errors import NotFound, WidgetStorageError
from widget_core.models import StoredDate
from widget_core.project_index import PROJECTS_FOLDER

logger = logging.getLogger(__name__)

BRIGHTNESS_THRESHOLD = 0.5
FILL_KINDS = ("solid", "gradient", "image", "glassmorphism")


def _unwrap_payload(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {"_0"}:
        return value["_0"]
    return value


# ── Colors ───────────────────────────────────────────

class StyleColor(BaseModel):
    """RGBA color with components in 0..1; ``semantic`` marks system colors."""
    model_config = ConfigDict(frozen=True)

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    opacity: float = 1.0
    semantic: Optional[str] = None

    @classmethod
    def rgb(cls, red: float, green: float, blue: float, opacity: float = 1.0) -> "StyleColor":
        return cls(red=red, green=green, blue=blue, opacity=opacity)

    def with_opacity(self, opacity: float) -> "StyleColor":
        return self.model_copy(update={"opacity": self.opacity * opacity})

    @property
    def brightness(self) -> float:
        """Perceived brightness (luminance weights)."""
        return 0.299 * self.red + 0.587 * self.green + 0.114 * self.blue


BLACK = StyleColor.rgb(0, 0, 0)
WHITE = StyleColor.rgb(1, 1, 1)
PRIMARY = StyleColor(semantic="primary")
SECONDARY = StyleColor(semantic="secondary")
BLUE = StyleColor(red=0.0, green=0.478, blue=1.0, semantic="blue")
ACCENT_ON_LIGHT = StyleColor.rgb(0.2, 0.45, 0.75)
ACCENT_ON_DARK = StyleColor.rgb(0.4, 0.65, 0.95)


_UNIT_POINTS = {
    "topLeading": (0.0, 0.0),
    "top": (0.5, 0.0),
    "topTrailing": (1.0, 0.0),
    "leading": (0.0, 0.5),
    "center": (0.5, 0.5),
    "trailing": (1.0, 0.5),
    "bottomLeading": (0.0, 1.0),
    "bottom": (0.5, 1.0),
    "bottomTrailing": (1.0, 1.0),
}


def unit_point(name: str) -> Tuple[float, float]:
    """Gradient point name → (x, y); unknown names map to center."""
    return _UNIT_POINTS.get(name, _UNIT_POINTS["center"])


# ── Saved project data ───────────────────────────────

class SolidFill(BaseModel):
    color: StyleColor
    opacity: Optional[float] = None


class GradientStop(BaseModel):
    color: StyleColor
    location: float


class GradientFill(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    stops: List[GradientStop]
    start_point: str = Field(alias="startPoint")
    end_point: str = Field(alias="endPoint")
    angle: Optional[float] = None


class ImageFill(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_id: str = Field(alias="imageId")
    content_mode: Optional[str] = Field(default=None, alias="contentMode")
    blur_radius: Optional[float] = Field(default=None, alias="blurRadius")


class GlassmorphismFill(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    preset: str
    blur_radius: float = Field(alias="blurRadius")
    tint_color: StyleColor = Field(alias="tintColor")
    tint_opacity: float = Field(alias="tintOpacity")
    noise_opacity: Optional[float] = Field(default=None, alias="noiseOpacity")
    border_opacity: Optional[float] = Field(default=None, alias="borderOpacity")


class ProjectBackground(BaseModel):
    """Exactly one fill kind is set."""
    solid: Optional[SolidFill] = None
    gradient: Optional[GradientFill] = None
    image: Optional[ImageFill] = None
    glassmorphism: Optional[GlassmorphismFill] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap_case(cls, data: Any) -> Any:
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError("background must have exactly one fill kind")
        kind, payload = next(iter(data.items()))
        if kind not in FILL_KINDS:
            raise ValueError(f"unknown fill kind: {kind}")
        return {kind: _unwrap_payload(payload)}

    @property
    def kind(self) -> str:
        for name in FILL_KINDS:
            if getattr(self, name) is not None:
                return name
        return "none"


class TextElementData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text_color: Optional[StyleColor] = Field(default=None, alias="textColor")
    font_id: Optional[str] = Field(default=None, alias="fontId")
    font_size: Optional[float] = Field(default=None, alias="fontSize")


class IconElementData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    primary_color: Optional[StyleColor] = Field(default=None, alias="primaryColor")


class LayerElementData(BaseModel):
    text: Optional[TextElementData] = None
    icon: Optional[IconElementData] = None

    @field_validator("text", "icon", mode="before")
    @classmethod
    def unwrap(cls, value: Any) -> Any:
        return _unwrap_payload(value)


class LayerData(BaseModel):
    element: Optional[LayerElementData] = None


class SavedProjectData(BaseModel):
    """Project blob as far as widget styling needs it."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    background: ProjectBackground
    layers: Optional[List[LayerData]] = None
    widget_type: Optional[str] = Field(default=None, alias="widgetType")
    size: Optional[str] = None
    created_at: Optional[StoredDate] = Field(default=None, alias="createdAt")
    modified_at: Optional[StoredDate] = Field(default=None, alias="modifiedAt")
    is_favorite: Optional[bool] = Field(default=None, alias="isFavorite")
    template_id: Optional[str] = Field(default=None, alias="templateId")

    @field_validator("layers", mode="wrap")
    @classmethod
    def ignore_bad_layers(cls, value, handler):
        # Layers are optional decoration; undecodable ones are dropped
        try:
            return handler(value)
        except ValidationError:
            return None

    @field_validator("widget_type", "size", "template_id", "is_favorite", "created_at", "modified_at", mode="wrap")
    @classmethod
    def ignore_bad_extras(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return None


# ── Derived style ────────────────────────────────────

class StyleBackground(BaseModel):
    kind: str
    colors: List[StyleColor] = Field(default_factory=list)
    start_point: Optional[Tuple[float, float]] = None
    end_point: Optional[Tuple[float, float]] = None
    image_id: Optional[str] = None


class WidgetStyleConfig(BaseModel):
    text_color: StyleColor = PRIMARY
    secondary_text_color: StyleColor = SECONDARY
    accent_color: StyleColor = BLUE
    background: StyleBackground = Field(default_factory=lambda: StyleBackground(kind="solid", colors=[WHITE]))


def _contrast_text(brightness: float) -> StyleColor:
    return BLACK if brightness > BRIGHTNESS_THRESHOLD else WHITE


def create_style_config(project: SavedProjectData) -> WidgetStyleConfig:
    """Pick text and accent colors that read well on the project's background."""
    text_color = PRIMARY
    secondary = SECONDARY
    accent = BLUE
    bg = project.background

    if bg.solid is not None:
        fill = bg.solid
        opacity = fill.opacity if fill.opacity is not None else 1.0
        background = StyleBackground(kind="solid", colors=[fill.color.with_opacity(opacity)])
        bright = fill.color.brightness > BRIGHTNESS_THRESHOLD
        text_color = _contrast_text(fill.color.brightness)
        secondary = text_color.with_opacity(0.7)
        accent = ACCENT_ON_LIGHT if bright else ACCENT_ON_DARK
    elif bg.gradient is not None:
        fill = bg.gradient
        background = StyleBackground(
            kind="gradient",
            colors=[s.color for s in fill.stops],
            start_point=unit_point(fill.start_point),
            end_point=unit_point(fill.end_point),
        )
        if fill.stops:
            first = fill.stops[0].color
            text_color = _contrast_text(first.brightness)
            secondary = text_color.with_opacity(0.7)
            accent = ACCENT_ON_LIGHT if first.brightness > BRIGHTNESS_THRESHOLD else WHITE.with_opacity(0.9)
    elif bg.glassmorphism is not None:
        glass = bg.glassmorphism
        background = StyleBackground(
            kind="glassmorphism",
            colors=[glass.tint_color.with_opacity(glass.tint_opacity), WHITE.with_opacity(0.1)],
        )
        if glass.tint_color.brightness > BRIGHTNESS_THRESHOLD:
            text_color = BLACK.with_opacity(0.85)
            secondary = BLACK.with_opacity(0.6)
            accent = ACCENT_ON_LIGHT
        else:
            text_color = WHITE.with_opacity(0.95)
            secondary = WHITE.with_opacity(0.7)
            accent = WHITE.with_opacity(0.9)
    else:
        # Image: dim overlay so light text stays readable
        background = StyleBackground(kind="image", colors=[BLACK.with_opacity(0.3)], image_id=bg.image.image_id)
        text_color = WHITE
        secondary = WHITE.with_opacity(0.8)
        accent = WHITE.with_opacity(0.9)

    # First text layer's color wins over the contrast pick
    for layer in project.layers or []:
        if layer.element is not None and layer.element.text is not None:
            if layer.element.text.text_color is not None:
                text_color = layer.element.text.text_color
            break

    return WidgetStyleConfig(
        text_color=text_color,
        secondary_text_color=secondary,
        accent_color=accent,
        background=background,
    )


class ProjectStyleLoader:
    """Loads a project blob by id and turns it into a widget style."""

    def __init__(self, container: SharedContainer, projects_folder: str = PROJECTS_FOLDER):
        self.container = container
        self.projects_folder = projects_folder

    def load_project(self, project_id: str) -> Optional[SavedProjectData]:
        path = f"{self.projects_folder}/{project_id}.json"
        try:
            raw = self.container.read_json(path)
            project = SavedProjectData.model_validate(raw)
        except NotFound:
            logger.info(f"[{project_id}] Project file not found: {path}")
            return None
        except (WidgetStorageError, ValidationError) as e:
            logger.warning(f"[{project_id}] Failed to decode project: {e}")
            return None
        logger.debug(f"[{project_id}] Loaded project: {project.name}")
        return project

    def load_style_config(self, project_id: str) -> Optional[WidgetStyleConfig]:
        """Style for a saved project; None for "default" or when it can't be loaded."""
        if project_id == "default":
            return None
        project = self.load_project(project_id)
        if project is None:
            return None
        return create_style_config(project)
