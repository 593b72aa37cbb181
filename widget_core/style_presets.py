"""
Style presets: the fixed catalog of named widget themes.
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from widget_core.models import LegacyWidgetConfig


class StylePreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str

    @property
    def title(self) -> str:
        return self.name

    @property
    def subtitle(self) -> str:
        return self.description


SYSTEM = StylePreset(id="system", name="System", description="Follows your device's light/dark mode")
CLASSIC_LIGHT = StylePreset(id="classic_light", name="Classic Light", description="Clean white with accent color")
CLASSIC_DARK = StylePreset(id="classic_dark", name="Classic Dark", description="Dark mode with subtle gradients")
SEPIA_WARMTH = StylePreset(id="sepia_warmth", name="Sepia Warmth", description="Warm tones matching sepia theme")
MINIMAL = StylePreset(id="minimal", name="Minimal", description="Ultra-clean, typography-focused")
GRADIENT_BLISS = StylePreset(id="gradient_bliss", name="Gradient Bliss", description="Soft gradient backgrounds")
SCRIPTURE_ART = StylePreset(id="scripture_art", name="Scripture Art", description="Decorative patterns with elegance")
MIDNIGHT_GOLD = StylePreset(id="midnight_gold", name="Midnight Gold", description="Luxurious dark with gold accents")
SUNRISE_HOPE = StylePreset(id="sunrise_hope", name="Sunrise Hope", description="Warm sunrise gradients")

ALL_PRESETS: tuple[StylePreset, ...] = (
    SYSTEM,
    CLASSIC_LIGHT,
    CLASSIC_DARK,
    SEPIA_WARMTH,
    MINIMAL,
    GRADIENT_BLISS,
    SCRIPTURE_ART,
    MIDNIGHT_GOLD,
    SUNRISE_HOPE,
)

_PRESETS_BY_ID: Dict[str, StylePreset] = {p.id: p for p in ALL_PRESETS}


def resolve_preset(reference: Optional[str]) -> StylePreset:
    """Return the preset named by ``reference``; System when absent or unknown."""
    if reference is None:
        return SYSTEM
    return _PRESETS_BY_ID.get(reference, SYSTEM)


def preset_for_saved_config(config: Optional[LegacyWidgetConfig]) -> StylePreset:
    if config is None:
        return SYSTEM
    return resolve_preset(config.preset_id)


class StylePresetQuery:
    """Preset picker lookups."""

    def entities_for(self, identifiers: Iterable[str]) -> List[StylePreset]:
        wanted = set(identifiers)
        return [p for p in ALL_PRESETS if p.id in wanted]

    def suggested_entities(self) -> List[StylePreset]:
        return list(ALL_PRESETS)

    def default_result(self) -> StylePreset:
        return SYSTEM
