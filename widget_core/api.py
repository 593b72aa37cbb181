"""
FastAPI 路由：向宿主暴露小组件选项、样式预设和显示数据。
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from widget_core.legacy_config import SavedConfigQuery
from widget_core.project_style import ProjectStyleLoader
from widget_core.style_presets import StylePresetQuery, resolve_preset
from widget_core.widget_choices import WidgetChoiceResolver
from widget_core.widget_data import WidgetDataProvider
from widget_core.widget_types import BibleWidgetType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# 这些全局引用会在 main.py 中注入
_choices: WidgetChoiceResolver | None = None
_styles: ProjectStyleLoader | None = None
_saved_configs: SavedConfigQuery | None = None
_widget_data: WidgetDataProvider | None = None
_presets = StylePresetQuery()


def init_api(choices, styles, saved_configs, widget_data):
    """注入全局依赖（由 main.py 调用）。"""
    global _choices, _styles, _saved_configs, _widget_data
    _choices = choices
    _styles = styles
    _saved_configs = saved_configs
    _widget_data = widget_data


# ── 小组件选项 ────────────────────────────────────────

@router.get("/widgets")
async def list_widgets() -> list[dict]:
    """获取所有已保存的小组件（无数据时返回默认样式）。"""
    return [e.to_display() for e in _choices.resolve_widget_choices()]


@router.get("/widgets/{widget_id}")
async def get_widget(widget_id: str) -> dict:
    matches = _choices.entities_for([widget_id])
    if not matches:
        raise HTTPException(404, f"Widget '{widget_id}' not found")
    return matches[0].to_display()


@router.get("/widgets/{widget_id}/style")
async def get_widget_style(widget_id: str) -> dict[str, Any]:
    """根据项目背景计算小组件配色。"""
    style = _styles.load_style_config(widget_id)
    if style is None:
        raise HTTPException(404, f"No saved style for widget '{widget_id}'")
    return style.model_dump()


# ── 样式预设 ──────────────────────────────────────────

@router.get("/presets")
async def list_presets() -> list[dict]:
    return [p.model_dump() for p in _presets.suggested_entities()]


@router.get("/presets/{reference}")
async def get_preset(reference: str) -> dict:
    """未知 ID 返回 System 预设，而不是 404。"""
    return resolve_preset(reference).model_dump()


# ── 旧版配置与显示数据 ────────────────────────────────

@router.get("/saved-configs")
async def list_saved_configs() -> list[dict]:
    result = []
    for config in _saved_configs.suggested_entities():
        data = config.model_dump(by_alias=True)
        data["preset"] = resolve_preset(config.preset_id).id
        result.append(data)
    return result


@router.get("/widget-data")
async def get_widget_data() -> dict[str, Any]:
    data = _widget_data.fetch_widget_data()
    result = data.model_dump(mode="json")
    result["days_remaining"] = data.days_remaining()
    return result


@router.get("/widget-types")
async def list_widget_types() -> list[dict]:
    return [t.to_dict() for t in BibleWidgetType]
