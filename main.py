"""
Bible Widgets 主入口：启动 FastAPI 服务，向宿主提供小组件配置。
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from widget_core import api
from widget_core.config_loader import AppConfig, load_config
from widget_core.container import SharedContainer
from widget_core.legacy_config import SavedConfigQuery, WidgetConfigProvider
from widget_core.project_style import ProjectStyleLoader
from widget_core.widget_choices import WidgetChoiceResolver
from widget_core.widget_data import WidgetDataProvider

# 日志配置
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan 事件处理：启动时和关闭时的逻辑。"""
    choices = app.state.choices.resolve_widget_choices()
    logger.info(f"启动时共有 {len(choices)} 个小组件选项: {', '.join(c.id for c in choices)}")

    yield  # 应用运行中

    # 关闭时：关闭偏好存储
    logger.info("正在关闭...")
    app.state.container.close()


def create_app(config: AppConfig | None = None) -> FastAPI:
    """创建并配置 FastAPI 应用。"""
    if config is None:
        logger.info("正在加载配置...")
        config = load_config()

    app = FastAPI(
        title="Bible Widgets API",
        description="Saved widget styles, presets and widget display data",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS 中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── 初始化核心组件 ────────────────────────────────────────
    container = SharedContainer.from_config(config)
    logger.info(f"共享容器: {container.containers_root / container.group_id}")

    choices = WidgetChoiceResolver.from_container(container, config)
    styles = ProjectStyleLoader(container, projects_folder=config.storage.projects_folder)
    saved_configs = SavedConfigQuery(
        WidgetConfigProvider(container, key=config.preference_keys.widget_configs_simplified)
    )
    widget_data = WidgetDataProvider(container, key=config.preference_keys.widget_data)

    # 注入依赖到 API 模块
    api.init_api(
        choices=choices,
        styles=styles,
        saved_configs=saved_configs,
        widget_data=widget_data,
    )

    # 注册 API 路由
    app.include_router(api.router)

    # 将组件存到 app.state，供 lifespan 访问
    app.state.config = config
    app.state.container = container
    app.state.choices = choices

    return app


def main():
    """主入口。"""
    config = load_config()
    port = int(sys.argv[1]) if len(sys.argv) > 1 else config.server.port

    logger.info(f"🚀 启动 Bible Widgets 后端 (port={port})...")

    app = create_app(config)

    uvicorn.run(
        app,
        host=config.server.host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
