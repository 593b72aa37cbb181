"""
偏好存储：基于 TinyDB 的 app group 键值存储。
对应主应用与小组件共享的 preference suite，按 key 去重。
"""

import logging
import time
from pathlib import Path
from typing import Any

from tinydb import Query, TinyDB

logger = logging.getLogger(__name__)


class PreferenceStore:
    """TinyDB 键值操作封装。"""

    def __init__(self, db_path: str | Path):
        db_path = Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        self.db = TinyDB(str(db_path), indent=2, ensure_ascii=False)
        self.table = self.db.table("preferences")
        logger.debug(f"偏好存储已打开: {db_path}")

    # ── 写入 ──────────────────────────────────────────

    def set(self, key: str, value: Any):
        """写入或覆盖一个偏好值。value 必须可 JSON 序列化。"""
        record = {
            "key": key,
            "value": value,
            "updated_at": time.time(),
        }
        Pref = Query()
        self.table.upsert(record, Pref.key == key)
        logger.debug(f"偏好已保存: {key}")

    def remove(self, key: str) -> bool:
        """删除指定偏好，返回是否存在。"""
        Pref = Query()
        removed = self.table.remove(Pref.key == key)
        return bool(removed)

    # ── 查询 ──────────────────────────────────────────

    def get(self, key: str, default: Any = None) -> Any:
        """获取偏好值，不存在时返回 default。"""
        Pref = Query()
        results = self.table.search(Pref.key == key)
        if not results:
            return default
        return results[0].get("value", default)

    def contains(self, key: str) -> bool:
        Pref = Query()
        return self.table.contains(Pref.key == key)

    def keys(self) -> list[str]:
        """列出所有偏好 key。"""
        return [r["key"] for r in self.table.all() if "key" in r]

    # ── 管理 ──────────────────────────────────────────

    def close(self):
        """关闭数据库。"""
        self.db.close()
