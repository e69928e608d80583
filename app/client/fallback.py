"""本地降级缓存

整个工单列表以 JSON 形式保存在固定键 wo:data 下，下次启动时读取。
只是便利缓存，不与服务端自动同步。
"""

import json
import os
from pathlib import Path
from typing import Any

FALLBACK_KEY = "wo:data"


class LocalStore:
    """基于单个 JSON 文件的键值存储"""

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self) -> dict:
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except (FileNotFoundError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, ensure_ascii=False, indent=2, default=str)
        os.replace(tmp, self.path)
