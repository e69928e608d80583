"""工单列表 JSON 导出"""

import json
from datetime import date
from pathlib import Path
from typing import List, Optional


def export_filename(day: Optional[date] = None) -> str:
    return f"work_orders_{(day or date.today()).isoformat()}.json"


def export_json(orders: List[dict], directory=".", day: Optional[date] = None) -> Path:
    """把工单列表写到 work_orders_YYYY-MM-DD.json，返回文件路径"""
    path = Path(directory) / export_filename(day)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(orders, fh, ensure_ascii=False, indent=2, default=str)
    return path
