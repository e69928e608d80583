"""工单列表过滤（与服务端 list 接口语义一致）"""

from typing import Iterable, List, Optional

ALL_STATUSES = "All"

SEARCH_FIELDS = ("job_number", "job_name", "job_pm", "job_address", "work_order_number")


def filter_orders(orders: Iterable[dict], status: Optional[str] = None, q: Optional[str] = None) -> List[dict]:
    """status 精确匹配（"All" 或空表示不过滤），q 不区分大小写包含匹配"""
    needle = (q or "").strip().lower()
    result = []
    for order in orders:
        if status and status != ALL_STATUSES and order.get("status") != status:
            continue
        if needle and not any(needle in str(order.get(f) or "").lower() for f in SEARCH_FIELDS):
            continue
        result.append(order)
    return result
