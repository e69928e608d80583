"""客户端状态层

- api: 基于 requests 的 REST 接口封装
- fallback: 本地 JSON 键值存储（接口不可用时的降级缓存）
- board: 工单列表状态（加载、增删改、过滤、降级模式）
- filters / export: 列表过滤和 JSON 导出
"""

from .api import ApiError, ApiUnavailable, WorkOrderApi, to_payload
from .board import WorkOrderBoard
from .export import export_filename, export_json
from .fallback import FALLBACK_KEY, LocalStore
from .filters import ALL_STATUSES, filter_orders

__all__ = [
    "ApiError",
    "ApiUnavailable",
    "WorkOrderApi",
    "to_payload",
    "WorkOrderBoard",
    "export_filename",
    "export_json",
    "FALLBACK_KEY",
    "LocalStore",
    "ALL_STATUSES",
    "filter_orders",
]
