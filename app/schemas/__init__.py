"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .work_order import (
    WorkOrderItemIn,
    WorkOrderBase,
    WorkOrderCreate,
    WorkOrderUpdate,
    WorkOrderRead,
    WorkOrderItemRead,
    WorkOrderDetail,
)

__all__ = [
    "WorkOrderItemIn",
    "WorkOrderBase",
    "WorkOrderCreate",
    "WorkOrderUpdate",
    "WorkOrderRead",
    "WorkOrderItemRead",
    "WorkOrderDetail",
]
