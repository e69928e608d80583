"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from ..database.connection import Base
from .enums import HoldReason, ItemScope, ItemStatus, ItemType, WorkOrderStatus
from .work_order import WorkOrder
from .work_order_item import WorkOrderItem, WorkOrderItemCompletionDate

__all__ = [
    "Base",
    "WorkOrder",
    "WorkOrderItem",
    "WorkOrderItemCompletionDate",
    "WorkOrderStatus",
    "ItemType",
    "ItemScope",
    "ItemStatus",
    "HoldReason",
]
