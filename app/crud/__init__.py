from .work_order import (
    create_work_order,
    update_work_order,
    delete_work_order,
    get_work_order_detail,
    list_work_orders,
)

__all__ = [
    "create_work_order",
    "update_work_order",
    "delete_work_order",
    "get_work_order_detail",
    "list_work_orders",
]
