from .health import router as health_router
from .work_orders import router as work_orders_router

__all__ = ["health_router", "work_orders_router"]
