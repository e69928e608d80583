"""应用模块入口

提供统一的模块导入接口
"""

from . import (
    config,
    crud,
    db,
    models,
    schemas,
    core,
)

# 从子模块导入关键组件
from .config import settings
from .db import get_db, engine, Base, SessionLocal, run_query, transaction

__all__ = [
    "config",
    "crud",
    "db",
    "models",
    "schemas",
    "core",
    "settings",
    "get_db",
    "engine",
    "Base",
    "SessionLocal",
    "run_query",
    "transaction",
]
