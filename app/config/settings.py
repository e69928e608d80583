"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

import logging
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

POSTGRES_FIELDS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 应用配置
    APP_TITLE: str = "Work Orders"
    APP_DESCRIPTION: str = "Work order tracking API"
    APP_VERSION: str = "1.0.0"

    # PostgreSQL 配置 - 从环境变量加载
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_HOST: str = "127.0.0.1"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "work_orders"

    # 数据库配置 - 优先使用DATABASE_URL，否则从PostgreSQL配置构建
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30

    # 工单编号冲突时的最大尝试次数
    WORK_ORDER_NUMBER_MAX_ATTEMPTS: int = 5

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    CORS_ORIGINS: List[str] = ["*"]

    # 启动时创建缺失的数据表（开发环境使用，生产环境使用 alembic 迁移）
    CREATE_TABLES_ON_STARTUP: bool = True

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 如果没有显式设置DATABASE_URL，从PostgreSQL配置构建（允许空密码）；
        # 一个 POSTGRES_* 都没有设置时才使用本地 SQLite
        if not self.DATABASE_URL:
            if any(name in self.model_fields_set for name in POSTGRES_FIELDS):
                self.DATABASE_URL = (
                    f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                    f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
                )
            else:
                self.DATABASE_URL = "sqlite:///./dev.db"
                logger.warning("Neither DATABASE_URL nor POSTGRES_* is set; using local SQLite dev.db")

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# 创建全局配置实例
settings = Settings()
