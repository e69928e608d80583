"""日志配置模块

- 开发环境：可读的单行格式
- 生产环境：JSON 格式（便于日志收集）
- 日志级别由 LOG_LEVEL 控制
"""

import json
import logging
import sys
from datetime import datetime, timezone

from ..config.settings import settings

# 请求日志中附带的额外字段
_EXTRA_FIELDS = ("method", "path", "status", "duration_ms", "work_order_id", "work_order_number")


class JSONFormatter(logging.Formatter):
    """JSON 日志格式"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val
        return json.dumps(entry, ensure_ascii=False, default=str)


class ReadableFormatter(logging.Formatter):
    """开发环境使用的可读格式"""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        duration = getattr(record, "duration_ms", None)
        dur_str = f" [{duration:.0f}ms]" if duration is not None else ""
        base = f"{ts} {record.levelname:<8} {record.name}: {record.getMessage()}{dur_str}"
        if record.exc_info and record.exc_info[0] is not None:
            base += "\n" + self.formatException(record.exc_info)
        return base


def configure_logging(level_name: str = None, json_format: bool = None) -> None:
    """配置根日志记录器（只保留一个 stderr handler，避免重复输出）"""
    level_name = (level_name or settings.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    if json_format is None:
        json_format = settings.LOG_JSON

    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if json_format else ReadableFormatter())
    handler.setLevel(level)
    root.addHandler(handler)
    root.setLevel(level)

    # SQL 日志由 ECHO_SQL 控制
    for noisy in ("urllib3", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
