"""工单编号生成

编号格式 WO-YYYYMMDD-###：当天已有编号的最大序号加一，序号至少三位，超过 999 时自然变宽。
编号由现有数据推导而不是计数器，并发创建时依靠 work_order_number 的唯一约束拒绝重复，
由写入流程负责重试。
"""

from datetime import date
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import WorkOrder

PREFIX = "WO"


def day_prefix(day: date) -> str:
    """当天编号前缀，例如 WO-20250101-"""
    return f"{PREFIX}-{day.strftime('%Y%m%d')}-"


def format_work_order_number(day: date, seq: int) -> str:
    return f"{day_prefix(day)}{seq:03d}"


def parse_sequence(number: str, day: date) -> Optional[int]:
    """解析编号末尾的序号，前缀不符或序号不是数字时返回 None"""
    prefix = day_prefix(day)
    if not number or not number.startswith(prefix):
        return None
    suffix = number[len(prefix):]
    if not suffix.isdigit():
        return None
    return int(suffix)


def next_sequence(existing_numbers: Iterable[str], day: date) -> int:
    """已有编号中的最大序号加一；没有有效编号时从 1 开始"""
    seqs = [s for s in (parse_sequence(n, day) for n in existing_numbers) if s is not None]
    return max(seqs) + 1 if seqs else 1


def generate_work_order_number(db: Session, day: date) -> str:
    """扫描当天已有编号并生成下一个编号（在调用方事务内执行）"""
    stmt = select(WorkOrder.work_order_number).where(
        WorkOrder.work_order_number.startswith(day_prefix(day), autoescape=True)
    )
    existing = db.execute(stmt).scalars().all()
    return format_work_order_number(day, next_sequence(existing, day))
