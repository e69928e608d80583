"""工单模型定义"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, Date, DateTime, JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database.connection import Base


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class WorkOrder(Base):
    """工单模型"""
    __tablename__ = "work_orders"
    __table_args__ = (
        UniqueConstraint("work_order_number", name="uq_work_orders_work_order_number"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    # WO-YYYYMMDD-###，创建时生成，之后不再修改
    work_order_number = Column(String(32), nullable=False, index=True)
    job_number = Column(String(64), nullable=True)
    job_name = Column(String(255), nullable=True)
    job_pm = Column(String(255), nullable=True)
    job_address = Column(String(255), nullable=True)
    job_superintendent = Column(String(255), nullable=True)
    division = Column(String(64), nullable=True)
    system = Column(String(64), nullable=True)
    notes = Column(Text, nullable=True)
    date_issued = Column(Date, nullable=True)
    material_delivery_date = Column(Date, nullable=True)
    # ISO 日期字符串列表
    requested_completion_dates = Column(JSON, nullable=False, default=list)
    # 以下两个字段由明细的完工日期推导，每次写入明细时重新计算
    completion_date = Column(Date, nullable=True)
    completion_varies = Column(Boolean, nullable=False, default=False)
    status = Column(String(32), nullable=False, default="Draft", index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    items = relationship(
        "WorkOrderItem",
        back_populates="work_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkOrderItem.seq",
    )
