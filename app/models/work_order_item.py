"""工单明细及完工日期模型

一个工单对应多条明细，一条明细对应零到多个完工日期（分批交付）。
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..database.connection import Base
from .work_order import new_id


class WorkOrderItem(Base):
    """工单明细表"""
    __tablename__ = "work_order_items"

    id = Column(String(32), primary_key=True, default=new_id)
    work_order_id = Column(String(32), ForeignKey("work_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    seq = Column(Integer, nullable=False)  # 明细序号，保持写入顺序
    type = Column(String(32), nullable=True)
    scope = Column(String(32), nullable=True)
    elevation = Column(String(255), nullable=True)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(String(32), nullable=False, default="In Progress")
    hold_reason = Column(String(64), nullable=True)

    work_order = relationship("WorkOrder", back_populates="items")
    completion_dates = relationship(
        "WorkOrderItemCompletionDate",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkOrderItemCompletionDate.seq",
    )


class WorkOrderItemCompletionDate(Base):
    """明细完工日期表"""
    __tablename__ = "work_order_item_completion_dates"

    id = Column(String(32), primary_key=True, default=new_id)
    item_id = Column(String(32), ForeignKey("work_order_items.id", ondelete="CASCADE"), nullable=False, index=True)
    seq = Column(Integer, nullable=False)
    completion_date = Column(Date, nullable=False)

    item = relationship("WorkOrderItem", back_populates="completion_dates")
