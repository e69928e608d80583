"""数据库操作（CRUD）- 工单相关

- create_work_order: 在一个事务内生成编号、插入工单和明细
- update_work_order: 整单覆盖汇总字段，删除全部明细后按请求重新插入
- get_work_order_detail: 组装工单、明细及明细完工日期
- list_work_orders: 按状态和关键字过滤，按创建时间倒序

写操作通过 unit_of_work 包裹，任何一步失败都会整体回滚。
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from .. import models, schemas
from ..config.settings import settings
from ..core.completion import derive_completion, stamp_uniform_completion_date
from ..core.exceptions import WorkOrderNumberConflict
from ..core.numbering import generate_work_order_number
from ..database.gateway import unit_of_work
from ..models.work_order import utcnow

logger = logging.getLogger(__name__)

# 关键字搜索覆盖的字段
SEARCH_COLUMNS = (
    models.WorkOrder.job_number,
    models.WorkOrder.job_name,
    models.WorkOrder.job_pm,
    models.WorkOrder.job_address,
    models.WorkOrder.work_order_number,
)


def _summary_fields(payload: schemas.WorkOrderBase, completion_date, completion_varies) -> dict:
    division = payload.division
    if division is None and payload.job_number:
        # 未填写时取工程编号首字符
        division = payload.job_number[0]
    return {
        "job_number": payload.job_number,
        "job_name": payload.job_name,
        "job_pm": payload.job_pm,
        "job_address": payload.job_address,
        "job_superintendent": payload.job_superintendent,
        "division": division,
        "system": payload.system,
        "notes": payload.notes,
        "date_issued": payload.date_issued or date.today(),
        "material_delivery_date": payload.material_delivery_date,
        "requested_completion_dates": [d.isoformat() for d in payload.requested_completion_dates],
        "completion_date": completion_date,
        "completion_varies": completion_varies,
        "status": payload.status.value,
    }


def _item_dates(payload: schemas.WorkOrderCreate) -> List[List[date]]:
    return stamp_uniform_completion_date(
        [list(it.completion_dates) for it in payload.items], payload.completion_date
    )


def _derived_completion(payload: schemas.WorkOrderCreate, item_dates):
    if payload.completion_date is not None:
        return payload.completion_date, False
    return derive_completion(item_dates)


def _insert_items(db: Session, work_order_id: str, payload: schemas.WorkOrderCreate, item_dates) -> None:
    """按请求顺序插入明细及其完工日期"""
    for seq, (item, dates) in enumerate(zip(payload.items, item_dates), start=1):
        db_item = models.WorkOrderItem(
            work_order_id=work_order_id,
            seq=seq,
            type=item.type.value if item.type else None,
            scope=item.scope.value if item.scope else None,
            elevation=item.elevation,
            quantity=item.quantity,
            status=item.status.value,
            hold_reason=item.hold_reason.value if item.hold_reason else None,
        )
        for date_seq, completion_date in enumerate(dates, start=1):
            db_item.completion_dates.append(
                models.WorkOrderItemCompletionDate(seq=date_seq, completion_date=completion_date)
            )
        db.add(db_item)
    db.flush()


def _is_number_conflict(exc: IntegrityError) -> bool:
    return "work_order_number" in str(exc.orig)


def create_work_order(db: Session, payload: schemas.WorkOrderCreate, today: Optional[date] = None,
                      max_attempts: Optional[int] = None):
    """创建工单

    编号在插入同一个事务内生成；若并发创建导致编号冲突（唯一约束），回滚后重新生成编号重试。
    返回新插入的工单行（不含明细，明细由 get_work_order_detail 读取）。
    """
    today = today or date.today()
    max_attempts = max_attempts or settings.WORK_ORDER_NUMBER_MAX_ATTEMPTS
    item_dates = _item_dates(payload)
    completion_date, completion_varies = _derived_completion(payload, item_dates)

    number = None
    for attempt in range(1, max_attempts + 1):
        try:
            with unit_of_work(db):
                number = generate_work_order_number(db, today)
                now = utcnow()
                db_order = models.WorkOrder(
                    work_order_number=number,
                    created_at=now,
                    updated_at=now,
                    **_summary_fields(payload, completion_date, completion_varies),
                )
                db.add(db_order)
                db.flush()
                _insert_items(db, db_order.id, payload, item_dates)
        except IntegrityError as exc:
            if not _is_number_conflict(exc):
                raise
            logger.warning("Work order number %s already taken (attempt %d/%d)", number, attempt, max_attempts)
            continue
        db.refresh(db_order)
        logger.info("Created work order %s", db_order.work_order_number,
                    extra={"work_order_id": db_order.id, "work_order_number": db_order.work_order_number})
        return db_order

    raise WorkOrderNumberConflict(number, max_attempts)


def update_work_order(db: Session, work_order_id: str, payload: schemas.WorkOrderUpdate):
    """整单更新工单，明细全部删除后重新插入

    不存在时返回 None。编号和创建时间保持不变，明细会获得新的 id。
    """
    item_dates = _item_dates(payload)
    completion_date, completion_varies = _derived_completion(payload, item_dates)

    with unit_of_work(db):
        db_order = db.get(models.WorkOrder, work_order_id)
        if db_order is None:
            return None

        for field, value in _summary_fields(payload, completion_date, completion_varies).items():
            setattr(db_order, field, value)
        db_order.updated_at = max(utcnow(), db_order.created_at)

        item_ids = select(models.WorkOrderItem.id).where(models.WorkOrderItem.work_order_id == work_order_id)
        db.execute(
            delete(models.WorkOrderItemCompletionDate)
            .where(models.WorkOrderItemCompletionDate.item_id.in_(item_ids))
            .execution_options(synchronize_session=False)
        )
        db.execute(
            delete(models.WorkOrderItem)
            .where(models.WorkOrderItem.work_order_id == work_order_id)
            .execution_options(synchronize_session=False)
        )
        _insert_items(db, work_order_id, payload, item_dates)

    db.refresh(db_order)
    logger.info("Updated work order %s", db_order.work_order_number,
                extra={"work_order_id": db_order.id, "work_order_number": db_order.work_order_number})
    return db_order


def delete_work_order(db: Session, work_order_id: str) -> bool:
    """删除工单，明细及完工日期级联删除"""
    with unit_of_work(db):
        db_order = db.get(models.WorkOrder, work_order_id)
        if db_order is None:
            return False
        db.delete(db_order)
    logger.info("Deleted work order %s", work_order_id, extra={"work_order_id": work_order_id})
    return True


def get_work_order_detail(db: Session, work_order_id: str) -> Optional[schemas.WorkOrderDetail]:
    """获取工单详情（工单 + 按序号排列的明细，每条明细带完工日期列表）"""
    stmt = (
        select(models.WorkOrder)
        .where(models.WorkOrder.id == work_order_id)
        .options(selectinload(models.WorkOrder.items).selectinload(models.WorkOrderItem.completion_dates))
    )
    db_order = db.execute(stmt).scalars().first()
    if db_order is None:
        return None

    items = [
        schemas.WorkOrderItemRead(
            id=it.id,
            work_order_id=it.work_order_id,
            seq=it.seq,
            type=it.type,
            scope=it.scope,
            elevation=it.elevation,
            quantity=it.quantity,
            status=it.status,
            hold_reason=it.hold_reason,
            completion_dates=[c.completion_date for c in it.completion_dates],
        )
        for it in db_order.items
    ]
    return schemas.WorkOrderDetail(order=schemas.WorkOrderRead.model_validate(db_order), items=items)


def list_work_orders(db: Session, status: Optional[str] = None, q: Optional[str] = None):
    """获取工单列表，按创建时间倒序

    status 精确匹配；q 对工程编号、工程名称、项目经理、地址、工单编号做不区分大小写的包含匹配。
    """
    stmt = select(models.WorkOrder)
    if status:
        stmt = stmt.where(models.WorkOrder.status == status)
    if q and q.strip():
        pattern = q.strip()
        stmt = stmt.where(or_(*(col.icontains(pattern, autoescape=True) for col in SEARCH_COLUMNS)))
    stmt = stmt.order_by(models.WorkOrder.created_at.desc(), models.WorkOrder.work_order_number.desc())
    return db.execute(stmt).scalars().all()
