from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...database.connection import get_db
from ...utils.pdf import render_work_order_pdf

router = APIRouter()

NOT_FOUND = "Not found"


@router.get("", response_model=List[schemas.WorkOrderRead])
def list_work_orders_endpoint(
    status_filter: Optional[str] = Query(None, alias="status", description="状态精确匹配"),
    q: Optional[str] = Query(None, description="工程编号/名称/项目经理/地址/工单编号关键字"),
    db: Session = Depends(get_db),
):
    """工单列表，按创建时间倒序"""
    return crud.list_work_orders(db, status=status_filter, q=q)


@router.post("", response_model=schemas.WorkOrderRead, status_code=status.HTTP_201_CREATED)
def create_work_order_endpoint(payload: schemas.WorkOrderCreate, db: Session = Depends(get_db)):
    """创建新工单（编号由服务端生成）"""
    return crud.create_work_order(db, payload)


@router.get("/{work_order_id}", response_model=schemas.WorkOrderDetail)
def get_work_order_endpoint(work_order_id: str, db: Session = Depends(get_db)):
    detail = crud.get_work_order_detail(db, work_order_id)
    if detail is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return detail


@router.put("/{work_order_id}", response_model=schemas.WorkOrderRead)
def update_work_order_endpoint(work_order_id: str, payload: schemas.WorkOrderUpdate, db: Session = Depends(get_db)):
    """整单更新工单，明细整体替换"""
    db_order = crud.update_work_order(db, work_order_id, payload)
    if db_order is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return db_order


@router.delete("/{work_order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_work_order_endpoint(work_order_id: str, db: Session = Depends(get_db)):
    """删除指定ID的工单（不存在时同样返回 204）"""
    crud.delete_work_order(db, work_order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{work_order_id}/pdf")
def get_work_order_pdf(work_order_id: str, db: Session = Depends(get_db)):
    """生成工单 PDF"""
    detail = crud.get_work_order_detail(db, work_order_id)
    if detail is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    filename = f"{detail.order.work_order_number}.pdf"
    return Response(
        content=render_work_order_pdf(detail),
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )
