"""工单数据结构定义

定义工单相关的Pydantic模型。请求体使用前端的 camelCase 字段名（jobNumber、jobPM ...），
同时也接受 snake_case；响应使用数据库列名。
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.enums import HoldReason, ItemScope, ItemStatus, ItemType, WorkOrderStatus


def _blank_to_none(values):
    """去掉字符串首尾空白，空字符串视为未填写"""
    if not isinstance(values, dict):
        return values
    cleaned = {}
    for key, value in values.items():
        if isinstance(value, str):
            value = value.strip() or None
        cleaned[key] = value
    return cleaned


class WorkOrderItemIn(BaseModel):
    """请求中的工单明细"""
    type: Optional[ItemType] = None
    scope: Optional[ItemScope] = None
    elevation: Optional[str] = None
    quantity: int = Field(0, ge=0)
    status: ItemStatus = ItemStatus.IN_PROGRESS
    hold_reason: Optional[HoldReason] = Field(None, alias="holdReason")
    completion_dates: List[date] = Field(default_factory=list, alias="completionDates")

    class Config:
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        return _blank_to_none(values)

    @field_validator("quantity", mode="before")
    @classmethod
    def default_quantity(cls, value):
        return 0 if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return ItemStatus.IN_PROGRESS if value is None else value

    @field_validator("completion_dates", mode="before")
    @classmethod
    def drop_blank_dates(cls, value):
        if value is None:
            return []
        return [d for d in value if d not in (None, "")]


class WorkOrderBase(BaseModel):
    """工单基础模型（汇总字段）"""
    job_number: Optional[str] = Field(None, alias="jobNumber")
    job_name: Optional[str] = Field(None, alias="jobName")
    job_pm: Optional[str] = Field(None, alias="jobPM")
    job_address: Optional[str] = Field(None, alias="jobAddress")
    job_superintendent: Optional[str] = Field(None, alias="jobSuperintendent")
    division: Optional[str] = None
    system: Optional[str] = None
    notes: Optional[str] = None
    date_issued: Optional[date] = Field(None, alias="dateIssued")
    material_delivery_date: Optional[date] = Field(None, alias="materialDeliveryDate")
    requested_completion_dates: List[date] = Field(default_factory=list, alias="requestedCompletionDates")
    # 整单完工日期：填写时覆盖所有明细的完工日期
    completion_date: Optional[date] = Field(None, alias="completionDate")
    status: WorkOrderStatus = WorkOrderStatus.DRAFT

    class Config:
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        return _blank_to_none(values)

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return WorkOrderStatus.DRAFT if value is None else value

    @field_validator("requested_completion_dates", mode="before")
    @classmethod
    def drop_blank_dates(cls, value):
        if value is None:
            return []
        return [d for d in value if d not in (None, "")]


class WorkOrderCreate(WorkOrderBase):
    """创建工单时的模型"""
    items: List[WorkOrderItemIn] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def default_items(cls, value):
        return [] if value is None else value


class WorkOrderUpdate(WorkOrderCreate):
    """更新工单时的模型（完整状态，不做字段合并）"""
    pass


class WorkOrderRead(BaseModel):
    """读取工单时的模型"""
    id: str
    work_order_number: str
    job_number: Optional[str] = None
    job_name: Optional[str] = None
    job_pm: Optional[str] = None
    job_address: Optional[str] = None
    job_superintendent: Optional[str] = None
    division: Optional[str] = None
    system: Optional[str] = None
    notes: Optional[str] = None
    date_issued: Optional[date] = None
    material_delivery_date: Optional[date] = None
    requested_completion_dates: List[date] = Field(default_factory=list)
    completion_date: Optional[date] = None
    completion_varies: bool = False
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class WorkOrderItemRead(BaseModel):
    """读取工单明细时的模型"""
    id: str
    work_order_id: str
    seq: int
    type: Optional[str] = None
    scope: Optional[str] = None
    elevation: Optional[str] = None
    quantity: int
    status: str
    hold_reason: Optional[str] = None
    completion_dates: List[date] = Field(default_factory=list)


class WorkOrderDetail(BaseModel):
    """工单详情：工单本身加上明细"""
    order: WorkOrderRead
    items: List[WorkOrderItemRead]
