"""角色权限表

角色到可见状态、可编辑状态以及能否新建/删除工单的固定映射。
服务端不强制状态流转，这张表只用于客户端的显示和编辑控制。
"""

import enum
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List

from ..models.enums import WorkOrderStatus

S = WorkOrderStatus


class Role(str, enum.Enum):
    PROJECT_MANAGER = "Project Manager"
    FABRICATION = "Fabrication"
    ADMIN = "Admin"


@dataclass(frozen=True)
class RolePermissions:
    visible_statuses: FrozenSet[WorkOrderStatus]
    editable_statuses: FrozenSet[WorkOrderStatus]
    can_create: bool
    can_delete: bool


ROLE_PERMISSIONS = {
    Role.PROJECT_MANAGER: RolePermissions(
        visible_statuses=frozenset(S),
        editable_statuses=frozenset({S.DRAFT, S.SUBMITTED_FOR_REVIEW}),
        can_create=True,
        can_delete=False,
    ),
    Role.FABRICATION: RolePermissions(
        visible_statuses=frozenset({S.RELEASED_TO_FAB, S.IN_PROGRESS, S.ON_HOLD, S.COMPLETED}),
        editable_statuses=frozenset({S.RELEASED_TO_FAB, S.IN_PROGRESS, S.ON_HOLD}),
        can_create=False,
        can_delete=False,
    ),
    Role.ADMIN: RolePermissions(
        visible_statuses=frozenset(S),
        editable_statuses=frozenset(S),
        can_create=True,
        can_delete=True,
    ),
}


def permissions_for(role) -> RolePermissions:
    return ROLE_PERMISSIONS[Role(role)]


def _as_status(status):
    try:
        return S(status)
    except ValueError:
        return None


def can_view(role, status) -> bool:
    return _as_status(status) in permissions_for(role).visible_statuses


def can_edit(role, status) -> bool:
    return _as_status(status) in permissions_for(role).editable_statuses


def visible_orders(role, orders: Iterable[dict]) -> List[dict]:
    """按角色过滤工单列表（工单为包含 status 键的 dict）"""
    return [o for o in orders if can_view(role, o.get("status"))]
