"""工单相关的枚举值（封闭集合）"""

import enum


class WorkOrderStatus(str, enum.Enum):
    DRAFT = "Draft"
    ISSUED = "Issued"
    IN_PROGRESS = "In Progress"
    ON_HOLD = "On Hold"
    COMPLETE = "Complete"
    # 按角色流转的部署使用以下状态
    SUBMITTED_FOR_REVIEW = "Submitted for Review"
    RELEASED_TO_FAB = "Released to Fab"
    COMPLETED = "Completed"


class ItemType(str, enum.Enum):
    DOOR = "Door"
    STOREFRONT = "Storefront"
    CURTAINWALL = "Curtainwall"
    WINDOW_WALL = "Window wall"


class ItemScope(str, enum.Enum):
    KIT = "Kit"
    ASSEMBLE = "Assemble"
    HARDWARE = "Hardware"


class ItemStatus(str, enum.Enum):
    IN_PROGRESS = "In Progress"
    ON_HOLD = "On Hold"
    COMPLETE = "Complete"


class HoldReason(str, enum.Enum):
    MATERIAL_ISSUES = "Material Issues"
    SHORT_MATERIAL = "Short Material"
    WAITING_ON_ANSWERS = "Waiting on Answers"
    PM_SUPER_REQUESTED = "PM/Super Requested"
