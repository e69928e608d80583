"""业务异常"""


class WorkOrderNumberConflict(Exception):
    """多次重试后仍无法分配唯一的工单编号（并发创建冲突），客户端可重试"""

    def __init__(self, number: str, attempts: int):
        self.number = number
        self.attempts = attempts
        super().__init__(f"Work order number {number} already taken after {attempts} attempts")
