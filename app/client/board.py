"""工单列表状态

启动时从接口加载；接口不可用时进入降级模式，读写都只针对本地缓存，
并保留一条提示信息。降级模式下不自动重试，也不排队等待同步。
每次变更后整个列表写回本地缓存。
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from ..core.permissions import visible_orders
from .api import ApiUnavailable, WorkOrderApi, to_payload
from .export import export_json
from .fallback import FALLBACK_KEY, LocalStore
from .filters import filter_orders

logger = logging.getLogger(__name__)

DEGRADED_WARNING = "API not reachable - using local storage only."
PENDING_NUMBER = "(pending)"


class WorkOrderBoard:

    def __init__(self, api: WorkOrderApi, store: LocalStore):
        self.api = api
        self.store = store
        self.orders: List[dict] = store.get(FALLBACK_KEY, [])
        self.degraded = False
        self.warning: Optional[str] = None

    def _save(self) -> None:
        self.store.set(FALLBACK_KEY, self.orders)

    def _degrade(self, exc: Exception) -> None:
        logger.warning("API unavailable; falling back to local storage: %s", exc)
        self.degraded = True
        self.warning = DEGRADED_WARNING

    def _find(self, work_order_id: str) -> Optional[dict]:
        return next((o for o in self.orders if o.get("id") == work_order_id), None)

    def load(self) -> List[dict]:
        try:
            orders = self.api.list_orders()
        except ApiUnavailable as exc:
            self._degrade(exc)
            return self.orders
        self.orders = orders
        self.degraded = False
        self.warning = None
        self._save()
        return self.orders

    def create(self, order: dict) -> dict:
        """新建工单；接口可用时由服务端分配编号"""
        created = None
        if not self.degraded:
            try:
                row = self.api.create_order(to_payload(order))
            except ApiUnavailable as exc:
                self._degrade(exc)
            else:
                created = {**row, "items": order.get("items") or []}
        if created is None:
            now = datetime.now(timezone.utc).isoformat()
            created = {
                **order,
                "id": uuid.uuid4().hex,
                "work_order_number": PENDING_NUMBER,
                "created_at": now,
                "updated_at": now,
            }
        self.orders = [created] + self.orders
        self._save()
        return created

    def update(self, work_order_id: str, patch: dict) -> Optional[dict]:
        """合并修改后以完整状态提交（明细整体替换）

        列表接口返回的工单不含明细，提交前先读取详情补全，否则服务端明细会被清空。
        """
        existing = self._find(work_order_id)
        if existing is None:
            return None
        merged = {**existing, **patch}
        if not self.degraded:
            try:
                if "items" not in merged:
                    merged["items"] = self.api.get_order(work_order_id)["items"]
                updated = self.api.update_order(work_order_id, to_payload(merged))
                merged = {**merged, **updated}
            except ApiUnavailable as exc:
                self._degrade(exc)
        self.orders = [merged if o.get("id") == work_order_id else o for o in self.orders]
        self._save()
        return merged

    def delete(self, work_order_id: str) -> None:
        self.orders = [o for o in self.orders if o.get("id") != work_order_id]
        self._save()
        if not self.degraded:
            try:
                self.api.delete_order(work_order_id)
            except ApiUnavailable as exc:
                self._degrade(exc)

    def filtered(self, status: Optional[str] = None, q: Optional[str] = None, role=None) -> List[dict]:
        orders = visible_orders(role, self.orders) if role else self.orders
        return filter_orders(orders, status=status, q=q)

    def export(self, directory=".", day=None):
        return export_json(self.orders, directory, day)
