"""工单 REST 接口封装"""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

# 订单 dict（接口返回的 snake_case）到请求体 camelCase 的映射
SUMMARY_KEYS = {
    "job_number": "jobNumber",
    "job_name": "jobName",
    "job_pm": "jobPM",
    "job_address": "jobAddress",
    "job_superintendent": "jobSuperintendent",
    "division": "division",
    "system": "system",
    "notes": "notes",
    "date_issued": "dateIssued",
    "material_delivery_date": "materialDeliveryDate",
    "requested_completion_dates": "requestedCompletionDates",
    "status": "status",
}
ITEM_KEYS = {
    "type": "type",
    "scope": "scope",
    "elevation": "elevation",
    "quantity": "quantity",
    "status": "status",
    "hold_reason": "holdReason",
    "completion_dates": "completionDates",
}


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"{status_code}: {message}")


class ApiUnavailable(Exception):
    """接口无法连接（网络错误或超时）"""


def to_payload(order: dict) -> dict:
    """把工单 dict 转成创建/更新接口的请求体（完整状态）"""
    payload = {camel: order.get(key) for key, camel in SUMMARY_KEYS.items()}
    payload["requestedCompletionDates"] = payload["requestedCompletionDates"] or []
    payload["items"] = [
        {camel: item.get(key) for key, camel in ITEM_KEYS.items()}
        for item in order.get("items") or []
    ]
    for item in payload["items"]:
        item["completionDates"] = item["completionDates"] or []
    return payload


class WorkOrderApi:
    """REST 接口客户端

    session 默认为 requests.Session，也可以传入接口兼容的对象（如测试用的 TestClient）。
    """

    def __init__(self, base_url: str, session=None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise ApiUnavailable(str(exc)) from exc
        if response.status_code >= 400:
            try:
                message = response.json().get("error", "")
            except ValueError:
                message = response.text
            raise ApiError(response.status_code, message)
        return response

    def health(self) -> bool:
        return self._request("GET", "/api/health").json().get("ok", False)

    def list_orders(self, status: Optional[str] = None, q: Optional[str] = None) -> list:
        params = {k: v for k, v in (("status", status), ("q", q)) if v}
        return self._request("GET", "/api/work-orders", params=params).json()

    def get_order(self, work_order_id: str) -> dict:
        return self._request("GET", f"/api/work-orders/{work_order_id}").json()

    def create_order(self, payload: dict) -> dict:
        return self._request("POST", "/api/work-orders", json=payload).json()

    def update_order(self, work_order_id: str, payload: dict) -> dict:
        return self._request("PUT", f"/api/work-orders/{work_order_id}", json=payload).json()

    def delete_order(self, work_order_id: str) -> None:
        self._request("DELETE", f"/api/work-orders/{work_order_id}")

    def pdf_url(self, work_order_id: str) -> str:
        return f"{self.base_url}/api/work-orders/{work_order_id}/pdf"
