"""Order Flow API client.

This module defines a small client wrapper around the Order Flow REST
API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* customers: :meth:`~OrderFlowClient.list_customers`,
  :meth:`~OrderFlowClient.get_customer`,
  :meth:`~OrderFlowClient.create_customer`,
  :meth:`~OrderFlowClient.update_customer`,
  :meth:`~OrderFlowClient.delete_customer`
* orders: :meth:`~OrderFlowClient.list_orders`,
  :meth:`~OrderFlowClient.get_order`,
  :meth:`~OrderFlowClient.create_order`,
  :meth:`~OrderFlowClient.update_order`,
  :meth:`~OrderFlowClient.delete_order`,
  :meth:`~OrderFlowClient.list_orders_by_customer_id`,
  :meth:`~OrderFlowClient.list_orders_by_customer_name`

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for list
methods) and ``error`` is a dictionary with the keys ``status_code`` and
``message``.  The message is the ``detail`` sent by the server when there
is one.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
API behind a gateway.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class OrderFlowClient:
    """Client for interacting with the Order Flow API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path the versioned routers are mounted under.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included in
                all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        prefix = api_prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to the versioned base URL (e.g. ``/orders``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PATCH).
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/customers")

    def get_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/customers/{customer_id}")

    def create_customer(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a customer and return it with its generated ``id``."""
        return self._request("POST", "/customers", json_body={"name": name, "email": email})

    def update_customer(self, customer_id: int, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PATCH", f"/customers/{customer_id}", json_body={"name": name, "email": email}
        )

    def delete_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/customers/{customer_id}")

    # ------------------------------------------------------------------
    # Order operations
    # ------------------------------------------------------------------
    def list_orders(
        self, page_index: Optional[int] = None, page_size: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve one page of orders, newest first.

        Parameters left as ``None`` are not sent, so the server defaults
        apply.
        """
        params: Dict[str, Any] = {}
        if page_index is not None:
            params["pageIndex"] = page_index
        if page_size is not None:
            params["pageSize"] = page_size
        return self._list("/orders", params=params or None)

    def get_order(self, order_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/orders/{order_id}")

    def create_order(
        self, order_information: str, customer_id: int, item_names: List[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", "/orders", json_body=self._order_body(order_information, customer_id, item_names)
        )

    def update_order(
        self, order_id: int, order_information: str, customer_id: int, item_names: List[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PATCH",
            f"/orders/{order_id}",
            json_body=self._order_body(order_information, customer_id, item_names),
        )

    def delete_order(self, order_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete an order.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/orders/{order_id}")
        if error:
            return False, error
        return True, None

    def list_orders_by_customer_id(self, customer_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/orders/customer/id/{customer_id}")

    def list_orders_by_customer_name(self, customer_name: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/orders/customer/name/{quote(customer_name, safe='')}")

    @staticmethod
    def _order_body(order_information: str, customer_id: int, item_names: List[str]) -> Dict[str, Any]:
        return {
            "orderInformation": order_information,
            "customerId": customer_id,
            "items": [{"name": name} for name in item_names],
        }
