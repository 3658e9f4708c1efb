"""Trip Expense API client.

A thin wrapper around the HTTP API using the ``requests`` library.  It
exposes one method per endpoint:

* :meth:`list_trip_requests`, :meth:`get_trip_request`,
  :meth:`create_trip_request` and :meth:`update_trip_status` for trip
  requests;
* :meth:`list_expenses`, :meth:`create_expense`,
  :meth:`delete_expense` and :meth:`expense_totals` for expenses;
* :meth:`search_routes` for route candidates;
* :meth:`health` for the liveness probe.

Methods never raise on HTTP or transport errors.  Each returns a tuple
``(result, error)`` where ``error`` is ``None`` on success or a dict
with ``status_code`` and ``message`` keys describing the failure.
Payloads and results use the API's camelCase field names.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TripExpenseAPI:
    """Client for the trip request and expense API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:4000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, without the ``/api`` prefix.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path below ``/api`` (e.g. ``/expenses``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
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
                    message = exc.response.json().get("message", "")
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Trip requests
    # ------------------------------------------------------------------
    def list_trip_requests(self, status: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return trip requests, newest first, optionally filtered by status."""
        params = {"status": status} if status else None
        data, error = self._request("GET", "/trip-requests", params=params)
        return (data or []), error

    def get_trip_request(self, trip_request_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/trip-requests/{trip_request_id}")

    def create_trip_request(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit a trip request.

        Args:
            payload: Trip request fields except ``id``, ``status`` and
                ``createdAt``.
        """
        return self._request("POST", "/trip-requests", json_body=payload)

    def update_trip_status(self, trip_request_id: str, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PATCH", f"/trip-requests/{trip_request_id}/status", json_body={"status": status}
        )

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------
    def list_expenses(self, trip_request_id: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"tripRequestId": trip_request_id} if trip_request_id else None
        data, error = self._request("GET", "/expenses", params=params)
        return (data or []), error

    def create_expense(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Record an expense.

        Args:
            payload: Expense fields except ``id``.  ``tripRequestId``
                must reference an existing trip request.
        """
        return self._request("POST", "/expenses", json_body=payload)

    def delete_expense(self, expense_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete an expense.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/expenses/{expense_id}")
        return error is None, error

    def expense_totals(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/expenses/totals")
        return (data or []), error

    # ------------------------------------------------------------------
    # Routes and health
    # ------------------------------------------------------------------
    def search_routes(self, departure: str, destination: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return route candidates annotated with the cheapest fare."""
        data, error = self._request(
            "GET", "/routes/search", params={"departure": departure, "destination": destination}
        )
        return (data or []), error

    def health(self) -> bool:
        data, error = self._request("GET", "/health")
        return error is None and isinstance(data, dict) and data.get("status") == "ok"
