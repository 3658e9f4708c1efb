"""
Service layer for trip requests.

Trip requests are created in the ``pending`` state and later approved
or rejected by a manager.  Each call loads the whole document from the
injected store; mutations run inside ``store.transaction()`` so the
load, change and save happen under the store lock.  New requests are
prepended, so the stored order is newest first.  Reads return the stored
records unchanged, so a legacy or hand-edited record is passed through
rather than failing the whole request.

Trip requests cannot be deleted, which is why expenses referencing
them never become orphaned.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from trip_expense_api.app.core.store import DocumentStore, TRIP_REQUESTS, generate_id
from trip_expense_api.app.schemas.trip_request import (
    TripRequestCreate,
    TripRequestRead,
    TripRequestStatus,
)


def _utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TripRequestService:
    """Service class for creating, listing and reviewing trip requests."""

    @classmethod
    async def list_trip_requests(
        cls,
        store: DocumentStore,
        status: Optional[TripRequestStatus] = None,
    ) -> List[Dict[str, Any]]:
        """Return trip requests in stored order (newest first).

        If ``status`` is given only requests in that state are returned.
        """
        records = store.load()[TRIP_REQUESTS]
        if status is not None:
            records = [r for r in records if r.get("status") == status.value]
        return records

    @classmethod
    async def get_trip_request(cls, store: DocumentStore, trip_request_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve a single trip request, or ``None`` if it does not exist."""
        for record in store.load()[TRIP_REQUESTS]:
            if record.get("id") == trip_request_id:
                return record
        return None

    @classmethod
    async def create_trip_request(cls, store: DocumentStore, data: TripRequestCreate) -> TripRequestRead:
        """Store a new trip request and return it.

        The status is always ``pending`` and ``createdAt`` is set by
        the server, whatever the client sent.
        """
        logger = logging.getLogger(__name__)
        with store.transaction() as document:
            records = document[TRIP_REQUESTS]
            trip_request = TripRequestRead(
                **data.model_dump(),
                id=generate_id(records),
                status=TripRequestStatus.pending,
                created_at=_utc_timestamp(),
            )
            records.insert(0, trip_request.to_document())
        logger.info("Created trip request %s for %s", trip_request.id, trip_request.employee_name)
        return trip_request

    @classmethod
    async def update_status(
        cls,
        store: DocumentStore,
        trip_request_id: str,
        status: TripRequestStatus,
    ) -> Dict[str, Any]:
        """Set the status of a trip request.

        No transition guard is applied: any of the three states may be
        written over any other.  Setting the current status again leaves
        the record unchanged.

        Raises
        ------
        ValueError
            If no trip request has the given id.
        """
        logger = logging.getLogger(__name__)
        with store.transaction() as document:
            for record in document[TRIP_REQUESTS]:
                if record.get("id") == trip_request_id:
                    previous = record.get("status")
                    record["status"] = status.value
                    break
            else:
                raise ValueError("Trip request not found")
        logger.info("Trip request %s status %s -> %s", trip_request_id, previous, status.value)
        return record
