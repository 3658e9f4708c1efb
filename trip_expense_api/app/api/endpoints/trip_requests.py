"""
Trip request endpoints.

Employees submit trip requests here and managers approve or reject
them through the status endpoint.  Requests are listed newest first.
There is intentionally no delete route: expenses reference trip
requests and are never cascaded or orphaned.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import ValidationError

from trip_expense_api.app.core.http import parse_body, read_json_object
from trip_expense_api.app.core.store import DocumentStore, get_store
from trip_expense_api.app.schemas.trip_request import (
    TripRequestCreate,
    TripRequestRead,
    TripRequestStatus,
    TripRequestStatusUpdate,
)
from trip_expense_api.app.services.trip_request_service import TripRequestService

router = APIRouter()


# Stored records are returned as they are; the models only document them.
@router.get("", response_model=None, responses={200: {"model": List[TripRequestRead]}})
async def list_trip_requests(
    status_filter: Optional[TripRequestStatus] = Query(None, alias="status"),
    store: DocumentStore = Depends(get_store),
) -> List[Dict[str, Any]]:
    """Return all trip requests in stored order (newest first).

    - **status**: only return requests in this state, e.g. ``approved``
      to build the list of trips that may receive expenses.
    """
    return await TripRequestService.list_trip_requests(store, status=status_filter)


@router.post(
    "",
    response_model=TripRequestRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_trip_request(
    request: Request,
    store: DocumentStore = Depends(get_store),
) -> TripRequestRead:
    """Submit a new trip request.

    ``employeeName``, ``department``, ``destination``, ``purpose``,
    ``startDate``, ``endDate`` and ``estimatedCost`` are required
    (``estimatedCost`` may be 0).  ``selectedRoute`` optionally embeds
    a route picked from ``/api/routes/search``.  The new request is
    always ``pending``.
    """
    data = await parse_body(request, TripRequestCreate)
    return await TripRequestService.create_trip_request(store, data)


@router.get("/{trip_request_id}", response_model=None, responses={200: {"model": TripRequestRead}})
async def get_trip_request(
    trip_request_id: str,
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    """Retrieve a single trip request.  Returns 404 if it does not exist."""
    trip_request = await TripRequestService.get_trip_request(store, trip_request_id)
    if trip_request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip request not found")
    return trip_request


@router.patch(
    "/{trip_request_id}/status",
    response_model=None,
    responses={200: {"model": TripRequestRead}},
)
async def update_trip_request_status(
    trip_request_id: str,
    request: Request,
    store: DocumentStore = Depends(get_store),
) -> Dict[str, Any]:
    """Set the status of a trip request.

    The body must be ``{"status": "pending" | "approved" | "rejected"}``;
    anything else is rejected with 400 before the id is looked up.
    Every transition is allowed, so an approval can be reverted to
    ``pending`` for correction.
    """
    payload = await read_json_object(request)
    try:
        update = TripRequestStatusUpdate.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status") from e
    try:
        return await TripRequestService.update_status(store, trip_request_id, update.status)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
