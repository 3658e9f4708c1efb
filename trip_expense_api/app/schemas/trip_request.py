"""
Pydantic models for trip requests.

``TripRequestCreate`` is the body accepted when an employee submits a
trip; ``TripRequestRead`` is the stored record returned by the API,
which adds the server-assigned ``id``, ``status`` and ``createdAt``.
``TripRequestStatusUpdate`` is the body of the status endpoint.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel, Number
from .route import RouteInfo


class TripRequestStatus(str, Enum):
    """Approval state of a trip request.

    Any state may be set over any other one, including moving an
    approved or rejected request back to ``pending`` for correction.
    """

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class TripRequestBase(CamelModel):
    employee_name: str = Field(..., min_length=1, examples=["Tanaka"])
    department: str = Field(..., min_length=1, examples=["Sales"])
    destination: str = Field(..., min_length=1, examples=["Osaka"])
    purpose: str = Field(..., min_length=1, examples=["Client visit"])
    # Dates are kept exactly as submitted; no ordering check is made.
    start_date: str = Field(..., min_length=1, examples=["2024-04-01"])
    end_date: str = Field(..., min_length=1, examples=["2024-04-03"])
    estimated_cost: Number = Field(..., examples=[30000])
    selected_route: Optional[RouteInfo] = None


class TripRequestCreate(TripRequestBase):
    """Schema for submitting a trip request."""
    pass


class TripRequestRead(TripRequestBase):
    """Schema for a trip request returned by the API."""

    id: str
    status: TripRequestStatus = TripRequestStatus.pending
    created_at: str


class TripRequestStatusUpdate(CamelModel):
    status: TripRequestStatus
