"""
Pydantic models for route search results.

A ``RouteInfo`` is one candidate itinerary between two places: its
total duration in minutes, one-way fare, number of transfers and the
ordered legs (``RouteStep``) that make it up.  Routes are informational
only.  A trip request may embed the route chosen at submission time as
a snapshot; it is never re-validated against later searches.
"""

from typing import List, Literal, Optional

from pydantic import Field

from .base import CamelModel, Number


class RouteStep(CamelModel):
    """A single leg of a route: a train ride or a walk between platforms."""

    type: Literal["train", "walk"]
    line: Optional[str] = Field(None, examples=["Tokaido Shinkansen"])
    # ``from`` is a keyword, so the attribute carries a trailing underscore.
    from_: str = Field(..., alias="from", examples=["Tokyo"])
    to: str = Field(..., examples=["Nagoya"])
    duration: int = Field(..., description="Minutes")
    fare: Optional[Number] = None


class RouteInfo(CamelModel):
    """A candidate itinerary.

    ``is_cheapest`` and ``cheapest_fare`` are filled in by the route
    search so clients can compare a route with the cheapest one from
    the same result set.
    """

    id: str
    departure: str
    arrival: str
    duration: int = Field(..., description="Total minutes")
    fare: Number = Field(..., description="One-way fare")
    transfers: int
    steps: List[RouteStep] = Field(default_factory=list)
    is_cheapest: Optional[bool] = None
    cheapest_fare: Optional[Number] = None
