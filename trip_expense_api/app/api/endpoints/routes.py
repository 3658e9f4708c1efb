"""
Route search endpoint.

Returns candidate itineraries between two places so an employee can
pick one when submitting a trip request.  Results come from the route
provider configured on the app and are annotated with the cheapest
fare of the result set.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from trip_expense_api.app.schemas.route import RouteInfo
from trip_expense_api.app.services.route_service import (
    RouteProvider,
    RouteService,
    get_route_provider,
)

router = APIRouter()


@router.get("/search", response_model=List[RouteInfo], response_model_exclude_none=True)
async def search_routes(
    departure: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    provider: RouteProvider = Depends(get_route_provider),
) -> List[RouteInfo]:
    """Search routes from ``departure`` to ``destination``."""
    return await RouteService.search_routes(provider, departure, destination)
