"""
Route search.

Finding routes is delegated to a ``RouteProvider``: any object with a
``search(departure, destination)`` method returning ``RouteInfo``
candidates.  ``SampleRouteProvider`` returns a fixed set of
illustrative itineraries and is what the app uses unless another
provider is passed to ``create_app``.

``RouteService.search_routes`` marks the cheapest candidates so a
client can show how much more a chosen route costs.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

from fastapi import Request

from trip_expense_api.app.schemas.route import RouteInfo, RouteStep


class RouteProvider(Protocol):
    def search(self, departure: str, destination: str) -> List[RouteInfo]:
        ...


class SampleRouteProvider:
    """Route provider returning three fixed sample itineraries.

    Station names between the endpoints and all fares are sample data;
    only ``departure`` and ``destination`` come from the query.
    """

    def search(self, departure: str, destination: str) -> List[RouteInfo]:
        if not departure or not destination:
            return []

        def train(line: str, start: str, end: str, minutes: int, fare: int) -> RouteStep:
            return RouteStep(type="train", line=line, from_=start, to=end, duration=minutes, fare=fare)

        def walk(station: str, minutes: int) -> RouteStep:
            return RouteStep(type="walk", from_=station, to=station, duration=minutes)

        return [
            RouteInfo(
                id="1",
                departure=departure,
                arrival=destination,
                duration=135,
                fare=14520,
                transfers=1,
                steps=[
                    train("Tokaido Shinkansen Nozomi", departure, "Nagoya", 90, 10560),
                    walk("Nagoya", 5),
                    train("Tokaido Line Rapid", "Nagoya", destination, 40, 3960),
                ],
            ),
            RouteInfo(
                id="2",
                departure=departure,
                arrival=destination,
                duration=145,
                fare=13340,
                transfers=2,
                steps=[
                    train("Tokaido Shinkansen Hikari", departure, "Kyoto", 100, 9840),
                    walk("Kyoto", 5),
                    train("Tokaido Line", "Kyoto", "Osaka", 30, 2200),
                    walk("Osaka", 3),
                    train("Osaka Loop Line", "Osaka", destination, 7, 1300),
                ],
            ),
            RouteInfo(
                id="3",
                departure=departure,
                arrival=destination,
                duration=160,
                fare=11280,
                transfers=1,
                steps=[
                    train("Tokaido Line", departure, "Shizuoka", 80, 5640),
                    walk("Shizuoka", 5),
                    train("Tokaido Line Rapid", "Shizuoka", destination, 75, 5640),
                ],
            ),
        ]


class RouteService:
    """Service class wrapping a route provider."""

    @classmethod
    async def search_routes(
        cls,
        provider: RouteProvider,
        departure: str,
        destination: str,
    ) -> List[RouteInfo]:
        """Search routes and annotate them with the cheapest fare.

        Every route gets ``cheapest_fare`` set to the lowest fare in the
        result set and ``is_cheapest`` set when its own fare equals it.
        Ties all count as cheapest.
        """
        logger = logging.getLogger(__name__)
        routes = list(provider.search(departure, destination))
        logger.debug("Route search %s -> %s returned %d routes", departure, destination, len(routes))
        if not routes:
            return []
        cheapest = min(route.fare for route in routes)
        return [
            route.model_copy(update={"is_cheapest": route.fare == cheapest, "cheapest_fare": cheapest})
            for route in routes
        ]


def get_route_provider(request: Request) -> RouteProvider:
    """FastAPI dependency returning the route provider attached to the app."""
    return request.app.state.route_provider
