from datetime import date

from aws_lambda_powertools import Logger

from airline.flight.domain.entity import Flight
from airline.flight.domain.repository import FlightCatalog

logger = Logger(child=True)


class SearchFlightsService:
    """フライト検索ユースケース"""

    def __init__(self, catalog: FlightCatalog) -> None:
        self._catalog = catalog

    def search(self, origin: str, destination: str, on: date) -> list[Flight]:
        """出発地・到着地・日付でフライトを検索する"""
        search_keys = {
            "origin": origin,
            "destination": destination,
            "date": on.isoformat(),
        }
        logger.info("Searching flights", extra=search_keys)

        flights = self._catalog.search(origin, destination, on)

        if not flights:
            logger.warning("No flights found", extra=search_keys)
        else:
            logger.info("Found flights", extra={**search_keys, "count": len(flights)})
        return flights
