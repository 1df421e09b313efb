from aws_lambda_powertools import Logger

from airline.booking.domain.entity import Booking
from airline.booking.domain.repository import BookingLedger
from airline.flight.domain.repository import FlightCatalog
from airline.flight.domain.value_object import FlightId
from airline.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class CreateBookingService:
    """予約作成ユースケース

    フライトの存在を確認してから台帳に PENDING の予約を作成する。
    """

    def __init__(self, ledger: BookingLedger, catalog: FlightCatalog) -> None:
        self._ledger = ledger
        self._catalog = catalog

    def create(self, flight_id: FlightId, passenger_name: str) -> Booking:
        """予約を作成する"""
        logger.info(
            "Creating booking",
            extra={"flight_id": str(flight_id), "passenger_name": passenger_name},
        )

        if self._catalog.find_by_id(flight_id) is None:
            logger.error(
                "Flight not found when creating booking",
                extra={"flight_id": str(flight_id), "passenger_name": passenger_name},
            )
            raise ResourceNotFoundException("Flight not found.")

        booking = self._ledger.create(flight_id, passenger_name)
        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "status": booking.status.value,
                "flight_id": str(booking.flight_id),
            },
        )
        return booking
