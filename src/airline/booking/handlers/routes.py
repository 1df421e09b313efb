from aws_lambda_powertools.event_handler.api_gateway import Router

from airline.booking.domain.value_object import BookingId
from airline.booking.handlers.request_models import CreateBookingRequest
from airline.booking.handlers.response_models import to_booking_data
from airline.flight.domain.value_object import FlightId
from airline.shared.utils import api_response

router = Router()


def _app_context():
    return router.context["app_context"]


@router.post("/api/bookings")
def create_booking():
    """予約作成 API"""
    body = router.current_event.decoded_body or "{}"
    request = CreateBookingRequest.model_validate_json(body)

    booking = _app_context().create_booking.create(
        FlightId(value=request.flight_id), request.passenger_name
    )
    return api_response(
        201,
        to_booking_data(booking),
        headers={"Location": f"/api/bookings/{booking.id}"},
    )


@router.get("/api/bookings/<booking_id>")
def get_booking(booking_id: str):
    """予約取得 API"""
    booking = _app_context().get_booking.get(BookingId(value=booking_id))
    return api_response(200, to_booking_data(booking))


@router.post("/api/bookings/<booking_id>/confirm")
def confirm_booking(booking_id: str):
    """予約確定 API"""
    booking = _app_context().confirm_booking.confirm(BookingId(value=booking_id))
    return api_response(200, to_booking_data(booking))


@router.post("/api/bookings/<booking_id>/cancel")
def cancel_booking(booking_id: str):
    """予約キャンセル API"""
    booking = _app_context().cancel_booking.cancel(BookingId(value=booking_id))
    return api_response(200, to_booking_data(booking))
