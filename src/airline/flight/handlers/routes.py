from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler.api_gateway import Router
from pydantic import ValidationError

from airline.flight.handlers.request_models import SearchFlightsQuery
from airline.flight.handlers.response_models import to_flight_data
from airline.shared.utils import api_response, error_response

logger = Logger(child=True)

router = Router()


@router.get("/api/flights/search")
def search_flights():
    """フライト検索 API

    日付の形式チェックはここで行い、不正な日付はカタログまで渡さない。
    """
    params = router.current_event.query_string_parameters or {}

    try:
        query = SearchFlightsQuery.model_validate(params)
    except ValidationError as e:
        if any(err["loc"] == ("date",) for err in e.errors()):
            logger.error(
                "Invalid date format for flight search",
                extra={
                    "origin": params.get("from"),
                    "destination": params.get("to"),
                    "date": params.get("date"),
                },
            )
            return error_response(400, "Invalid date format. Use yyyy-MM-dd.")
        raise

    service = router.context["app_context"].search_flights
    flights = service.search(query.origin, query.destination, query.date)
    return api_response(200, [to_flight_data(f) for f in flights])
