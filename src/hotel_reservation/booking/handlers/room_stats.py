from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.domain.value_object import HotelId
from hotel_reservation.booking.handlers.api import handle_errors
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.request_models import HotelFilterQuery
from hotel_reservation.booking.handlers.response_models import (
    success,
    to_room_stats_data,
)
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室空き状況サマリ取得 Lambda Handler"""
    query = HotelFilterQuery.model_validate(event.query_string_parameters or {})
    logger.info("Fetching room stats", extra={"hotel_id": query.hotel_id})

    hotel_id = HotelId(query.hotel_id) if query.hotel_id is not None else None
    stats = get_engine().room_stats(hotel_id)
    return api_response(200, success(to_room_stats_data(stats)))
