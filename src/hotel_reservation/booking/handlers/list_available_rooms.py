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
    RoomData,
    success_list,
    to_room_data,
)
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約可能な客室一覧取得 Lambda Handler"""
    query = HotelFilterQuery.model_validate(event.query_string_parameters or {})
    logger.info("Listing available rooms", extra={"hotel_id": query.hotel_id})

    hotel_id = HotelId(query.hotel_id) if query.hotel_id is not None else None
    rooms = [to_room_data(room) for room in get_engine().list_available_rooms(hotel_id)]
    return api_response(200, success_list(rooms, RoomData))
