from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.domain.value_object import HotelId
from hotel_reservation.booking.handlers.api import handle_errors, read_json_body
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.request_models import CreateRoomRequest
from hotel_reservation.booking.handlers.response_models import success, to_room_data
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室登録 Lambda Handler"""
    logger.info("Received create room request")

    request = CreateRoomRequest.model_validate(read_json_body(event))
    room = get_engine().create_room(
        hotel_id=HotelId(request.hotel_id),
        number=request.number,
        room_type=request.room_type,
        price_per_night=request.price_per_night,
        available=request.available,
        currency=request.currency,
    )
    return api_response(201, success(to_room_data(room)))
