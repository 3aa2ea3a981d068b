from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.domain.value_object import Guest, RoomId
from hotel_reservation.booking.handlers.api import handle_errors, read_json_body
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.request_models import CreateBookingRequest
from hotel_reservation.booking.handlers.response_models import (
    success,
    to_booking_data,
)
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create booking request")

    request = CreateBookingRequest.model_validate(read_json_body(event))
    guest = Guest(
        id=request.guest.id,
        name=request.guest.name,
        email=request.guest.email,
    )
    booking = get_engine().create_booking(
        room_id=RoomId(request.room_id),
        guest=guest,
        check_in=request.check_in_date,
        check_out=request.check_out_date,
        initial_status=request.status,
        guest_count=request.guest_count,
    )
    return api_response(201, success(to_booking_data(booking)))
