from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.domain.value_object import BookingId
from hotel_reservation.booking.handlers.api import handle_errors, read_json_body
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.request_models import TransitionBookingRequest
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
    """予約ステータス遷移 Lambda Handler"""
    path_params = event.path_parameters or {}
    logger.info(
        "Received transition booking request",
        extra={"booking_id": path_params.get("booking_id")},
    )

    request = TransitionBookingRequest.model_validate(
        {**read_json_body(event), "booking_id": path_params.get("booking_id")}
    )
    booking = get_engine().transition_booking(
        BookingId(request.booking_id), request.status
    )
    return api_response(200, success(to_booking_data(booking)))
