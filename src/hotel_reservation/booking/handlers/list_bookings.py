from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.handlers.api import handle_errors
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.request_models import BookingStatusQuery
from hotel_reservation.booking.handlers.response_models import (
    BookingData,
    success_list,
    to_booking_data,
)
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ステータス別の予約一覧取得 Lambda Handler"""
    query = BookingStatusQuery.model_validate(event.query_string_parameters or {})
    logger.info("Filtering bookings by status", extra={"status": query.status.value})

    bookings = [
        to_booking_data(booking)
        for booking in get_engine().filter_bookings_by_status(query.status)
    ]
    return api_response(200, success_list(bookings, BookingData))
