from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.handlers.api import handle_errors, read_json_body
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.request_models import CreateHotelRequest
from hotel_reservation.booking.handlers.response_models import success, to_hotel_data
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル登録 Lambda Handler"""
    logger.info("Received create hotel request")

    request = CreateHotelRequest.model_validate(read_json_body(event))
    hotel = get_engine().create_hotel(
        name=request.name,
        city=request.city,
        rating=request.rating,
    )
    return api_response(201, success(to_hotel_data(hotel)))
