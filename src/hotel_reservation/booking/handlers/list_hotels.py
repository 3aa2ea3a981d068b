from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.handlers.api import handle_errors
from hotel_reservation.booking.handlers.dependencies import get_engine
from hotel_reservation.booking.handlers.response_models import (
    HotelData,
    success_list,
    to_hotel_data,
)
from hotel_reservation.shared.utils import api_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ホテル一覧取得 Lambda Handler"""
    logger.info("Listing all hotels")

    hotels = [to_hotel_data(hotel) for hotel in get_engine().list_hotels()]
    return api_response(200, success_list(hotels, HotelData))
