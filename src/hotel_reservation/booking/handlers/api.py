import functools
import json
from collections.abc import Callable

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as RequestValidationError

from hotel_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    NotFoundError,
    ValidationError,
)
from hotel_reservation.shared.utils import api_response

logger = Logger()

Handler = Callable[[APIGatewayProxyEventV2, LambdaContext], dict]


def read_json_body(event: APIGatewayProxyEventV2) -> dict:
    """リクエストボディを JSON として読み込む（空ボディは空 dict）"""
    if not event.body:
        return {}
    return event.json_body


def handle_errors(handler: Handler) -> Handler:
    """ドメイン例外を HTTP ステータスに変換するデコレータ

    - 入力不正 (pydantic / ValidationError) -> 400
    - NotFoundError -> 404
    - BusinessRuleViolationException -> 409
    - それ以外 -> 500
    """

    @functools.wraps(handler)
    def wrapper(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
        try:
            return handler(event, context)
        except RequestValidationError as e:
            return api_response(
                400,
                {
                    "status": "error",
                    "message": "Invalid request",
                    "errors": e.errors(include_url=False, include_context=False),
                },
            )
        except json.JSONDecodeError:
            return api_response(
                400, {"status": "error", "message": "Request body must be valid JSON"}
            )
        except ValidationError as e:
            return api_response(400, {"status": "error", "message": str(e)})
        except NotFoundError as e:
            return api_response(404, {"status": "error", "message": str(e)})
        except BusinessRuleViolationException as e:
            return api_response(409, {"status": "error", "message": str(e)})
        except Exception:
            logger.exception("Unhandled error while processing request")
            return api_response(
                500, {"status": "error", "message": "Internal server error"}
            )

    return wrapper
