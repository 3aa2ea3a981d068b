import json
from dataclasses import dataclass

import pytest

from hotel_reservation.booking.handlers.dependencies import get_engine, get_settings


@dataclass
class FakeLambdaContext:
    function_name: str = "hotel-reservation-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:us-east-1:123456789012:function:hotel-reservation-test"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: str | None = None


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context が参照する属性を持つダミーコンテキスト"""
    return FakeLambdaContext()


@pytest.fixture(autouse=True)
def fresh_engine(monkeypatch):
    """テストごとにプロセス共有のエンジンを作り直す"""
    monkeypatch.delenv("STRICT_HOTEL_REFERENCE", raising=False)
    monkeypatch.setenv("DEFAULT_CURRENCY", "COP")
    get_settings.cache_clear()
    get_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) のイベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "version": "2.0",
            "rawPath": "/",
            "body": body,
            "isBase64Encoded": False,
            "pathParameters": path_parameters,
            "queryStringParameters": query,
            "requestContext": {"http": {"method": "POST", "path": "/"}},
        }

    return _factory


@pytest.fixture
def read_body():
    def _read(response: dict) -> dict:
        return json.loads(response["body"])

    return _read
