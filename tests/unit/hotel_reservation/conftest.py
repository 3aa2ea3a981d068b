from unittest.mock import MagicMock

import pytest

from hotel_reservation.booking.applications import ReservationEngine
from hotel_reservation.booking.domain.value_object import Guest
from hotel_reservation.booking.infrastructure import ReservationStore
from hotel_reservation.shared.utils import Settings


@pytest.fixture
def store():
    """空のインメモリストア"""
    return ReservationStore.in_memory()


@pytest.fixture
def engine(store):
    """全テスト共通のエンジンフィクスチャ（テストごとに状態は空）"""
    return ReservationEngine(store=store, settings=Settings())


@pytest.fixture
def create_guest():
    """Guest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        guest_id: int = 100,
        name: str = "Ana Gómez",
        email: str = "ana@example.com",
    ) -> Guest:
        return Guest(id=guest_id, name=name, email=email)

    return _factory


@pytest.fixture
def hotel_with_room(engine):
    """ホテル1件 + 予約可能な客室1件を登録済みの状態を作る"""
    hotel = engine.create_hotel(name="Hotel Caribe", city="Cartagena", rating=4.5)
    room = engine.create_room(
        hotel_id=hotel.id,
        number="101",
        room_type="double",
        price_per_night=220000,
        available=True,
    )
    return hotel, room


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
