from functools import lru_cache

from hotel_reservation.booking.applications import ReservationEngine
from hotel_reservation.booking.infrastructure import ReservationStore
from hotel_reservation.shared.utils import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_engine() -> ReservationEngine:
    """プロセス内で共有するエンジンを返す（Lambda 実行環境の再利用中は状態を保持）"""
    return ReservationEngine(store=ReservationStore.in_memory(), settings=get_settings())
