from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from hotel_reservation.booking.domain.enum import BookingStatus, RoomType
from hotel_reservation.shared.utils import to_decimal

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class CreateHotelRequest(BaseModel):
    """ホテル登録リクエストモデル"""

    name: str = Field(..., min_length=1, description="ホテル名")
    city: str = Field(..., min_length=1, description="所在地の都市名")
    rating: float | None = Field(default=None, ge=0, le=5, description="評価（0〜5）")


class CreateRoomRequest(BaseModel):
    """客室登録リクエストモデル"""

    hotel_id: int = Field(..., gt=0)
    number: str = Field(..., min_length=1, description="部屋番号", examples=["101"])
    room_type: RoomType
    price_per_night: Decimal = Field(..., ge=0, description="1泊あたりの料金")
    currency: str | None = Field(
        default=None,
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）。未指定時は DEFAULT_CURRENCY",
    )
    available: bool = True

    @field_validator("price_per_night", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class GuestRequest(BaseModel):
    """宿泊者のリクエストモデル"""

    id: int
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, examples=["guest@example.com"])


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル"""

    room_id: int = Field(..., gt=0)
    guest: GuestRequest
    check_in_date: str = Field(
        ...,
        pattern=ISO_DATE_PATTERN,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2025-03-05"],
    )
    check_out_date: str = Field(
        ...,
        pattern=ISO_DATE_PATTERN,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2025-03-10"],
    )
    status: BookingStatus = BookingStatus.PENDING
    guest_count: int = Field(default=1, ge=1, description="宿泊人数")


class TransitionBookingRequest(BaseModel):
    """予約ステータス遷移リクエストモデル"""

    booking_id: int = Field(..., gt=0)
    status: BookingStatus


class HotelFilterQuery(BaseModel):
    """ホテルによる絞り込みのクエリパラメータ"""

    hotel_id: int | None = Field(default=None, gt=0)


class BookingStatusQuery(BaseModel):
    """予約ステータスによる絞り込みのクエリパラメータ"""

    status: BookingStatus
