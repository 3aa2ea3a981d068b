from decimal import Decimal, InvalidOperation

from hotel_reservation.shared.domain.exception import ValidationError


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") とエンジンの両方から呼び出す。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValidationError(f"Invalid decimal value: {v!r}")
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid decimal value: {v!r}") from e
