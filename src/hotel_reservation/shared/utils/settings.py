from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """環境変数から読み込むアプリケーション設定"""

    service_name: str = "hotel-reservation"
    default_currency: str = "COP"
    strict_hotel_reference: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """環境変数から設定を生成する（未設定の項目はデフォルト値）"""
        env = os.environ if environ is None else environ
        return cls(
            service_name=env.get("POWERTOOLS_SERVICE_NAME", cls.service_name),
            default_currency=env.get("DEFAULT_CURRENCY", cls.default_currency),
            strict_hotel_reference=_to_bool(
                env.get("STRICT_HOTEL_REFERENCE"), cls.strict_hotel_reference
            ),
        )


def _to_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY
