from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 取得した集約は保存済みデータから毎回組み立て直す（呼び出し側の変更は反映されない）
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を新規に永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
