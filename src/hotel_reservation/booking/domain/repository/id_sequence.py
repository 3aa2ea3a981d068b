from abc import ABC, abstractmethod


class IdSequence(ABC):
    """全エンティティ共通の連番採番のインターフェース"""

    @abstractmethod
    def next(self) -> int:
        """次のIDを払い出す（単調増加）"""
        raise NotImplementedError
