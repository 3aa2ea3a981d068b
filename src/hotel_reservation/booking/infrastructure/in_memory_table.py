from collections.abc import Callable


class ConditionalCheckFailedError(Exception):
    """条件付き書き込みの条件を満たさなかった"""

    pass


class InMemoryTable:
    """主キー → アイテム(dict) を登録順に保持するインメモリテーブル

    アイテムは書き込み時・読み出し時にコピーするため、
    呼び出し側が受け取った dict を変更しても保存内容には影響しない。
    """

    def __init__(self, key_name: str) -> None:
        self.key_name = key_name
        self._items: dict[int, dict] = {}

    def put_item(self, item: dict) -> None:
        """新規アイテムを書き込む（キーが既に存在する場合は失敗）"""
        key = item[self.key_name]
        if key in self._items:
            raise ConditionalCheckFailedError(f"Item already exists: {key}")
        self._items[key] = dict(item)

    def update_item(self, item: dict) -> None:
        """既存アイテムを置き換える（キーが存在しない場合は失敗、登録順は維持）"""
        key = item[self.key_name]
        if key not in self._items:
            raise ConditionalCheckFailedError(f"Item does not exist: {key}")
        self._items[key] = dict(item)

    def get_item(self, key: int) -> dict | None:
        item = self._items.get(key)
        return dict(item) if item is not None else None

    def scan(self, predicate: Callable[[dict], bool] | None = None) -> list[dict]:
        """登録順に全件（または条件に合うもの）を返す"""
        return [
            dict(item)
            for item in self._items.values()
            if predicate is None or predicate(item)
        ]
