# pysauce/immutable_utils.py
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, Tuple

from immutables import Map
from pydantic import BaseModel


def freeze_items(items: Iterable[Tuple[str, Any]]) -> Tuple[Map, Tuple[str, ...]]:
    """將 (key, value) 序列凍結為 Map，並記錄鍵的首次出現順序 (後寫覆蓋前寫)"""
    data = Map()
    order = []
    with data.mutate() as mm:
        for key, value in items:
            if key not in mm:
                order.append(key)
            mm[key] = value
        data = mm.finish()
    return data, tuple(order)


class FrozenMapping(Mapping):
    """
    以 immutables.Map 儲存的不可變有序映射，支援 mapping 及屬性兩種讀取方式。
    """
    __slots__ = ("_data", "_order")

    def __init__(self, items: Iterable[Tuple[str, Any]] = ()):
        data, order = freeze_items(items)
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_order", order)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __getattr__(self, name: str) -> Any:
        # 只有在正常屬性查找失敗時才會進入
        if name in FrozenMapping.__slots__:
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cannot modify immutable instance attribute '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot modify immutable instance attribute '{name}'")

    def __dir__(self):
        return list(super().__dir__()) + [k for k in self._order if k.isidentifier()]

    def __hash__(self):
        # 與 Mapping.__eq__ 一致，不依賴鍵的順序
        return hash(frozenset(self.items()))

    def __reduce__(self):
        # copy、deepcopy 與 pickle 都經由 _rebuild 重建，不走 __setattr__
        return (_rebuild, (type(self), tuple(self.items())))

    def __repr__(self):
        body = ", ".join(f"{k}={self._data[k]!r}" for k in self._order)
        return f"{type(self).__name__}({body})"


def _rebuild(cls, items):
    """按保存的 (key, value) 順序重建 FrozenMapping 子類實例"""
    obj = cls.__new__(cls)
    FrozenMapping.__init__(obj, items)
    return obj


def to_dict(obj: Any) -> Any:
    """將 Map、Action、TypeTable 及 Pydantic 模型等巢狀結構轉換為普通字典/列表"""
    if isinstance(obj, BaseModel):
        return {k: to_dict(v) for k, v in obj.model_dump().items()}
    elif isinstance(obj, Mapping):
        return {k: to_dict(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [to_dict(i) for i in obj]
    elif isinstance(obj, frozenset):
        return {to_dict(i) for i in obj}
    return obj
