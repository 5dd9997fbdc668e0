"""
PySauce 共用類型定義模組。
"""

from typing import Any, Callable, Mapping, Sequence, TypeVar, Union

from typing_extensions import Protocol, TypeAlias, runtime_checkable

S = TypeVar("S")  # 狀態類型
A = TypeVar("A")  # Action 類型

TypeTag: TypeAlias = str
ActionHandler: TypeAlias = Callable[[Any, Any], Any]
HandlerMap: TypeAlias = Mapping[TypeTag, ActionHandler]
FieldNames: TypeAlias = Sequence[str]
ActionConfigValue: TypeAlias = Union[FieldNames, Callable[..., Any], None]
ActionConfig: TypeAlias = Mapping[str, ActionConfigValue]


@runtime_checkable
class ActionCreator(Protocol):
    """任何可以產生 Action 的可調用對象。"""

    def __call__(self, *values: Any) -> Any: ...


@runtime_checkable
class TypedActionCreator(ActionCreator, Protocol):
    """自動產生的 Action 生成器，攜帶其類型標籤和欄位名稱。"""

    type: TypeTag
    fields: Sequence[str]


class ReducerFunction(Protocol[S]):
    """(state, action) -> new_state 的 dispatch 函數。"""

    initial_state: S
    handlers: HandlerMap

    def __call__(self, state: S = ..., action: Any = None) -> S: ...
