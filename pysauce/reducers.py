import logging
from collections.abc import Mapping
from typing import Any, Dict, Tuple, TypeVar, Union

from .errors import InvalidArgumentError, handle_error
from .types import ActionHandler, HandlerMap, ReducerFunction

logger = logging.getLogger(__name__)

S = TypeVar("S")

_MISSING = object()


def _action_type(action: Any) -> Any:
    """讀取 action 的 type；mapping 看鍵，其他對象看屬性，不存在時返回 _MISSING"""
    if isinstance(action, Mapping):
        return action["type"] if "type" in action else _MISSING
    return getattr(action, "type", _MISSING)


def _resolve_action_type(action_creator_or_type: Any) -> str:
    """從類型標籤字串或帶 type 屬性的 Action 生成器取得類型標籤"""
    if isinstance(action_creator_or_type, str):
        return action_creator_or_type
    if callable(action_creator_or_type) and isinstance(getattr(action_creator_or_type, "type", None), str):
        return action_creator_or_type.type
    raise InvalidArgumentError(
        "an action type or an action creator with a type is required",
        argument="action_creator_or_type",
        value=action_creator_or_type,
    )


def _check_handler(handler: Any) -> ActionHandler:
    if not callable(handler):
        raise InvalidArgumentError("handler must be callable", argument="handler", value=handler)
    return handler


@handle_error
def create_reducer(initial_state: S, handlers: HandlerMap) -> ReducerFunction[S]:
    """
    創建一個 reducer 函式，用於處理狀態變更。

    Args:
        initial_state: 初始狀態，不能為 None (0、"" 等假值可以)。
        handlers: action 類型標籤到處理函式的 mapping，以引用方式保存，建立後不應再修改。

    Returns:
        一個 reducer 函式，根據 action 的類型執行對應的處理邏輯。

    Raises:
        InvalidArgumentError: initial_state 為 None 或 handlers 不是 mapping。
    """
    if initial_state is None:
        raise InvalidArgumentError("initial state is required", argument="initial_state")

    if handlers is None or not isinstance(handlers, Mapping):
        raise InvalidArgumentError("handlers must be an object", argument="handlers", value=handlers)

    def reducer(state: S = None, action: Any = None) -> S:
        """
        Reducer 函式，根據 action 處理狀態變更。

        Args:
            state: 當前狀態，省略或為 None 時使用初始狀態。
            action: 要處理的 action，默認為 None。

        Returns:
            新的狀態，如果 action 無效或沒有對應的處理器則返回原狀態。
        """
        if state is None:
            state = initial_state

        # 無效的 action，直接返回狀態
        if action is None:
            return state
        action_type = _action_type(action)
        if action_type is _MISSING:
            return state

        try:
            handler = handlers.get(action_type)  # 根據 action 類型查找處理函式
        except TypeError:
            # 不可哈希的 type 不可能有處理函式
            return state
        if handler is None:
            return state
        return handler(state, action)

    # 設置 reducer 的初始狀態和處理器映射
    reducer.initial_state = initial_state
    reducer.handlers = handlers

    logger.debug("created reducer with %d handlers", len(handlers))
    return reducer


@handle_error
def on(action_creator_or_type: Any, handler: ActionHandler) -> Dict[str, ActionHandler]:
    """
    創建一個 action 類型與處理函式的映射。

    Args:
        action_creator_or_type: 帶 type 屬性的 Action 生成器 (create_actions 產生的生成器)
            或類型標籤字串。
        handler: 處理該 Action 的函式，接收 (state, action) 並返回新狀態。

    Returns:
        一個包含 {action_type: handler} 的字典。
    """
    return {_resolve_action_type(action_creator_or_type): _check_handler(handler)}


@handle_error
def combine_handlers(*parts: Union[Tuple[Any, ActionHandler], HandlerMap]) -> Dict[str, ActionHandler]:
    """
    將多個 (action_type, handler) 元組或處理器 mapping 合併為一個處理器映射。

    後出現的同類型處理器會覆蓋先出現的。

    範例:
        >>> handlers = combine_handlers(
        ...     on(Creators.addTodo, add_todo),
        ...     ("RESET", reset),
        ... )
        >>> reducer = create_reducer([], handlers)
    """
    action_handlers: Dict[str, ActionHandler] = {}

    for part in parts:
        if isinstance(part, tuple) and len(part) == 2:
            # 如果是元組，則解構為 action 類型與處理函式
            action_type, handler = part
            action_handlers[_resolve_action_type(action_type)] = _check_handler(handler)
        elif isinstance(part, Mapping):
            action_handlers.update(part)
        else:
            raise InvalidArgumentError(
                "handlers must be (action_type, handler) tuples or mappings",
                argument="parts",
                value=part,
            )

    return action_handlers
