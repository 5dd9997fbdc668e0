"""
基於 PySauce 的 Action 定義模組。

此模組提供 Action 記錄類別，以及從聲明式配置批量創建
類型表 (Types) 與 Action 生成器 (Creators) 的功能。
Actions 是描述狀態變更意圖的不可變對象。
"""
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Literal, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .action_types import TypeTable, create_types
from .errors import ConfigurationError, InvalidArgumentError, handle_error
from .immutable_utils import FrozenMapping, _rebuild, to_dict
from .naming import to_tag
from .types import ActionConfig, ActionConfigValue, ActionCreator

logger = logging.getLogger(__name__)


class Action(FrozenMapping):
    """
    表示一個帶類型標籤和額外欄位的不可變動作記錄。

    可以用 mapping 方式 (action["text"]) 或屬性方式 (action.text) 讀取，
    並與任何擁有相同項目的 mapping 相等。

    屬性:
        type: 動作的類型標籤
    """
    __slots__ = ()

    def __init__(self, type: str, **extras: Any):
        super().__init__([("type", type), *extras.items()])

    @classmethod
    def from_items(cls, items: Iterable[Tuple[str, Any]]) -> "Action":
        """
        從 (key, value) 序列建立 Action，後出現的鍵覆蓋先出現的鍵。

        Args:
            items: 欄位序列，通常以 ("type", tag) 開頭

        Returns:
            新的 Action 記錄
        """
        return _rebuild(cls, items)

    def to_dict(self) -> Dict[str, Any]:
        """返回可序列化的普通字典快照。"""
        return to_dict(self)


# Action、TypeTable 及 Creators 表本身的屬性名稱，作為鍵時無法以屬性方式讀取
RESERVED_NAMES = frozenset(dir(Action)) | frozenset(dir(TypeTable))


class ActionDefinition(BaseModel):
    """
    單一配置條目的解析結果。

    kind 為 "fields" 時由 field_names 自動生成 Action 生成器；
    kind 為 "custom" 時直接使用調用者提供的 creator。
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    kind: Literal["fields", "custom"]
    field_names: Tuple[str, ...] = ()
    creator: Optional[Callable[..., Any]] = None

    @property
    def tag(self) -> str:
        return to_tag(self.name)

    @classmethod
    def parse(cls, name: str, value: ActionConfigValue) -> "ActionDefinition":
        """
        解析一個配置條目。

        Args:
            name: 配置的鍵，例如 "addTodo"
            value: 欄位名稱序列、None，或自定義的生成器函數

        Returns:
            ActionDefinition 實例

        Raises:
            ConfigurationError: 鍵或欄位名稱格式錯誤
        """
        if not isinstance(name, str) or not name or any(c.isspace() for c in name):
            raise ConfigurationError(
                "action names must be non-empty strings without whitespace",
                component="create_actions",
                config_key=name,
            )

        if name in RESERVED_NAMES:
            raise ConfigurationError(
                f"action name '{name}' shadows a built-in attribute of the type and creator tables",
                component="create_actions",
                config_key=name,
            )

        if callable(value):
            return cls(name=name, kind="custom", creator=value)

        if value is None:
            return cls(name=name, kind="fields")

        # 單一字串不是欄位名稱列表
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise ConfigurationError(
                f"extra property names for '{name}' must be a list of strings",
                component="create_actions",
                config_key=name,
                value=value,
            )

        field_names = tuple(value)
        if not all(isinstance(f, str) for f in field_names):
            raise ConfigurationError(
                f"extra property names for '{name}' must be strings",
                component="create_actions",
                config_key=name,
                value=value,
            )
        shadowed = [f for f in field_names if f in RESERVED_NAMES]
        if shadowed:
            raise ConfigurationError(
                f"extra property names for '{name}' shadow built-in Action attributes: {shadowed}",
                component="create_actions",
                config_key=name,
                value=value,
            )
        return cls(name=name, kind="fields", field_names=field_names)

    def build_creator(self) -> ActionCreator:
        """返回這個條目對應的 Action 生成器。"""
        if self.kind == "custom":
            return self.creator
        return create_action_creator(self.name, self.field_names)


def create_action_creator(name: str, field_names: Tuple[str, ...] = ()) -> ActionCreator:
    """
    創建一個 Action 生成器函數，類型標籤為 to_tag(name)。

    Args:
        name: Action 名稱，例如 "addTodo"
        field_names: 額外欄位名稱，按位置與調用參數配對

    Returns:
        一個可調用的函數，用於生成指定類型的 Action

    範例:
        >>> add_todo = create_action_creator("addTodo", ("text",))
        >>> add_todo("buy milk")  # Action(type='ADD_TODO', text='buy milk')
        >>> add_todo.type
        'ADD_TODO'
    """
    action_type = to_tag(name)
    field_names = tuple(field_names or ())

    if not field_names:
        def action_creator(*_values: Any) -> Action:
            return Action.from_items([("type", action_type)])
    else:
        def action_creator(*values: Any) -> Action:
            # zip 以較短者為準：多餘參數忽略，缺少的欄位不出現
            # 額外欄位在 type 之後寫入，名為 type 的欄位會覆蓋標籤
            return Action.from_items([("type", action_type), *zip(field_names, values)])

    # 添加 type 屬性以便於識別
    action_creator.type = action_type  # type: ignore
    action_creator.fields = field_names  # type: ignore
    action_creator.__name__ = name
    action_creator.__qualname__ = name

    return action_creator


class ActionsBundle(NamedTuple):
    """create_actions 的結果，可直接解構為 (Types, Creators)。"""

    types: TypeTable
    creators: FrozenMapping

    @property
    def Types(self) -> TypeTable:
        return self.types

    @property
    def Creators(self) -> FrozenMapping:
        return self.creators


@handle_error
def create_actions(config: ActionConfig) -> ActionsBundle:
    """
    從聲明式配置創建類型表與 Action 生成器。

    Args:
        config: 鍵為 Action 名稱，值為額外欄位名稱列表 (可為空或 None)
                或自定義的生成器函數

    Returns:
        ActionsBundle(types, creators)

    Raises:
        InvalidArgumentError: config 為 None、不是 mapping 或為空

    範例:
        >>> Types, Creators = create_actions({
        ...     "addTodo": ["text"],
        ...     "reset": None,
        ... })
        >>> Types.addTodo
        'ADD_TODO'
        >>> Creators.addTodo("buy milk")  # Action(type='ADD_TODO', text='buy milk')
    """
    if config is None or not isinstance(config, Mapping):
        raise InvalidArgumentError(
            "an object is required to setup types and creators", argument="config", value=config
        )
    if len(config) == 0:
        raise InvalidArgumentError("empty objects are not supported", argument="config", value=config)

    definitions = [ActionDefinition.parse(name, value) for name, value in config.items()]

    tags = create_types(" ".join(d.tag for d in definitions))
    types = TypeTable((d.name, tags[d.tag]) for d in definitions)
    creators = FrozenMapping((d.name, d.build_creator()) for d in definitions)

    logger.debug(
        "created %d action creators (%d custom)",
        len(creators),
        sum(1 for d in definitions if d.kind == "custom"),
    )
    return ActionsBundle(types, creators)
