"""
PySauce：為單向狀態更新模式生成樣板代碼。

提供三個互相獨立的工廠函數：
    create_types    從空白分隔字串建立類型常量表
    create_actions  從聲明式配置建立類型表與 Action 生成器
    create_reducer  從初始狀態與處理器映射建立 reducer
"""

from .errors import (
    SauceError, InvalidArgumentError, ConfigurationError,
    ErrorHandler, global_error_handler, configure_error_handler, handle_error
)
from .naming import to_tag
from .action_types import TypeTable, create_types
from .actions import Action, ActionDefinition, ActionsBundle, create_action_creator, create_actions
from .reducers import create_reducer, on, combine_handlers
from .immutable_utils import FrozenMapping, to_dict

__version__ = "0.1.0"

# 匯出所有公開 API
__all__ = [
    # Errors
    "SauceError", "InvalidArgumentError", "ConfigurationError",
    "ErrorHandler", "global_error_handler", "configure_error_handler", "handle_error",

    # Types
    "to_tag", "TypeTable", "create_types",

    # Actions
    "Action", "ActionDefinition", "ActionsBundle", "create_action_creator", "create_actions",

    # Reducers
    "create_reducer", "on", "combine_handlers",

    # Immutable Utils
    "FrozenMapping", "to_dict",
]
