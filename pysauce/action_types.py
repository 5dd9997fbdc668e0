"""
基於 PySauce 的 Action 類型表模組。

此模組提供 TypeTable 類別以及從空白分隔字串建立類型常量表的功能。
類型表讓調用者可以寫 Types.ADD_TODO 而不是重複字面量 "ADD_TODO"。
"""
import logging

from .errors import InvalidArgumentError, handle_error
from .immutable_utils import FrozenMapping

logger = logging.getLogger(__name__)


class TypeTable(FrozenMapping):
    """
    名稱到類型標籤的不可變有序映射。

    由 create_types 建立時為恆等表 (值等於鍵)；
    由 create_actions 建立時鍵為配置的原始鍵，值為轉換後的標籤。
    """
    __slots__ = ()


@handle_error
def create_types(names: str) -> TypeTable:
    """
    從空白分隔的名稱字串建立類型常量表，每個值等於其鍵。

    Args:
        names: 空白分隔的名稱，例如 "LOGIN_REQUEST LOGIN_SUCCESS"

    Returns:
        一個 TypeTable，鍵與值相同，保持首次出現順序
        與 get、items 等方法同名的名稱只能用 Types["get"] 讀取

    Raises:
        InvalidArgumentError: names 為 None、空字串或不是字串

    範例:
        >>> Types = create_types('''
        ...   LOGIN_REQUEST
        ...   LOGIN_SUCCESS
        ... ''')
        >>> Types.LOGIN_REQUEST
        'LOGIN_REQUEST'
    """
    if names is None or not isinstance(names, str) or names == "":
        raise InvalidArgumentError("valid types are required", argument="names", value=names)

    tokens = (token.strip() for token in names.strip().split())
    table = TypeTable((token, token) for token in tokens if token)
    logger.debug("created %d action types", len(table))
    return table
