"""
Action 名稱轉換模組。

將 camelCase 名稱轉換為 SCREAMING_SNAKE_CASE 類型標籤。
"""
import re

# 除字串開頭外的每一個大寫字母
_RX_CAPS = re.compile(r"(?!^)([A-Z])")


def to_tag(name: str) -> str:
    """
    將 camelCase 名稱轉換為類型標籤。

    在每一個非首字元的大寫字母前插入底線，然後整體轉為大寫。
    連續大寫字母會各自插入底線，例如 parseXMLNow -> PARSE_X_M_L_NOW。

    Args:
        name: 原始名稱，例如 "addTodo"

    Returns:
        類型標籤，例如 "ADD_TODO"

    範例:
        >>> to_tag("addTodo")
        'ADD_TODO'
        >>> to_tag("add_todo")
        'ADD_TODO'
    """
    return _RX_CAPS.sub(r"_\1", name).upper()
