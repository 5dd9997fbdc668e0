"""
PySauce 錯誤處理模組。

定義所有建構期錯誤的類別層級，以及集中式的錯誤處理器。
所有錯誤都在工廠函數（create_types / create_actions / create_reducer）
建構時同步拋出，dispatch 期間不會拋出任何錯誤。
"""

import datetime
import functools
import json
import logging
import traceback
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SauceError(Exception):
    """所有 PySauce 異常的基礎類。"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.traceback = "".join(traceback.format_stack()[:-1])

    def to_dict(self) -> Dict[str, Any]:
        """
        將錯誤轉換為可序列化的字典，用於日誌與報告。

        Returns:
            包含錯誤類型、訊息與細節的字典
        """
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": {k: repr(v) for k, v in self.details.items()},
        }

    def __str__(self) -> str:
        return self.message

    def __reduce__(self):
        # 子類的 __init__ 簽名各不相同，直接恢復屬性而不重新調用 __init__
        return (_restore_error, (type(self), self.message, self.__dict__.copy()))


def _restore_error(cls, message, state):
    """從 pickle 保存的訊息與屬性重建錯誤實例"""
    err = cls.__new__(cls, message)
    Exception.__init__(err, message)
    err.__dict__.update(state)
    return err


class InvalidArgumentError(SauceError, ValueError):
    """工廠函數收到無效參數時拋出。"""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None, **kwargs: Any):
        details = {"argument": argument, "value": value}
        details.update(kwargs)
        super().__init__(message, details)
        self.argument = argument
        self.value = value


class ConfigurationError(InvalidArgumentError):
    """Action 配置中單一條目格式錯誤，或錯誤處理器配置錯誤。"""

    def __init__(self, message: str, component: str, config_key: Optional[str] = None, **kwargs: Any):
        super().__init__(message, component=component, config_key=config_key, **kwargs)
        self.component = component
        self.config_key = config_key


class ErrorHandler:
    """集中式錯誤處理器，用於捕獲、日誌記錄和錯誤報告。"""

    def __init__(self, log_to_console: bool = True, log_to_file: bool = False, log_file: Optional[str] = None):
        self.handlers: List[Callable[[SauceError], None]] = []
        self.configure(log_to_console=log_to_console, log_to_file=log_to_file, log_file=log_file)

    def configure(self, log_to_console: bool = True, log_to_file: bool = False, log_file: Optional[str] = None) -> None:
        """
        更新處理器設定，保留已註冊的回調。

        Args:
            log_to_console: 是否寫入 pysauce.errors logger
            log_to_file: 是否追加寫入 JSON 行到檔案
            log_file: 日誌檔案路徑，log_to_file 為 True 時必填
        """
        if log_to_file and not log_file:
            raise ConfigurationError(
                "log_file is required when log_to_file is enabled",
                component="ErrorHandler",
                config_key="log_file",
            )
        self.log_to_console = log_to_console
        self.log_to_file = log_to_file
        self.log_file = log_file

    def register_handler(self, handler: Callable[[SauceError], None]) -> None:
        """註冊一個錯誤觀察者，每次處理錯誤時調用。"""
        self.handlers.append(handler)

    def handle(self, error: Union[SauceError, Exception]) -> None:
        """
        處理一個錯誤：記錄日誌、寫入檔案，然後通知所有已註冊的回調。

        Args:
            error: 要處理的錯誤
        """
        if isinstance(error, SauceError):
            record = error.to_dict()
        else:
            record = {"error_type": type(error).__name__, "message": str(error), "details": {}}

        if self.log_to_console:
            logger.error("%s: %s %s", record["error_type"], record["message"], record["details"])

        if self.log_to_file and self.log_file:
            record = dict(record, timestamp=datetime.datetime.now().isoformat())
            with open(self.log_file, "a", encoding="utf-8") as fh:
                fh.write(json.dumps(record, ensure_ascii=False) + "\n")

        for handler in list(self.handlers):
            try:
                handler(error)
            except Exception:
                # 回調失敗不能掩蓋原始錯誤
                logger.exception("error handler %r failed", handler)


# 單例錯誤處理器
global_error_handler = ErrorHandler()


def configure_error_handler(**kwargs: Any) -> ErrorHandler:
    """
    就地修改全域錯誤處理器的設定。

    Args:
        **kwargs: 傳給 ErrorHandler.configure 的參數

    Returns:
        全域錯誤處理器
    """
    global_error_handler.configure(**kwargs)
    return global_error_handler


def handle_error(func: Callable[..., T]) -> Callable[..., T]:
    """
    裝飾器：將 SauceError 交給全域錯誤處理器後原樣重新拋出。
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except SauceError as err:
            global_error_handler.handle(err)
            raise
    return wrapper
