import logging
import os
from contextvars import ContextVar
from datetime import datetime

_CURRENT_TEST: ContextVar[str] = ContextVar("CURRENT_TEST", default="-")

LOGGER_NAME = "page_helper"

LOG_DIR_ENV = "PAGE_HELPER_LOG_DIR"
LOG_LEVEL_ENV = "PAGE_HELPER_LOG_LEVEL"

_SENSITIVE_KEYWORDS = ("password", "passwd", "pwd", "otp", "token", "secret", "code")


def set_current_test(name: str) -> None:
    """设置当前测试名称上下文，写入每条日志的 test 字段。"""

    _CURRENT_TEST.set(name or "-")


def mask_if_sensitive(name, text) -> str:
    if isinstance(name, (list, tuple)):
        name = " ".join(str(part) for part in name)
    n = (name if isinstance(name, str) else "").lower()
    if any(k in n for k in _SENSITIVE_KEYWORDS):
        return "****"
    return text


class _InjectContextFilter(logging.Filter):
    """日志过滤器，注入测试名称与页面名称。
    Logger filter injecting the test name and page name into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "test"):
            record.test = _CURRENT_TEST.get()
        if not hasattr(record, "page"):
            record.page = "-"
        return True


def _log_file() -> str:
    log_dir = os.environ.get(LOG_DIR_ENV) or os.path.join(os.getcwd(), "logs")
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(
        log_dir,
        f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    )


def get_logger() -> logging.Logger:
    """中文：获取全局日志记录器，首次调用时挂载控制台与文件输出。
    English: Return the shared logger, attaching console and file handlers once.
    """

    logger = logging.getLogger(LOGGER_NAME)

    if getattr(logger, "_inited", False):
        return logger

    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(test)s | %(page)s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
    console_handler.setFormatter(formatter)
    console_handler.addFilter(_InjectContextFilter())

    file_handler = logging.FileHandler(_log_file(), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(_InjectContextFilter())

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logger.propagate = False

    logger._inited = True
    return logger


def get_page_logger(page_name: str | None = None):
    """中文：获取页面级日志记录器。
    参数:
        page_name: 页面名称，可为空；非空时写入日志的 page 字段。
    """

    logger = get_logger()
    if page_name:
        return logging.LoggerAdapter(logger, {"page": page_name})
    return logger
