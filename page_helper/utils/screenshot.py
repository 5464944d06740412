import os
import re
from datetime import datetime


def _safe_name(s: str) -> str:
    # 用于文件名：替换非法字符
    return re.sub(r"[^A-Za-z0-9_.=-]+", "_", s or "page")


def take_screenshot(driver, folder: str, prefix: str = "page") -> str:
    """中文：保存当前浏览器截图并返回文件路径。
    English: Save a screenshot of the current browser window, return its path.
    参数:
        driver: WebDriver 实例。
        folder: 截图输出目录。
        prefix: 文件名前缀，通常为 页面名.动作。
    """

    os.makedirs(folder, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    path = os.path.join(folder, f"{_safe_name(prefix)}_{ts}_{os.getpid()}.png")
    if not driver.save_screenshot(path):
        raise OSError(f"WebDriver could not save screenshot: {path}")
    return path
