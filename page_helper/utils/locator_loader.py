import os

import yaml
from selenium.webdriver.common.by import By


_BY_KEYWORDS = {
    "id": By.ID,
    "xpath": By.XPATH,
    "name": By.NAME,
    "css": By.CSS_SELECTOR,
    "class": By.CLASS_NAME,
    "tag": By.TAG_NAME,
    "link_text": By.LINK_TEXT,
}


class LocatorLoader:
    """定位器加载器，负责读取并校验 YAML 定位器文件。
    Locator loader that reads and validates a YAML locator file.

    文件结构 / layout::

        LoginPage:
          username_input: {by: id, value: username}
    """

    def __init__(self, yaml_path):
        if not os.path.exists(yaml_path):
            raise FileNotFoundError(f"Locator file not found: {yaml_path}")
        with open(yaml_path, "r", encoding="utf-8") as f:
            self.data = yaml.safe_load(f) or {}

    def validate_all(self):
        """校验定位器配置结构，并确认每个 by 关键字可被转换。"""

        if not isinstance(self.data, dict):
            raise ValueError("Locator root must be a dict")

        for page, locators in self.data.items():
            if not isinstance(locators, dict):
                raise ValueError(f"Page {page} must be a dict")
            for name, locator in locators.items():
                if not isinstance(locator, dict) or "by" not in locator or "value" not in locator:
                    raise ValueError(f"{page}.{name} missing by/value")
                to_selenium_locator(locator)

    def get(self, page, name):
        try:
            return self.data[page][name]
        except KeyError:
            raise KeyError(f"Locator not found: {page}.{name}") from None

    def page(self, page_name: str) -> "PageLocators":
        if page_name not in self.data:
            raise KeyError(f"Page not found in locator file: {page_name}")
        return PageLocators(self, page_name)


class PageLocators:
    """页面定位器代理，按名称返回 Selenium 定位器元组。
    Page locator proxy returning Selenium locator tuples by name.
    """

    def __init__(self, loader: LocatorLoader, page_name: str):
        self._loader = loader
        self._page_name = page_name

    def get(self, name):
        return to_selenium_locator(self._loader.get(self._page_name, name))


def to_selenium_locator(locator):
    """中文：将定位器配置转换为 Selenium (By, value) 元组。
    参数:
        locator: (By, value) 元组，或 {"by": ..., "value": ...} 字典。
    """

    if isinstance(locator, (list, tuple)) and len(locator) == 2:
        return locator[0], locator[1]
    if not isinstance(locator, dict):
        raise ValueError(f"Unsupported locator: {locator!r}")

    locator_type = (locator.get("by") or "").lower()
    if locator_type not in _BY_KEYWORDS:
        raise ValueError(f"Unsupported locator type: {locator_type}")
    return _BY_KEYWORDS[locator_type], locator.get("value")


def is_locator(value) -> bool:
    if isinstance(value, dict):
        return "by" in value
    return isinstance(value, (list, tuple)) and len(value) == 2 and isinstance(value[0], str)


class ElementMap:
    """名称 -> 定位器的映射，兼容普通 dict 与 PageLocators。"""

    def __init__(self, source=None):
        self._source = source if source is not None else {}

    @property
    def source(self):
        return self._source

    def get(self, name):
        if isinstance(self._source, PageLocators):
            return self._source.get(name)
        if name not in self._source:
            raise KeyError(f"Element not defined on page: {name}")
        value = self._source[name]
        if is_locator(value):
            return to_selenium_locator(value)
        # 已解析的 WebElement 原样返回
        return value


def build_page_locators(elements, page_name: str | None = None) -> ElementMap:
    """中文：构建页面元素映射。
    参数:
        elements: dict、PageLocators，或 LocatorLoader（此时需要 page_name）。
        page_name: 页面名称。
    """

    if isinstance(elements, ElementMap):
        return elements
    if isinstance(elements, LocatorLoader):
        if page_name is None:
            raise ValueError("page_name is required when elements come from a LocatorLoader")
        return ElementMap(elements.page(page_name))
    return ElementMap(elements)
