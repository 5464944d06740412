from enum import Enum

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from page_helper.utils.locator_loader import is_locator, to_selenium_locator
from page_helper.utils.logger import mask_if_sensitive


class DropdownSelector(str, Enum):
    INDEX = "index"
    LABEL = "label"
    VALUE = "value"

    @classmethod
    def parse(cls, by) -> "DropdownSelector":
        if isinstance(by, cls):
            return by
        by = (by or "").lower()
        if by == "text":
            return cls.LABEL
        try:
            return cls(by)
        except ValueError:
            raise ValueError("select_dropdown_option(by=) only supports: index | label | value") from None


def _xpath_literal(text: str) -> str:
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


def _css_string(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class DomMixin:
    """中文：DOM 交互混入类，提供元素解析、输入、读取与下拉框操作。
    English: DOM interaction mixin providing element lookup, typing, reading
    and dropdown selection.
    """

    def _find(self, target):
        """中文：把元素名称或定位器解析为 WebElement；已解析的元素原样返回。
        参数:
            target: 元素名称、定位器元组 / 字典或 WebElement。
        """

        if isinstance(target, str):
            target = self._lookup(target)
        if is_locator(target):
            by, value = to_selenium_locator(target)
            return self.__driver.find_element(by, value)
        return target

    def _describe(self, target) -> str:
        if isinstance(target, str):
            return f"{self._page_name}.{target}"
        if is_locator(target):
            by, value = to_selenium_locator(target)
            return f"{self._page_name}[{by}={value}]"
        return f"{self._page_name}<element>"

    def fill(self, target, text):
        """中文：向元素发送按键序列。
        参数:
            target: 元素名称、定位器元组或 WebElement。
            text: 需要输入的文本。
        """

        self._log.info(f"[FILL] {self._describe(target)} = {mask_if_sensitive(target, text)}")
        return self._find(target).send_keys(text)

    def clear_and_fill(self, target, text):
        """中文：先清空再输入文本。"""

        def _clear():
            self._find(target).clear()

        self.run_sequentially([_clear, lambda: self.fill(target, text)])

    def get_content(self, target) -> str:
        """中文：读取元素内容；有 value 属性（输入框）时返回 value，否则返回文本。"""

        element = self._find(target)
        value = element.get_attribute("value")
        content = element.text if value is None else value
        self._log.debug(f"[GET_CONTENT] {self._describe(target)} -> {mask_if_sensitive(target, content)}")
        return content

    def has_class(self, target, class_name: str) -> bool:
        """中文：判断元素 class 属性是否包含指定类名（按空白拆分后整词匹配）；无 class 属性时返回 False。
        参数:
            target: 元素名称、定位器元组或 WebElement。
            class_name: 类名。
        """

        classes = self._find(target).get_attribute("class")
        return bool(classes) and class_name in classes.split()

    def select_dropdown_option(self, target, by, key):
        """中文：打开下拉框，按序号 / 标签 / 值选择选项，然后清除焦点。
        参数:
            target: 下拉框的元素名称、定位器元组或 WebElement。
            by: 选择方式，支持 index、label、value。
            key: 序号、标签文本或 value 值。
        返回:
            被点击的 option 元素。
        """

        selector = DropdownSelector.parse(by)
        self._log.info(f"[SELECT] {self._describe(target)} by={selector.value} key={key}")

        def _pick():
            option = self._find_option(self._find(target), selector, key)
            option.click()
            return option

        results = self.run_sequentially([
            lambda: self.click(target),
            _pick,
            self.clear_focus,
        ])
        return results[1]

    def select_dropdown_item_by_index(self, target, index: int):
        return self.select_dropdown_option(target, DropdownSelector.INDEX, index)

    def select_dropdown_item_by_label(self, target, label: str):
        return self.select_dropdown_option(target, DropdownSelector.LABEL, label)

    def select_dropdown_item_by_value(self, target, value: str):
        return self.select_dropdown_option(target, DropdownSelector.VALUE, value)

    def _find_option(self, dropdown, selector: DropdownSelector, key):
        if selector is DropdownSelector.INDEX:
            options = dropdown.find_elements(By.TAG_NAME, "option")
            index = int(key)
            if not -len(options) <= index < len(options):
                raise NoSuchElementException(
                    f"Dropdown has no option at index {index} ({len(options)} options)"
                )
            return options[index]

        key = str(key)
        if selector is DropdownSelector.LABEL:
            literal = _xpath_literal(key)
            matches = dropdown.find_elements(
                By.XPATH, f".//option[@label={literal} or normalize-space(.)={literal}]"
            )
        else:
            matches = dropdown.find_elements(By.CSS_SELECTOR, f"option[value={_css_string(key)}]")

        if not matches:
            raise NoSuchElementException(f"Dropdown has no option with {selector.value}={key!r}")
        return matches[0]
