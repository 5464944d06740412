from selenium.webdriver import ActionChains
from selenium.webdriver.common.actions.action_builder import ActionBuilder


class MouseMixin:
    """鼠标交互混入类，提供点击、聚焦、悬停操作。
    Mouse interaction mixin providing click, focus and hover operations.
    """

    def click(self, target):
        """中文：点击元素；按配置先清除焦点，避免点击只把焦点从其他元素移走。
        参数:
            target: 元素名称、定位器元组或 WebElement。
        """

        self._log.info(f"[CLICK] {self._describe(target)}")
        steps = []
        if self._options.clear_focus_before_click:
            steps.append(self.clear_focus)
        steps.append(lambda: ActionChains(self.__driver).click(self._find(target)).perform())
        self.run_sequentially(steps)

    def focus(self, target):
        """聚焦元素（点击的别名）。"""

        return self.click(target)

    def clear_focus(self):
        """中文：在页面空白处点击以移除当前焦点。"""

        locator = self._options.clear_focus_locator
        if locator is not None:
            self._log.debug(f"[CLEAR_FOCUS] {self._page_name} on {locator}")
            element = self.__driver.find_element(*locator)
            ActionChains(self.__driver).click(element).perform()
            return

        x, y = self._options.clear_focus_point
        self._log.debug(f"[CLEAR_FOCUS] {self._page_name} at ({x}, {y})")
        builder = ActionBuilder(self.__driver)
        builder.pointer_action.move_to_location(x, y)
        builder.pointer_action.click()
        builder.perform()

    def hover(self, target):
        """中文：将鼠标移动到元素上方（不点击）。
        参数:
            target: 元素名称、定位器元组或 WebElement。
        """

        self._log.debug(f"[HOVER] {self._describe(target)}")
        ActionChains(self.__driver).move_to_element(self._find(target)).perform()
