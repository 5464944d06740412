from selenium.common.exceptions import WebDriverException

from page_helper.core.options import PageOptions
from page_helper.interactions.dom import DomMixin
from page_helper.interactions.js import JsMixin
from page_helper.interactions.mouse import MouseMixin
from page_helper.interactions.navigation import NavigationMixin
from page_helper.interactions.sequence import SequenceMixin
from page_helper.interactions.wait import WaitMixin
from page_helper.utils.locator_loader import build_page_locators
from page_helper.utils.screenshot import take_screenshot


_MIXINS = (NavigationMixin, MouseMixin, DomMixin, JsMixin, WaitMixin, SequenceMixin)


class BasePage(
    NavigationMixin,
    MouseMixin,
    DomMixin,
    JsMixin,
    WaitMixin,
    SequenceMixin,
):
    """页面基类，组合导航、元素交互与等待能力。
    Base page class composing navigation, element interaction and waits.

    子类通常只声明 base_url 与 elements::

        class EditPage(BasePage):
            base_url = "/#/edit"
            elements = {
                "edit_button": (By.ID, "edit-btn"),
                "cancel_button": (By.ID, "cancel-btn"),
            }

        page = EditPage(driver)
        page.navigate_to("/42")
        page.click("edit_button")
    """

    base_url = ""

    def __init__(self, driver, base_url=None, elements=None, page_name=None, options=None):
        """初始化页面并绑定驱动与元素映射。

            driver: WebDriver 实例。
            base_url: 页面地址，未传时使用类属性 base_url。
            elements: 名称 -> 定位器的 dict，或 LocatorLoader（按 page_name 取页面）。
            page_name: 页面名称，默认类名。
            options: PageOptions，未传时从 config.yaml 读取。
        """

        self.__driver = driver
        self._options = options if options is not None else PageOptions.load()
        self._page_name = page_name or type(self).__name__
        if base_url is not None:
            self.base_url = base_url
        if elements is None:
            elements = getattr(self, "elements", None)
        self._locators = build_page_locators(elements, self._page_name)
        self.elements = self._locators.source if elements is None else elements
        self.ignore_synchronization = False
        self._last_failure_id = None
        self._log = self._init_logger()
        self._bind_driver_to_mixins(driver)

    @property
    def options(self) -> PageOptions:
        return self._options

    @property
    def page_name(self) -> str:
        return self._page_name

    def _init_logger(self):
        from page_helper.utils.logger import get_page_logger

        return get_page_logger(self._page_name)

    def _lookup(self, name):
        """按名称取元素定位器（或已解析的元素）；未定义时抛出 KeyError。"""

        return self._locators.get(name)

    def _bind_driver_to_mixins(self, driver):
        """将 WebDriver 绑定到各交互混入类（各混入类通过私有属性 __driver 访问）。"""

        for mixin in _MIXINS:
            setattr(self, f"_{mixin.__name__}__driver", driver)

    def _capture_failure(self, action: str, exc: BaseException):
        """中文：失败时按配置截图并记录路径；同一个异常只截图一次，截图失败不影响原异常。
        参数:
            action: 失败的动作名称。
            exc: 原始异常。
        """

        if not self._options.screenshot_on_failure or id(exc) == self._last_failure_id:
            return None
        self._last_failure_id = id(exc)
        try:
            path = take_screenshot(
                self.__driver,
                self._options.screenshot_dir,
                prefix=f"{self._page_name}.{action}",
            )
        except (WebDriverException, OSError) as e:
            self._log.warning(f"[SCREENSHOT] {self._page_name}.{action} failed: {e}")
            return None
        self._log.error(f"[FAILURE] {self._page_name}.{action} screenshot={path}")
        return path
