from page_helper.core.base_page import BasePage
from page_helper.core.options import PageOptions
from page_helper.utils.locator_loader import build_page_locators


PAGE_METHODS = (
    "get",
    "navigate_to",
    "is_page_open",
    "run_sequentially",
    "click",
    "focus",
    "clear_focus",
    "hover",
    "scroll_into_view",
    "fill",
    "clear_and_fill",
    "get_content",
    "has_class",
    "select_dropdown_option",
    "select_dropdown_item_by_index",
    "select_dropdown_item_by_label",
    "select_dropdown_item_by_value",
    "wait_for_stable",
    "wait_until_modal_gone",
    "wait_for_element",
)


class _BoundPage(BasePage):
    """为已有页面对象组合出的 BasePage。
    base_url、elements、ignore_synchronization 均实时读写宿主对象；
    安装时显式传入的 elements 优先于宿主的 elements。
    """

    def __init__(self, host, driver, elements, options):
        self._host = host
        self._explicit_elements = elements
        super().__init__(
            driver,
            elements=elements if elements is not None else host.elements,
            page_name=getattr(host, "page_name", None) or type(host).__name__,
            options=options,
        )

    @property
    def base_url(self):
        return self._host.base_url

    @property
    def elements(self):
        if self._explicit_elements is not None:
            return self._explicit_elements
        return self._host.elements

    @elements.setter
    def elements(self, value):
        if self._explicit_elements is not None:
            self._explicit_elements = value
        else:
            self._host.elements = value

    @property
    def ignore_synchronization(self):
        return getattr(self._host, "ignore_synchronization", False)

    @ignore_synchronization.setter
    def ignore_synchronization(self, value):
        self._host.ignore_synchronization = value

    def _lookup(self, name):
        return build_page_locators(self.elements, self._page_name).get(name)


class PageHelper:
    """中文：为任意页面对象安装便捷方法。
    English: Installs the convenience method set on an existing page object.

    示例 / example::

        class EditPage:
            def __init__(self, helper):
                self.base_url = "/#/edit"
                self.elements = {
                    "edit_button": (By.ID, "edit-btn"),
                    "cancel_button": (By.ID, "cancel-btn"),
                }
                helper.install_page_methods(self)

        page = EditPage(PageHelper(driver))
        page.navigate_to()
    """

    def __init__(self, driver, options: PageOptions | None = None):
        self._driver = driver
        self._options = options if options is not None else PageOptions.load()

    @property
    def options(self) -> PageOptions:
        return self._options

    def install_page_methods(self, page, elements=None) -> BasePage:
        """中文：把方法集合绑定到页面对象上，返回承载这些方法的 BasePage。
        参数:
            page: 需提供 base_url（str）的页面对象。
            elements: 名称 -> 定位器映射，默认使用 page.elements。
        """

        if not isinstance(getattr(page, "base_url", None), str):
            raise ValueError(f"{type(page).__name__} must define a string base_url before installation")
        if elements is None and getattr(page, "elements", None) is None:
            raise ValueError(
                f"{type(page).__name__} must define elements or pass them explicitly"
            )

        bound = _BoundPage(page, self._driver, elements, self._options)
        for name in PAGE_METHODS:
            setattr(page, name, getattr(bound, name))
        bound._log.debug(f"[INSTALL] {bound.page_name} methods={len(PAGE_METHODS)}")
        return bound


def install_page_methods(page, driver, elements=None, options: PageOptions | None = None) -> BasePage:
    """中文：用 driver 为页面对象安装便捷方法（PageHelper 的快捷入口）。
    参数:
        page: 需提供 base_url 的页面对象。
        driver: WebDriver 实例。
        elements: 名称 -> 定位器映射，默认使用 page.elements。
        options: PageOptions，未传时从 config.yaml 读取。
    """

    return PageHelper(driver, options).install_page_methods(page, elements)
