from selenium.common.exceptions import TimeoutException
from selenium.webdriver.support.ui import WebDriverWait


class NavigationMixin:
    """中文：页面导航混入类，负责打开页面并确认页面已就绪。
    English: Navigation mixin that opens the page and confirms it is ready.
    """

    def get(self):
        """打开 base_url。"""

        return self.navigate_to("")

    def navigate_to(self, suffix: str = ""):
        """中文：打开 base_url + suffix，并等待页面打开标记出现。
        参数:
            suffix: 追加到 base_url 的路径，可为空。
        """

        url = f"{self.base_url}{suffix or ''}"
        self._log.info(f"[NAVIGATE] {self._page_name} -> {url}")
        self.ignore_synchronization = False
        results = self.run_sequentially([
            lambda: self.__driver.get(url),
            self._wait_page_open,
        ])
        return results[-1]

    def _wait_page_open(self, timeout=None):
        if timeout is None:
            timeout = self._options.page_open_timeout
        try:
            return WebDriverWait(
                self.__driver, timeout, poll_frequency=self._options.poll_frequency
            ).until(
                lambda _driver: self.is_page_open(),
                message=f"{self._page_name} did not open within {timeout}s",
            )
        except TimeoutException as exc:
            self._capture_failure("page_open", exc)
            raise

    def is_page_open(self) -> bool:
        """中文：等待页面稳定后检查页面打开标记是否存在；不存在返回 False。"""

        self.wait_for_stable()
        by, value = self._options.page_open_marker
        present = len(self.__driver.find_elements(by, value)) > 0
        self._log.debug(f"[PAGE_OPEN] {self._page_name} marker=({by}, {value}) present={present}")
        return present
