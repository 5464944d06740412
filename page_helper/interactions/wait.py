from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from page_helper.utils.locator_loader import is_locator, to_selenium_locator


def _element_attached(element):
    def _condition(_driver):
        try:
            element.is_enabled()
        except StaleElementReferenceException:
            return False
        return element

    return _condition


class WaitMixin:
    """中文：等待交互混入类，提供页面稳定、遮罩消失、元素出现等待能力。
    English: Wait interaction mixin providing stabilization, overlay and
    presence waits.
    """

    def _waiter(self, timeout):
        return WebDriverWait(self.__driver, timeout, poll_frequency=self._options.poll_frequency)

    def _timeout(self, timeout):
        return self._options.wait_timeout if timeout is None else timeout

    def wait_for_stable(self, timeout=None):
        """中文：等待前端无挂起的异步任务；ignore_synchronization 为 True 时跳过。
        参数:
            timeout: 最大等待时间（秒），默认 stabilization_timeout。
        """

        if self.ignore_synchronization:
            self._log.debug(f"[WAIT_STABLE] {self._page_name} skipped (synchronization ignored)")
            return True

        if timeout is None:
            timeout = self._options.stabilization_timeout
        script = self._options.stabilization_script
        try:
            return self._waiter(timeout).until(
                lambda d: d.execute_script(script),
                message=f"{self._page_name} did not stabilize within {timeout}s",
            )
        except TimeoutException as exc:
            self._capture_failure("wait_stable", exc)
            raise

    def wait_until_modal_gone(self, timeout=None):
        """中文：等待遮罩层（modal_locator）从 DOM 中消失。
        参数:
            timeout: 最大等待时间（秒），默认 wait_timeout。
        """

        timeout = self._timeout(timeout)
        locator = self._options.modal_locator
        self._log.debug(f"[WAIT_MODAL_GONE] {self._page_name} {locator} timeout={timeout}")
        try:
            return self._waiter(timeout).until_not(
                EC.presence_of_element_located(locator),
                message=f"Overlay {locator} still present after {timeout}s",
            )
        except TimeoutException as exc:
            self._capture_failure("wait_modal_gone", exc)
            raise

    def wait_for_element(self, target, timeout=None):
        """中文：等待元素出现在 DOM 中并返回该元素。
        参数:
            target: 元素名称、定位器元组或 WebElement。
            timeout: 最大等待时间（秒），默认 wait_timeout。
        """

        timeout = self._timeout(timeout)
        description = self._describe(target)
        if isinstance(target, str):
            target = self._lookup(target)
        if is_locator(target):
            condition = EC.presence_of_element_located(to_selenium_locator(target))
        else:
            condition = _element_attached(target)

        self._log.debug(f"[WAIT_ELEMENT] {description} timeout={timeout}")
        try:
            return self._waiter(timeout).until(
                condition,
                message=f"{description} not present after {timeout}s",
            )
        except TimeoutException as exc:
            self._capture_failure("wait_element", exc)
            raise
