from page_helper.driver.driver_factory import create_driver


class DriverManager:
    """驱动管理器，进程内复用同一个浏览器驱动。
    Driver manager sharing one browser driver per process.
    """

    _driver = None

    @classmethod
    def get_driver(cls, browser: str | None = None):
        if cls._driver is None:
            cls._driver = create_driver(browser)
        return cls._driver

    @classmethod
    def quit(cls):
        if cls._driver:
            try:
                cls._driver.quit()
            finally:
                cls._driver = None
