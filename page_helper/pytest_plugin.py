"""pytest fixtures for browser suites built on page_helper.

Registered through the ``pytest11`` entry point, so installing the package
makes ``driver``, ``page_helper_config`` and ``page_helper`` available.
"""

import pytest

from page_helper.core.helper import PageHelper
from page_helper.core.options import PageOptions
from page_helper.driver.driver_manager import DriverManager
from page_helper.utils.config_loader import load_config, safe_cfg_get
from page_helper.utils.logger import set_current_test


@pytest.fixture(scope="session")
def page_helper_config():
    try:
        return load_config()
    except FileNotFoundError:
        return {}


@pytest.fixture(scope="session")
def driver(page_helper_config):
    """初始化浏览器驱动并在会话结束时关闭。"""

    driver = DriverManager.get_driver()

    implicit_wait = safe_cfg_get(page_helper_config, ["selenium", "implicit_wait"])
    if implicit_wait is not None:
        driver.implicitly_wait(float(implicit_wait))

    page_load_timeout = safe_cfg_get(page_helper_config, ["selenium", "page_load_timeout"])
    if page_load_timeout is not None:
        driver.set_page_load_timeout(float(page_load_timeout))

    yield driver
    DriverManager.quit()


@pytest.fixture
def page_helper(driver, page_helper_config):
    return PageHelper(driver, PageOptions.from_config(page_helper_config))


def pytest_runtest_setup(item):
    set_current_test(item.nodeid)


def pytest_runtest_teardown(item):
    set_current_test("-")
