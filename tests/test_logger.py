import logging

from page_helper.utils.logger import get_logger, get_page_logger, mask_if_sensitive


def test_mask_sensitive_field_names():
    assert mask_if_sensitive("password_input", "hunter2") == "****"
    assert mask_if_sensitive("OTP", "123456") == "****"
    assert mask_if_sensitive("name_input", "Ada") == "Ada"
    assert mask_if_sensitive(("id", "password"), "x") == "****"
    assert mask_if_sensitive(object(), "x") == "x"


def test_logger_is_configured_once():
    logger = get_logger()
    handlers = list(logger.handlers)
    assert get_logger() is logger
    assert logger.handlers == handlers
    assert logger.propagate is False


def test_page_logger_carries_page_name():
    adapter = get_page_logger("LoginPage")
    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra == {"page": "LoginPage"}
    assert get_page_logger() is get_logger()


def test_plugin_tags_log_records_with_current_test():
    from types import SimpleNamespace

    from page_helper import pytest_plugin
    from page_helper.utils import logger as logger_module

    pytest_plugin.pytest_runtest_setup(SimpleNamespace(nodeid="tests/test_x.py::test_y"))
    assert logger_module._CURRENT_TEST.get() == "tests/test_x.py::test_y"

    pytest_plugin.pytest_runtest_teardown(SimpleNamespace(nodeid="tests/test_x.py::test_y"))
    assert logger_module._CURRENT_TEST.get() == "-"
