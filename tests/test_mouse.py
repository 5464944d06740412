import pytest
from selenium.webdriver.common.by import By

from page_helper.core.base_page import BasePage


def test_click_clears_focus_before_clicking(page, fake_driver, make_element, events):
    fake_driver.add((By.ID, "name"), make_element("name"))

    page.click("name_input")

    assert events == [("clear_focus", (0, 0)), ("pointer_click", "name")]


def test_click_without_focus_clearing(fake_driver, make_element, options, events):
    button = make_element("save")
    page = BasePage(
        fake_driver,
        base_url="/",
        options=options.with_overrides(clear_focus_before_click=False),
    )

    page.click(button)

    assert events == [("pointer_click", "save")]


def test_click_accepts_locator_tuple(page, fake_driver, make_element, events):
    fake_driver.add((By.CSS_SELECTOR, ".ok"), make_element("ok"))
    page.click((By.CSS_SELECTOR, ".ok"))
    assert events[-1] == ("pointer_click", "ok")


def test_click_unknown_element_name_raises_key_error(page, events):
    with pytest.raises(KeyError, match="missing_button"):
        page.click("missing_button")
    assert ("pointer_click", "missing_button") not in events


def test_focus_is_click(page, make_element, events):
    field = make_element("field")
    page.focus(field)
    assert events == [("clear_focus", (0, 0)), ("pointer_click", "field")]


def test_clear_focus_uses_configured_point(fake_driver, options, events):
    page = BasePage(fake_driver, base_url="/", options=options.with_overrides(clear_focus_point=(5, 7)))
    page.clear_focus()
    assert events == [("clear_focus", (5, 7))]


def test_clear_focus_clicks_configured_element(fake_driver, make_element, options, events):
    fake_driver.add((By.TAG_NAME, "header"), make_element("header"))
    page = BasePage(
        fake_driver,
        base_url="/",
        options=options.with_overrides(clear_focus_locator=(By.TAG_NAME, "header")),
    )
    page.clear_focus()
    assert events == [("pointer_click", "header")]


def test_hover_moves_pointer_without_clicking(page, make_element, events):
    menu = make_element("menu")
    page.hover(menu)
    assert events == [("hover", "menu")]


def test_clear_focus_locator_given_as_dict(fake_driver, make_element, options, events):
    fake_driver.add((By.CSS_SELECTOR, ".page-gutter"), make_element("gutter"))
    page = BasePage(
        fake_driver,
        base_url="/",
        options=options.with_overrides(clear_focus_locator={"by": "css", "value": ".page-gutter"}),
    )
    page.click(make_element("save"))
    assert events == [("pointer_click", "gutter"), ("pointer_click", "save")]
