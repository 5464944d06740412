from pathlib import Path

import pytest
from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.common.by import By

from page_helper.core.base_page import BasePage
from page_helper.core.options import PageOptions
from page_helper.interactions import mouse


class FakeElement:
    """Minimal WebElement stand-in that records what happens to it."""

    def __init__(self, name, events, text="", attributes=None):
        self.name = name
        self.events = events
        self.text = text
        self.attributes = dict(attributes or {})
        self.children = []
        self.queries = {}
        self.selected = False
        self.parent = None
        self.stale = False

    def __repr__(self):
        return f"<FakeElement {self.name}>"

    def get_attribute(self, name):
        return self.attributes.get(name)

    def click(self):
        self.events.append(("element_click", self.name))
        if self.parent is not None:
            for sibling in self.parent.children:
                sibling.selected = sibling is self
            self.parent.attributes["value"] = self.attributes.get("value")

    def clear(self):
        self.events.append(("clear", self.name))
        if "value" in self.attributes:
            self.attributes["value"] = ""

    def send_keys(self, text):
        self.events.append(("send_keys", self.name, text))
        self.attributes["value"] = (self.attributes.get("value") or "") + text

    def is_enabled(self):
        if self.stale:
            raise StaleElementReferenceException(self.name)
        return True

    def add_option(self, option):
        option.parent = self
        self.children.append(option)
        return option

    def find_elements(self, by, value):
        if by == By.TAG_NAME and value == "option":
            return list(self.children)
        self.events.append(("query", by, value))
        return list(self.queries.get((by, value), []))


class FakeDriver:
    def __init__(self, events):
        self.events = events
        self.elements = {}
        self.urls = []
        self.scripts = []
        self.stable = True
        self.screenshots = []

    def add(self, locator, element):
        self.elements[locator] = element
        return element

    def get(self, url):
        self.events.append(("get", url))
        self.urls.append(url)

    def find_element(self, by, value):
        try:
            return self.elements[(by, value)]
        except KeyError:
            raise NoSuchElementException(f"{by}={value}") from None

    def find_elements(self, by, value):
        element = self.elements.get((by, value))
        return [element] if element is not None else []

    def execute_script(self, script, *args):
        self.scripts.append((script, args))
        return self.stable

    def save_screenshot(self, path):
        Path(path).write_bytes(b"\x89PNG")
        self.screenshots.append(path)
        return True


class FakeActionChains:
    events = None

    def __init__(self, driver):
        self._steps = []

    def click(self, element=None):
        self._steps.append(("pointer_click", getattr(element, "name", element)))
        return self

    def move_to_element(self, element):
        self._steps.append(("hover", element.name))
        return self

    def perform(self):
        self.events.extend(self._steps)


class _FakePointer:
    def __init__(self):
        self.point = None

    def move_to_location(self, x, y):
        self.point = (x, y)

    def click(self):
        pass


class FakeActionBuilder:
    events = None

    def __init__(self, driver):
        self.pointer_action = _FakePointer()

    def perform(self):
        self.events.append(("clear_focus", self.pointer_action.point))


@pytest.fixture(autouse=True)
def _log_dir(tmp_path_factory, monkeypatch):
    monkeypatch.setenv("PAGE_HELPER_LOG_DIR", str(tmp_path_factory.getbasetemp() / "logs"))


@pytest.fixture
def events():
    return []


@pytest.fixture(autouse=True)
def pointer(monkeypatch, events):
    chains = type("Chains", (FakeActionChains,), {"events": events})
    builder = type("Builder", (FakeActionBuilder,), {"events": events})
    monkeypatch.setattr(mouse, "ActionChains", chains)
    monkeypatch.setattr(mouse, "ActionBuilder", builder)
    return events


@pytest.fixture
def fake_driver(events):
    driver = FakeDriver(events)
    driver.add((By.TAG_NAME, "body"), FakeElement("body", events))
    return driver


@pytest.fixture
def make_element(events):
    def _make(name, text="", **attributes):
        return FakeElement(name, events, text=text, attributes=attributes)

    return _make


@pytest.fixture
def options():
    return PageOptions(
        wait_timeout=0.05,
        page_open_timeout=0.05,
        stabilization_timeout=0.05,
        poll_frequency=0.01,
    )


@pytest.fixture
def page(fake_driver, options):
    return BasePage(
        fake_driver,
        base_url="/#/base",
        elements={
            "name_input": (By.ID, "name"),
            "password_input": {"by": "css", "value": "input[type=password]"},
            "status": (By.CSS_SELECTOR, ".status"),
            "country": (By.ID, "country"),
        },
        page_name="ProfilePage",
        options=options,
    )
