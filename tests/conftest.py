"""Shared fixtures and Selenium doubles for the browser automation tests."""

import threading
from unittest.mock import MagicMock

import pytest

from adminbrowser.settings import BrowserSettings

BASE_URL = "http://localhost:8080/osiam-addon-administration"
AUTH_SERVER_URL = "http://localhost:8080/osiam-auth-server"


def make_element(
    tag: str = "input",
    input_type: str | None = "text",
    displayed: bool = True,
    selected: bool = False,
    text: str = "",
    value: str = "",
) -> MagicMock:
    """Create a web element double."""

    elem = MagicMock(name="WebElement<{}>".format(tag))
    elem.tag_name = tag
    elem.text = text
    elem.is_displayed.return_value = displayed
    elem.is_selected.return_value = selected
    elem.get_attribute.side_effect = lambda name: {"type": input_type, "value": value}.get(name)

    return elem


@pytest.fixture
def settings(tmp_path) -> BrowserSettings:
    return BrowserSettings(base_url=BASE_URL, download_directory=str(tmp_path / "downloads"))


@pytest.fixture
def webdriver_mock() -> MagicMock:
    driver = MagicMock(name="WebDriver")
    driver.current_url = BASE_URL + "/"
    driver.find_elements.return_value = []
    return driver


@pytest.fixture
def no_wait() -> MagicMock:
    """Interrupt event double that never sleeps and is never set."""

    interrupt = MagicMock(spec=threading.Event)
    interrupt.wait.return_value = False
    return interrupt


class FakeControl:
    """Form control of the fake authorization server."""

    def __init__(self, session: "FakeAuthWebDriver", selector: str) -> None:
        self.session = session
        self.selector = selector
        self.tag_name = "button" if selector in (session.login_button, session.authorize_button) else "input"

    def is_displayed(self) -> bool:
        return True

    def get_attribute(self, name: str) -> str | None:
        return "text" if name == "type" and self.tag_name == "input" else None

    def clear(self) -> None:
        self.session.typed.pop(self.selector, None)

    def send_keys(self, value: str) -> None:
        self.session.typed[self.selector] = value

    def click(self) -> None:
        self.session.clicked.append(self.selector)
        if self.selector == self.session.login_button:
            self.session.current_url = AUTH_SERVER_URL + "/oauth/authorize?client_id=addon"
        elif self.selector == self.session.authorize_button:
            self.session.authenticated = True
            self.session.current_url = BASE_URL + "/user/list"


class FakeAuthWebDriver:
    """Web driver double simulating the redirects of an OAuth2 authorization server."""

    login_button = "//button[@type='submit']"
    authorize_button = "authorize"

    def __init__(self, authenticated: bool = False, remembered: bool = False) -> None:
        self.authenticated = authenticated
        self.remembered = remembered
        self.current_url = "about:blank"
        self.typed = {}
        self.clicked = []
        self.quit_calls = 0

    def get(self, url: str) -> None:
        if self.authenticated:
            self.current_url = url
        elif self.remembered:
            self.current_url = AUTH_SERVER_URL + "/oauth/authorize?client_id=addon"
        else:
            self.current_url = AUTH_SERVER_URL + "/login"

    def find_element(self, by: str, value: str) -> FakeControl:
        return FakeControl(self, value)

    def find_elements(self, by: str, value: str) -> list:
        return []

    def quit(self) -> None:
        self.quit_calls += 1
