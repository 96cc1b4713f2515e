"""Tests for the Browser facade."""

import logging
import threading
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from selenium.common.exceptions import NoSuchElementException

from adminbrowser.browser import Browser
from adminbrowser.helper.logadapter import configure_logging
from adminbrowser.driver import DriverDelegate
from adminbrowser.exceptions import SessionClosedError
from adminbrowser.locator import Element, Field
from adminbrowser.settings import BrowserSettings

from .conftest import make_element

USERNAME = Element.by_id("userName")
SAVE_BUTTON = Element.by_id("save")


@pytest.fixture
def browser(webdriver_mock, settings) -> Browser:
    return Browser(driver=webdriver_mock, settings=settings)


class TestSessionConfiguration:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ADMIN_BROWSER_IMPLICIT_WAIT_MS", raising=False)
        monkeypatch.delenv("ADMIN_BROWSER_BASE_URL", raising=False)

        settings = BrowserSettings()

        assert settings.implicit_wait_ms == 0
        assert settings.poll_interval_ms == 250
        assert settings.base_url is None

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("ADMIN_BROWSER_IMPLICIT_WAIT_MS", "5000")
        monkeypatch.setenv("ADMIN_BROWSER_BASE_URL", "http://console:8080/admin")

        settings = BrowserSettings()

        assert settings.implicit_wait_ms == 5000
        assert settings.base_url == "http://console:8080/admin"

    def test_setters_are_fluent(self, browser):
        assert browser.set_base_url("http://x").set_implicit_wait(1000) is browser
        assert browser.settings.base_url == "http://x"
        assert browser.settings.implicit_wait_ms == 1000

    def test_negative_implicit_wait_is_rejected(self, browser):
        with pytest.raises(ValidationError):
            browser.set_implicit_wait(-1)


class TestGotoPage:
    @pytest.mark.parametrize(
        ("base_url", "page", "expected"),
        [
            ("http://x///", "a", "http://x/a"),
            ("http://x", "a", "http://x/a"),
            ("http://x/", "/a/", "http://x/a/"),
            ("http://x", "/a/", "http://x/a/"),
            ("http://x//admin//", "//user//list", "http://x/admin/user/list"),
            ("https://console:8443/admin", "", "https://console:8443/admin/"),
        ],
    )
    def test_slash_runs_are_collapsed(self, browser, webdriver_mock, base_url, page, expected):
        browser.set_base_url(base_url)

        assert browser.goto_page(page) is browser
        webdriver_mock.get.assert_called_once_with(expected)

    def test_missing_base_url_is_not_validated(self, browser, webdriver_mock):
        browser.settings.base_url = None

        browser.goto_page("login")

        webdriver_mock.get.assert_called_once_with("None/login")


class TestElementOperations:
    def test_click(self, browser, webdriver_mock):
        button = make_element(tag="button")
        webdriver_mock.find_element.return_value = button

        assert browser.click(SAVE_BUTTON) is browser
        button.click.assert_called_once_with()

    def test_click_missing_element_raises(self, browser, webdriver_mock):
        webdriver_mock.find_element.side_effect = NoSuchElementException("missing")

        with pytest.raises(NoSuchElementException):
            browser.click(SAVE_BUTTON)

    def test_clear_multiple(self, browser, webdriver_mock):
        first, second = make_element(), make_element()
        webdriver_mock.find_element.side_effect = [first, second]

        browser.clear(USERNAME, Element.by_id("email"))

        first.clear.assert_called_once_with()
        second.clear.assert_called_once_with()

    def test_find_elements(self, browser, webdriver_mock):
        rows = [make_element(tag="tr"), make_element(tag="tr")]
        webdriver_mock.find_elements.return_value = rows

        assert browser.find_elements(Element.by_css("table tr")) == rows

    def test_get_value_of_input(self, browser, webdriver_mock):
        webdriver_mock.find_element.return_value = make_element(tag="INPUT", value="marissa")

        assert browser.get_value(USERNAME) == "marissa"

    def test_get_value_of_other_element(self, browser, webdriver_mock):
        webdriver_mock.find_element.return_value = make_element(tag="span", input_type=None, text="marissa")

        assert browser.get_value(Element.by_css(".user")) == "marissa"

    def test_find_selected_option(self, browser, webdriver_mock):
        webdriver_mock.find_element.return_value = make_element(tag="select", input_type=None)

        with patch("adminbrowser.browser.Select") as select_cls:
            option = browser.find_selected_option(Element.by_id("role"))

        assert option is select_cls.return_value.first_selected_option

    def test_fill_accepts_varargs_and_list(self, browser, webdriver_mock):
        field = make_element()
        webdriver_mock.find_element.return_value = field

        assert browser.fill(Field(USERNAME, "marissa")) is browser
        browser.fill([Field(USERNAME, "koala"), Field(USERNAME, "bob")])

        assert [c.args for c in field.send_keys.call_args_list] == [("marissa",), ("koala",), ("bob",)]


class TestPageState:
    def test_queries(self, browser, webdriver_mock):
        assert browser.is_text_present("Saved") is False
        assert browser.is_access_denied() is False
        assert browser.is_error_page() is False
        assert browser.is_login_page() is False

        webdriver_mock.find_elements.return_value = [make_element(tag="h1")]
        webdriver_mock.current_url = "http://localhost:8080/osiam-auth-server/login"

        assert browser.is_access_denied() is True
        assert browser.is_login_page() is True


class TestInterrupt:
    def test_interrupt_falls_through_to_final_attempt(self, browser, webdriver_mock):
        browser.set_implicit_wait(60000)
        webdriver_mock.find_element.side_effect = NoSuchElementException("missing")

        browser.interrupt()
        with pytest.raises(NoSuchElementException):
            browser.find_element(SAVE_BUTTON)

        assert webdriver_mock.find_element.call_count == 2

    def test_interrupt_from_other_thread(self, browser, webdriver_mock):
        browser.set_implicit_wait(60000)
        webdriver_mock.find_element.side_effect = NoSuchElementException("missing")
        timer = threading.Timer(0.3, browser.interrupt)

        timer.start()
        try:
            with pytest.raises(NoSuchElementException):
                browser.find_element(SAVE_BUTTON)
        finally:
            timer.cancel()

        assert webdriver_mock.find_element.call_count <= 4


class TestDelegation:
    def test_pass_through_operations(self, browser, webdriver_mock):
        webdriver_mock.title = "OSIAM Administration"
        webdriver_mock.page_source = "<html></html>"
        webdriver_mock.get_cookies.return_value = [{"name": "JSESSIONID"}]

        assert browser.title == "OSIAM Administration"
        assert browser.page_source == "<html></html>"
        assert browser.get_cookies() == [{"name": "JSESSIONID"}]
        browser.delete_all_cookies()
        webdriver_mock.delete_all_cookies.assert_called_once_with()

    def test_private_attributes_are_not_forwarded(self, browser):
        with pytest.raises(AttributeError):
            browser._driver  # noqa: B018

    def test_accepts_existing_delegate(self, webdriver_mock, settings):
        delegate = DriverDelegate(webdriver_mock)

        assert Browser(driver=delegate, settings=settings).driver is delegate

    def test_context_manager_quits_session(self, webdriver_mock, settings):
        with Browser(driver=webdriver_mock, settings=settings) as browser:
            browser.goto_page("users")

        webdriver_mock.quit.assert_called_once_with()
        with pytest.raises(SessionClosedError):
            browser.current_url  # noqa: B018

    def test_context_manager_logs_exception(self, webdriver_mock, settings, caplog):
        with pytest.raises(RuntimeError), Browser(driver=webdriver_mock, settings=settings):
            raise RuntimeError("test failed")

        assert "Unhandled exception in browser automation context" in caplog.text
        webdriver_mock.quit.assert_called_once_with()

    def test_start_creates_webdriver(self, settings):
        with patch("adminbrowser.browser.create_webdriver") as factory:
            browser = Browser.start(settings)

        factory.assert_called_once_with(settings)
        assert browser.driver.webdriver is factory.return_value


class TestLogging:
    def test_automation_name_prefixes_messages(self, webdriver_mock, settings, caplog):
        browser = Browser(driver=webdriver_mock, settings=settings, automation_name="user-admin")

        with caplog.at_level(logging.WARNING):
            browser.interrupt()

        assert "[user-admin] Interrupting element polling..." in caplog.text

    def test_configure_logging(self):
        with patch("adminbrowser.helper.logadapter.logging.basicConfig") as basic_config:
            configure_logging("DEBUG")

        assert basic_config.call_args.kwargs["level"] == "DEBUG"
