"""driver Module to own and forward to the Selenium web driver session.

Class: DriverDelegate
Methods:

__init__ : class initializer
get: navigate to an absolute URL
find_element / find_elements: raw (not retried) element lookup
... thin forwarding methods for windows, cookies and navigation
quit: end the browser session

Function: create_webdriver
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import os
from types import TracebackType
from typing import Any

import chromedriver_autoinstaller
import urllib3
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .exceptions import BrowserSessionError, SessionClosedError
from .settings import BrowserSettings

default_logger = logging.getLogger("adminbrowser.driver")


def set_chrome_options(settings: BrowserSettings) -> ChromeOptions:
    """Set chrome options for Selenium.

    Args:
        settings (BrowserSettings):
            The session settings.

    Returns:
        ChromeOptions:
            Options to call the browser with.

    """

    chrome_options = ChromeOptions()
    if settings.headless:
        chrome_options.add_argument("--headless")
    chrome_options.add_argument("--no-sandbox")
    chrome_options.add_argument("--disable-dev-shm-usage")
    chrome_options.add_argument("--window-size={},{}".format(settings.window_width, settings.window_height))

    chrome_options.add_experimental_option(
        "prefs",
        {"download.default_directory": settings.download_directory},
    )

    return chrome_options


def set_firefox_options(settings: BrowserSettings) -> FirefoxOptions:
    """Set firefox options for Selenium.

    Args:
        settings (BrowserSettings):
            The session settings.

    Returns:
        FirefoxOptions:
            Options to call the browser with.

    """

    firefox_options = FirefoxOptions()
    if settings.headless:
        firefox_options.add_argument("-headless")
    firefox_options.add_argument("--width={}".format(settings.window_width))
    firefox_options.add_argument("--height={}".format(settings.window_height))
    # 2 = use a custom download directory:
    firefox_options.set_preference("browser.download.folderList", 2)
    firefox_options.set_preference("browser.download.dir", settings.download_directory)

    return firefox_options


def create_webdriver(settings: BrowserSettings, logger: logging.Logger = default_logger) -> WebDriver:
    """Create a Selenium web driver based on the session settings.

    If a remote URL is configured a remote session (Selenium server / grid)
    is opened, otherwise a local browser is started.

    Args:
        settings (BrowserSettings):
            The session settings.
        logger (logging.Logger, optional):
            The logging object to use for all log messages. Defaults to default_logger.

    Returns:
        WebDriver:
            The web driver owning the new browser session.

    Raises:
        BrowserSessionError:
            If the browser session cannot be created.

    """

    match settings.browser:
        case "chrome":
            options = set_chrome_options(settings)
        case "firefox":
            options = set_firefox_options(settings)
        case _:
            msg = "Unknown browser -> '{}'. Cannot create a browser session.".format(settings.browser)
            logger.error(msg)
            raise BrowserSessionError(msg)

    if not os.path.exists(settings.download_directory):
        os.makedirs(settings.download_directory)

    try:
        if settings.remote_url:
            logger.info("Open remote %s session at -> %s...", settings.browser, settings.remote_url)
            driver = webdriver.Remote(command_executor=settings.remote_url, options=options)
        elif settings.browser == "chrome":
            logger.info("Start local chrome browser (headless -> %s)...", settings.headless)
            chromedriver_autoinstaller.install()
            driver = webdriver.Chrome(options=options)
        else:
            logger.info("Start local firefox browser (headless -> %s)...", settings.headless)
            driver = webdriver.Firefox(options=options)
    except WebDriverException as e:
        msg = "Failed to create {} browser session; error -> {}".format(settings.browser, e.msg or str(e))
        logger.error(msg)
        raise BrowserSessionError(msg) from e

    return driver


class DriverDelegate:
    """Own the live web driver session and forward session-level operations to it.

    All other components of the browser automation just borrow the
    session for the duration of a single call.
    """

    logger: logging.Logger = default_logger

    def __init__(self, driver: WebDriver, logger: logging.Logger = default_logger) -> None:
        """Initialize the object.

        Args:
            driver (WebDriver):
                The Selenium web driver (local or remote).
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("driver")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self._driver = driver

    # end method definition

    @property
    def webdriver(self) -> WebDriver:
        """Return the underlying web driver.

        Raises:
            SessionClosedError:
                If the session has already been quit.

        """

        if self._driver is None:
            raise SessionClosedError
        return self._driver

    # end method definition

    @property
    def is_active(self) -> bool:
        return self._driver is not None

    # end method definition

    def get(self, url: str) -> None:
        """Navigate to an absolute URL.

        Args:
            url (str):
                The URL to load.

        """

        self.logger.debug("Load page -> %s", url)

        try:
            self.webdriver.get(url)
        except (WebDriverException, urllib3.exceptions.ReadTimeoutError):
            self.logger.error("Cannot load page -> %s!", url)
            raise

    # end method definition

    @property
    def current_url(self) -> str:
        return self.webdriver.current_url

    @property
    def page_source(self) -> str:
        return self.webdriver.page_source

    @property
    def title(self) -> str:
        return self.webdriver.title

    @property
    def current_window_handle(self) -> str:
        return self.webdriver.current_window_handle

    @property
    def window_handles(self) -> list[str]:
        return self.webdriver.window_handles

    @property
    def switch_to(self) -> Any:
        return self.webdriver.switch_to

    def find_element(self, by: str, value: str) -> WebElement:
        return self.webdriver.find_element(by=by, value=value)

    def find_elements(self, by: str, value: str) -> list[WebElement]:
        return self.webdriver.find_elements(by=by, value=value)

    def back(self) -> None:
        self.webdriver.back()

    def forward(self) -> None:
        self.webdriver.forward()

    def refresh(self) -> None:
        self.webdriver.refresh()

    def get_cookies(self) -> list[dict]:
        return self.webdriver.get_cookies()

    def get_cookie(self, name: str) -> dict | None:
        return self.webdriver.get_cookie(name)

    def add_cookie(self, cookie: dict) -> None:
        self.webdriver.add_cookie(cookie)

    def delete_cookie(self, name: str) -> None:
        self.webdriver.delete_cookie(name)

    def delete_all_cookies(self) -> None:
        self.webdriver.delete_all_cookies()

    def set_window_size(self, width: int, height: int) -> None:
        self.webdriver.set_window_size(width, height)

    def maximize_window(self) -> None:
        self.webdriver.maximize_window()

    def implicitly_wait(self, wait_time: float) -> None:
        """Set the web driver's own implicit wait (in seconds) for the whole session.

        This is independent from the polling of the resilient element finder.
        """

        self.logger.debug("Web driver implicit wait for max -> %s seconds...", str(wait_time))
        self.webdriver.implicitly_wait(wait_time)

    def set_page_load_timeout(self, wait_time: float) -> None:
        self.webdriver.set_page_load_timeout(wait_time)

    def execute_script(self, script: str, *args: Any) -> Any:
        return self.webdriver.execute_script(script, *args)

    def get_screenshot_as_file(self, filename: str) -> bool:
        self.logger.debug("Save browser screenshot to -> %s", filename)
        return self.webdriver.get_screenshot_as_file(filename)

    def close(self) -> None:
        """Close the current window. This is just like closing a tab not ending the browser."""

        self.webdriver.close()

    # end method definition

    def quit(self) -> None:
        """End the browser session and close all windows.

        Calling it a second time has no effect.
        """

        if self._driver is None:
            return

        self.logger.info("Quit browser session...")
        try:
            self._driver.quit()
        finally:
            self._driver = None

    # end method definition

    def __enter__(self) -> "DriverDelegate":
        """Enable use with 'with' statement (context manager block)."""

        return self

    # end method definition

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback_obj: TracebackType | None,
    ) -> None:
        """Quit the browser session when leaving the context manager block."""

        if exc_type is not None:
            self.logger.error("Unhandled exception in browser session -> %s", exc_value)

        self.quit()

    # end method definition
