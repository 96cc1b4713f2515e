"""browser Module with the Browser facade used by the end-to-end tests.

The Browser owns exactly one browser session (via the DriverDelegate) and
adds the functions the tests need on top of the plain web driver:

* goto_page() - relative navigation based on the base URL
* find_element() - resilient element lookup with implicit wait
* fill() - fill form fields independent of the control kind
* do_oauth_login() - OAuth2 login tolerant of an already authenticated session
* is_text_present(), is_access_denied(), is_error_page(), is_login_page()

All other session-level operations (title, cookies, windows, ...) are
forwarded to the DriverDelegate, so the Browser can be used wherever the
plain driver would be used.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import re
import threading
import traceback
from types import TracebackType
from typing import Any

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from .driver import DriverDelegate, create_webdriver
from .fill import FieldFillEngine, flatten_fields
from .finder import ResilientFinder
from .helper.logadapter import PrefixLogAdapter
from .locator import Element, Field
from .login import OAuthLoginElements, OAuthLoginFlow
from .pages import PageStateQueries
from .settings import BrowserSettings

default_logger = logging.getLogger("adminbrowser.browser")

# Runs of 2 or more slashes - but not the one following the URL scheme ("http://"):
MULTIPLE_SLASHES = re.compile(r"(?<!:)/{2,}")


class Browser:
    """An advanced web driver for the end-to-end tests of the administration console."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        driver: WebDriver | DriverDelegate,
        settings: BrowserSettings | None = None,
        login_elements: OAuthLoginElements | None = None,
        automation_name: str = "",
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the object.

        Args:
            driver (WebDriver | DriverDelegate):
                The Selenium web driver (or a delegate already wrapping it).
                The Browser takes ownership of the session.
            settings (BrowserSettings | None, optional):
                The session configuration. Defaults to BrowserSettings() (read from the environment).
            login_elements (OAuthLoginElements | None, optional):
                Locators of the authorization server pages used by do_oauth_login().
            automation_name (str, optional):
                If given, all log messages of the browser are prefixed with this name.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("browser")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        component_logger = self.logger
        if automation_name:
            self.logger = PrefixLogAdapter(self.logger, {"prefix": automation_name})

        self.settings = settings if settings is not None else BrowserSettings()
        self.driver = driver if isinstance(driver, DriverDelegate) else DriverDelegate(driver, logger=component_logger)

        self._interrupt = threading.Event()
        self.finder = ResilientFinder(
            driver=self.driver,
            settings=self.settings,
            interrupt=self._interrupt,
            logger=component_logger,
        )
        self.fill_engine = FieldFillEngine(finder=self.finder, logger=component_logger)
        self.pages = PageStateQueries(
            driver=self.driver,
            finder=self.finder,
            settings=self.settings,
            logger=component_logger,
        )
        self.login_flow = OAuthLoginFlow(browser=self, elements=login_elements, logger=component_logger)

    # end method definition

    @classmethod
    def start(cls, settings: BrowserSettings | None = None, **kwargs: Any) -> "Browser":
        """Open a new browser session as configured in the settings.

        Args:
            settings (BrowserSettings | None, optional):
                The session configuration. Defaults to BrowserSettings() (read from the environment).
            kwargs (Any):
                Further arguments of the Browser constructor.

        Returns:
            Browser:
                The browser owning the new session.

        """

        settings = settings if settings is not None else BrowserSettings()

        return cls(driver=create_webdriver(settings), settings=settings, **kwargs)

    # end method definition

    def set_implicit_wait(self, implicit_wait_ms: int) -> "Browser":
        """Set the time budget the element finder polls for elements.

        Args:
            implicit_wait_ms (int):
                Time in milliseconds. 0 means no retry.

        Returns:
            Browser:
                self

        """

        self.settings.implicit_wait_ms = implicit_wait_ms

        return self

    # end method definition

    def set_base_url(self, base_url: str) -> "Browser":
        """Set the base URL. This URL is used by goto_page()!

        Args:
            base_url (str):
                The base URL of the administration console.

        Returns:
            Browser:
                self

        """

        self.settings.base_url = base_url

        return self

    # end method definition

    def page_url(self, page: str) -> str:
        """Build the absolute URL of a sub-page of the administration console.

        Base URL and page are joined with a slash and any run of multiple
        slashes is collapsed. A missing base URL is not validated here.

        Args:
            page (str):
                The (relative) page path.

        Returns:
            str:
                The absolute URL.

        """

        target = "{}/{}".format(self.settings.base_url, page)

        return MULTIPLE_SLASHES.sub("/", target)

    # end method definition

    def goto_page(self, page: str) -> "Browser":
        """Go to a specific sub-page of the administration console.

        This function requires that the base URL was previously set by set_base_url()
        (or via the settings).

        Args:
            page (str):
                Where should be navigated.

        Returns:
            Browser:
                self

        """

        self.driver.get(self.page_url(page))

        return self

    # end method definition

    def do_oauth_login(self, username: str, password: str) -> "Browser":
        """Login via the OAuth2 mechanism of the authorization server.

        If the session is already authenticated nothing is entered.

        Args:
            username (str):
                Username that should be used.
            password (str):
                Password that should be used.

        Returns:
            Browser:
                self

        """

        self.login_flow.run(username=username, password=password)

        return self

    # end method definition

    def click(self, element: Element) -> "Browser":
        """Click on the given element.

        Args:
            element (Element):
                Element which should be clicked.

        Returns:
            Browser:
                self

        """

        self.finder.find_element(element).click()
        self.logger.debug("Successfully clicked element -> %s", element)

        return self

    # end method definition

    def clear(self, *elements: Element) -> "Browser":
        """Clear the given (input) elements.

        Args:
            elements (Element):
                Elements which should be cleared.

        Returns:
            Browser:
                self

        """

        for element in elements:
            self.finder.find_element(element).clear()

        return self

    # end method definition

    def find_element(self, element: Element) -> WebElement:
        """Return the element if it was found. This method uses the implicit wait mechanism!"""

        return self.finder.find_element(element)

    # end method definition

    def find_elements(self, element: Element) -> list[WebElement]:
        """Return all matching elements. This method doesn't use the implicit wait mechanism!"""

        return self.finder.find_elements(element)

    # end method definition

    def find_select_element(self, element: Element) -> Select:
        """Return the drop-down (<select>) element.

        Raises:
            UnexpectedTagNameException:
                If the element is not a <select> element.

        """

        return Select(self.finder.find_element(element))

    # end method definition

    def find_selected_option(self, element: Element) -> WebElement:
        """Return the first selected option of a drop-down."""

        return self.find_select_element(element).first_selected_option

    # end method definition

    def get_value(self, element: Element) -> str:
        """Get the value of the given element.

        For '<input>' elements this is the value attribute, for all
        others the visible text. The element is looked up without retries.

        Args:
            element (Element):
                The element to read.

        Returns:
            str:
                The value of the element.

        """

        web_element = self.driver.find_element(*element.by())

        match web_element.tag_name.lower():
            case "input":
                return web_element.get_attribute("value")
            case _:
                return web_element.text

    # end method definition

    def fill(self, *fields: Field) -> "Browser":
        """Fill all fields on the current page.

        Accepts the fields either as variable arguments or as a single
        list of fields.

        Args:
            fields (Field):
                Fields that should be filled.

        Returns:
            Browser:
                self

        """

        self.fill_engine.fill(flatten_fields(fields))

        return self

    # end method definition

    def is_text_present(self, text: str) -> bool:
        """Check if the given text is shown on the current page."""

        return self.pages.is_text_present(text)

    # end method definition

    def is_access_denied(self) -> bool:
        """Is the access for the current page denied?"""

        return self.pages.is_access_denied()

    # end method definition

    def is_error_page(self) -> bool:
        """Is the current page an error page?"""

        return self.pages.is_error_page()

    # end method definition

    def is_login_page(self) -> bool:
        """Is the current page the login page?"""

        return self.pages.is_login_page()

    # end method definition

    def interrupt(self) -> None:
        """Stop an in-flight element polling (e.g. from another thread).

        The polling then continues with its final attempt.
        """

        self.logger.warning("Interrupting element polling...")
        self._interrupt.set()

    # end method definition

    def __getattr__(self, name: str) -> Any:
        """Forward all other (public) session operations to the driver delegate."""

        if name.startswith("_") or "driver" not in self.__dict__:
            raise AttributeError(name)

        return getattr(self.driver, name)

    # end method definition

    def __enter__(self) -> "Browser":
        """Enable use with 'with' statement (context manager block)."""

        return self

    # end method definition

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback_obj: TracebackType | None,
    ) -> None:
        """Handle cleanup when exiting a context manager block ('with' statement).

        If an unhandled exception occurs within the context block, it will be
        logged before the browser session is quit.

        Args:
            exc_type (type[BaseException] | None):
                The class of the raised exception, if any.
            exc_value (BaseException | None):
                The exception instance raised, if any.
            traceback_obj (TracebackType | None):
                The traceback object associated with the exception, if any.

        """

        if exc_type is not None:
            self.logger.error(
                "Unhandled exception in browser automation context -> %s",
                "".join(traceback.format_exception(exc_type, exc_value, traceback_obj)),
            )

        self.driver.quit()

    # end method definition
