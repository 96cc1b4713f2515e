"""Resilient element finder that polls for page elements.

A rendered DOM is inherently racy: elements appear late, are re-rendered
(stale references) or are present but not yet visible. The finder retries
these transient conditions within the implicit wait budget of the session
and then does one last, unguarded lookup.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import threading

from selenium.common.exceptions import (
    ElementNotVisibleException,
    NoSuchElementException,
    StaleElementReferenceException,
)
from selenium.webdriver.remote.webelement import WebElement

from .driver import DriverDelegate
from .locator import Element
from .retry import FixedDelayRetry
from .settings import BrowserSettings

default_logger = logging.getLogger("adminbrowser.finder")

TRANSIENT_EXCEPTIONS = (
    NoSuchElementException,
    StaleElementReferenceException,
    ElementNotVisibleException,
)


class ResilientFinder:
    """Find page elements with the implicit wait mechanism of the session."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        driver: DriverDelegate,
        settings: BrowserSettings,
        interrupt: threading.Event | None = None,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the object.

        Args:
            driver (DriverDelegate):
                The delegate owning the browser session.
            settings (BrowserSettings):
                The (mutable) session settings. The implicit wait is read on each call.
            interrupt (threading.Event | None, optional):
                Event to stop an in-flight polling early.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("finder")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.driver = driver
        self.settings = settings
        self.interrupt = interrupt

    # end method definition

    def find_element(self, element: Element) -> WebElement:
        """Return the page element if it was found. This method uses the implicit wait mechanism!

        Args:
            element (Element):
                The element locator.

        Returns:
            WebElement:
                The found (and visible) web element.

        Raises:
            NoSuchElementException:
                If the element could not be found in the final attempt.
            StaleElementReferenceException:
                If the element has been re-rendered during the final attempt.

        """

        by, value = element.by()

        def visible_element() -> WebElement:
            web_element = self.driver.find_element(by, value)
            if not web_element.is_displayed():
                msg = "Element {} is not visible".format(element)
                raise ElementNotVisibleException(msg)

            # Resolve again - the element we checked may already be stale:
            return self.driver.find_element(by, value)

        retry = FixedDelayRetry(
            attempts=self.settings.implicit_wait_ms // self.settings.poll_interval_ms,
            delay=self.settings.poll_interval_ms / 1000,
            retry_on=TRANSIENT_EXCEPTIONS,
            interrupt=self.interrupt,
            logger=self.logger,
        )

        self.logger.debug(
            "Find page element -> %s (implicit wait -> %d ms)...",
            element,
            self.settings.implicit_wait_ms,
        )

        try:
            web_element = retry.run(action=visible_element, final=lambda: self.driver.find_element(by, value))
        except TRANSIENT_EXCEPTIONS:
            self.logger.error("Cannot find page element -> %s", element)
            raise

        self.logger.debug("Found page element -> %s", element)

        return web_element

    # end method definition

    def find_elements(self, element: Element) -> list[WebElement]:
        """Return all matching page elements. This method doesn't use the implicit wait mechanism!

        Args:
            element (Element):
                The element locator.

        Returns:
            list[WebElement]:
                The matching web elements. Empty list if there are none.

        """

        by, value = element.by()

        return self.driver.find_elements(by, value)

    # end method definition
