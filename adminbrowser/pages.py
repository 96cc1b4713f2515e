"""Read-only predicates about the state of the current page.

None of the queries navigates or waits: the absence of an element is a
normal (False) result and never an error.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging

from .driver import DriverDelegate
from .finder import ResilientFinder
from .locator import text_locator
from .settings import BrowserSettings

default_logger = logging.getLogger("adminbrowser.pages")

ACCESS_DENIED_TEXT = "Access Denied"
ERROR_PAGE_TEXT = "Whitelabel Error Page"


class PageStateQueries:
    """Check the content and location of the current page."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        driver: DriverDelegate,
        finder: ResilientFinder,
        settings: BrowserSettings,
        logger: logging.Logger = default_logger,
    ) -> None:
        if logger != default_logger:
            self.logger = logger.getChild("pages")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.driver = driver
        self.finder = finder
        self.settings = settings

    # end method definition

    def is_text_present(self, text: str) -> bool:
        """Check if the given text is shown on the current page.

        Args:
            text (str):
                Text to check (case-sensitive, whitespace-normalized).

        Returns:
            bool:
                True if the text is present. Otherwise False.

        """

        count = len(self.finder.find_elements(text_locator(text)))

        self.logger.debug("Found %d element%s with text -> '%s'", count, "s" if count != 1 else "", text)

        return count > 0

    # end method definition

    def is_access_denied(self) -> bool:
        """Is the access for the current page denied?"""

        return self.is_text_present(ACCESS_DENIED_TEXT)

    # end method definition

    def is_error_page(self) -> bool:
        """Is the current page the generic error page of the web application?"""

        return self.is_text_present(ERROR_PAGE_TEXT)

    # end method definition

    def is_login_page(self) -> bool:
        """Is the current page served by the authorization server (i.e. the login page)?"""

        return self.settings.auth_server_marker in self.driver.current_url

    # end method definition
