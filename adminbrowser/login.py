"""OAuth2 login via the browser.

The login runs through an authorization-code style redirect flow:

UNAUTHENTICATED
 ├── DONE                 (session is already authenticated - no redirect to the auth server)
 ├── AT_CREDENTIAL_PAGE   (auth server asks for user name and password)
 │    └── SUBMITTED
 │         └── AUTHORIZING
 └── AUTHORIZING          (session remembered - only the consent is required)
      └── DONE

The state is derived from the current URL on every run and never persisted.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .locator import Element, Field

if TYPE_CHECKING:
    from .browser import Browser

default_logger = logging.getLogger("adminbrowser.login")


class LoginState(Enum):
    """States of the OAuth2 login flow."""

    UNAUTHENTICATED = "unauthenticated"
    AT_CREDENTIAL_PAGE = "at_credential_page"
    SUBMITTED = "submitted"
    AUTHORIZING = "authorizing"
    DONE = "done"


@dataclass(frozen=True)
class OAuthLoginElements:
    """Page elements of the login and the consent page of the authorization server."""

    username: Element = field(default_factory=lambda: Element.by_name("username"))
    password: Element = field(default_factory=lambda: Element.by_name("password"))
    login_button: Element = field(default_factory=lambda: Element.by_xpath("//button[@type='submit']"))
    authorize_button: Element = field(default_factory=lambda: Element.by_name("authorize"))


def classify_url(url: str, auth_server_marker: str, credential_marker: str) -> LoginState:
    """Derive the login state from the URL the browser has been redirected to.

    Args:
        url (str):
            The current URL of the browser.
        auth_server_marker (str):
            Substring identifying the authorization server host.
        credential_marker (str):
            Substring identifying the credential entry page of the authorization server.

    Returns:
        LoginState:
            DONE if we are not on the authorization server,
            AT_CREDENTIAL_PAGE if user name and password are requested,
            AUTHORIZING otherwise (only the consent is missing).

    """

    if auth_server_marker not in url:
        # always logged in
        return LoginState.DONE
    if credential_marker in url:
        return LoginState.AT_CREDENTIAL_PAGE

    return LoginState.AUTHORIZING


class OAuthLoginFlow:
    """Walk through the OAuth2 login of the administration console."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        browser: "Browser",
        elements: OAuthLoginElements | None = None,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the object.

        Args:
            browser (Browser):
                The browser to run the login with.
            elements (OAuthLoginElements | None, optional):
                Locators of the authorization server pages. Defaults to OAuthLoginElements().
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("login")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.browser = browser
        self.elements = elements or OAuthLoginElements()

    # end method definition

    def step(self, state: LoginState, username: str, password: str) -> LoginState:
        """Execute the action of the given state and return the next state.

        Args:
            state (LoginState):
                The current state.
            username (str):
                User name for the credential page.
            password (str):
                Password for the credential page.

        Returns:
            LoginState:
                The follow-up state.

        """

        settings = self.browser.settings

        match state:
            case LoginState.UNAUTHENTICATED:
                self.browser.goto_page(settings.login_path)
                return classify_url(
                    self.browser.current_url,
                    settings.auth_server_marker,
                    settings.credential_page_marker,
                )
            case LoginState.AT_CREDENTIAL_PAGE:
                self.logger.info("Enter credentials of user -> '%s'...", username)
                self.browser.fill(
                    Field(self.elements.username, username),
                    Field(self.elements.password, password),
                )
                self.browser.click(self.elements.login_button)
                return LoginState.SUBMITTED
            case LoginState.SUBMITTED:
                return LoginState.AUTHORIZING
            case LoginState.AUTHORIZING:
                self.logger.info("Authorize access of the administration console...")
                self.browser.click(self.elements.authorize_button)
                return LoginState.DONE
            case LoginState.DONE:
                return LoginState.DONE

    # end method definition

    def run(self, username: str, password: str) -> list[LoginState]:
        """Login via the OAuth2 mechanism.

        Any failure to locate a page element is propagated. The caller
        is responsible to check that the final redirect succeeded.

        Args:
            username (str):
                Username that should be used.
            password (str):
                Password that should be used.

        Returns:
            list[LoginState]:
                The states the flow has passed (starting with UNAUTHENTICATED, ending with DONE).

        """

        state = LoginState.UNAUTHENTICATED
        visited = [state]

        while state != LoginState.DONE:
            state = self.step(state, username, password)
            visited.append(state)

        if LoginState.AT_CREDENTIAL_PAGE not in visited and LoginState.AUTHORIZING not in visited:
            self.logger.debug("Session is already authenticated. Nothing to do.")
        else:
            self.logger.info("OAuth login of user -> '%s' completed.", username)

        return visited

    # end method definition
