"""adminbrowser - resilient Selenium browser automation for end-to-end tests of a web administration console."""

from .browser import Browser
from .driver import DriverDelegate, create_webdriver
from .exceptions import BrowserSessionError, SessionClosedError
from .fill import ControlKind, FieldFillEngine
from .finder import ResilientFinder
from .helper.logadapter import configure_logging
from .locator import Element, Field, Strategy, text_locator
from .login import LoginState, OAuthLoginElements, OAuthLoginFlow
from .pages import PageStateQueries
from .retry import FixedDelayRetry
from .settings import BrowserSettings

__all__ = [
    "Browser",
    "BrowserSessionError",
    "BrowserSettings",
    "ControlKind",
    "DriverDelegate",
    "Element",
    "Field",
    "FieldFillEngine",
    "FixedDelayRetry",
    "LoginState",
    "OAuthLoginElements",
    "OAuthLoginFlow",
    "PageStateQueries",
    "ResilientFinder",
    "SessionClosedError",
    "Strategy",
    "configure_logging",
    "create_webdriver",
    "text_locator",
]
