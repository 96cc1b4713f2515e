"""Locators for page elements and fields to be filled into them.

An Element only describes HOW a page element can be found (strategy + selector).
It never keeps a reference to a found web element: the DOM may be re-rendered
at any time, so every operation resolves the element again.
"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

from dataclasses import dataclass
from enum import Enum
from typing import Any

from selenium.webdriver.common.by import By


class Strategy(Enum):
    """Supported strategies to locate a page element (mapped to Selenium 'By' values)."""

    ID = By.ID
    NAME = By.NAME
    CSS = By.CSS_SELECTOR
    XPATH = By.XPATH
    CLASS_NAME = By.CLASS_NAME
    TAG_NAME = By.TAG_NAME
    LINK_TEXT = By.LINK_TEXT
    PARTIAL_LINK_TEXT = By.PARTIAL_LINK_TEXT

    @classmethod
    def from_name(cls, name: str) -> "Strategy":
        """Determine the strategy from a name.

        We don't want to expose class "By" outside this package,
        so we also accept plain strings like "id", "css" or "xpath".

        Args:
            name (str):
                Either the enum name (case-insensitive, e.g. "css") or
                the Selenium 'By' value (e.g. "css selector").

        Returns:
            Strategy:
                The matching strategy.

        Raises:
            ValueError:
                If the name is not a supported strategy.

        """

        for strategy in cls:
            if name.lower() in (strategy.name.lower(), strategy.value):
                return strategy

        msg = "Unsupported find method -> '{}'".format(name)
        raise ValueError(msg)


@dataclass(frozen=True)
class Element:
    """Identify one addressable page element."""

    strategy: Strategy
    selector: str

    def by(self) -> tuple[str, str]:
        """Return the (by, value) pair expected by WebDriver.find_element()."""

        return (self.strategy.value, self.selector)

    @classmethod
    def by_id(cls, selector: str) -> "Element":
        return cls(Strategy.ID, selector)

    @classmethod
    def by_name(cls, selector: str) -> "Element":
        return cls(Strategy.NAME, selector)

    @classmethod
    def by_css(cls, selector: str) -> "Element":
        return cls(Strategy.CSS, selector)

    @classmethod
    def by_xpath(cls, selector: str) -> "Element":
        return cls(Strategy.XPATH, selector)

    def __str__(self) -> str:
        return "'{}' ({})".format(self.selector, self.strategy.value)


@dataclass(frozen=True)
class Field:
    """A page element together with the value that should be set.

    The interpretation of the value depends on the kind of the page
    element at fill time (text input, drop-down or checkbox).
    """

    element: Element
    value: Any


def xpath_literal(text: str) -> str:
    """Quote a string as XPath 1.0 string literal.

    XPath 1.0 has no escape character, so a text containing both
    single and double quotes is assembled with concat().

    Args:
        text (str):
            The text to quote.

    Returns:
        str:
            The XPath string literal.

    """

    if "'" not in text:
        return "'{}'".format(text)
    if '"' not in text:
        return '"{}"'.format(text)

    parts = text.split("'")
    return "concat({})".format(", \"'\", ".join("'{}'".format(part) for part in parts))


def text_locator(text: str) -> Element:
    """Build an XPath locator matching all elements that show the given text.

    Text nodes and the full (descendant) text of an element are both whitespace-normalized.

    Args:
        text (str):
            The (case-sensitive) text to search for.

    Returns:
        Element:
            The XPath element locator.

    """

    literal = xpath_literal(text)

    return Element.by_xpath(
        "//*[contains(normalize-space(text()), {0}) or contains(normalize-space(.), {0})]".format(literal),
    )
