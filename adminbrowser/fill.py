"""Fill form fields of the current page, independent of the kind of the form control."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import Select

from .finder import ResilientFinder
from .locator import Field

default_logger = logging.getLogger("adminbrowser.fill")

# Element selectors containing one of these are never logged with their value:
SENSITIVE_SELECTORS = ("password", "secret", "token")


class ControlKind(Enum):
    """Kinds of form controls that need a different interaction to set a value."""

    SELECT = "select"
    CHECKBOX = "checkbox"
    TEXT = "text"

    @classmethod
    def of(cls, web_element: WebElement) -> "ControlKind":
        """Determine the kind of a resolved form control."""

        # HTML '<select>' can only be identified based on its tag name:
        if (web_element.tag_name or "").lower() == "select":
            return cls.SELECT
        # Checkboxes have tag name '<input type="checkbox">':
        if (web_element.get_attribute("type") or "").lower() == "checkbox":
            return cls.CHECKBOX
        return cls.TEXT


def flatten_fields(fields: tuple) -> list[Field]:
    """Accept either fields as variable arguments or a single iterable of fields."""

    if len(fields) == 1 and not isinstance(fields[0], Field):
        return list(fields[0])

    return list(fields)


def is_sensitive(field: Field) -> bool:
    return any(name in field.element.selector.lower() for name in SENSITIVE_SELECTORS)


class FieldFillEngine:
    """Apply field values to the form controls of the current page."""

    logger: logging.Logger = default_logger

    def __init__(self, finder: ResilientFinder, logger: logging.Logger = default_logger) -> None:
        """Initialize the object.

        Args:
            finder (ResilientFinder):
                Finder used to resolve the form controls.
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("fill")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.finder = finder

    # end method definition

    def fill(self, fields: Iterable[Field]) -> None:
        """Fill all fields on the current page.

        The fields are applied in the given order. The first failing field
        aborts the remaining ones; fields that have already been set stay set.

        Args:
            fields (Iterable[Field]):
                Fields that should be filled.

        """

        for field in fields:
            web_element = self.finder.find_element(field.element)
            kind = ControlKind.of(web_element)

            self.logger.debug(
                "Set %s element -> %s to value -> '%s'...",
                kind.value,
                field.element,
                field.value if not is_sensitive(field) else "<sensitive>",
            )

            match kind:
                case ControlKind.SELECT:
                    self.select_option(web_element, field.value)
                case ControlKind.CHECKBOX:
                    self.select_checkbox(web_element, field.value)
                case ControlKind.TEXT:
                    web_element.clear()  # clear existing text in the input field
                    web_element.send_keys(str(field.value))  # write new text into the field

    # end method definition

    def select_checkbox(self, web_element: WebElement, value: Any) -> None:
        """Bring a checkbox into the desired state. It is only clicked if the state differs.

        Args:
            web_element (WebElement):
                The checkbox.
            value (Any):
                The desired state. Everything that reads "true" (case-insensitive) means checked.

        """

        desired_state = str(value).lower() == "true"

        if web_element.is_selected() == desired_state:
            self.logger.debug("Checkbox already in desired state -> %s", desired_state)
            return

        web_element.click()

    # end method definition

    def select_option(self, web_element: WebElement, value: Any) -> None:
        """Select a drop-down option by its value or - as fallback - by its visible text.

        Args:
            web_element (WebElement):
                The '<select>' element.
            value (Any):
                Option value or visible option text.

        Raises:
            NoSuchElementException:
                If there is neither an option with this value nor with this text.

        """

        select = Select(web_element)
        try:
            select.select_by_value(str(value))
        except NoSuchElementException:
            self.logger.debug("No drop-down option with value -> '%s'. Try to select it by visible text.", value)
            select.select_by_visible_text(str(value))

    # end method definition
