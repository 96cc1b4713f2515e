"""Definition for all custom exceptions of the browser automation."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"


class BrowserSessionError(Exception):
    """Custom exception if the browser session (web driver) cannot be created."""

    def __init__(self, message: str) -> None:
        """Initialize the BrowserSessionError with a message.

        Args:
            message (str):
                The error message.

        """
        super().__init__(message)


class SessionClosedError(Exception):
    """Custom exception if an operation is called on a session that has already quit."""

    def __init__(self, message: str = "Browser session has already been quit!") -> None:
        """Initialize the SessionClosedError with a message.

        Args:
            message (str, optional):
                The error message.

        """
        super().__init__(message)
