"""Custom adapter to prefix all messages of a browser automation with its name."""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright (C) 2024-2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import sys


class PrefixLogAdapter(logging.LoggerAdapter):
    """Prefix all messages with a custom prefix (e.g. the name of the automation)."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        """Put the prefix in front of the log message.

        Args:
            msg (str):
                The original log message.
            kwargs (dict):
                Keyword arguments of the logging call.

        Returns:
            tuple[str, dict]:
                The prefixed message and the unchanged keyword arguments.

        """

        return "[{}] {}".format(self.extra["prefix"], msg), kwargs


def configure_logging(level: str = "INFO") -> None:
    """Log all browser automation messages to stdout."""

    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%d-%b-%Y %H:%M:%S",
        level=level,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
