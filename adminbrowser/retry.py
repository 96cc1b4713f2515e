"""Bounded, blocking retry with a fixed delay between the attempts.

Class: FixedDelayRetry
Methods:

__init__ : class initializer
run: run an action with retries and a final, unguarded attempt

"""

__author__ = "Dr. Marc Diefenbruch"
__copyright__ = "Copyright 2025, OpenText"
__credits__ = ["Kai-Philip Gatzweiler"]
__maintainer__ = "Dr. Marc Diefenbruch"
__email__ = "mdiefenb@opentext.com"

import logging
import threading
from collections.abc import Callable
from typing import TypeVar

default_logger = logging.getLogger("adminbrowser.retry")

T = TypeVar("T")


class FixedDelayRetry:
    """Run an action a limited number of times with a fixed delay in between."""

    logger: logging.Logger = default_logger

    def __init__(
        self,
        attempts: int,
        delay: float,
        retry_on: tuple[type[BaseException], ...],
        interrupt: threading.Event | None = None,
        logger: logging.Logger = default_logger,
    ) -> None:
        """Initialize the retry object.

        Args:
            attempts (int):
                Number of guarded attempts. Values <= 0 mean that only the final
                attempt is done.
            delay (float):
                Time in seconds to wait after a failed attempt.
            retry_on (tuple[type[BaseException], ...]):
                Exceptions that are considered transient. Any other exception
                stops the retries immediately.
            interrupt (threading.Event | None, optional):
                If this event is set while waiting, no further guarded attempts
                are done. Defaults to None (cannot be interrupted).
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("retry")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        self.attempts = max(attempts, 0)
        self.delay = delay
        self.retry_on = retry_on
        self._interrupt = interrupt if interrupt is not None else threading.Event()

    # end method definition

    def run(self, action: Callable[[], T], final: Callable[[], T] | None = None) -> T:
        """Run the action with retries.

        Transient exceptions (see retry_on) of the guarded attempts are swallowed.
        Once the attempts are exhausted (or the wait has been interrupted) the
        final action is called exactly once. Its result is returned and its
        exceptions are propagated to the caller.

        Args:
            action (Callable[[], T]):
                The action to run for the guarded attempts.
            final (Callable[[], T] | None, optional):
                The action for the last, unguarded attempt. Defaults to the action itself.

        Returns:
            T:
                The result of the first successful attempt.

        """

        for attempt in range(self.attempts):
            try:
                return action()
            except self.retry_on as e:
                self.logger.debug(
                    "Attempt %d/%d failed with -> %s; wait %.3f seconds and retry...",
                    attempt + 1,
                    self.attempts,
                    type(e).__name__,
                    self.delay,
                )
            # Event.wait() returns True if the event has been set - that's our cancellation point.
            # The interrupt is consumed so that later calls retry normally again:
            if self._interrupt.wait(self.delay):
                self._interrupt.clear()
                self.logger.warning("Retry has been interrupted after attempt %d/%d!", attempt + 1, self.attempts)
                break

        # last try
        return (final or action)()

    # end method definition
