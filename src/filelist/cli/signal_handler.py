"""Signal handling utilities for the filelist CLI.

SIGINT does not kill a listing outright: it sets an event that the tree walker polls,
so the walk stops descending and the files found so far are still written out.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

_SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Handles system signals for graceful interruption management.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received, or when
            writing output hits a broken pipe.
        sigint_received: Event that is set when a SIGINT signal is received. It doubles as
            the cancellation event of the running walk.
        original_sigpipe_handler: Original SIGPIPE signal handler (None where the platform
            has no SIGPIPE).
        original_sigint_handler: Original SIGINT signal handler.
    """

    def __init__(self) -> None:
        """Initialize signal handler with original handlers preserved."""
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(_SIGPIPE) if _SIGPIPE is not None else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Handle SIGPIPE signal."""
        self.sigpipe_received.set()
        if _SIGPIPE is not None:
            signal.signal(_SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Handle SIGINT signal.

        The original handler is restored, so a second Ctrl+C interrupts immediately.
        """
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE (where available) and SIGINT."""
    if _SIGPIPE is not None:
        signal.signal(_SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Cleanup function registered with atexit.

    Redirects stdout to the null device if we received SIGPIPE or SIGINT to prevent
    additional error messages during shutdown.
    """
    if signal_handler.sigpipe_received.is_set() or signal_handler.sigint_received.is_set():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
