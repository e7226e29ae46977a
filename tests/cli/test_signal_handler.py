"""Unit tests for the signal handler module in the filelist CLI."""

import os
import signal
import sys
from unittest.mock import MagicMock, patch

import pytest

from filelist.cli.signal_handler import SignalHandler, cleanup, setup_signal_handling, signal_handler

requires_sigpipe = pytest.mark.skipif(not hasattr(signal, "SIGPIPE"), reason="SIGPIPE is not available")


@pytest.fixture
def mock_signal():
    """Create a mock for the signal module."""
    with patch("signal.signal", autospec=True) as mock:
        yield mock


@pytest.fixture
def mock_os():
    """Create a mock for os module functions used in signal handling."""
    with patch("filelist.cli.signal_handler.os", autospec=True) as mock:
        mock.open.return_value = 123  # Mock file descriptor
        mock.dup2 = MagicMock()
        mock.devnull = "/dev/null"
        mock.O_WRONLY = os.O_WRONLY
        yield mock


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance for tests.

    This avoids interference with the singleton instance.
    """
    return SignalHandler()


@pytest.fixture
def preserved_events():
    """Restore the singleton's events after a test changes them."""
    original_sigpipe = signal_handler.sigpipe_received.is_set()
    original_sigint = signal_handler.sigint_received.is_set()
    yield
    for event, was_set in (
        (signal_handler.sigpipe_received, original_sigpipe),
        (signal_handler.sigint_received, original_sigint),
    ):
        if was_set:
            event.set()
        else:
            event.clear()


def test_signal_handler_initialization(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.original_sigint_handler is not None


@requires_sigpipe
def test_handle_sigpipe(fresh_signal_handler, mock_signal):
    """Test the SIGPIPE handler function."""
    fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, MagicMock())

    assert fresh_signal_handler.sigpipe_received.is_set()
    mock_signal.assert_called_once_with(signal.SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_handle_sigint(fresh_signal_handler, mock_signal):
    """Test the SIGINT handler function."""
    fresh_signal_handler.handle_sigint(signal.SIGINT, MagicMock())

    assert fresh_signal_handler.sigint_received.is_set()
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


@requires_sigpipe
def test_setup_signal_handling(mock_signal):
    """Test signal handler setup function."""
    setup_signal_handling()

    assert mock_signal.call_count == 2
    mock_signal.assert_any_call(signal.SIGPIPE, signal_handler.handle_sigpipe)
    mock_signal.assert_any_call(signal.SIGINT, signal_handler.handle_sigint)


def test_cleanup_with_no_signals(mock_os, preserved_events):
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()

    cleanup()

    mock_os.open.assert_not_called()
    mock_os.dup2.assert_not_called()


@pytest.mark.parametrize("event_name", ["sigpipe_received", "sigint_received"])
def test_cleanup_after_signal(mock_os, preserved_events, event_name):
    signal_handler.sigpipe_received.clear()
    signal_handler.sigint_received.clear()
    getattr(signal_handler, event_name).set()

    with patch.object(sys, "stdout") as mock_stdout:
        mock_stdout.fileno.return_value = 1
        cleanup()

    mock_os.open.assert_called_once_with(os.devnull, os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)
