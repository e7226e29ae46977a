"""Unit tests for the error_action module."""

from filelist.tree_walker.error_action import ErrorAction


def test_error_action_enum():
    """Test the ErrorAction enum values."""
    assert ErrorAction.IGNORE == "ignore"
    assert ErrorAction.RAISE == "raise"

    # Test string conversion works both ways
    assert ErrorAction("ignore") == ErrorAction.IGNORE
    assert ErrorAction("raise") == ErrorAction.RAISE


def test_error_action_comparison():
    """Test comparing ErrorAction enum with strings."""
    assert "ignore" == ErrorAction.IGNORE
    assert "raise" == ErrorAction.RAISE
    assert ErrorAction.IGNORE != "raise"
    assert ErrorAction.RAISE != "ignore"
