"""Tests for boundary call results."""
from view_paths.domain.base.results import StoreResult


def test_capture_success():
    result = StoreResult.capture(lambda a, b: a + b, 1, b=2)

    assert result.success is True
    assert result.value == 3
    assert result.error_message is None


def test_capture_failure():
    def explode():
        raise OSError("no space left")

    result = StoreResult.capture(explode)

    assert result.success is False
    assert result.value is None
    assert result.error_message == "no space left"
