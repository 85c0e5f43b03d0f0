"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from statsengine.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.1},
            backend_name="cpu_test",
        )
        assert result.params.value == 42.0
        assert result.info == {"method": "test"}
        assert result.timing == {"total_seconds": 0.1}
        assert result.backend_name == "cpu_test"

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        assert result.warnings == ()
        assert not result.has_warning("anything")

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="x",
            warnings=("group (dose=2.0) has a single observation; sd is undefined",),
        )
        assert result.has_warning("single observation")
        assert not result.has_warning("converge")

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="x")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "y"
