"""Tests for the error accumulator."""

from rangechart.extraction.errors import ErrorAccumulator


class TestErrorAccumulator:
    """Test ErrorAccumulator."""

    def test_add_keeps_order(self):
        """Test messages are kept in the order they were added."""
        errors = ErrorAccumulator()
        errors.add("first")
        errors.add("second")

        assert errors.get_errors() == ["first", "second"]
        assert len(errors) == 2
        assert errors

    def test_clear(self):
        """Test clear empties the list."""
        errors = ErrorAccumulator()
        errors.add("first")
        errors.clear()

        assert errors.get_errors() == []
        assert not errors

    def test_get_errors_returns_copy(self):
        """Test callers cannot mutate the accumulated list."""
        errors = ErrorAccumulator()
        errors.add("first")
        errors.get_errors().append("sneaky")

        assert errors.get_errors() == ["first"]
