"""Tests for error formatting."""

from emailmask.errors import ConfigurationError, EmailMaskError, format_error


class TestErrors:
    """Test cases for emailmask exceptions."""

    def test_error_without_suggestion(self):
        """Test that a plain error renders only its message."""
        assert str(EmailMaskError("Something broke")) == "Something broke"

    def test_error_with_suggestion(self):
        """Test that the suggestion is appended as a hint."""
        error = EmailMaskError("Something broke", "Try again")
        assert str(error) == "Something broke\n\nHint: Try again"

    def test_configuration_error_lists_problems(self):
        """Test that every problem appears in the hint."""
        error = ConfigurationError("Invalid mask options", ["first", "second"])

        assert error.errors == ["first", "second"]
        assert "  - first" in str(error)
        assert "  - second" in str(error)
        assert isinstance(error, EmailMaskError)

    def test_configuration_error_without_problems(self):
        """Test a configuration error with no details."""
        error = ConfigurationError("Invalid mask options")
        assert str(error) == "Invalid mask options"
        assert error.errors == []


class TestFormatError:
    """Test cases for format_error."""

    def test_package_error(self):
        """Test that package errors render as themselves."""
        error = ConfigurationError("Invalid mask options", ["bad"])
        assert format_error(error) == str(error)

    def test_builtin_errors(self):
        """Test hints for common built-in exceptions."""
        assert format_error(ValueError("x")).startswith("Invalid value: x")
        assert format_error(TypeError("y")).startswith("Type error: y")
        assert format_error(KeyError("email")).startswith("Missing key: 'email'")

    def test_unexpected_error(self):
        """Test the fallback message."""
        message = format_error(RuntimeError("boom"))
        assert message.startswith("Unexpected error: RuntimeError: boom")
