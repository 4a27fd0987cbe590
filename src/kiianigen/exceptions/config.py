"""Configuration-related exceptions.

- ConfigurationError: Base class for configuration errors
- ConfigFileNotFoundError: A required input file is missing
- ConfigFileInvalidError: A file has invalid JSON syntax
- ConfigValidationError: A file's values fail validation
"""

from typing import Any, Optional

from .base import KiianigenError


class ConfigurationError(KiianigenError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """A required configuration file does not exist."""

    def __init__(self, file_path: str, description: str = "Configuration file"):
        """
        Initialize config file not found error.

        Args:
            file_path: Path that was looked up
            description: What kind of file was expected
        """
        super().__init__(
            user_message=f"{description} not found: {file_path}",
            technical_message=f"Missing file: {file_path}",
            recoverable=True,
            recovery_hint=(
                "Point --source at the configurator export directory "
                "(the one containing KType-Standard.json and kll.json)"
            ),
        )
        self.file_path = file_path


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = "Configuration file has invalid syntax"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "expecting" in parse_error.lower() or "eof" in parse_error.lower():
            user_msg = "Configuration file has a syntax error"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if "generator" in field.lower():
            recovery += "\nRun 'kiianigen list' to see valid generator names"
        elif "activeanimations" in field.lower().replace("_", ""):
            recovery += "\nEvery active animation needs an entry under 'animations'"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
