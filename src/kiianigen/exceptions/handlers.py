"""
Centralized error handling utilities.

1. **Custom Exceptions** - Typed, user-friendly error classes (see base, config, generator)
2. **Error Context** - Preserve technical details for logging, show friendly messages to users
3. **Error Isolation** - One failing animation in a batch shouldn't stop the others

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Generator name not registered | `UnknownGeneratorError` |
| Generator rejects its parameters | `GeneratorParameterError` |
| Input file missing | `ConfigFileNotFoundError` |
| Pydantic rejects a file | `raise wrap_pydantic_error(e, str(path)) from e` |
| Batch of animations from a conf file | `collector = collect_errors("generate animations")` |
| Critical section with auto-logging | `with ErrorContext("write output"): ...` |
"""

import logging
from typing import Optional

from .base import KiianigenError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("write output file") as ctx:
            path.write_text(content)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, KiianigenError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> KiianigenError:
    """
    Convert Pydantic validation errors to kiianigen exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON syntax: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ())) or "document"
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ())) or "document"
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, KiianigenError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("generate animations")

        for name, spec in conf.active_specs():
            with collector.try_operation(f"generate {name}"):
                animations[name] = registry.generate(spec.generator, geometry, spec.params)

        if collector.has_errors:
            logger.warning(collector.get_summary())
        ```

    Args:
        operation: Description of the overall operation

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        """
        Initialize error collector.

        Args:
            operation: Description of the overall operation
        """
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Only KiianigenError is collected; anything else is a bug and propagates.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """
        Get a summary of collected errors.

        Returns:
            Multi-line summary string
        """
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = (
            f"Failed {self.error_count} of {self.error_count + self.success_count} "
            f"operations while trying to {self.operation}:\n"
        )
        for sub_op, error in self.errors:
            if isinstance(error, KiianigenError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, KiianigenError):
                return False

            self.collector.errors.append((self.sub_operation, exc_val))
            logger.debug(f"Collected error for {self.sub_operation}: {exc_val.technical_message}")
            return True
