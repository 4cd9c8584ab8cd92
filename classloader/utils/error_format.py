"""Safe error message formatting utilities.

Ensures exceptions always have useful display messages, even when their
str() representation is empty, and that dynamic text (paths, identifiers,
exception messages) can be interpolated into Rich markup safely.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

# Friendly messages for exception types commonly raised while loading a
# source file whose str() can be empty
FRIENDLY_MESSAGES: dict[type, str] = {
    PermissionError: "Permission denied while reading the source file.",
    IsADirectoryError: "The resolved path is a directory, not a source file.",
    FileNotFoundError: "The source file disappeared before it could be loaded.",
    ImportError: "The source file could not be imported.",
    KeyboardInterrupt: "Operation interrupted by user.",
}


def format_error_message(e: BaseException, *, include_type: bool = True) -> str:
    """Format an exception into a useful display message.

    Args:
        e: The exception to format
        include_type: Whether to include the exception type name

    Returns:
        A non-empty, user-friendly error message

    Examples:
        >>> format_error_message(PermissionError())
        'PermissionError: Permission denied while reading the source file.'

        >>> format_error_message(ValueError("invalid input"))
        'ValueError: invalid input'

        >>> format_error_message(ValueError("invalid input"), include_type=False)
        'invalid input'
    """
    error_str = str(e)
    error_type = type(e).__name__

    if error_str:
        if include_type and error_type not in error_str:
            return f"{error_type}: {error_str}"
        return error_str

    for exc_type, friendly_msg in FRIENDLY_MESSAGES.items():
        if isinstance(e, exc_type):
            return f"{error_type}: {friendly_msg}"

    return f"{error_type}: (no additional details)"


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings.

    Args:
        value: Any value to escape (will be converted to str)

    Returns:
        String safe for interpolation into Rich markup f-strings
    """
    return _escape_markup(str(value))
