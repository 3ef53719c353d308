"""linepos exception hierarchy with structured diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LinePosError(Exception):
    """Base exception for all linepos errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LinePosError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnpositionedCursorError(LinePosError, ValueError):
    """A default-constructed LinePosCursor was dereferenced or advanced.

    The unpositioned cursor only serves as a placeholder value; it has no
    underlying cursor to read from.
    """
