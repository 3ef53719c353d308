"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Stop scanning at the upper bound of the sequence",
        )

    @staticmethod
    def unpositioned_cursor(operation: str) -> Diagnostic:
        """Default-constructed LinePosCursor was dereferenced or advanced.

        Args:
            operation: The attempted operation ("current", "advance", ...)

        Returns:
            Diagnostic for UNPOSITIONED_CURSOR
        """
        msg = f"Cannot {operation} an unpositioned LinePosCursor"
        return Diagnostic(
            code=DiagnosticCode.UNPOSITIONED_CURSOR,
            message=msg,
            hint="Construct the cursor from an underlying cursor: LinePosCursor(base)",
        )

    @staticmethod
    def invalid_tab_width(tab_width: int) -> Diagnostic:
        """Tab width below one.

        Args:
            tab_width: The rejected tab width

        Returns:
            Diagnostic for INVALID_TAB_WIDTH
        """
        msg = f"Tab width must be >= 1, got {tab_width}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TAB_WIDTH,
            message=msg,
            hint="Use tab_width=1 to count a tab as a single column",
        )
