"""Log Ingest - Exceptions"""

from typing import Optional


class FormatError(ValueError):
    """A field could not be converted to its target type"""

    def __init__(self, field: str, value: str, line_number: Optional[int] = None, reason: str = ''):
        self.field = field
        self.value = value
        self.line_number = line_number
        message = f"Invalid {field} value {value!r}"
        if reason:
            message += f" ({reason})"
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
