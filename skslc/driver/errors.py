"""
skslc Driver Errors

Result codes and the exceptions that carry them out of a failing job.
"""

from enum import IntEnum
from typing import Optional


class ResultCode(IntEnum):
    """Outcome of a job, ordered from least to most severe."""

    SUCCESS = 0
    COMPILE_ERROR = 1
    INPUT_ERROR = 2
    OUTPUT_ERROR = 3


class DriverError(Exception):
    """Base exception for all driver errors."""

    result_code = ResultCode.INPUT_ERROR

    def __init__(self, message: str, filename: Optional[str] = None):
        self.message = message
        self.filename = filename
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with the offending file, if any."""
        if self.filename:
            return f"{self.filename}: {self.message}"
        return self.message


class InputError(DriverError):
    """Raised for bad arguments, unreadable input or unknown extensions."""
    result_code = ResultCode.INPUT_ERROR


class PragmaError(InputError):
    """Raised when a `#pragma settings` comment holds an unknown token."""
    pass


class CompileError(DriverError):
    """Raised when the compiler rejects a program or an emitter fails."""
    result_code = ResultCode.COMPILE_ERROR


class OutputError(DriverError):
    """Raised when the output file cannot be opened or closed."""
    result_code = ResultCode.OUTPUT_ERROR
