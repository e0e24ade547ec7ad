from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    StdinReadError = "stdin_read_error"
    EmptyInput = "empty_input"
    InvalidPrefix = "invalid_prefix"
    InvalidEncoding = "invalid_encoding"
    UnrecognizedFormat = "unrecognized_format"
    EncodingFailed = "encoding_failed"


class Result:
    """Outcome of an operation: either data on success or an error message and its kind."""

    def __init__(self, success: bool, data: Any = None, error: Optional[str] = None,
                 kind: Optional[ErrorKind] = None):
        self.success = success
        self.data = data
        self.error = error
        self.kind = kind

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        if self.success:
            return f"Result(True, {self.data!r})"
        return f"Result(False, error={self.error!r}, kind={self.kind})"
