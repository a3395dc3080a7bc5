"""Core layer: the error value type and the library's own exceptions. No I/O."""

from .models import ErrorKind, ErrorValue, Reason
from .errors import ErrorValueException, InvalidArgument

__all__ = [
    "ErrorKind",
    "ErrorValue",
    "Reason",
    "ErrorValueException",
    "InvalidArgument",
]
