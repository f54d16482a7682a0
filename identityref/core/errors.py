"""Parse errors with tracking IDs."""

import os

from identityref.utils.codec import encode
from identityref.utils.timestamp import format_timestamp, timestamp_prefix


def _tracking_id():
    """Identifier-shaped id drawn from os.urandom, independent of the shared random source."""
    return encode(timestamp_prefix() + os.urandom(7))


class IdentityError(ValueError):
    """Base error with unique ID and timestamp for tracking."""
    
    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = _tracking_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause
    
    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class NullOrEmptyInputError(IdentityError):
    """String argument is None, empty or whitespace only."""
    
    def __init__(self, message=None, argument="id", **kwargs):
        context = kwargs.pop("context", {})
        context["argument"] = argument
        super().__init__(message or f"Argument '{argument}' is null, empty or whitespace", context=context, **kwargs)


class NullInputError(IdentityError):
    """Byte argument is None."""
    
    def __init__(self, message=None, argument="id", **kwargs):
        context = kwargs.pop("context", {})
        context["argument"] = argument
        super().__init__(message or f"Argument '{argument}' is null", context=context, **kwargs)


class InvalidLengthError(IdentityError):
    """String is not 16 characters, or byte sequence is not 10 bytes."""
    
    def __init__(self, message=None, expected=None, actual=None, **kwargs):
        context = kwargs.pop("context", {})
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message or f"Length is expected to be {expected}, got {actual}", context=context, **kwargs)


class InvalidFormatError(IdentityError):
    """String holds characters outside the alphabet."""
    
    def __init__(self, message=None, invalid=None, **kwargs):
        context = kwargs.pop("context", {})
        if invalid:
            context["invalid"] = invalid
        super().__init__(message or f"Argument contains invalid characters: {invalid!r}", context=context, **kwargs)
