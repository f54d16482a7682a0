from identityref.core.errors import (
    IdentityError,
    InvalidFormatError,
    InvalidLengthError,
    NullInputError,
    NullOrEmptyInputError,
)
from identityref.core.identity import (
    EMPTY,
    Identity,
    identity_from_bytes,
    identity_from_string,
    new_identity,
    to_bytes,
    to_string,
    try_parse,
)

__all__ = [
    "EMPTY",
    "Identity",
    "IdentityError",
    "InvalidFormatError",
    "InvalidLengthError",
    "NullInputError",
    "NullOrEmptyInputError",
    "identity_from_bytes",
    "identity_from_string",
    "new_identity",
    "to_bytes",
    "to_string",
    "try_parse",
]
