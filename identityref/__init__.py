"""
identityref - 16 character, URL-safe, case-insensitive unique identifiers.

    >>> from identityref import Identity
    >>> str(Identity.from_bytes(bytes([85] * 10)))
    'anananananananan'
"""

from identityref.config import Config, load_config
from identityref.core import (
    EMPTY,
    Identity,
    IdentityError,
    InvalidFormatError,
    InvalidLengthError,
    NullInputError,
    NullOrEmptyInputError,
    identity_from_bytes,
    identity_from_string,
    new_identity,
    to_bytes,
    to_string,
    try_parse,
)
from identityref.internal.logging import StructuredLogger, get_logger
from identityref.utils.codec import ALPHABET, is_valid
from identityref.utils.generator import RandomSource

__version__ = "1.0.0"


def configure(config=None):
    """Apply a Config (loaded from disk when omitted) to the logger and random source."""
    if config is None:
        config = load_config()
    StructuredLogger.configure(config.logging.level)
    RandomSource.configure(config.generator.seed)
    get_logger().debug("identityref configured", log_level=str(config.logging.level), seeded=config.generator.seed is not None)
    return config


__all__ = [
    "ALPHABET",
    "Config",
    "EMPTY",
    "Identity",
    "IdentityError",
    "InvalidFormatError",
    "InvalidLengthError",
    "NullInputError",
    "NullOrEmptyInputError",
    "configure",
    "identity_from_bytes",
    "identity_from_string",
    "is_valid",
    "load_config",
    "new_identity",
    "to_bytes",
    "to_string",
    "try_parse",
]
