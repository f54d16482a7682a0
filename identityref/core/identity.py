"""
Identity - short, URL-safe, case-insensitive unique identifier.

80 bits: 3 bytes coarse timestamp + 7 bytes random = 16 char base32 string.
More than 7.2e16 values per timestamp partition, about 1.2e24 in total.
Valid characters are [0123456789abcdefghjkmnprstuvwxyz], case-insensitive.
"""

from pydantic_core import core_schema

from identityref.core.errors import (
    InvalidFormatError,
    InvalidLengthError,
    NullInputError,
    NullOrEmptyInputError,
)
from identityref.internal.logging import LogLevel, get_logger
from identityref.utils import codec
from identityref.utils.generator import generate_bytes

_EMPTY_BYTES = bytes(codec.BYTE_LENGTH)
_BYTES_LIKE = (bytes, bytearray, memoryview)
_INT_SEQUENCES = (list, tuple)


def _reject(error):
    log = get_logger()
    if log.is_enabled(LogLevel.DEBUG):
        log.debug("Rejected identity input", error_id=error.error_id, reason=type(error).__name__, **error.context)
    return error


def _validate_string(text):
    """Return the lowercased text or raise the matching parse error."""
    if text is None or (isinstance(text, str) and (not text or text.isspace())):
        raise _reject(NullOrEmptyInputError())
    if not isinstance(text, str):
        raise TypeError(f"Identity string must be str, not {type(text).__name__}")

    text = text.lower()
    if len(text) != codec.TEXT_LENGTH:
        raise _reject(InvalidLengthError(expected=codec.TEXT_LENGTH, actual=len(text)))

    invalid = codec.invalid_chars(text)
    if invalid:
        raise _reject(InvalidFormatError(invalid="".join(invalid)))
    return text


def _validate_bytes(data):
    """Return an owned copy of the 10 bytes or raise the matching parse error."""
    if data is None:
        raise _reject(NullInputError())

    if isinstance(data, _BYTES_LIKE):
        raw = bytes(data)
    elif isinstance(data, _INT_SEQUENCES):
        try:
            raw = bytes(data)
        except (TypeError, ValueError) as exc:
            raise _reject(InvalidFormatError("Byte values must be integers in range(0, 256)", cause=exc)) from exc
    else:
        raise TypeError(f"Identity bytes must be bytes-like, not {type(data).__name__}")

    if len(raw) != codec.BYTE_LENGTH:
        raise _reject(InvalidLengthError(expected=codec.BYTE_LENGTH, actual=len(raw)))
    return raw


def _coerce_bytes(data):
    """Non-raising variant of _validate_bytes(); returns None on failure."""
    try:
        if isinstance(data, _BYTES_LIKE) or isinstance(data, _INT_SEQUENCES):
            raw = bytes(data)
        else:
            return None
    except (TypeError, ValueError):
        return None
    return raw if len(raw) == codec.BYTE_LENGTH else None


class Identity:
    """
    Immutable 10-byte identifier.

    Identity() with no argument is uninitialized and equals Identity.Empty.
    Identity(value) parses a string or a byte sequence strictly.
    """

    __slots__ = ("_id",)

    Empty = None

    def __init__(self, value=None):
        if value is None:
            raw = None
        elif isinstance(value, Identity):
            raw = value._id
        elif isinstance(value, str):
            raw = codec.decode(_validate_string(value))
        else:
            raw = _validate_bytes(value)
        object.__setattr__(self, "_id", raw)

    @classmethod
    def _from_raw(cls, raw):
        ident = object.__new__(cls)
        object.__setattr__(ident, "_id", raw)
        return ident

    def __setattr__(self, name, value):
        raise AttributeError("Identity is immutable")

    def __delattr__(self, name):
        raise AttributeError("Identity is immutable")

    # Construction

    @classmethod
    def new(cls):
        """Generate a fresh identity (timestamp partition + random suffix)."""
        return cls._from_raw(generate_bytes())

    @classmethod
    def from_string(cls, text):
        """
        Strictly parse a 16-character identity string.

        Raises NullOrEmptyInputError, InvalidLengthError or InvalidFormatError.
        """
        return cls._from_raw(codec.decode(_validate_string(text)))

    @classmethod
    def from_bytes(cls, data):
        """
        Strictly parse a 10-byte sequence. The bytes are copied.

        Raises NullInputError or InvalidLengthError.
        """
        return cls._from_raw(_validate_bytes(data))

    @classmethod
    def parse(cls, value):
        if isinstance(value, str):
            return cls.from_string(value)
        if value is None:
            raise _reject(NullOrEmptyInputError())
        return cls.from_bytes(value)

    @classmethod
    def try_parse_string(cls, text):
        """Return (True, identity) or (False, Empty). Never raises."""
        if not codec.is_valid(text):
            return False, EMPTY
        return True, cls._from_raw(codec.decode(text.lower()))

    @classmethod
    def try_parse_bytes(cls, data):
        """Return (True, identity) or (False, Empty). Never raises."""
        raw = _coerce_bytes(data)
        if raw is None:
            return False, EMPTY
        return True, cls._from_raw(raw)

    @classmethod
    def try_parse(cls, value):
        if isinstance(value, str):
            return cls.try_parse_string(value)
        return cls.try_parse_bytes(value)

    # Conversion

    def to_bytes(self):
        return _EMPTY_BYTES if self._id is None else self._id

    def to_string(self):
        return codec.encode(self.to_bytes())

    def __bytes__(self):
        return self.to_bytes()

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Identity('{self.to_string()}')"

    def __reduce__(self):
        return (self.__class__.from_bytes, (self.to_bytes(),))

    # Comparison

    def __eq__(self, other):
        """
        Compare with an Identity, a string (case-insensitive) or a byte sequence.

        Only Identity-to-Identity equality is hash-consistent: an identity can
        equal "anananananananan" or bytes([85] * 10) while hashing differently
        from them, so mixed-type keys in one dict or set will not find each other.
        """
        if isinstance(other, Identity):
            return self.to_bytes() == other.to_bytes()
        if isinstance(other, str):
            return other.lower() == self.to_string()
        if isinstance(other, _BYTES_LIKE) or isinstance(other, _INT_SEQUENCES):
            raw = _coerce_bytes(other)
            return raw is not None and raw == self.to_bytes()
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # 32-bit wrapping sum; shift counts wrap at 32 as well.
        result = 0
        for index, value in enumerate(self.to_bytes()):
            result = (result + (value << ((index * 3 + value) & 31))) & 0xFFFFFFFF
        return result - 0x100000000 if result & 0x80000000 else result

    def __lt__(self, other):
        if not isinstance(other, Identity):
            return NotImplemented
        return self.to_bytes() < other.to_bytes()

    def __le__(self, other):
        if not isinstance(other, Identity):
            return NotImplemented
        return self.to_bytes() <= other.to_bytes()

    def __gt__(self, other):
        if not isinstance(other, Identity):
            return NotImplemented
        return self.to_bytes() > other.to_bytes()

    def __ge__(self, other):
        if not isinstance(other, Identity):
            return NotImplemented
        return self.to_bytes() >= other.to_bytes()

    # pydantic / FastAPI

    @classmethod
    def _validate(cls, value):
        if isinstance(value, Identity):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, _BYTES_LIKE):
            return cls.from_bytes(value)
        raise ValueError(f"Cannot build Identity from {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_string,
                info_arg=False,
                return_schema=core_schema.str_schema(),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {
            "type": "string",
            "minLength": codec.TEXT_LENGTH,
            "maxLength": codec.TEXT_LENGTH,
            "pattern": codec.PATTERN,
        }


EMPTY = Identity._from_raw(_EMPTY_BYTES)
Identity.Empty = EMPTY


def new_identity():
    return Identity.new()


def identity_from_string(text):
    return Identity.from_string(text)


def identity_from_bytes(data):
    return Identity.from_bytes(data)


def try_parse(value):
    """(success, identity) for a string or byte sequence; never raises."""
    return Identity.try_parse(value)


def to_string(identity):
    return identity.to_string()


def to_bytes(identity):
    return identity.to_bytes()
