"""Resource name rules — ASCII-only and a byte-length ceiling.

A resource name is valid when every character is 7-bit ASCII and its
encoded length does not exceed :data:`MAX_NAME_LENGTH` bytes.

INVARIANT: The ASCII check always runs before the length check, so the
limit is never observed on non-ASCII input.
"""

from __future__ import annotations

from typing import Any

MAX_NAME_LENGTH = 255

Name = str | bytes


class NameValidationError(ValueError):
    """Base class for rejected resource names."""

    code = "INVALID_NAME"

    def __init__(self, value: Name, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.message = message

    def to_detail(self) -> dict[str, Any]:
        return {"value": display_name(self.value)}


class NonASCIIError(NameValidationError):
    """Name contains a character outside code points 0-127."""

    code = "NON_ASCII"

    def __init__(self, value: Name) -> None:
        super().__init__(
            value,
            f"Invalid value: '{display_name(value)}' contains non-ASCII characters.",
        )


class LengthExceededError(NameValidationError):
    """Name is longer than the allowed number of bytes."""

    code = "LENGTH_EXCEEDED"

    def __init__(self, value: Name, limit: int) -> None:
        super().__init__(
            value,
            f"Invalid value: '{display_name(value)}' exceeds the allowed limit of {limit} characters.",
        )
        self.limit = limit

    def to_detail(self) -> dict[str, Any]:
        return {**super().to_detail(), "limit": self.limit}


def display_name(value: Name) -> str:
    """Render *value* as printable, encodable text.

    Undecodable bytes, and the surrogates that stand in for them in
    ``os.fsdecode``-style strings, become ``\\xNN`` escapes.
    """
    if isinstance(value, str):
        try:
            value = value.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError:
            return value.encode("utf-8", errors="backslashreplace").decode("utf-8")
    return value.decode("utf-8", errors="backslashreplace")


def byte_length(name: Name) -> int:
    """Return the number of bytes *name* occupies when UTF-8 encoded.

    Lone surrogates count as three bytes each, as in ``surrogatepass``.

    Examples:
        >>> byte_length("my-pod")
        6
        >>> byte_length("p\\u00f6d")
        4
    """
    if isinstance(name, bytes):
        return len(name)
    return len(name.encode("utf-8", errors="surrogatepass"))


def check_non_ascii(name: Name) -> None:
    """Raise :class:`NonASCIIError` unless *name* is pure ASCII.

    ``bytes`` input is rejected if any byte is >= 128, which also covers
    sequences that are not well-formed UTF-8.
    """
    if not name.isascii():
        raise NonASCIIError(name)


def check_length(name: Name, limit: int = MAX_NAME_LENGTH) -> None:
    """Raise :class:`LengthExceededError` if *name* is over *limit* bytes."""
    if byte_length(name) > limit:
        raise LengthExceededError(name, limit)


def validate_resource_names(*names: Name, limit: int = MAX_NAME_LENGTH) -> None:
    """Validate each name in order, raising the first failure.

    Names after the first invalid one are not inspected. No names at all
    is valid.
    """
    for name in names:
        check_non_ascii(name)
        check_length(name, limit)


def is_valid_resource_name(name: Name, limit: int = MAX_NAME_LENGTH) -> bool:
    """Return True if *name* passes both checks."""
    try:
        validate_resource_names(name, limit=limit)
    except NameValidationError:
        return False
    return True
