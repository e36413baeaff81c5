"""resname — resource name validation."""

from resname.domain.names import (
    LengthExceededError,
    NameValidationError,
    NonASCIIError,
    check_length,
    check_non_ascii,
    validate_resource_names,
)

__version__ = "0.1.0"

__all__ = [
    "LengthExceededError",
    "NameValidationError",
    "NonASCIIError",
    "__version__",
    "check_length",
    "check_non_ascii",
    "validate_resource_names",
]
