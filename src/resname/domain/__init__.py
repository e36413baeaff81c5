"""Domain layer — resource name rules and their errors.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""

from resname.domain.names import (
    MAX_NAME_LENGTH,
    LengthExceededError,
    NameValidationError,
    NonASCIIError,
    check_length,
    check_non_ascii,
    display_name,
    is_valid_resource_name,
    validate_resource_names,
)

__all__ = [
    "MAX_NAME_LENGTH",
    "LengthExceededError",
    "NameValidationError",
    "NonASCIIError",
    "check_length",
    "check_non_ascii",
    "display_name",
    "is_valid_resource_name",
    "validate_resource_names",
]
