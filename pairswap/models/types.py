"""Shared type definitions for the value model and request payloads."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from pairswap.safe_int import UINT64_MAX


def validate_uint64(value: Any) -> int:
    """Validate that a value is a valid uint64 amount.

    Args:
        value: Value to validate (int or decimal string)

    Returns:
        The amount as an int

    Raises:
        ValueError: If value is not an int or decimal string (bool is rejected),
            is negative, or exceeds 2^64-1
    """
    if isinstance(value, bool):
        raise ValueError("Uint64 must be int or string, got bool")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint64 must be a decimal integer string: '{value}'") from err
    elif not isinstance(value, int):
        raise ValueError(f"Uint64 must be int or string, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint64 cannot be negative: {value}")
    if value > UINT64_MAX:
        raise ValueError(f"Uint64 overflow: {value} > 2^64-1")
    return value


# Opaque asset identifier, compared only by equality
AssetId = Annotated[str, Field(min_length=1)]

# 64-bit unsigned amount, accepted as int or decimal string
Uint64 = Annotated[
    int,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer amount"),
]
