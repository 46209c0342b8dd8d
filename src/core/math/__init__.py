"""
Core math modules for the coffee production engine.

Numerical primitives with stability guarantees.
"""

from src.core.math.numerical_safeguards import (
    # Safe division
    safe_divide,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Utilities
    clamp,
    geometric_cost,
    # Validation
    validate_non_negative,
    validate_positive,
)

__all__ = [
    "safe_divide",
    "is_valid_float",
    "sanitize_float",
    "clamp",
    "geometric_cost",
    "validate_non_negative",
    "validate_positive",
]
