"""
Numerical Safeguards — safe math primitives for the production chain

Every conversion in the game divides by a stoichiometric ratio or multiplies
a rate by a time quantum. This module keeps those operations finite and
bounded:
- Safe division with a zero-denominator fallback
- NaN/Inf sanitization so bad values never reach the ledger
- Clamping into a closed range
- Geometric cost curves (ceil(base × multiplier^n))

INVARIANTS:
1. Division by zero never happens (fallback is returned)
2. NaN/Inf never propagate (replaced by fallback)
3. All operations are deterministic
"""

import math

# =============================================================================
# SAFE DIVISION
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Division that never raises and never returns NaN/Inf.

    Args:
        numerator: Dividend
        denominator: Divisor
        fallback: Value returned when the divisor is zero or the result
            is not finite (default: 0.0)

    Returns:
        numerator / denominator, or fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(1.0, 0.0, fallback=-1.0)
        -1.0
    """
    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if denom_clean == 0.0:
        return fallback

    return sanitize_float(num_clean / denom_clean, fallback=fallback)


# =============================================================================
# NaN/Inf SANITIZATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True if value is finite (not NaN, not Inf)."""
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Replace NaN/Inf with a fallback value.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# UTILITIES
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Restrict a value to [min_value, max_value].

    Either bound may be None (unbounded on that side).

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
        >>> clamp(15.0, 0.0)
        15.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def geometric_cost(base_cost: float, multiplier: float, exponent: int) -> float:
    """
    Purchase cost on a geometric curve, rounded up to a whole amount.

    cost = ceil(base_cost × multiplier^exponent)

    Used both for automation units (exponent = units owned) and for
    upgrades (exponent = current level).

    Args:
        base_cost: Cost of the first purchase
        multiplier: Growth factor per purchase (> 1)
        exponent: Number of purchases already made (>= 0)

    Returns:
        Cost of the next purchase (an int), or math.inf once the curve
        exceeds the float range

    Raises:
        ValueError: If exponent is negative

    Examples:
        >>> geometric_cost(10, 1.1, 0)
        10
        >>> geometric_cost(25, 1.1, 2)
        31
        >>> geometric_cost(15, 1.35, 1)
        21
        >>> geometric_cost(10, 1.1, 10_000)
        inf
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    try:
        cost = base_cost * multiplier**exponent
    except OverflowError:
        return math.inf
    if not is_valid_float(cost):
        return math.inf
    return math.ceil(cost)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Check that a value is a finite number > 0.

    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Check that a value is a finite number >= 0.

    Raises:
        ValueError: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
