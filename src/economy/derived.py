"""
Derived quantities — capacities and manual-action rates

Pure functions of GameState.upgrade_levels and the base constants. Nothing
here is cached: callers ask again whenever they need the current value, so a
freshly bought upgrade is visible immediately.
"""

from src.core.domain.game_state import GameState
from src.core.domain.resources import Resource
from src.core.math.numerical_safeguards import clamp
from src.economy import catalog
from src.economy.constants import (
    BASE_COFFEE_CUPS_FOR_POUR,
    BASE_COFFEE_CUPS_PER_BREW,
    BASE_FRESH_BEANS_AMOUNT,
    BASE_FRESH_BEANS_FOR_ROAST,
    BASE_FRESH_BEANS_PRICE,
    BASE_MAXIMUM_COFFEE_CUPS,
    BASE_MAXIMUM_FRESH_BEANS,
    BASE_MAXIMUM_ROASTED_BEANS,
    BASE_MONEY_PER_COFFEE_CUP,
    BASE_ROASTED_BEANS_FOR_BREW,
    BASE_ROASTED_BEANS_PER_ROAST,
    MIN_ROASTED_BEANS_FOR_BREW,
)
from src.economy.upgrade_state import get_upgrade_effect


# =============================================================================
# CAPACITIES
# =============================================================================


def max_fresh_beans(state: GameState) -> float:
    return BASE_MAXIMUM_FRESH_BEANS + get_upgrade_effect(state, catalog.BIGGER_BEAN_SACKS)


def max_roasted_beans(state: GameState) -> float:
    return BASE_MAXIMUM_ROASTED_BEANS + get_upgrade_effect(state, catalog.AIRTIGHT_HOPPERS)


def max_coffee_cups(state: GameState) -> float:
    return BASE_MAXIMUM_COFFEE_CUPS + get_upgrade_effect(state, catalog.MORE_POTS)


def capacity(state: GameState, resource: Resource) -> float | None:
    """
    Capacity of a resource pool.

    Returns:
        Upper bound, or None for money (unbounded)
    """
    if resource == Resource.FRESH_BEANS:
        return max_fresh_beans(state)
    if resource == Resource.ROASTED_BEANS:
        return max_roasted_beans(state)
    if resource == Resource.COFFEE_CUPS:
        return max_coffee_cups(state)
    return None


def headroom(state: GameState, resource: Resource) -> float | None:
    """Free space left in a pool (None for money), never negative."""
    cap = capacity(state, resource)
    if cap is None:
        return None
    return max(0.0, cap - state.amount(resource))


def clamp_to_capacity(state: GameState) -> None:
    """
    Force every resource into [0, capacity].

    Used on load; the engine itself never needs it.
    """
    for resource in Resource:
        state.set_amount(
            resource, clamp(state.amount(resource), 0.0, capacity(state, resource))
        )


# =============================================================================
# MANUAL ACTION RATES
# =============================================================================


def buy_fresh_beans_price(state: GameState) -> float:
    """Price per fresh bean, floored at zero."""
    discount = get_upgrade_effect(state, catalog.BULK_CONTRACTS)
    return max(0.0, BASE_FRESH_BEANS_PRICE * (1 - discount))


def buy_fresh_beans_amount(state: GameState) -> float:
    """Fresh beans added per manual purchase."""
    return BASE_FRESH_BEANS_AMOUNT + get_upgrade_effect(state, catalog.FASTER_CLICKING)


def buy_fresh_beans_cost(state: GameState) -> float:
    """Money charged for one manual purchase (price × amount)."""
    return buy_fresh_beans_price(state) * buy_fresh_beans_amount(state)


def fresh_beans_for_roast(state: GameState) -> float:
    return BASE_FRESH_BEANS_FOR_ROAST


def roasted_beans_per_roast(state: GameState) -> float:
    return BASE_ROASTED_BEANS_PER_ROAST + get_upgrade_effect(
        state, catalog.ROASTING_TECHNIQUE
    )


def roasted_beans_for_brew(state: GameState) -> float:
    """Roasted beans per brew, never below one bean."""
    reduction = get_upgrade_effect(state, catalog.EFFICIENT_BREWING)
    return max(MIN_ROASTED_BEANS_FOR_BREW, BASE_ROASTED_BEANS_FOR_BREW - reduction)


def coffee_cups_per_brew(state: GameState) -> float:
    return BASE_COFFEE_CUPS_PER_BREW


def coffee_cups_for_pour(state: GameState) -> float:
    return BASE_COFFEE_CUPS_FOR_POUR


def money_per_coffee_cup(state: GameState) -> float:
    return BASE_MONEY_PER_COFFEE_CUP + get_upgrade_effect(state, catalog.PREMIUM_BLEND)
