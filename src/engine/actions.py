"""
Manual Actions — the four player-triggered conversions

Each action is a guarded transition:
1. evaluate the precondition from the ledger and current derived rates
2. precondition false -> no-op, return False (an expected outcome)
3. precondition true  -> debit the input, credit the output (clamped to capacity)

| Action          | Precondition                                  |
|-----------------|-----------------------------------------------|
| buy_fresh_beans | money ≥ cost AND fresh + amount ≤ max fresh   |
| roast_beans     | fresh ≥ required AND roasted + produced ≤ max |
| brew_coffee     | roasted ≥ required AND cups + produced ≤ max  |
| pour_coffee     | cups ≥ required                               |

Rates are recomputed on every call so upgrades apply immediately.
"""

import logging

from src.core.domain.game_state import GameState
from src.economy.derived import (
    buy_fresh_beans_amount,
    buy_fresh_beans_cost,
    coffee_cups_for_pour,
    coffee_cups_per_brew,
    fresh_beans_for_roast,
    max_coffee_cups,
    max_fresh_beans,
    max_roasted_beans,
    money_per_coffee_cup,
    roasted_beans_for_brew,
    roasted_beans_per_roast,
)

log = logging.getLogger(__name__)


# =============================================================================
# BUY FRESH BEANS (money -> fresh beans)
# =============================================================================


def can_buy_fresh_beans(state: GameState) -> bool:
    return (
        state.money >= buy_fresh_beans_cost(state)
        and state.fresh_beans + buy_fresh_beans_amount(state) <= max_fresh_beans(state)
    )


def buy_fresh_beans(state: GameState) -> bool:
    if not can_buy_fresh_beans(state):
        return False

    state.money -= buy_fresh_beans_cost(state)
    state.fresh_beans = min(
        state.fresh_beans + buy_fresh_beans_amount(state), max_fresh_beans(state)
    )
    log.debug("bought fresh beans, now %.2f", state.fresh_beans)
    return True


# =============================================================================
# ROAST (fresh beans -> roasted beans)
# =============================================================================


def can_roast_beans(state: GameState) -> bool:
    return (
        state.fresh_beans >= fresh_beans_for_roast(state)
        and state.roasted_beans + roasted_beans_per_roast(state) <= max_roasted_beans(state)
    )


def roast_beans(state: GameState) -> bool:
    if not can_roast_beans(state):
        return False

    state.fresh_beans -= fresh_beans_for_roast(state)
    state.roasted_beans = min(
        state.roasted_beans + roasted_beans_per_roast(state), max_roasted_beans(state)
    )
    log.debug("roasted beans, now %.2f", state.roasted_beans)
    return True


# =============================================================================
# BREW (roasted beans -> coffee cups)
# =============================================================================


def can_brew_coffee(state: GameState) -> bool:
    return (
        state.roasted_beans >= roasted_beans_for_brew(state)
        and state.coffee_cups + coffee_cups_per_brew(state) <= max_coffee_cups(state)
    )


def brew_coffee(state: GameState) -> bool:
    if not can_brew_coffee(state):
        return False

    state.roasted_beans -= roasted_beans_for_brew(state)
    state.coffee_cups = min(
        state.coffee_cups + coffee_cups_per_brew(state), max_coffee_cups(state)
    )
    log.debug("brewed coffee, now %.2f cups", state.coffee_cups)
    return True


# =============================================================================
# POUR (coffee cups -> money)
# =============================================================================


def can_pour_coffee(state: GameState) -> bool:
    return state.coffee_cups >= coffee_cups_for_pour(state)


def pour_coffee(state: GameState) -> bool:
    if not can_pour_coffee(state):
        return False

    state.coffee_cups -= coffee_cups_for_pour(state)
    state.money += money_per_coffee_cup(state)
    log.debug("poured coffee, money now %.2f", state.money)
    return True
