"""
Production Units — automation unit costs, purchases and production rates

Four unit kinds, each owned independently:
    next_cost(kind) = ceil(base_cost(kind) × 1.1^count(kind))
    rate(kind)      = base_rate(kind) × count(kind) × (1 + rate upgrade effect)

Counts only grow; there is no sell-back and no upper bound. Once the cost curve
leaves the float range next_cost is math.inf and the unit cannot be bought.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.game_state import GameState
from src.core.domain.resources import UnitKind
from src.core.math.numerical_safeguards import geometric_cost
from src.economy import catalog
from src.economy.constants import (
    BASE_AUTO_BREWER_COST,
    BASE_AUTO_BREWER_RATE,
    BASE_AUTO_ROASTER_COST,
    BASE_AUTO_ROASTER_RATE,
    BASE_BARISTA_COST,
    BASE_BARISTA_RATE,
    BASE_BEAN_BUYER_COST,
    BASE_BEAN_BUYER_RATE,
    UNIT_COST_MULTIPLIER,
)
from src.economy.upgrade_state import get_upgrade_effect

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitSpec:
    """Static parameters of one automation unit kind."""

    kind: UnitKind
    base_cost: float
    base_rate: float  # output units per second per owned unit
    rate_upgrade_id: str


UNIT_SPECS: Final[Mapping[UnitKind, UnitSpec]] = MappingProxyType(
    {
        UnitKind.BEAN_BUYER: UnitSpec(
            kind=UnitKind.BEAN_BUYER,
            base_cost=BASE_BEAN_BUYER_COST,
            base_rate=BASE_BEAN_BUYER_RATE,
            rate_upgrade_id=catalog.BEAN_BUYER_LOGISTICS,
        ),
        UnitKind.AUTO_ROASTER: UnitSpec(
            kind=UnitKind.AUTO_ROASTER,
            base_cost=BASE_AUTO_ROASTER_COST,
            base_rate=BASE_AUTO_ROASTER_RATE,
            rate_upgrade_id=catalog.AUTO_ROASTER_CALIBRATION,
        ),
        UnitKind.AUTO_BREWER: UnitSpec(
            kind=UnitKind.AUTO_BREWER,
            base_cost=BASE_AUTO_BREWER_COST,
            base_rate=BASE_AUTO_BREWER_RATE,
            rate_upgrade_id=catalog.HIGH_CAPACITY_BREWERS,
        ),
        UnitKind.BARISTA: UnitSpec(
            kind=UnitKind.BARISTA,
            base_cost=BASE_BARISTA_COST,
            base_rate=BASE_BARISTA_RATE,
            rate_upgrade_id=catalog.FASTER_ROBOT_ARMS,
        ),
    }
)


def next_unit_cost(state: GameState, kind: UnitKind) -> float:
    """Cost of the next unit of a kind, scaled by how many are owned."""
    spec = UNIT_SPECS[kind]
    return geometric_cost(spec.base_cost, UNIT_COST_MULTIPLIER, state.unit_count(kind))


def can_buy_unit(state: GameState, kind: UnitKind) -> bool:
    return state.money >= next_unit_cost(state, kind)


def buy_unit(state: GameState, kind: UnitKind) -> bool:
    """
    Buy one automation unit.

    Returns:
        True if bought; False (no state change) if unaffordable
    """
    cost = next_unit_cost(state, kind)
    if state.money < cost:
        return False

    state.money -= cost
    setattr(state, kind.value, state.unit_count(kind) + 1)

    log.debug("bought %s #%d for %d", kind.value, state.unit_count(kind), cost)
    return True


def production_rate(state: GameState, kind: UnitKind) -> float:
    """
    Output per second of all owned units of a kind.

    rate = base_rate × count × (1 + rate upgrade effect)
    """
    spec = UNIT_SPECS[kind]
    base = spec.base_rate * state.unit_count(kind)
    multiplier = 1 + get_upgrade_effect(state, spec.rate_upgrade_id)
    return base * multiplier
