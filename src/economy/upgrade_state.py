"""
Upgrade State — purchased levels, current effects and next-level costs

Reads and advances GameState.upgrade_levels against the immutable catalog.

For upgrade u at level L:
    effect(u) = u.effect(L)
    cost(u)   = ceil(u.base_cost × u.cost_multiplier^L)

Unknown ids have level 0, effect 0 and infinite cost, so they can never be
bought. A cost past the float range is also math.inf: the next level is simply
unaffordable.
"""

import logging
import math
from dataclasses import dataclass

from src.core.domain.game_state import GameState
from src.core.domain.resources import UpgradeCategory
from src.economy.catalog import UPGRADES, UpgradeDefinition, get_upgrade

log = logging.getLogger(__name__)


# =============================================================================
# QUERIES
# =============================================================================


def get_upgrade_level(state: GameState, upgrade_id: str) -> int:
    """Purchased level, 0 for ids never bought."""
    return state.upgrade_levels.get(upgrade_id, 0)


def get_upgrade_effect(state: GameState, upgrade_id: str) -> float:
    """Current effect magnitude of an upgrade (0 for unknown ids)."""
    upgrade = get_upgrade(upgrade_id)
    if upgrade is None:
        return 0.0
    return upgrade.get_effect(get_upgrade_level(state, upgrade_id))


def get_upgrade_cost(state: GameState, upgrade_id: str) -> float:
    """Cost of the next level (math.inf for unknown ids)."""
    upgrade = get_upgrade(upgrade_id)
    if upgrade is None:
        return math.inf
    return upgrade.cost_at(get_upgrade_level(state, upgrade_id))


def can_buy_upgrade(state: GameState, upgrade_id: str) -> bool:
    """True if the player can afford the next level."""
    return state.money >= get_upgrade_cost(state, upgrade_id)


# =============================================================================
# PURCHASE
# =============================================================================


def buy_upgrade(state: GameState, upgrade_id: str) -> bool:
    """
    Buy one level of an upgrade.

    Insufficient funds (or an unknown id) is a normal outcome: nothing
    changes and False is returned.

    Args:
        state: Game state to mutate
        upgrade_id: Catalog id

    Returns:
        True if the level was bought
    """
    cost = get_upgrade_cost(state, upgrade_id)
    if state.money < cost:
        return False

    state.money -= cost
    new_level = get_upgrade_level(state, upgrade_id) + 1
    state.upgrade_levels[upgrade_id] = new_level

    log.debug("bought upgrade %s level %d for %s", upgrade_id, new_level, cost)
    return True


# =============================================================================
# DETAILED VIEWS
# =============================================================================


@dataclass(frozen=True)
class UpgradeView:
    """Catalog entry combined with the player's progress on it."""

    definition: UpgradeDefinition
    level: int
    effect: float
    formatted_effect: str
    next_level: int
    next_effect: float
    formatted_next_effect: str
    cost: float

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def category(self) -> UpgradeCategory:
        return self.definition.category


def describe_upgrade(state: GameState, upgrade: UpgradeDefinition) -> UpgradeView:
    """Build the detailed view of one upgrade for the current state."""
    level = get_upgrade_level(state, upgrade.id)
    effect = upgrade.get_effect(level)
    next_effect = upgrade.get_effect(level + 1)
    return UpgradeView(
        definition=upgrade,
        level=level,
        effect=effect,
        formatted_effect=upgrade.format_effect(effect),
        next_level=level + 1,
        next_effect=next_effect,
        formatted_next_effect=upgrade.format_effect(next_effect),
        cost=upgrade.cost_at(level),
    )


def describe_upgrades(state: GameState) -> list[UpgradeView]:
    """Detailed views for the whole catalog, in catalog order."""
    return [describe_upgrade(state, upgrade) for upgrade in UPGRADES]


def upgrades_by_category(state: GameState) -> dict[UpgradeCategory, list[UpgradeView]]:
    """
    Detailed views grouped by category.

    Every category is present (possibly empty); catalog order is kept
    within each group.
    """
    result: dict[UpgradeCategory, list[UpgradeView]] = {
        category: [] for category in UpgradeCategory
    }
    for view in describe_upgrades(state):
        result[view.category].append(view)
    return result
