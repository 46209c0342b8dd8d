"""
Upgrade Catalog — immutable definitions of permanent bonuses

Each definition carries its cost curve (base cost, multiplier per level), an
effect function mapping level -> magnitude, and a formatter mapping
magnitude -> display string. The catalog is built once at import time and
never mutated; purchased levels live in GameState.upgrade_levels.

Effect functions are linear in level, hence monotonic non-decreasing. Levels
are unbounded: there is no max level on any upgrade.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Final, Mapping

from src.core.domain.resources import UpgradeCategory
from src.core.math.numerical_safeguards import geometric_cost
from src.economy.constants import UPGRADE_COST_MULTIPLIER


# =============================================================================
# UPGRADE IDS
# =============================================================================

FASTER_CLICKING: Final[str] = "faster_clicking"
BULK_CONTRACTS: Final[str] = "bulk_contracts"
ROASTING_TECHNIQUE: Final[str] = "roasting_technique"
EFFICIENT_BREWING: Final[str] = "efficient_brewing"
PREMIUM_BLEND: Final[str] = "premium_blend"

BIGGER_BEAN_SACKS: Final[str] = "bigger_bean_sacks"
AIRTIGHT_HOPPERS: Final[str] = "airtight_hoppers"
MORE_POTS: Final[str] = "more_pots"

BEAN_BUYER_LOGISTICS: Final[str] = "bean_buyer_logistics"
AUTO_ROASTER_CALIBRATION: Final[str] = "auto_roaster_calibration"
AUTO_BREWER_EFFICIENCY: Final[str] = "auto_brewer_efficiency"
HIGH_CAPACITY_BREWERS: Final[str] = "high_capacity_brewers"
BARISTA_TRAINING: Final[str] = "barista_training"
FASTER_ROBOT_ARMS: Final[str] = "faster_robot_arms"


# =============================================================================
# DEFINITION
# =============================================================================


@dataclass(frozen=True)
class UpgradeDefinition:
    """Static definition of one upgrade."""

    id: str
    name: str
    description: str
    category: UpgradeCategory
    base_cost: float
    cost_multiplier: float
    effect: Callable[[int], float]
    format_effect: Callable[[float], str]

    def get_effect(self, level: int) -> float:
        """Effect magnitude at a given level."""
        return self.effect(level)

    def cost_at(self, level: int) -> float:
        """Cost of the next level when currently at `level` (math.inf on overflow)."""
        return geometric_cost(self.base_cost, self.cost_multiplier, level)


# =============================================================================
# EFFECT AND FORMAT HELPERS
# =============================================================================


def linear_effect(per_level: float) -> Callable[[int], float]:
    """Effect function growing by `per_level` for every level bought."""

    def effect(level: int) -> float:
        return level * per_level

    return effect


def _number(value: float) -> str:
    # Integral magnitudes render without a trailing ".0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _percent(value: float) -> int:
    # Round half up, so 0.125 -> 13
    return math.floor(value * 100 + 0.5)


def _plural(value: float) -> str:
    return "" if value == 1 else "s"


def _fmt_beans_per_click(effect: float) -> str:
    return f"+{_number(effect)} Bean{_plural(effect)}/Click"


def _fmt_cost_discount(effect: float) -> str:
    return f"-{_percent(effect)}% Cost"


def _fmt_roasted_per_click(effect: float) -> str:
    return f"+{_number(effect)} Roasted Bean{_plural(effect)}/Click"


def _fmt_beans_required(effect: float) -> str:
    return f"-{_number(effect)} Bean{_plural(effect)} Required"


def _fmt_money_per_cup(effect: float) -> str:
    return f"+${effect:.2f}/Cup"


def _fmt_capacity(effect: float) -> str:
    return f"+{_number(effect)} Capacity"


def _fmt_cup_capacity(effect: float) -> str:
    return f"+{_number(effect)} Cup{_plural(effect)} Capacity"


def _fmt_rate(effect: float) -> str:
    return f"+{_percent(effect)}% Rate"


def _fmt_bean_cost(effect: float) -> str:
    return f"-{_percent(effect)}% Bean Cost"


def _fmt_money_boost(effect: float) -> str:
    return f"+{_percent(effect)}% $/Cup"


# =============================================================================
# CATALOG
# =============================================================================

UPGRADES: Final[tuple[UpgradeDefinition, ...]] = (
    # Manual
    UpgradeDefinition(
        id=FASTER_CLICKING,
        name="Ergonomic Mouse",
        description="Increases the amount of Fresh Beans added per click",
        category=UpgradeCategory.MANUAL,
        base_cost=15,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(2),
        format_effect=_fmt_beans_per_click,
    ),
    UpgradeDefinition(
        id=BULK_CONTRACTS,
        name="Bulk Bean Contracts",
        description="Decreases the cost of beans when buying manually",
        category=UpgradeCategory.MANUAL,
        base_cost=30,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.07),
        format_effect=_fmt_cost_discount,
    ),
    UpgradeDefinition(
        id=ROASTING_TECHNIQUE,
        name="Manual Roasting Technique",
        description="Increases the amount of Roasted Beans produced per click",
        category=UpgradeCategory.MANUAL,
        base_cost=60,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(2),
        format_effect=_fmt_roasted_per_click,
    ),
    UpgradeDefinition(
        id=EFFICIENT_BREWING,
        name="Efficient Manual Brewing",
        description="Decreases the amount of Roasted Beans required per cup",
        category=UpgradeCategory.MANUAL,
        base_cost=90,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(1.5),
        format_effect=_fmt_beans_required,
    ),
    UpgradeDefinition(
        id=PREMIUM_BLEND,
        name="Premium Blend",
        description="Increases the Money earned per cup when pouring coffee",
        category=UpgradeCategory.MANUAL,
        base_cost=120,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.3),
        format_effect=_fmt_money_per_cup,
    ),
    # Storage
    UpgradeDefinition(
        id=BIGGER_BEAN_SACKS,
        name="Bigger Bean Sacks",
        description="Increases the maximum storage capacity for Fresh Beans",
        category=UpgradeCategory.STORAGE,
        base_cost=45,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(75),
        format_effect=_fmt_capacity,
    ),
    UpgradeDefinition(
        id=AIRTIGHT_HOPPERS,
        name="Airtight Hoppers",
        description="Increases the maximum storage capacity for Roasted Beans",
        category=UpgradeCategory.STORAGE,
        base_cost=60,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(40),
        format_effect=_fmt_capacity,
    ),
    UpgradeDefinition(
        id=MORE_POTS,
        name="Thermal Urns",
        description="Increases the maximum storage capacity for Brewed Coffee",
        category=UpgradeCategory.STORAGE,
        base_cost=75,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(8),
        format_effect=_fmt_cup_capacity,
    ),
    # Automation
    UpgradeDefinition(
        id=BEAN_BUYER_LOGISTICS,
        name="Bean Buyer Logistics",
        description="Increases the rate at which Bean Buyers generate Fresh Beans",
        category=UpgradeCategory.AUTOMATION,
        base_cost=180,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.15),
        format_effect=_fmt_rate,
    ),
    UpgradeDefinition(
        id=AUTO_ROASTER_CALIBRATION,
        name="Auto-Roaster Calibration",
        description=(
            "Increases the rate at which Auto-Roasters convert Fresh Beans "
            "into Roasted Beans"
        ),
        category=UpgradeCategory.AUTOMATION,
        base_cost=400,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.1),
        format_effect=_fmt_rate,
    ),
    UpgradeDefinition(
        id=AUTO_BREWER_EFFICIENCY,
        name="Auto-Brewer Efficiency",
        description=(
            "Decreases the amount of Roasted Beans required per cup brewed "
            "by Auto-Brewers"
        ),
        category=UpgradeCategory.AUTOMATION,
        base_cost=500,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.05),
        format_effect=_fmt_bean_cost,
    ),
    UpgradeDefinition(
        id=HIGH_CAPACITY_BREWERS,
        name="High-Capacity Auto-Brewers",
        description="Increases the rate at which Auto-Brewers produce Coffee Cups",
        category=UpgradeCategory.AUTOMATION,
        base_cost=600,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.1),
        format_effect=_fmt_rate,
    ),
    UpgradeDefinition(
        id=BARISTA_TRAINING,
        name="Barista Training",
        description="Increases the Money earned per cup sold by Baristas",
        category=UpgradeCategory.AUTOMATION,
        base_cost=700,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.05),
        format_effect=_fmt_money_boost,
    ),
    UpgradeDefinition(
        id=FASTER_ROBOT_ARMS,
        name="Faster Robot Arms",
        description="Increases the rate at which Baristas sell Coffee Cups",
        category=UpgradeCategory.AUTOMATION,
        base_cost=800,
        cost_multiplier=UPGRADE_COST_MULTIPLIER,
        effect=linear_effect(0.1),
        format_effect=_fmt_rate,
    ),
)

UPGRADES_BY_ID: Final[Mapping[str, UpgradeDefinition]] = MappingProxyType(
    {upgrade.id: upgrade for upgrade in UPGRADES}
)


def get_upgrade(upgrade_id: str) -> UpgradeDefinition | None:
    """Catalog entry for an id, or None if the id is unknown."""
    return UPGRADES_BY_ID.get(upgrade_id)
