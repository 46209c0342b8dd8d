"""
Economy — balance constants, upgrade catalog, upgrade state and
derived quantities (capacities and manual-action rates).
"""

from src.economy.catalog import UPGRADES, UPGRADES_BY_ID, UpgradeDefinition, get_upgrade
from src.economy.derived import (
    buy_fresh_beans_amount,
    buy_fresh_beans_cost,
    buy_fresh_beans_price,
    capacity,
    coffee_cups_for_pour,
    coffee_cups_per_brew,
    fresh_beans_for_roast,
    headroom,
    max_coffee_cups,
    max_fresh_beans,
    max_roasted_beans,
    money_per_coffee_cup,
    roasted_beans_for_brew,
    roasted_beans_per_roast,
)
from src.economy.upgrade_state import (
    UpgradeView,
    buy_upgrade,
    can_buy_upgrade,
    describe_upgrades,
    get_upgrade_cost,
    get_upgrade_effect,
    get_upgrade_level,
    upgrades_by_category,
)

__all__ = [
    # Catalog
    "UPGRADES",
    "UPGRADES_BY_ID",
    "UpgradeDefinition",
    "get_upgrade",
    # Upgrade state
    "UpgradeView",
    "buy_upgrade",
    "can_buy_upgrade",
    "describe_upgrades",
    "get_upgrade_cost",
    "get_upgrade_effect",
    "get_upgrade_level",
    "upgrades_by_category",
    # Derived quantities
    "capacity",
    "headroom",
    "max_fresh_beans",
    "max_roasted_beans",
    "max_coffee_cups",
    "buy_fresh_beans_price",
    "buy_fresh_beans_amount",
    "buy_fresh_beans_cost",
    "fresh_beans_for_roast",
    "roasted_beans_per_roast",
    "roasted_beans_for_brew",
    "coffee_cups_per_brew",
    "coffee_cups_for_pour",
    "money_per_coffee_cup",
]
