"""
Resources — enums naming the pools, automation units and upgrade categories

String enums so values serialize directly into snapshots and log lines.
"""

from enum import Enum


class Resource(str, Enum):
    """The four resource pools of the production chain."""

    MONEY = "money"
    FRESH_BEANS = "fresh_beans"
    ROASTED_BEANS = "roasted_beans"
    COFFEE_CUPS = "coffee_cups"


class UnitKind(str, Enum):
    """
    Automation units.

    Value is the GameState field holding the owned count.
    """

    BEAN_BUYER = "bean_buyers"
    AUTO_ROASTER = "auto_roasters"
    AUTO_BREWER = "auto_brewers"
    BARISTA = "baristas"


class UpgradeCategory(str, Enum):
    """Upgrade groups as shown in the shop."""

    MANUAL = "manual"
    STORAGE = "storage"
    AUTOMATION = "automation"
