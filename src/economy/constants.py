"""
Balance constants for the coffee production chain

All rates are per second of simulated time; the tick engine scales them by
the tick quantum. Capacities are base values before storage upgrades.
"""

from typing import Final

# =============================================================================
# COST CURVES
# =============================================================================

# Growth per automation unit owned
UNIT_COST_MULTIPLIER: Final[float] = 1.1

# Growth per upgrade level
UPGRADE_COST_MULTIPLIER: Final[float] = 1.35

# =============================================================================
# TIMING
# =============================================================================

TICK_INTERVAL_MS: Final[int] = 16
TICK_SECONDS: Final[float] = TICK_INTERVAL_MS / 1000

AUTOSAVE_INTERVAL_MS: Final[int] = 10_000

# =============================================================================
# AUTOMATION UNITS (cost, output per second per unit)
# =============================================================================

BASE_BEAN_BUYER_COST: Final[float] = 10
BASE_BEAN_BUYER_RATE: Final[float] = 0.75  # fresh beans

BASE_AUTO_ROASTER_COST: Final[float] = 25
BASE_AUTO_ROASTER_RATE: Final[float] = 0.7  # roasted beans

BASE_AUTO_BREWER_COST: Final[float] = 70
BASE_AUTO_BREWER_RATE: Final[float] = 0.3  # coffee cups

BASE_BARISTA_COST: Final[float] = 150
BASE_BARISTA_RATE: Final[float] = 0.3  # coffee cups sold

# =============================================================================
# MANUAL ACTIONS
# =============================================================================

BASE_FRESH_BEANS_PRICE: Final[float] = 0.08
BASE_FRESH_BEANS_AMOUNT: Final[float] = 2

# =============================================================================
# STORAGE
# =============================================================================

BASE_MAXIMUM_FRESH_BEANS: Final[float] = 150
BASE_MAXIMUM_ROASTED_BEANS: Final[float] = 75
BASE_MAXIMUM_COFFEE_CUPS: Final[float] = 20

# =============================================================================
# STOICHIOMETRY
# =============================================================================

BASE_FRESH_BEANS_FOR_ROAST: Final[float] = 1
BASE_ROASTED_BEANS_PER_ROAST: Final[float] = 2
BASE_ROASTED_BEANS_FOR_BREW: Final[float] = 8
MIN_ROASTED_BEANS_FOR_BREW: Final[float] = 1
BASE_COFFEE_CUPS_PER_BREW: Final[float] = 1
BASE_COFFEE_CUPS_FOR_POUR: Final[float] = 1
BASE_MONEY_PER_COFFEE_CUP: Final[float] = 3
