"""Engine — manual actions, automation units, tick engine, scheduler and session.

Flow order within a tick: bean buying -> roasting -> brewing -> selling.
"""

from .actions import (
    brew_coffee,
    buy_fresh_beans,
    can_brew_coffee,
    can_buy_fresh_beans,
    can_pour_coffee,
    can_roast_beans,
    pour_coffee,
    roast_beans,
)
from .scheduler import SchedulerConfig, TickScheduler
from .session import CoffeeGame
from .tick import (
    Flow,
    FlowOutcome,
    FlowResult,
    TickReport,
    auto_brewer_tick,
    auto_roaster_tick,
    barista_tick,
    bean_buyer_tick,
    tick,
)
from .units import UNIT_SPECS, UnitSpec, buy_unit, can_buy_unit, next_unit_cost, production_rate

__all__ = [
    # Manual actions
    "buy_fresh_beans",
    "can_buy_fresh_beans",
    "roast_beans",
    "can_roast_beans",
    "brew_coffee",
    "can_brew_coffee",
    "pour_coffee",
    "can_pour_coffee",
    # Units
    "UNIT_SPECS",
    "UnitSpec",
    "buy_unit",
    "can_buy_unit",
    "next_unit_cost",
    "production_rate",
    # Tick engine
    "Flow",
    "FlowOutcome",
    "FlowResult",
    "TickReport",
    "bean_buyer_tick",
    "auto_roaster_tick",
    "auto_brewer_tick",
    "barista_tick",
    "tick",
    # Scheduling
    "SchedulerConfig",
    "TickScheduler",
    "CoffeeGame",
]
