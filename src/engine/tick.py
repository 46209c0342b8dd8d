"""
Tick Engine — advances the four automation flows by one time quantum

Order within a tick is fixed: bean buying -> roasting -> brewing -> selling.
Each stage sees the ledger left by the previous stage (no snapshot isolation).

Every flow is expressed through a driving quantity q = rate × Δt (the number
of beans bought, roasted beans produced, cups brewed, or cups sold) and two
fixed per-q coefficients:
    input consumed  = q × input_per_q
    output produced = q × output_per_q

Per-flow algorithm:
1. q <= 0                              -> IDLE, nothing happens
2. input < q × input_per_q             -> SKIPPED_INPUT (all-or-nothing)
3. output + q × output_per_q > capacity:
   - no headroom left                  -> SKIPPED_CAPACITY
   - otherwise produce exactly the headroom and consume the proportional
     input (ratio input/output preserved)  -> THROTTLED
4. otherwise apply the full pair       -> FULL

Shortage of input stops a flow outright while lack of space only throttles
it. The asymmetry is intended and covered by tests.
"""

from dataclasses import dataclass
from enum import Enum

from src.core.domain.game_state import GameState
from src.core.domain.resources import Resource, UnitKind
from src.core.math.numerical_safeguards import safe_divide, validate_non_negative
from src.economy import catalog
from src.economy.constants import TICK_SECONDS
from src.economy.derived import (
    buy_fresh_beans_price,
    capacity,
    coffee_cups_per_brew,
    fresh_beans_for_roast,
    money_per_coffee_cup,
    roasted_beans_for_brew,
    roasted_beans_per_roast,
)
from src.economy.upgrade_state import get_upgrade_effect
from src.engine.units import production_rate


# =============================================================================
# RESULT TYPES
# =============================================================================


class Flow(str, Enum):
    """Automation flows in execution order."""

    BEAN_BUYING = "bean_buying"
    ROASTING = "roasting"
    BREWING = "brewing"
    SELLING = "selling"


class FlowOutcome(str, Enum):
    """Which branch of the flow algorithm ran."""

    IDLE = "IDLE"
    SKIPPED_INPUT = "SKIPPED_INPUT"
    SKIPPED_CAPACITY = "SKIPPED_CAPACITY"
    THROTTLED = "THROTTLED"
    FULL = "FULL"


@dataclass(frozen=True)
class FlowResult:
    """Outcome of one flow within one tick."""

    flow: Flow
    outcome: FlowOutcome
    input_resource: Resource
    output_resource: Resource
    input_consumed: float
    output_produced: float

    @property
    def applied(self) -> bool:
        return self.outcome in (FlowOutcome.FULL, FlowOutcome.THROTTLED)


@dataclass(frozen=True)
class TickReport:
    """Results of the four flows of one tick, in execution order."""

    bean_buying: FlowResult
    roasting: FlowResult
    brewing: FlowResult
    selling: FlowResult

    @property
    def results(self) -> tuple[FlowResult, ...]:
        return (self.bean_buying, self.roasting, self.brewing, self.selling)


# =============================================================================
# GENERIC CONVERSION
# =============================================================================


def _run_flow(
    state: GameState,
    flow: Flow,
    input_resource: Resource,
    output_resource: Resource,
    quantity: float,
    input_per_q: float,
    output_per_q: float,
) -> FlowResult:
    def result(outcome: FlowOutcome, consumed: float = 0.0, produced: float = 0.0) -> FlowResult:
        return FlowResult(
            flow=flow,
            outcome=outcome,
            input_resource=input_resource,
            output_resource=output_resource,
            input_consumed=consumed,
            output_produced=produced,
        )

    if quantity <= 0:
        return result(FlowOutcome.IDLE)

    available = state.amount(input_resource)
    desired_input = quantity * input_per_q
    if desired_input > available:
        return result(FlowOutcome.SKIPPED_INPUT)

    desired_output = quantity * output_per_q
    current_output = state.amount(output_resource)
    cap = capacity(state, output_resource)

    if cap is not None and current_output + desired_output > cap:
        room = cap - current_output
        if room <= 0:
            return result(FlowOutcome.SKIPPED_CAPACITY)

        # Same input/output ratio as the full pair
        input_used = min(room * safe_divide(input_per_q, output_per_q), available)
        state.set_amount(input_resource, max(0.0, available - input_used))
        state.set_amount(output_resource, cap)
        return result(FlowOutcome.THROTTLED, input_used, room)

    state.set_amount(input_resource, available - desired_input)
    state.set_amount(output_resource, current_output + desired_output)
    return result(FlowOutcome.FULL, desired_input, desired_output)


# =============================================================================
# FLOWS
# =============================================================================


def bean_buyer_tick(state: GameState, dt: float = TICK_SECONDS) -> FlowResult:
    """Bean buyers spend money on fresh beans at the current per-bean price."""
    beans = production_rate(state, UnitKind.BEAN_BUYER) * dt
    return _run_flow(
        state,
        Flow.BEAN_BUYING,
        Resource.MONEY,
        Resource.FRESH_BEANS,
        quantity=beans,
        input_per_q=buy_fresh_beans_price(state),
        output_per_q=1.0,
    )


def auto_roaster_tick(state: GameState, dt: float = TICK_SECONDS) -> FlowResult:
    """Auto-roasters turn fresh beans into roasted beans."""
    roasted = production_rate(state, UnitKind.AUTO_ROASTER) * dt
    return _run_flow(
        state,
        Flow.ROASTING,
        Resource.FRESH_BEANS,
        Resource.ROASTED_BEANS,
        quantity=roasted,
        input_per_q=fresh_beans_for_roast(state) / roasted_beans_per_roast(state),
        output_per_q=1.0,
    )


def auto_brewer_tick(state: GameState, dt: float = TICK_SECONDS) -> FlowResult:
    """
    Auto-brewers turn roasted beans into cups.

    The efficiency upgrade scales bean consumption only; the factor never
    drops below zero.
    """
    cups = production_rate(state, UnitKind.AUTO_BREWER) * dt
    efficiency = max(0.0, 1 - get_upgrade_effect(state, catalog.AUTO_BREWER_EFFICIENCY))
    beans_per_cup = roasted_beans_for_brew(state) / coffee_cups_per_brew(state)
    return _run_flow(
        state,
        Flow.BREWING,
        Resource.ROASTED_BEANS,
        Resource.COFFEE_CUPS,
        quantity=cups,
        input_per_q=beans_per_cup * efficiency,
        output_per_q=1.0,
    )


def barista_tick(state: GameState, dt: float = TICK_SECONDS) -> FlowResult:
    """Baristas sell cups; money has no capacity so only cup supply gates them."""
    cups = production_rate(state, UnitKind.BARISTA) * dt
    boost = 1 + get_upgrade_effect(state, catalog.BARISTA_TRAINING)
    return _run_flow(
        state,
        Flow.SELLING,
        Resource.COFFEE_CUPS,
        Resource.MONEY,
        quantity=cups,
        input_per_q=1.0,
        output_per_q=money_per_coffee_cup(state) * boost,
    )


def tick(state: GameState, dt: float = TICK_SECONDS) -> TickReport:
    """
    Advance every automation flow by one time quantum.

    Args:
        state: Game state to mutate
        dt: Simulated seconds per tick (default 0.016)

    Returns:
        TickReport with one FlowResult per flow

    Raises:
        ValueError: If dt is negative or not finite
    """
    validate_non_negative(dt, "dt")

    return TickReport(
        bean_buying=bean_buyer_tick(state, dt),
        roasting=auto_roaster_tick(state, dt),
        brewing=auto_brewer_tick(state, dt),
        selling=barista_tick(state, dt),
    )
