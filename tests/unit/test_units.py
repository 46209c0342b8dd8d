"""
Tests for Production Units

Coverage:
- Base and scaled unit costs (ceiling of geometric curve)
- buy_unit guard and effect
- Production rates with count and rate upgrades
"""

import math

import pytest

from src.core.domain import GameState, UnitKind
from src.economy import catalog
from src.engine.units import (
    UNIT_SPECS,
    buy_unit,
    can_buy_unit,
    next_unit_cost,
    production_rate,
)


class TestUnitCosts:
    """next_unit_cost"""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (UnitKind.BEAN_BUYER, 10),
            (UnitKind.AUTO_ROASTER, 25),
            (UnitKind.AUTO_BREWER, 70),
            (UnitKind.BARISTA, 150),
        ],
    )
    def test_first_unit_costs_base(self, kind, expected):
        assert next_unit_cost(GameState(), kind) == expected

    def test_cost_scales_with_count(self):
        state = GameState(bean_buyers=3)
        assert next_unit_cost(state, UnitKind.BEAN_BUYER) == math.ceil(10 * 1.1**3)

    def test_cost_is_per_kind(self):
        state = GameState(bean_buyers=5)
        assert next_unit_cost(state, UnitKind.AUTO_ROASTER) == 25

    def test_cost_past_float_range_is_infinite(self):
        state = GameState(bean_buyers=8000)
        assert next_unit_cost(state, UnitKind.BEAN_BUYER) == math.inf

    @pytest.mark.parametrize("kind", list(UnitKind))
    def test_cost_strictly_increasing(self, kind):
        costs = [
            next_unit_cost(GameState(**{kind.value: count}), kind) for count in range(40)
        ]
        assert all(b > a for a, b in zip(costs, costs[1:]))


class TestBuyUnit:
    """buy_unit"""

    def test_unaffordable_is_noop(self):
        state = GameState(money=9.99)
        before = state.snapshot()

        assert not can_buy_unit(state, UnitKind.BEAN_BUYER)
        assert buy_unit(state, UnitKind.BEAN_BUYER) is False
        assert state.snapshot() == before

    def test_purchase(self):
        state = GameState(money=30.0)

        assert buy_unit(state, UnitKind.AUTO_ROASTER) is True
        assert state.auto_roasters == 1
        assert state.money == pytest.approx(5.0)

    def test_next_purchase_costs_more(self):
        state = GameState(money=1000.0)
        buy_unit(state, UnitKind.BARISTA)
        second = next_unit_cost(state, UnitKind.BARISTA)
        buy_unit(state, UnitKind.BARISTA)

        assert state.baristas == 2
        assert state.money == pytest.approx(1000.0 - 150 - second)

    def test_infinite_cost_is_unaffordable(self):
        state = GameState(money=1e300, baristas=10_000)
        before = state.snapshot()

        assert not can_buy_unit(state, UnitKind.BARISTA)
        assert buy_unit(state, UnitKind.BARISTA) is False
        assert state.snapshot() == before

    def test_exact_funds_suffice(self):
        state = GameState(money=70.0)
        assert buy_unit(state, UnitKind.AUTO_BREWER) is True
        assert state.money == 0.0


class TestProductionRate:
    """production_rate"""

    def test_no_units_no_rate(self):
        state = GameState()
        for kind in UnitKind:
            assert production_rate(state, kind) == 0

    def test_rate_scales_with_count(self):
        state = GameState(bean_buyers=4)
        assert production_rate(state, UnitKind.BEAN_BUYER) == pytest.approx(3.0)

    @pytest.mark.parametrize(
        "kind,upgrade_id,per_level",
        [
            (UnitKind.BEAN_BUYER, catalog.BEAN_BUYER_LOGISTICS, 0.15),
            (UnitKind.AUTO_ROASTER, catalog.AUTO_ROASTER_CALIBRATION, 0.1),
            (UnitKind.AUTO_BREWER, catalog.HIGH_CAPACITY_BREWERS, 0.1),
            (UnitKind.BARISTA, catalog.FASTER_ROBOT_ARMS, 0.1),
        ],
    )
    def test_rate_upgrades(self, kind, upgrade_id, per_level):
        state = GameState(**{kind.value: 2}, upgrade_levels={upgrade_id: 3})
        expected = UNIT_SPECS[kind].base_rate * 2 * (1 + 3 * per_level)

        assert production_rate(state, kind) == pytest.approx(expected)

    def test_unrelated_upgrade_has_no_effect(self):
        state = GameState(auto_roasters=1, upgrade_levels={catalog.FASTER_ROBOT_ARMS: 5})
        assert production_rate(state, UnitKind.AUTO_ROASTER) == pytest.approx(0.7)
