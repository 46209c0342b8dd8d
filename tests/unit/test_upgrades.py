"""
Tests for the Upgrade Catalog and Upgrade State

Coverage:
- Catalog shape (ids unique, categories, shared multiplier)
- Effects monotonic, costs strictly increasing per level
- Level / effect / cost lookups, unknown ids
- buy_upgrade: insufficient funds no-op, exact ceiling deduction
- Detailed views and category grouping
- Effect formatting
"""

import math

import pytest

from src.core.domain import GameState, UpgradeCategory
from src.economy import catalog
from src.economy.catalog import UPGRADES, UPGRADES_BY_ID, get_upgrade
from src.economy.constants import UPGRADE_COST_MULTIPLIER
from src.economy.upgrade_state import (
    buy_upgrade,
    can_buy_upgrade,
    describe_upgrades,
    get_upgrade_cost,
    get_upgrade_effect,
    get_upgrade_level,
    upgrades_by_category,
)


# =============================================================================
# CATALOG
# =============================================================================


class TestCatalog:
    """Static catalog content."""

    def test_fourteen_unique_upgrades(self):
        assert len(UPGRADES) == 14
        assert len(UPGRADES_BY_ID) == 14

    def test_category_sizes(self):
        counts = {category: 0 for category in UpgradeCategory}
        for upgrade in UPGRADES:
            counts[upgrade.category] += 1

        assert counts[UpgradeCategory.MANUAL] == 5
        assert counts[UpgradeCategory.STORAGE] == 3
        assert counts[UpgradeCategory.AUTOMATION] == 6

    def test_shared_cost_multiplier(self):
        assert all(u.cost_multiplier == UPGRADE_COST_MULTIPLIER for u in UPGRADES)

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            UPGRADES_BY_ID["new"] = UPGRADES[0]  # type: ignore[index]

    def test_definitions_are_frozen(self):
        with pytest.raises(AttributeError):
            UPGRADES[0].base_cost = 1  # type: ignore[misc]

    def test_get_upgrade_unknown(self):
        assert get_upgrade("no_such_upgrade") is None
        assert get_upgrade(catalog.MORE_POTS).name == "Thermal Urns"

    @pytest.mark.parametrize("upgrade", UPGRADES, ids=lambda u: u.id)
    def test_effect_monotonic(self, upgrade):
        effects = [upgrade.get_effect(level) for level in range(30)]
        assert effects[0] == 0
        assert all(b >= a for a, b in zip(effects, effects[1:]))

    @pytest.mark.parametrize("upgrade", UPGRADES, ids=lambda u: u.id)
    def test_cost_strictly_increasing(self, upgrade):
        costs = [upgrade.cost_at(level) for level in range(40)]
        assert costs[0] == upgrade.base_cost
        assert all(b > a for a, b in zip(costs, costs[1:]))

    def test_cost_formula(self):
        sacks = get_upgrade(catalog.BIGGER_BEAN_SACKS)
        assert sacks.cost_at(3) == math.ceil(45 * 1.35**3)


# =============================================================================
# FORMATTING
# =============================================================================


class TestEffectFormatting:
    """Display strings of effect magnitudes."""

    def test_beans_per_click_plural(self):
        upgrade = get_upgrade(catalog.FASTER_CLICKING)
        assert upgrade.format_effect(upgrade.get_effect(0)) == "+0 Beans/Click"
        assert upgrade.format_effect(upgrade.get_effect(2)) == "+4 Beans/Click"

    def test_singular_when_one(self):
        upgrade = get_upgrade(catalog.MORE_POTS)
        assert upgrade.format_effect(1) == "+1 Cup Capacity"
        assert upgrade.format_effect(upgrade.get_effect(1)) == "+8 Cups Capacity"

    def test_fractional_magnitude(self):
        upgrade = get_upgrade(catalog.EFFICIENT_BREWING)
        assert upgrade.format_effect(upgrade.get_effect(1)) == "-1.5 Beans Required"
        assert upgrade.format_effect(upgrade.get_effect(2)) == "-3 Beans Required"

    def test_percentages(self):
        assert get_upgrade(catalog.BULK_CONTRACTS).format_effect(0.21) == "-21% Cost"
        assert get_upgrade(catalog.BEAN_BUYER_LOGISTICS).format_effect(0.15) == "+15% Rate"
        assert get_upgrade(catalog.AUTO_BREWER_EFFICIENCY).format_effect(0.05) == "-5% Bean Cost"
        assert get_upgrade(catalog.BARISTA_TRAINING).format_effect(0.1) == "+10% $/Cup"

    def test_money_per_cup(self):
        assert get_upgrade(catalog.PREMIUM_BLEND).format_effect(0.3) == "+$0.30/Cup"

    def test_capacity(self):
        upgrade = get_upgrade(catalog.AIRTIGHT_HOPPERS)
        assert upgrade.format_effect(upgrade.get_effect(2)) == "+80 Capacity"


# =============================================================================
# UPGRADE STATE
# =============================================================================


class TestUpgradeLookups:
    """Level, effect and cost for the current state."""

    def test_unseen_id_defaults_to_level_zero(self):
        state = GameState()
        assert get_upgrade_level(state, catalog.MORE_POTS) == 0
        assert get_upgrade_effect(state, catalog.MORE_POTS) == 0

    def test_effect_follows_level(self):
        state = GameState(upgrade_levels={catalog.BIGGER_BEAN_SACKS: 2})
        assert get_upgrade_effect(state, catalog.BIGGER_BEAN_SACKS) == 150

    def test_cost_follows_level(self):
        state = GameState(upgrade_levels={catalog.FASTER_CLICKING: 2})
        assert get_upgrade_cost(state, catalog.FASTER_CLICKING) == math.ceil(15 * 1.35**2)

    def test_unknown_id(self):
        state = GameState(money=1e9)
        assert get_upgrade_effect(state, "unknown") == 0
        assert get_upgrade_cost(state, "unknown") == math.inf
        assert not can_buy_upgrade(state, "unknown")


class TestBuyUpgrade:
    """buy_upgrade guard and effect."""

    def test_insufficient_funds_is_noop(self):
        state = GameState(money=14.0)
        before = state.snapshot()

        assert buy_upgrade(state, catalog.FASTER_CLICKING) is False
        assert state.snapshot() == before
        assert state.upgrade_levels == {}
        assert state.money == 14.0

    def test_purchase_increments_level_and_deducts_cost(self):
        state = GameState(money=100.0)

        assert buy_upgrade(state, catalog.FASTER_CLICKING) is True
        assert state.upgrade_levels[catalog.FASTER_CLICKING] == 1
        assert state.money == pytest.approx(85.0)

    def test_second_level_costs_ceiling(self):
        state = GameState(money=100.0, upgrade_levels={catalog.FASTER_CLICKING: 1})

        assert buy_upgrade(state, catalog.FASTER_CLICKING) is True
        assert state.upgrade_levels[catalog.FASTER_CLICKING] == 2
        assert state.money == pytest.approx(100.0 - 21)

    def test_exact_funds_suffice(self):
        state = GameState(money=30.0)
        assert buy_upgrade(state, catalog.BULK_CONTRACTS) is True
        assert state.money == 0.0

    def test_unknown_id_is_noop(self):
        state = GameState(money=1e9)
        assert buy_upgrade(state, "unknown") is False
        assert state.upgrade_levels == {}
        assert state.money == 1e9

    def test_levels_unbounded(self):
        state = GameState(money=1e12)
        for _ in range(50):
            assert buy_upgrade(state, catalog.MORE_POTS)
        assert state.upgrade_levels[catalog.MORE_POTS] == 50

    def test_cost_past_float_range_is_unaffordable(self):
        state = GameState(money=1e300, upgrade_levels={catalog.FASTER_CLICKING: 3000})
        before = state.snapshot()

        assert get_upgrade_cost(state, catalog.FASTER_CLICKING) == math.inf
        assert not can_buy_upgrade(state, catalog.FASTER_CLICKING)
        assert buy_upgrade(state, catalog.FASTER_CLICKING) is False
        assert state.snapshot() == before


class TestUpgradeViews:
    """describe_upgrades / upgrades_by_category."""

    def test_view_fields(self):
        state = GameState(upgrade_levels={catalog.MORE_POTS: 1})
        views = {view.id: view for view in describe_upgrades(state)}
        pots = views[catalog.MORE_POTS]

        assert pots.level == 1
        assert pots.effect == 8
        assert pots.formatted_effect == "+8 Cups Capacity"
        assert pots.next_level == 2
        assert pots.next_effect == 16
        assert pots.formatted_next_effect == "+16 Cups Capacity"
        assert pots.cost == math.ceil(75 * 1.35)

    def test_view_of_huge_level(self):
        state = GameState(upgrade_levels={catalog.MORE_POTS: 5000})
        views = {view.id: view for view in describe_upgrades(state)}

        assert views[catalog.MORE_POTS].cost == math.inf
        assert views[catalog.MORE_POTS].effect == 40000

    def test_views_in_catalog_order(self):
        ids = [view.id for view in describe_upgrades(GameState())]
        assert ids == [u.id for u in UPGRADES]

    def test_grouping(self):
        groups = upgrades_by_category(GameState())

        assert set(groups) == set(UpgradeCategory)
        assert [v.id for v in groups[UpgradeCategory.STORAGE]] == [
            catalog.BIGGER_BEAN_SACKS,
            catalog.AIRTIGHT_HOPPERS,
            catalog.MORE_POTS,
        ]
        assert all(v.category == UpgradeCategory.MANUAL for v in groups[UpgradeCategory.MANUAL])
