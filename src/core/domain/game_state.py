"""
GameState — the single mutable aggregate of a game session

Holds the four resource quantities, the owned automation unit counts and the
purchased upgrade levels. Capacities, rates and costs are never stored here;
they are derived on demand in src.economy.derived and src.engine.units.

GameState is mutable: the engine functions mutate it in place and are
responsible for keeping every resource within [0, capacity]. Field constraints
are validated on construction and on load (model_validate), not on every
assignment.

Snapshot keys are camelCase (freshBeans, upgradeLevels, ...); Python code uses
the snake_case field names.
"""

from typing import Annotated, Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .resources import Resource, UnitKind


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_MONEY: float = 15.0
DEFAULT_FRESH_BEANS: float = 10.0


# =============================================================================
# GAME STATE MODEL
# =============================================================================


class GameState(BaseModel):
    """
    Resource ledger, automation unit counts and upgrade levels.

    Default values describe a brand new game.
    """

    # Resource ledger
    money: float = Field(default=DEFAULT_MONEY, ge=0, description="Cash on hand")
    fresh_beans: float = Field(
        default=DEFAULT_FRESH_BEANS, ge=0, description="Unroasted beans in storage"
    )
    roasted_beans: float = Field(default=0.0, ge=0, description="Roasted beans in hoppers")
    coffee_cups: float = Field(default=0.0, ge=0, description="Brewed cups ready to sell")

    # Automation units (counts only ever increase)
    bean_buyers: int = Field(default=0, ge=0, description="Owned bean buyers")
    auto_roasters: int = Field(default=0, ge=0, description="Owned auto-roasters")
    auto_brewers: int = Field(default=0, ge=0, description="Owned auto-brewers")
    baristas: int = Field(default=0, ge=0, description="Owned baristas")

    # Upgrade id -> purchased level
    upgrade_levels: dict[str, Annotated[int, Field(ge=0)]] = Field(
        default_factory=dict, description="Purchased upgrade levels by upgrade id"
    )

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def amount(self, resource: Resource) -> float:
        """Current quantity of a resource pool."""
        return getattr(self, resource.value)

    def set_amount(self, resource: Resource, value: float) -> None:
        """Overwrite a resource pool. Callers keep the value within bounds."""
        setattr(self, resource.value, value)

    def unit_count(self, kind: UnitKind) -> int:
        """Owned count of an automation unit."""
        return getattr(self, kind.value)

    def snapshot(self) -> dict[str, Any]:
        """
        Plain-dict snapshot with camelCase keys.

        The returned dict shares nothing with the live state.
        """
        return self.model_dump(by_alias=True)


def default_game_state() -> GameState:
    """
    Baseline state of a new game.

    Kept next to the model so tests, the loader and the session share it.
    """
    return GameState()
