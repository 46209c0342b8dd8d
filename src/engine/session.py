"""
CoffeeGame — one game session

Owns a single GameState (constructed explicitly, no process-wide singleton)
and exposes every player operation, the tick, persistence and display views
as methods. The module-level functions in actions, units, tick and
upgrade_state remain the primary API; the session only binds them to its
state and store.
"""

import logging
from typing import Optional

from src.core.domain.game_state import GameState, default_game_state
from src.core.domain.resources import Resource, UnitKind
from src.display.formatting import ResourceView, resource_views
from src.economy import upgrade_state
from src.economy.constants import TICK_SECONDS
from src.economy.upgrade_state import UpgradeView
from src.engine import actions, units
from src.engine.scheduler import SchedulerConfig, TickScheduler
from src.engine.tick import TickReport, tick
from src.persistence.snapshot import STORAGE_KEY, load_game, save_game
from src.persistence.store import InMemoryStore, KeyValueStore

log = logging.getLogger(__name__)


class CoffeeGame:
    """A coffee production game bound to one state and one store."""

    def __init__(
        self,
        state: Optional[GameState] = None,
        store: Optional[KeyValueStore] = None,
        config: Optional[SchedulerConfig] = None,
        storage_key: str = STORAGE_KEY,
    ):
        """
        Args:
            state: initial state (default: new game)
            store: snapshot store (default: in-memory)
            config: scheduler timing
            storage_key: key the snapshot is written under
        """
        self.state = state if state is not None else default_game_state()
        self.store = store if store is not None else InMemoryStore()
        self.storage_key = storage_key
        self.scheduler = TickScheduler(
            on_tick=self.tick, on_autosave=self.save, config=config
        )

    @classmethod
    def load(
        cls,
        store: KeyValueStore,
        config: Optional[SchedulerConfig] = None,
        storage_key: str = STORAGE_KEY,
    ) -> "CoffeeGame":
        """Session resumed from the store (defaults for anything missing)."""
        return cls(
            state=load_game(store, storage_key),
            store=store,
            config=config,
            storage_key=storage_key,
        )

    # -------------------------------------------------------------------------
    # Manual actions
    # -------------------------------------------------------------------------

    def buy_fresh_beans(self) -> bool:
        return actions.buy_fresh_beans(self.state)

    def roast_beans(self) -> bool:
        return actions.roast_beans(self.state)

    def brew_coffee(self) -> bool:
        return actions.brew_coffee(self.state)

    def pour_coffee(self) -> bool:
        return actions.pour_coffee(self.state)

    # -------------------------------------------------------------------------
    # Automation units
    # -------------------------------------------------------------------------

    def next_unit_cost(self, kind: UnitKind) -> float:
        return units.next_unit_cost(self.state, kind)

    def buy_unit(self, kind: UnitKind) -> bool:
        return units.buy_unit(self.state, kind)

    def production_rate(self, kind: UnitKind) -> float:
        return units.production_rate(self.state, kind)

    # -------------------------------------------------------------------------
    # Upgrades
    # -------------------------------------------------------------------------

    def buy_upgrade(self, upgrade_id: str) -> bool:
        return upgrade_state.buy_upgrade(self.state, upgrade_id)

    def upgrades(self) -> list[UpgradeView]:
        return upgrade_state.describe_upgrades(self.state)

    # -------------------------------------------------------------------------
    # Simulation, persistence, display
    # -------------------------------------------------------------------------

    def tick(self, dt: float = TICK_SECONDS) -> TickReport:
        return tick(self.state, dt)

    def save(self) -> None:
        save_game(self.store, self.state, self.storage_key)

    def views(self) -> dict[Resource, ResourceView]:
        return resource_views(self.state)

    def run(self, duration: Optional[float] = None) -> int:
        """
        Drive ticks and autosaves in the calling thread.

        Returns:
            Number of ticks run
        """
        return self.scheduler.run(duration)

    def stop(self) -> None:
        """Stop the loop and write a final snapshot."""
        self.scheduler.stop()
        self.save()
