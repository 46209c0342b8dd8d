"""
Snapshot persistence — GameState <-> JSON text under a fixed store key

Loading is a structural merge over the new-game defaults:
- missing fields take their default
- unknown fields are ignored
- a field failing the game_state contract (wrong type, negative, NaN)
  takes its default; a bad upgrade entry is dropped on its own
- text that is not a JSON object yields the default state

Loading never raises for bad data. There is no version field; the merge is
the only compatibility mechanism.
"""

import json
import logging
from typing import Any, Dict, Final, Optional

from pydantic import ValidationError

from src.core.contracts.validators import GameStateValidator
from src.core.domain.game_state import GameState, default_game_state
from src.economy.derived import clamp_to_capacity
from src.persistence.store import KeyValueStore

log = logging.getLogger(__name__)

STORAGE_KEY: Final[str] = "coffeeGameState"

_UPGRADE_LEVELS_KEY: Final[str] = "upgradeLevels"

_validator: Optional[GameStateValidator] = None


def _get_validator() -> GameStateValidator:
    global _validator
    if _validator is None:
        _validator = GameStateValidator()
    return _validator


def _reject_constant(name: str) -> None:
    # NaN / Infinity / -Infinity become null and then fail the contract
    return None


# =============================================================================
# SERIALIZATION
# =============================================================================


def serialize_state(state: GameState) -> str:
    """JSON object text with camelCase snapshot keys."""
    return json.dumps(state.snapshot(), sort_keys=True)


def merge_snapshot(data: Dict[str, Any]) -> GameState:
    """
    Merge a decoded snapshot over the defaults.

    Args:
        data: Decoded JSON object (possibly partial or partly invalid)

    Returns:
        A valid GameState with resources clamped to capacity
    """
    validator = _get_validator()
    bad_fields: set[str] = set()
    bad_upgrades: set[str] = set()
    if not validator.is_valid(data):
        for error in validator.iter_errors(data):
            path = list(error.absolute_path)
            if not path:
                continue
            if path[0] == _UPGRADE_LEVELS_KEY and len(path) > 1:
                bad_upgrades.add(str(path[1]))
            else:
                bad_fields.add(str(path[0]))

    merged = default_game_state().snapshot()
    for key in merged:
        if key not in data or key in bad_fields:
            continue
        value = data[key]
        if key == _UPGRADE_LEVELS_KEY:
            value = {k: v for k, v in value.items() if k not in bad_upgrades}
        merged[key] = value

    if bad_fields:
        log.warning("snapshot fields reset to defaults: %s", sorted(bad_fields))
    if bad_upgrades:
        log.warning("snapshot upgrade entries dropped: %s", sorted(bad_upgrades))

    try:
        state = GameState.model_validate(merged)
    except ValidationError as e:
        log.warning("snapshot rejected after merge, using defaults: %s", e)
        return default_game_state()

    clamp_to_capacity(state)
    return state


def deserialize_state(text: Optional[str]) -> GameState:
    """
    Parse snapshot text into a GameState.

    None, unparseable JSON or a non-object payload give the default state.
    """
    if text is None:
        return default_game_state()

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (json.JSONDecodeError, TypeError) as e:
        log.warning("unreadable snapshot, using defaults: %s", e)
        return default_game_state()

    if not isinstance(data, dict):
        log.warning("snapshot is not an object (%s), using defaults", type(data).__name__)
        return default_game_state()

    return merge_snapshot(data)


# =============================================================================
# STORE I/O
# =============================================================================


def save_game(store: KeyValueStore, state: GameState, key: str = STORAGE_KEY) -> None:
    """Write the current snapshot to the store."""
    store.set(key, serialize_state(state))
    log.info("game saved (money=%.2f)", state.money)


def load_game(store: KeyValueStore, key: str = STORAGE_KEY) -> GameState:
    """Read the snapshot from the store, merged over defaults."""
    text = store.get(key)
    if text is None:
        log.info("no saved game under %r, starting fresh", key)
        return default_game_state()

    state = deserialize_state(text)
    log.info("game loaded (money=%.2f)", state.money)
    return state
