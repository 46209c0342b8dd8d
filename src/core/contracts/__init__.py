"""
Contract Validation Module

JSON Schema contracts for persisted data.
"""

from .validators import (
    ContractValidator,
    GameStateValidator,
    SchemaLoader,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "GameStateValidator",
]
