"""
Display formatting — string views of resource values

Raw values keep full float precision; these helpers only shape what a
front-end shows:
- money: en-US dollar string with thousands separators, 2 decimals
- beans: floored to a whole bean
- cups:  floored to one decimal place
"""

import math
from dataclasses import dataclass

from src.core.domain.game_state import GameState
from src.core.domain.resources import Resource
from src.economy.derived import capacity


def format_currency(amount: float) -> str:
    """
    Format money as US dollars.

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-1.5)
        '-$1.50'
    """
    sign = "-" if amount < 0 and round(abs(amount), 2) != 0 else ""
    return "{}${:,.2f}".format(sign, abs(amount))


def format_beans(amount: float) -> str:
    """Whole beans, floored ('12' for 12.9)."""
    return str(math.floor(amount))


def format_cups(amount: float) -> str:
    """Cups floored to one decimal; integral values drop the '.0'."""
    tenths = math.floor(amount * 10)
    if tenths % 10 == 0:
        return str(tenths // 10)
    return f"{tenths / 10:.1f}"


_FORMATTERS = {
    Resource.MONEY: format_currency,
    Resource.FRESH_BEANS: format_beans,
    Resource.ROASTED_BEANS: format_beans,
    Resource.COFFEE_CUPS: format_cups,
}


@dataclass(frozen=True)
class ResourceView:
    """Raw value, display string and capacity of one resource."""

    resource: Resource
    raw: float
    formatted: str
    maximum: float | None


def format_resource(resource: Resource, amount: float) -> str:
    return _FORMATTERS[resource](amount)


def resource_views(state: GameState) -> dict[Resource, ResourceView]:
    """Views for all four resources, in ledger order."""
    return {
        resource: ResourceView(
            resource=resource,
            raw=state.amount(resource),
            formatted=format_resource(resource, state.amount(resource)),
            maximum=capacity(state, resource),
        )
        for resource in Resource
    }
