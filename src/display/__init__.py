"""
Display — formatted string views of the resource ledger.
"""

from src.display.formatting import (
    ResourceView,
    format_beans,
    format_cups,
    format_currency,
    format_resource,
    resource_views,
)

__all__ = [
    "ResourceView",
    "format_beans",
    "format_cups",
    "format_currency",
    "format_resource",
    "resource_views",
]
