"""
Catalog and schedule engines.

This package contains the collections that perform the core business
logic of the scheduling system.
"""

from .catalog import Catalog
from .schedule import Schedule

__all__ = [
    "Catalog",
    "Schedule",
]
