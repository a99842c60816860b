"""
Query families over a built GeoIndex.
"""

from .states import StateQueries
from .lgas import LGAQueries
from .regions import RegionQueries

__all__ = [
    'StateQueries',
    'LGAQueries',
    'RegionQueries'
]
