"""
Tabular export of the hierarchy.
"""

from .frames import states_frame, lgas_frame, region_stats_frame

__all__ = [
    'states_frame',
    'lgas_frame',
    'region_stats_frame'
]
