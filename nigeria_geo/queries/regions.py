"""
Region queries and per-region aggregates.
"""

import logging
from typing import Any, List, Optional

from ..index import GeoIndex
from ..models import Region, RegionStats, State, REGIONS
from .states import StateQueries
from .lgas import LGAQueries


class RegionQueries:
    """Answers region-level questions against one GeoIndex."""

    def __init__(self, index: GeoIndex, state_queries: Optional[StateQueries] = None,
                 lga_queries: Optional[LGAQueries] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the region queries.

        Args:
            index: Built index to query
            state_queries: Optional state queries over the same index
            lga_queries: Optional LGA queries over the same index
            logger: Optional logger instance for logging operations
        """
        self.index = index
        self.logger = logger or logging.getLogger(__name__)
        self.state_queries = state_queries or StateQueries(index, logger=self.logger)
        self.lga_queries = lga_queries or LGAQueries(
            index, state_queries=self.state_queries, logger=self.logger
        )

    def get_all_regions(self) -> List[Region]:
        """The six regions in canonical geographic order."""
        return list(REGIONS)

    def get_region_states(self, region: Any) -> List[State]:
        """States of a region; same result as ``StateQueries.get_states_by_region``."""
        return self.state_queries.get_states_by_region(region)

    def get_region_by_state(self, code: Any) -> Optional[Region]:
        """Region of the state with this code, or None."""
        return self.state_queries.get_state_region(code)

    def get_region_stats(self, region: Any) -> Optional[RegionStats]:
        """
        Aggregate statistics for a region.

        The LGA count is the sum of each member state's LGA count.

        Args:
            region: Region member or its string value

        Returns:
            RegionStats, or None for values outside the enumeration
        """
        resolved = Region.parse(region)
        if resolved is None:
            return None

        states = self.get_region_states(resolved)
        lga_count = sum(self.lga_queries.lga_count_for_state(state.code) for state in states)
        return RegionStats(
            region=resolved,
            state_count=len(states),
            lga_count=lga_count,
            states=states
        )

    def get_all_region_stats(self) -> List[RegionStats]:
        """Statistics for every region in canonical order."""
        return [self.get_region_stats(region) for region in REGIONS]

    def is_valid_region(self, value: Any) -> bool:
        """True if the value is a region member or the exact name of one."""
        return Region.parse(value) is not None

    def get_region_state_count(self, region: Any) -> int:
        """Number of states in a region; 0 for unrecognized input."""
        stats = self.get_region_stats(region)
        return stats.state_count if stats else 0

    def get_region_lga_count(self, region: Any) -> int:
        """Number of LGAs in a region; 0 for unrecognized input."""
        stats = self.get_region_stats(region)
        return stats.lga_count if stats else 0

    def get_region_description(self, region: Any) -> Optional[str]:
        """Human-readable description of a region, or None for unrecognized input."""
        resolved = Region.parse(region)
        if resolved is None:
            return None
        return self.index.region_description(resolved)
