"""
LGA queries.

LGA names are not unique across the country. ``get_lga_by_name`` resolves
such names to the first LGA in canonical order; ``get_all_lgas_by_name``
returns every one of them.
"""

import logging
from typing import Any, List, Optional

from ..index import GeoIndex
from ..models import LGA
from ..utils.data_utils import normalize_code, normalize_name, is_null_or_empty
from .states import StateQueries


class LGAQueries:
    """Answers LGA-level questions against one GeoIndex."""

    def __init__(self, index: GeoIndex, state_queries: Optional[StateQueries] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the LGA queries.

        Args:
            index: Built index to query
            state_queries: State queries used to resolve state names; one is
                created over the same index if omitted
            logger: Optional logger instance for logging operations
        """
        self.index = index
        self.logger = logger or logging.getLogger(__name__)
        self.state_queries = state_queries or StateQueries(index, logger=self.logger)

    def get_all_lgas(self) -> List[LGA]:
        """Return every LGA in canonical order as a new list."""
        return list(self.index.lgas)

    def get_lgas_by_state(self, code: Any) -> List[LGA]:
        """
        Return the LGAs of a state in canonical order.

        Args:
            code: State code, any case

        Returns:
            List of LGAs; empty for empty or unknown codes
        """
        key = normalize_code(code)
        if not key:
            return []
        return list(self.index.lgas_by_state_code.get(key, ()))

    def get_lgas_by_state_name(self, name: Any) -> List[LGA]:
        """
        Return the LGAs of the state with this full name.

        Args:
            name: State name, exact match ignoring case

        Returns:
            List of LGAs; empty when the name does not resolve
        """
        state = self.state_queries.get_state_by_name(name)
        if state is None:
            return []
        return self.get_lgas_by_state(state.code)

    def search_lgas(self, query: Any) -> List[LGA]:
        """
        Find LGAs anywhere in the country whose name contains the query.

        Args:
            query: Text to look for, case ignored; empty matches nothing

        Returns:
            Matching LGAs in canonical order
        """
        needle = normalize_name(query)
        if not needle:
            return []

        matches = [lga for lga in self.index.lgas if needle in normalize_name(lga.name)]
        self.logger.debug(f"search_lgas({query!r}) matched {len(matches)} LGAs")
        return matches

    def total_lga_count(self) -> int:
        """Number of LGAs in the whole dataset."""
        return self.index.total_lgas

    def lga_count_for_state(self, code: Any) -> int:
        """Number of LGAs in one state; 0 for unknown codes."""
        return len(self.index.lgas_by_state_code.get(normalize_code(code), ()))

    def get_lga_count(self, code: Any = None) -> int:
        """
        Count LGAs nationally or in one state.

        Args:
            code: Optional state code. When omitted the national total is
                returned; when given (even as an empty string) the count for
                that state is returned.

        Returns:
            LGA count
        """
        if code is None:
            return self.total_lga_count()
        return self.lga_count_for_state(code)

    def lga_exists(self, lga_name: Any, code: Any) -> bool:
        """
        Check whether a state has an LGA with exactly this name.

        Args:
            lga_name: LGA name, case ignored
            code: State code, case ignored

        Returns:
            True if found; False if missing or either argument is empty
        """
        if is_null_or_empty(lga_name) or is_null_or_empty(code):
            return False

        needle = normalize_name(lga_name)
        return any(
            normalize_name(lga.name) == needle
            for lga in self.index.lgas_by_state_code.get(normalize_code(code), ())
        )

    def get_lga_by_name(self, name: Any) -> Optional[LGA]:
        """
        Look up an LGA by exact name, case ignored.

        When several states have an LGA of this name the one appearing first
        in canonical order is returned. Use ``get_all_lgas_by_name`` to see
        every match.

        Args:
            name: LGA name

        Returns:
            The first matching LGA, or None
        """
        matches = self.index.lgas_by_name.get(normalize_name(name), ())
        return matches[0] if matches else None

    def get_all_lgas_by_name(self, name: Any) -> List[LGA]:
        """Every LGA with exactly this name (case ignored), canonical order."""
        key = normalize_name(name)
        if not key:
            return []
        return list(self.index.lgas_by_name.get(key, ()))
