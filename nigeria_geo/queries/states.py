"""
State queries.

Lookups by code and name go through the index maps; only ``search_states``
scans the state sequence.
"""

import logging
from typing import Any, List, Optional

from ..index import GeoIndex
from ..models import Region, State, StateWithLGAs
from ..utils.data_utils import normalize_code, normalize_name


class StateQueries:
    """Answers state-level questions against one GeoIndex."""

    def __init__(self, index: GeoIndex, logger: Optional[logging.Logger] = None):
        """
        Initialize the state queries.

        Args:
            index: Built index to query
            logger: Optional logger instance for logging operations
        """
        self.index = index
        self.logger = logger or logging.getLogger(__name__)

    def get_all_states(self) -> List[State]:
        """Return every state in canonical order as a new list."""
        return list(self.index.states)

    def get_state_by_code(self, code: Any) -> Optional[State]:
        """
        Look up a state by its two-letter code.

        Args:
            code: State code, any case, surrounding whitespace ignored

        Returns:
            The State, or None for empty or unknown codes
        """
        key = normalize_code(code)
        if not key:
            return None
        return self.index.state_by_code.get(key)

    def get_state_by_name(self, name: Any) -> Optional[State]:
        """
        Look up a state by its full name (exact, case-insensitive).

        Args:
            name: State name such as 'Lagos' or 'akwa ibom'

        Returns:
            The State, or None when no state has that name
        """
        key = normalize_name(name)
        if not key:
            return None
        return self.index.state_by_name.get(key)

    def get_states_by_region(self, region: Any) -> List[State]:
        """
        Return the states of a region in canonical order.

        Args:
            region: Region member or its string value

        Returns:
            List of states; empty for values outside the region enumeration
        """
        resolved = Region.parse(region)
        if resolved is None:
            return []
        return list(self.index.states_by_region.get(resolved, ()))

    def get_state_capital(self, code: Any) -> Optional[str]:
        """Capital of the state with this code, or None."""
        state = self.get_state_by_code(code)
        return state.capital if state else None

    def is_valid_state_code(self, code: Any) -> bool:
        """True if the code names a known state."""
        return self.get_state_by_code(code) is not None

    def get_state_with_lgas(self, code: Any) -> Optional[StateWithLGAs]:
        """
        Return a state together with its LGAs.

        Args:
            code: State code, any case

        Returns:
            StateWithLGAs, or None if the code does not resolve
        """
        state = self.get_state_by_code(code)
        if state is None:
            return None
        lgas = self.index.lgas_by_state_code.get(normalize_code(code), ())
        return StateWithLGAs.from_state(state, list(lgas))

    def search_states(self, query: Any) -> List[State]:
        """
        Find states whose name contains the query, ignoring case.

        An empty query matches nothing.

        Args:
            query: Text to look for

        Returns:
            Matching states in canonical order
        """
        needle = normalize_name(query)
        if not needle:
            return []

        matches = [state for state in self.index.states if needle in normalize_name(state.name)]
        self.logger.debug(f"search_states({query!r}) matched {len(matches)} states")
        return matches

    def get_state_region(self, code: Any) -> Optional[Region]:
        """Region of the state with this code, or None."""
        state = self.get_state_by_code(code)
        return state.region if state else None
