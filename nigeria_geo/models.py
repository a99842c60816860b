"""
Data models for the Nigeria geo data library.

This module defines the record types of the three-level hierarchy
(Region -> State -> LGA) and the aggregates returned by queries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Tuple, Dict, Any


class Region(str, Enum):
    """
    Nigerian geopolitical zones.

    Members are declared in canonical geographic order; iterating the enum
    yields that order. Being ``str``-valued, a member compares equal to its
    name, so ``Region.SOUTH_WEST == 'South-West'``.
    """

    NORTH_CENTRAL = 'North-Central'
    NORTH_EAST = 'North-East'
    NORTH_WEST = 'North-West'
    SOUTH_EAST = 'South-East'
    SOUTH_SOUTH = 'South-South'
    SOUTH_WEST = 'South-West'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> Optional['Region']:
        """
        Resolve a region from a member or its exact string value.

        Args:
            value: Region member or region name such as 'South-West'

        Returns:
            Matching Region, or None for anything outside the enumeration
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


REGIONS: Tuple[Region, ...] = tuple(Region)


@dataclass(frozen=True)
class State:
    """A Nigerian state (or the FCT)."""

    name: str
    capital: str
    code: str  # two-letter code, e.g. 'LA'
    region: Region

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'capital': self.capital,
            'code': self.code,
            'region': self.region.value,
        }


@dataclass(frozen=True)
class LGA:
    """A Local Government Area, owned by the state whose code is ``state``."""

    name: str
    state: str

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'state': self.state}


@dataclass
class StateWithLGAs:
    """A state together with its LGAs in canonical order."""

    name: str
    capital: str
    code: str
    region: Region
    lgas: List[LGA] = field(default_factory=list)
    lga_count: int = 0

    @classmethod
    def from_state(cls, state: State, lgas: List[LGA]) -> 'StateWithLGAs':
        """Combine a state record with its LGA list."""
        return cls(
            name=state.name,
            capital=state.capital,
            code=state.code,
            region=state.region,
            lgas=list(lgas),
            lga_count=len(lgas),
        )

    @property
    def state(self) -> State:
        """The plain state record without the LGA list."""
        return State(name=self.name, capital=self.capital, code=self.code, region=self.region)

    def to_dict(self) -> Dict[str, Any]:
        result = self.state.to_dict()
        result['lgas'] = [lga.to_dict() for lga in self.lgas]
        result['lga_count'] = self.lga_count
        return result


@dataclass
class RegionStats:
    """Aggregate statistics for one geopolitical zone."""

    region: Region
    state_count: int
    lga_count: int
    states: List[State] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'region': self.region.value,
            'state_count': self.state_count,
            'lga_count': self.lga_count,
            'states': [state.to_dict() for state in self.states],
        }


@dataclass(frozen=True)
class DatasetMetadata:
    """
    Read-only snapshot describing a loaded dataset.

    Attributes:
        total_states: Number of states (including the FCT)
        total_lgas: Number of LGAs across all states
        regions: The region enumeration in canonical order
    """
    total_states: int
    total_lgas: int
    regions: Tuple[Region, ...] = REGIONS

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_states': self.total_states,
            'total_lgas': self.total_lgas,
            'regions': [region.value for region in self.regions],
        }
