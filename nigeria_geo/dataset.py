"""
Immutable dataset container.

A Dataset is the unit handed to the index builder: the ordered state and LGA
sequences plus region descriptions. The bundled Nigerian data is one
instance; tests and callers can build their own from raw tuples or load one
from CSV through ``DatasetLoader``.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Sequence

from .models import Region, State, LGA
from .exceptions import create_integrity_error


@dataclass(frozen=True)
class Dataset:
    """
    Raw, ordered hierarchy records.

    Attributes:
        states: States in canonical order
        lgas: LGAs in canonical order, each tagged with its state code
        region_descriptions: Human-readable description per region
        source: Where the records came from, for logging
    """
    states: Tuple[State, ...]
    lgas: Tuple[LGA, ...]
    region_descriptions: Mapping[Region, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    source: str = "custom"

    def __post_init__(self):
        # Freeze whatever sequences the caller passed in
        object.__setattr__(self, 'states', tuple(self._coerce_region(s) for s in self.states))
        object.__setattr__(self, 'lgas', tuple(self.lgas))
        object.__setattr__(
            self, 'region_descriptions', MappingProxyType(dict(self.region_descriptions))
        )

    @staticmethod
    def _coerce_region(state: State) -> State:
        """Turn a region given as its string value into the Region member."""
        if isinstance(state.region, Region):
            return state
        region = Region.parse(state.region)
        # Unknown regions are left for the index builder to reject
        return replace(state, region=region) if region is not None else state

    @classmethod
    def from_raw(cls, states_data: Iterable[Sequence[str]],
                 lgas_data: Mapping[str, Iterable[str]],
                 region_descriptions: Optional[Mapping[str, str]] = None,
                 source: str = "custom") -> 'Dataset':
        """
        Build a dataset from plain tuples.

        Args:
            states_data: Iterable of (name, capital, code, region) tuples
            lgas_data: Mapping of state code to LGA names; iteration order of
                the mapping defines the canonical LGA order
            region_descriptions: Optional mapping of region name to description
            source: Label for logging

        Returns:
            Dataset instance

        Raises:
            DatasetIntegrityError: If a state names a region outside the enumeration
        """
        states = []
        for name, capital, code, region_value in states_data:
            region = Region.parse(region_value)
            if region is None:
                raise create_integrity_error('unknown_region', region_value)
            states.append(State(name=name, capital=capital, code=code, region=region))

        lgas = [
            LGA(name=lga_name, state=state_code)
            for state_code, lga_names in lgas_data.items()
            for lga_name in lga_names
        ]

        descriptions = {}
        for region_value, description in (region_descriptions or {}).items():
            region = Region.parse(region_value)
            if region is None:
                raise create_integrity_error('unknown_region', region_value)
            descriptions[region] = description

        return cls(states=tuple(states), lgas=tuple(lgas),
                   region_descriptions=descriptions, source=source)


def load_bundled_dataset() -> Dataset:
    """Build the dataset of Nigerian states and LGAs shipped with the package."""
    from .data.nigeria import STATES_DATA, LGAS_DATA, REGION_DESCRIPTIONS

    return Dataset.from_raw(STATES_DATA, LGAS_DATA, REGION_DESCRIPTIONS, source="bundled")
