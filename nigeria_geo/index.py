"""
Index builder for the hierarchy query engine.

This module provides the GeoIndex class, which derives every lookup structure
the queries need from a Dataset in a single pass and checks the dataset's
integrity while doing so. An index is never modified after it is built.
"""

import logging
import time
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .dataset import Dataset
from .models import Region, State, LGA, DatasetMetadata, REGIONS
from .exceptions import DatasetIntegrityError, create_integrity_error
from .utils.data_utils import normalize_code, normalize_name
from .utils.error_handler import create_error_context, log_error_details


class GeoIndex:
    """
    Read-only lookup structures over one dataset.

    Attributes:
        dataset: The dataset the index was built from
        states: All states in canonical order
        lgas: All LGAs in canonical order
        state_by_code: Uppercase code -> State
        state_by_name: Lowercase name -> State
        lgas_by_state_code: Uppercase code -> LGAs of that state, canonical order
        states_by_region: Region -> states of that region, canonical order
        lgas_by_name: Lowercase LGA name -> every LGA with that name, canonical order
        total_states: Cached state count
        total_lgas: Cached LGA count
        metadata: Snapshot of the totals and the region enumeration
    """

    def __init__(self, dataset: Dataset, logger: Optional[logging.Logger] = None):
        """
        Build the index.

        Args:
            dataset: Source records
            logger: Optional logger instance for logging operations

        Raises:
            DatasetIntegrityError: If the dataset breaks a hierarchy invariant
        """
        self.logger = logger or logging.getLogger(__name__)
        self.dataset = dataset

        start_time = time.time()
        try:
            state_by_code, state_by_name, states_by_region = self._index_states(dataset.states)
            lgas_by_state_code, lgas_by_name = self._index_lgas(dataset.lgas, state_by_code)
        except DatasetIntegrityError as e:
            context = create_error_context(
                operation="build_index",
                source=dataset.source,
                states=len(dataset.states),
                lgas=len(dataset.lgas)
            )
            log_error_details(self.logger, e, context)
            raise

        self.states: Tuple[State, ...] = dataset.states
        self.lgas: Tuple[LGA, ...] = dataset.lgas
        self.state_by_code: Mapping[str, State] = MappingProxyType(state_by_code)
        self.state_by_name: Mapping[str, State] = MappingProxyType(state_by_name)
        self.lgas_by_state_code: Mapping[str, Tuple[LGA, ...]] = MappingProxyType(lgas_by_state_code)
        self.states_by_region: Mapping[Region, Tuple[State, ...]] = MappingProxyType(states_by_region)
        self.lgas_by_name: Mapping[str, Tuple[LGA, ...]] = MappingProxyType(lgas_by_name)

        self.total_states = len(self.states)
        self.total_lgas = len(self.lgas)
        self.metadata = DatasetMetadata(
            total_states=self.total_states,
            total_lgas=self.total_lgas,
            regions=REGIONS
        )

        duration = time.time() - start_time
        self.logger.info(
            f"Built index from {dataset.source} dataset: {self.total_states:,} states, "
            f"{self.total_lgas:,} LGAs in {duration:.3f}s"
        )

    def _index_states(self, states: Tuple[State, ...]):
        """Index states by code, name and region, rejecting duplicates."""
        state_by_code: Dict[str, State] = {}
        state_by_name: Dict[str, State] = {}
        states_by_region: Dict[Region, List[State]] = {region: [] for region in REGIONS}

        for state in states:
            code = normalize_code(state.code)
            name = normalize_name(state.name)

            if not code:
                raise create_integrity_error('empty_state_code', state.name)
            if not name:
                raise create_integrity_error('empty_state_name', state.code)
            if Region.parse(state.region) is None:
                raise create_integrity_error('unknown_region', state.region)
            if code in state_by_code:
                raise create_integrity_error('duplicate_state_code', state.code, affected_records=2)
            if name in state_by_name:
                raise create_integrity_error('duplicate_state_name', state.name, affected_records=2)

            state_by_code[code] = state
            state_by_name[name] = state
            states_by_region[Region.parse(state.region)].append(state)

        return (
            state_by_code,
            state_by_name,
            {region: tuple(members) for region, members in states_by_region.items()}
        )

    def _index_lgas(self, lgas: Tuple[LGA, ...], state_by_code: Dict[str, State]):
        """Group LGAs by owning state and by name, rejecting dangling references."""
        lgas_by_state_code: Dict[str, List[LGA]] = {code: [] for code in state_by_code}
        lgas_by_name: Dict[str, List[LGA]] = {}
        dangling: List[LGA] = []

        for lga in lgas:
            name = normalize_name(lga.name)
            if not name:
                raise create_integrity_error('empty_lga_name', lga.state)

            code = normalize_code(lga.state)
            if code not in lgas_by_state_code:
                dangling.append(lga)
                continue

            lgas_by_state_code[code].append(lga)
            lgas_by_name.setdefault(name, []).append(lga)

        if dangling:
            raise create_integrity_error(
                'dangling_lga_state', dangling[0].state, affected_records=len(dangling)
            )

        return (
            {code: tuple(members) for code, members in lgas_by_state_code.items()},
            {name: tuple(members) for name, members in lgas_by_name.items()}
        )

    def region_description(self, region: Region) -> str:
        """Description of a region, or empty string when the dataset has none."""
        return self.dataset.region_descriptions.get(region, "")


def build_index(dataset: Dataset, logger: Optional[logging.Logger] = None) -> GeoIndex:
    """
    Build a GeoIndex for a dataset.

    Rebuilding from the same dataset yields an equivalent index.

    Args:
        dataset: Source records
        logger: Optional logger instance

    Returns:
        Built GeoIndex
    """
    return GeoIndex(dataset, logger=logger)
