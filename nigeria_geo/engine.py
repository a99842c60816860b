"""
Query engine facade.

GeoDataEngine bundles the state, LGA and region query families built over a
single GeoIndex. Independent engines over different datasets can coexist;
the package root exposes one built from the bundled Nigerian data.
"""

import logging
import time
from typing import Any, List, Optional

from .config import GeoDataConfig
from .dataset import Dataset, load_bundled_dataset
from .data_loader import DatasetLoader
from .index import GeoIndex, build_index
from .logging_config import setup_logging
from .models import Region, State, LGA, StateWithLGAs, RegionStats, DatasetMetadata
from .queries import StateQueries, LGAQueries, RegionQueries


class GeoDataEngine:
    """
    Read-only query engine over one indexed dataset.

    Every query returns a sentinel rather than raising for empty or unknown
    input: None for single lookups, an empty list for collections, False for
    predicates and 0 for counts.
    """

    def __init__(self, index: GeoIndex, logger: Optional[logging.Logger] = None):
        """
        Initialize the engine over a built index.

        Args:
            index: Built GeoIndex
            logger: Optional logger instance for logging operations
        """
        self.logger = logger or logging.getLogger(__name__)
        self.index = index
        self.states = StateQueries(index, logger=self.logger)
        self.lgas = LGAQueries(index, state_queries=self.states, logger=self.logger)
        self.regions = RegionQueries(
            index, state_queries=self.states, lga_queries=self.lgas, logger=self.logger
        )

    @classmethod
    def from_dataset(cls, dataset: Dataset,
                     logger: Optional[logging.Logger] = None) -> 'GeoDataEngine':
        """
        Index a dataset and wrap it in an engine.

        Raises:
            DatasetIntegrityError: If the dataset breaks a hierarchy invariant
        """
        return cls(build_index(dataset, logger=logger), logger=logger)

    @classmethod
    def from_config(cls, config: GeoDataConfig) -> 'GeoDataEngine':
        """
        Build an engine as described by a configuration.

        Loads the CSV files named in the config, or the bundled dataset when
        none are named, with logging set up from the config.

        Args:
            config: GeoDataConfig instance

        Returns:
            Ready GeoDataEngine
        """
        geo_logger = setup_logging(config)
        start_time = time.time()

        if config.uses_bundled_dataset():
            dataset = load_bundled_dataset()
        else:
            loader = DatasetLoader(logger=geo_logger.logger)
            dataset = loader.load_csv(config.states_file, config.lgas_file)
        geo_logger.log_dataset_loaded(dataset.source, len(dataset.states), len(dataset.lgas))

        engine = cls.from_dataset(dataset, logger=geo_logger.logger)
        geo_logger.log_index_built(engine.metadata, time.time() - start_time)
        return engine

    @property
    def metadata(self) -> DatasetMetadata:
        """Totals and region enumeration of the indexed dataset."""
        return self.index.metadata

    # State queries

    def get_all_states(self) -> List[State]:
        return self.states.get_all_states()

    def get_state_by_code(self, code: Any) -> Optional[State]:
        return self.states.get_state_by_code(code)

    def get_state_by_name(self, name: Any) -> Optional[State]:
        return self.states.get_state_by_name(name)

    def get_states_by_region(self, region: Any) -> List[State]:
        return self.states.get_states_by_region(region)

    def get_state_capital(self, code: Any) -> Optional[str]:
        return self.states.get_state_capital(code)

    def is_valid_state_code(self, code: Any) -> bool:
        return self.states.is_valid_state_code(code)

    def get_state_with_lgas(self, code: Any) -> Optional[StateWithLGAs]:
        return self.states.get_state_with_lgas(code)

    def search_states(self, query: Any) -> List[State]:
        return self.states.search_states(query)

    def get_state_region(self, code: Any) -> Optional[Region]:
        return self.states.get_state_region(code)

    # LGA queries

    def get_all_lgas(self) -> List[LGA]:
        return self.lgas.get_all_lgas()

    def get_lgas_by_state(self, code: Any) -> List[LGA]:
        return self.lgas.get_lgas_by_state(code)

    def get_lgas_by_state_name(self, name: Any) -> List[LGA]:
        return self.lgas.get_lgas_by_state_name(name)

    def search_lgas(self, query: Any) -> List[LGA]:
        return self.lgas.search_lgas(query)

    def get_lga_count(self, code: Any = None) -> int:
        return self.lgas.get_lga_count(code)

    def lga_exists(self, lga_name: Any, code: Any) -> bool:
        return self.lgas.lga_exists(lga_name, code)

    def get_lga_by_name(self, name: Any) -> Optional[LGA]:
        return self.lgas.get_lga_by_name(name)

    def get_all_lgas_by_name(self, name: Any) -> List[LGA]:
        return self.lgas.get_all_lgas_by_name(name)

    # Region queries

    def get_all_regions(self) -> List[Region]:
        return self.regions.get_all_regions()

    def get_region_states(self, region: Any) -> List[State]:
        return self.regions.get_region_states(region)

    def get_region_by_state(self, code: Any) -> Optional[Region]:
        return self.regions.get_region_by_state(code)

    def get_region_stats(self, region: Any) -> Optional[RegionStats]:
        return self.regions.get_region_stats(region)

    def get_all_region_stats(self) -> List[RegionStats]:
        return self.regions.get_all_region_stats()

    def is_valid_region(self, value: Any) -> bool:
        return self.regions.is_valid_region(value)

    def get_region_state_count(self, region: Any) -> int:
        return self.regions.get_region_state_count(region)

    def get_region_lga_count(self, region: Any) -> int:
        return self.regions.get_region_lga_count(region)

    def get_region_description(self, region: Any) -> Optional[str]:
        return self.regions.get_region_description(region)
