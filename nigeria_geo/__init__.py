"""
Nigeria geo data - read-only access to Nigerian regions, states and LGAs.

Importing the package builds a default engine over the bundled dataset and
exposes its queries as module-level functions:

    >>> import nigeria_geo
    >>> nigeria_geo.get_state_by_code('la').capital
    'Ikeja'
    >>> len(nigeria_geo.get_lgas_by_state('LA'))
    20

Build a GeoDataEngine directly to query another dataset.
"""

from .models import Region, REGIONS, State, LGA, StateWithLGAs, RegionStats, DatasetMetadata
from .dataset import Dataset, load_bundled_dataset
from .engine import GeoDataEngine
from .exceptions import (
    GeoDataError,
    DatasetIntegrityError,
    ValidationError,
    DataLoadError,
    FileAccessError,
    ConfigurationError
)

__version__ = "1.0.0"
__author__ = "Data Analytics Team"

_default_engine = GeoDataEngine.from_dataset(load_bundled_dataset())

METADATA = _default_engine.metadata

# State queries
get_all_states = _default_engine.get_all_states
get_state_by_code = _default_engine.get_state_by_code
get_state_by_name = _default_engine.get_state_by_name
get_states_by_region = _default_engine.get_states_by_region
get_state_capital = _default_engine.get_state_capital
is_valid_state_code = _default_engine.is_valid_state_code
get_state_with_lgas = _default_engine.get_state_with_lgas
search_states = _default_engine.search_states
get_state_region = _default_engine.get_state_region

# LGA queries
get_all_lgas = _default_engine.get_all_lgas
get_lgas_by_state = _default_engine.get_lgas_by_state
get_lgas_by_state_name = _default_engine.get_lgas_by_state_name
search_lgas = _default_engine.search_lgas
get_lga_count = _default_engine.get_lga_count
lga_exists = _default_engine.lga_exists
get_lga_by_name = _default_engine.get_lga_by_name
get_all_lgas_by_name = _default_engine.get_all_lgas_by_name

# Region queries
get_all_regions = _default_engine.get_all_regions
get_region_states = _default_engine.get_region_states
get_region_by_state = _default_engine.get_region_by_state
get_region_stats = _default_engine.get_region_stats
get_all_region_stats = _default_engine.get_all_region_stats
is_valid_region = _default_engine.is_valid_region
get_region_state_count = _default_engine.get_region_state_count
get_region_lga_count = _default_engine.get_region_lga_count
get_region_description = _default_engine.get_region_description


def get_default_engine() -> GeoDataEngine:
    """The engine behind the module-level functions."""
    return _default_engine
