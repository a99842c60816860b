"""
Tabular views of an engine's data.

Each function builds a new pandas DataFrame on every call, so callers may
modify the result freely.
"""

import pandas as pd

from ..engine import GeoDataEngine


def states_frame(engine: GeoDataEngine) -> pd.DataFrame:
    """
    One row per state, in canonical order.

    Columns: name, capital, code, region, lga_count.
    """
    rows = []
    for state in engine.get_all_states():
        row = state.to_dict()
        row['lga_count'] = engine.get_lga_count(state.code)
        rows.append(row)
    return pd.DataFrame(rows, columns=['name', 'capital', 'code', 'region', 'lga_count'])


def lgas_frame(engine: GeoDataEngine) -> pd.DataFrame:
    """
    One row per LGA, in canonical order.

    Columns: name, state (code), state_name, region.
    """
    rows = []
    for lga in engine.get_all_lgas():
        state = engine.get_state_by_code(lga.state)
        rows.append({
            'name': lga.name,
            'state': lga.state,
            'state_name': state.name,
            'region': state.region.value,
        })
    return pd.DataFrame(rows, columns=['name', 'state', 'state_name', 'region'])


def region_stats_frame(engine: GeoDataEngine) -> pd.DataFrame:
    """
    One row per region, in canonical order.

    Columns: region, description, state_count, lga_count.
    """
    rows = [
        {
            'region': stats.region.value,
            'description': engine.get_region_description(stats.region),
            'state_count': stats.state_count,
            'lga_count': stats.lga_count,
        }
        for stats in engine.get_all_region_stats()
    ]
    return pd.DataFrame(rows, columns=['region', 'description', 'state_count', 'lga_count'])
