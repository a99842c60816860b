"""
Utility functions and helpers.
"""

from .data_utils import (
    safe_string_conversion,
    is_null_or_empty,
    normalize_code,
    normalize_name,
    clean_dataframe_strings,
    detect_duplicates,
    get_data_quality_summary
)

__all__ = [
    'safe_string_conversion',
    'is_null_or_empty',
    'normalize_code',
    'normalize_name',
    'clean_dataframe_strings',
    'detect_duplicates',
    'get_data_quality_summary'
]
