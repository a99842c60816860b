"""
Data utility functions for string cleaning, null handling and key normalization.

Codes are normalized to trimmed uppercase and names to trimmed lowercase with
internal whitespace collapsed. Every index key and every query argument goes
through the same functions, which is what makes lookups case-insensitive.
"""

import pandas as pd
from typing import Any


def safe_string_conversion(value: Any) -> str:
    """
    Safely convert a value to string, handling nulls and cleaning whitespace.

    Args:
        value: Value to convert to string

    Returns:
        Cleaned string value or empty string if null
    """
    if value is None or pd.isna(value):
        return ""

    return str(value).strip()


def is_null_or_empty(value: Any) -> bool:
    """
    Check if a value is null, empty, or contains only whitespace.

    Args:
        value: Value to check

    Returns:
        True if value is null/empty, False otherwise
    """
    if value is None or pd.isna(value):
        return True

    if isinstance(value, str):
        return not value.strip()

    return False


def normalize_code(value: Any) -> str:
    """
    Normalize a state code for index lookup.

    Args:
        value: Raw code, e.g. ' la '

    Returns:
        Trimmed uppercase code ('LA'), or empty string for null input
    """
    if is_null_or_empty(value):
        return ""

    return str(value).strip().upper()


def normalize_name(value: Any) -> str:
    """
    Normalize a state or LGA name for index lookup and substring search.

    Args:
        value: Raw name, e.g. '  Akwa   IBOM'

    Returns:
        Lowercase name with single spaces ('akwa ibom'), or empty string
    """
    if is_null_or_empty(value):
        return ""

    return ' '.join(str(value).split()).lower()


def clean_dataframe_strings(df: pd.DataFrame, string_columns: list) -> pd.DataFrame:
    """
    Clean string columns in a DataFrame by removing extra whitespace.

    Args:
        df: DataFrame to clean
        string_columns: List of column names to clean

    Returns:
        DataFrame with cleaned string columns
    """
    df_cleaned = df.copy()

    for col in string_columns:
        if col in df_cleaned.columns:
            df_cleaned[col] = df_cleaned[col].apply(safe_string_conversion)

    return df_cleaned


def detect_duplicates(df: pd.DataFrame, key_columns: list) -> pd.DataFrame:
    """
    Detect duplicate records based on specified key columns.

    Args:
        df: DataFrame to check for duplicates
        key_columns: List of column names to use for duplicate detection

    Returns:
        DataFrame containing only the duplicate records
    """
    subset_df = df[key_columns].copy()
    duplicated_mask = subset_df.duplicated(keep=False)

    return df[duplicated_mask].copy()


def get_data_quality_summary(df: pd.DataFrame) -> dict:
    """
    Generate a summary of data quality metrics for a DataFrame.

    Args:
        df: DataFrame to analyze

    Returns:
        Dictionary containing data quality metrics
    """
    summary = {
        'total_records': len(df),
        'null_counts': df.isnull().sum().to_dict(),
        'empty_string_counts': {},
        'duplicate_count': int(df.duplicated().sum()),
    }

    for col in df.columns:
        if not pd.api.types.is_string_dtype(df[col]):
            continue
        empty_count = int((df[col].astype(str).str.strip() == '').sum())
        summary['empty_string_counts'][col] = empty_count

    return summary
