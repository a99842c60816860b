"""
Data loading module.

This module provides the DatasetLoader class for building a Dataset from
pandas DataFrames or CSV files, so the engine can run on data other than the
bundled Nigerian tables. Loaded datasets still go through the index
builder's integrity checks.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .dataset import Dataset
from .models import Region, State, LGA, REGIONS
from .exceptions import DataLoadError, ValidationError, FileAccessError
from .utils.data_utils import (
    clean_dataframe_strings,
    detect_duplicates,
    get_data_quality_summary,
    normalize_code
)
from .utils.error_handler import create_error_context, log_error_details


STATE_COLUMNS = ['name', 'capital', 'code', 'region']
LGA_COLUMNS = ['name', 'state']


class DatasetLoader:
    """
    Loads state and LGA tables into a Dataset.

    States table columns: name, capital, code, region.
    LGAs table columns: name, state (the owning state's code).
    Row order in each table becomes the canonical order.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the DatasetLoader.

        Args:
            logger: Optional logger instance for logging operations
        """
        self.logger = logger or logging.getLogger(__name__)

    def load_dataframes(self, states_df: pd.DataFrame, lgas_df: pd.DataFrame,
                        source: str = "dataframe") -> Dataset:
        """
        Build a Dataset from two DataFrames.

        Args:
            states_df: States table
            lgas_df: LGAs table
            source: Label recorded on the dataset for logging

        Returns:
            Dataset with records in table order

        Raises:
            DataLoadError: If a table is empty
            ValidationError: If columns are missing or a region is unknown
        """
        if states_df.empty:
            raise DataLoadError("States table contains no data", file_path=source)
        if lgas_df.empty:
            raise DataLoadError("LGAs table contains no data", file_path=source)

        self._validate_columns(states_df, STATE_COLUMNS, 'states')
        self._validate_columns(lgas_df, LGA_COLUMNS, 'lgas')

        states_df = clean_dataframe_strings(states_df, STATE_COLUMNS)
        lgas_df = clean_dataframe_strings(lgas_df, LGA_COLUMNS)
        states_df['code'] = states_df['code'].apply(normalize_code)
        lgas_df['state'] = lgas_df['state'].apply(normalize_code)

        self._report_data_quality(states_df, lgas_df)

        states = [self._to_state(row) for row in states_df.itertuples(index=False)]
        lgas = [
            LGA(name=row.name, state=row.state)
            for row in lgas_df.itertuples(index=False)
        ]

        return Dataset(states=tuple(states), lgas=tuple(lgas), source=source)

    def load_csv(self, states_file: str, lgas_file: str) -> Dataset:
        """
        Build a Dataset from two CSV files.

        Args:
            states_file: Path to the states CSV
            lgas_file: Path to the LGAs CSV

        Returns:
            Dataset with records in file order

        Raises:
            FileAccessError: If a file is missing or not a regular file
            DataLoadError: If a file cannot be parsed
            ValidationError: If columns are missing or a region is unknown
        """
        states_df = self._read_csv(states_file)
        lgas_df = self._read_csv(lgas_file)
        return self.load_dataframes(states_df, lgas_df, source=f"{states_file}, {lgas_file}")

    def _read_csv(self, file_path: str) -> pd.DataFrame:
        """Read one CSV file as strings, mapping failures to loader errors."""
        self.logger.info(f"Reading CSV: {file_path}")

        file_path_obj = Path(file_path)
        if not file_path_obj.exists():
            raise FileAccessError(
                f"File not found: {file_path}",
                file_path=file_path,
                operation="read"
            )
        if not file_path_obj.is_file():
            raise FileAccessError(
                f"Path is not a file: {file_path}",
                file_path=file_path,
                operation="read"
            )

        try:
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise DataLoadError(
                f"File is empty or contains no valid data: {file_path}",
                file_path=file_path,
                original_error=e
            )
        except pd.errors.ParserError as e:
            raise DataLoadError(
                f"Error parsing CSV file: {str(e)}",
                file_path=file_path,
                original_error=e
            )
        except PermissionError as e:
            raise FileAccessError(
                f"Permission denied accessing file: {file_path}",
                file_path=file_path,
                operation="read",
                original_error=e
            )
        except Exception as e:
            context = create_error_context(
                operation="read_csv",
                file_path=file_path,
                error_type=type(e).__name__
            )
            log_error_details(self.logger, e, context)
            raise DataLoadError(
                f"Unexpected error loading {file_path}: {str(e)}",
                file_path=file_path,
                original_error=e
            )

        self.logger.info(f"Read {len(df):,} records from {file_path}")
        return df

    def _validate_columns(self, df: pd.DataFrame, required_columns: List[str], table_name: str):
        """Raise ValidationError if required columns are missing."""
        missing_columns = [col for col in required_columns if col not in df.columns]
        if missing_columns:
            raise ValidationError(
                f"Missing required columns in {table_name} table: {missing_columns}",
                field_name='columns',
                invalid_value=list(df.columns),
                validation_rules=[f"Required columns: {required_columns}"]
            )

    def _to_state(self, row) -> State:
        """Convert a cleaned states row into a State."""
        region = Region.parse(row.region)
        if region is None:
            raise ValidationError(
                f"Unknown region for state {row.name!r}: {row.region!r}",
                field_name='region',
                invalid_value=row.region,
                validation_rules=[f"Region must be one of: {[r.value for r in REGIONS]}"]
            )
        return State(name=row.name, capital=row.capital, code=row.code, region=region)

    def _report_data_quality(self, states_df: pd.DataFrame, lgas_df: pd.DataFrame):
        """Log quality summaries and warn about duplicate rows."""
        self.logger.info(f"States data quality: {get_data_quality_summary(states_df)}")
        self.logger.info(f"LGAs data quality: {get_data_quality_summary(lgas_df)}")

        duplicate_lgas = detect_duplicates(lgas_df, LGA_COLUMNS)
        if not duplicate_lgas.empty:
            self.logger.warning(
                f"DATA QUALITY: {len(duplicate_lgas)} LGA rows repeat a (name, state) pair"
            )
