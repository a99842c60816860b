"""
Unit tests for DatasetLoader.
"""

import os
import shutil
import tempfile
import unittest

import pandas as pd

from nigeria_geo.data_loader import DatasetLoader
from nigeria_geo.engine import GeoDataEngine
from nigeria_geo.models import Region
from nigeria_geo.exceptions import (
    DataLoadError, ValidationError, FileAccessError, DatasetIntegrityError
)


class TestDatasetLoader(unittest.TestCase):
    """Test cases for DatasetLoader."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.loader = DatasetLoader()

        self.states_df = pd.DataFrame({
            'name': ['Lagos', ' Ogun '],
            'capital': ['Ikeja', 'Abeokuta'],
            'code': ['la', 'OG'],
            'region': ['South-West', 'South-West'],
        })
        self.lgas_df = pd.DataFrame({
            'name': ['Agege', 'Ikeja', 'Abeokuta North'],
            'state': ['LA', 'la', 'OG'],
        })

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def _write_csv(self, df: pd.DataFrame, name: str) -> str:
        path = os.path.join(self.temp_dir, name)
        df.to_csv(path, index=False)
        return path

    def test_load_dataframes(self):
        """Test loading and cleaning DataFrames."""
        dataset = self.loader.load_dataframes(self.states_df, self.lgas_df)

        self.assertEqual(len(dataset.states), 2)
        self.assertEqual(dataset.states[0].code, 'LA')
        self.assertEqual(dataset.states[1].name, 'Ogun')
        self.assertEqual(dataset.states[0].region, Region.SOUTH_WEST)
        self.assertEqual([lga.state for lga in dataset.lgas], ['LA', 'LA', 'OG'])

    def test_load_dataframes_does_not_modify_input(self):
        """Test that the caller's DataFrames are left untouched."""
        self.loader.load_dataframes(self.states_df, self.lgas_df)
        self.assertEqual(self.states_df['code'].tolist(), ['la', 'OG'])

    def test_loaded_dataset_is_queryable(self):
        """Test building an engine from loaded data."""
        engine = GeoDataEngine.from_dataset(self.loader.load_dataframes(self.states_df, self.lgas_df))
        self.assertEqual(engine.get_lga_count('LA'), 2)
        self.assertEqual(engine.get_state_capital('og'), 'Abeokuta')

    def test_missing_columns(self):
        """Test that missing columns raise ValidationError."""
        with self.assertRaises(ValidationError) as cm:
            self.loader.load_dataframes(self.states_df.drop(columns=['capital']), self.lgas_df)
        self.assertEqual(cm.exception.field_name, 'columns')

        with self.assertRaises(ValidationError):
            self.loader.load_dataframes(self.states_df, self.lgas_df.rename(columns={'state': 'code'}))

    def test_empty_tables(self):
        """Test that empty tables raise DataLoadError."""
        with self.assertRaises(DataLoadError):
            self.loader.load_dataframes(self.states_df.iloc[0:0], self.lgas_df)
        with self.assertRaises(DataLoadError):
            self.loader.load_dataframes(self.states_df, self.lgas_df.iloc[0:0])

    def test_unknown_region(self):
        """Test that an unknown region raises ValidationError."""
        self.states_df.loc[1, 'region'] = 'South West'
        with self.assertRaises(ValidationError) as cm:
            self.loader.load_dataframes(self.states_df, self.lgas_df)
        self.assertEqual(cm.exception.field_name, 'region')

    def test_dangling_reference_caught_by_index(self):
        """Test that integrity problems surface when the index is built."""
        self.lgas_df.loc[2, 'state'] = 'ZZ'
        dataset = self.loader.load_dataframes(self.states_df, self.lgas_df)
        with self.assertRaises(DatasetIntegrityError):
            GeoDataEngine.from_dataset(dataset)

    def test_duplicate_rows_logged(self):
        """Test the data quality warning for repeated LGA rows."""
        lgas_df = pd.concat([self.lgas_df, self.lgas_df.iloc[[0]]], ignore_index=True)
        with self.assertLogs('nigeria_geo.data_loader', level='WARNING') as cm:
            self.loader.load_dataframes(self.states_df, lgas_df)
        self.assertTrue(any('DATA QUALITY' in line for line in cm.output))

    def test_load_csv(self):
        """Test loading from CSV files."""
        states_file = self._write_csv(self.states_df, 'states.csv')
        lgas_file = self._write_csv(self.lgas_df, 'lgas.csv')

        dataset = self.loader.load_csv(states_file, lgas_file)

        self.assertEqual(len(dataset.states), 2)
        self.assertEqual(len(dataset.lgas), 3)
        self.assertIn('states.csv', dataset.source)

    def test_load_csv_keeps_na_like_names(self):
        """Test that names such as 'NA' are not read as missing values."""
        states_df = pd.DataFrame({
            'name': ['Nasarawa'], 'capital': ['Lafia'], 'code': ['NA'], 'region': ['North-Central'],
        })
        lgas_df = pd.DataFrame({'name': ['Lafia'], 'state': ['NA']})
        dataset = self.loader.load_csv(
            self._write_csv(states_df, 'states.csv'),
            self._write_csv(lgas_df, 'lgas.csv')
        )
        self.assertEqual(dataset.states[0].code, 'NA')
        self.assertEqual(dataset.lgas[0].state, 'NA')

    def test_load_csv_missing_file(self):
        """Test that a missing file raises FileAccessError."""
        lgas_file = self._write_csv(self.lgas_df, 'lgas.csv')
        with self.assertRaises(FileAccessError) as cm:
            self.loader.load_csv(os.path.join(self.temp_dir, 'nope.csv'), lgas_file)
        self.assertEqual(cm.exception.operation, 'read')

    def test_load_csv_directory(self):
        """Test that a directory path raises FileAccessError."""
        lgas_file = self._write_csv(self.lgas_df, 'lgas.csv')
        with self.assertRaises(FileAccessError):
            self.loader.load_csv(self.temp_dir, lgas_file)

    def test_load_csv_empty_file(self):
        """Test that an empty file raises DataLoadError."""
        empty_file = os.path.join(self.temp_dir, 'empty.csv')
        with open(empty_file, 'w', encoding='utf-8'):
            pass
        lgas_file = self._write_csv(self.lgas_df, 'lgas.csv')
        with self.assertRaises(DataLoadError):
            self.loader.load_csv(empty_file, lgas_file)


if __name__ == '__main__':
    unittest.main()
