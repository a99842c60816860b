"""
Unit tests for configuration, logging setup and engine construction.
"""

import logging
import os
import shutil
import tempfile
import unittest

import pandas as pd

from nigeria_geo.config import GeoDataConfig
from nigeria_geo.engine import GeoDataEngine
from nigeria_geo.logging_config import GeoDataLogger, setup_logging
from nigeria_geo.exceptions import ConfigurationError, get_error_severity


class TestGeoDataConfig(unittest.TestCase):
    """Test cases for GeoDataConfig."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.states_file = os.path.join(self.temp_dir, 'states.csv')
        self.lgas_file = os.path.join(self.temp_dir, 'lgas.csv')

        pd.DataFrame({
            'name': ['Kano', 'Jigawa'],
            'capital': ['Kano', 'Dutse'],
            'code': ['KN', 'JI'],
            'region': ['North-West', 'North-West'],
        }).to_csv(self.states_file, index=False)
        pd.DataFrame({
            'name': ['Nasarawa', 'Dutse', 'Fagge'],
            'state': ['KN', 'JI', 'KN'],
        }).to_csv(self.lgas_file, index=False)

    def tearDown(self):
        """Clean up test fixtures."""
        logging.getLogger('nigeria_geo').handlers.clear()
        shutil.rmtree(self.temp_dir)

    def test_defaults(self):
        """Test the default configuration."""
        config = GeoDataConfig()
        self.assertTrue(config.uses_bundled_dataset())
        self.assertEqual(config.log_level, 'INFO')
        self.assertIsNone(config.log_file)

    def test_log_level_normalized(self):
        """Test that log level names are uppercased."""
        self.assertEqual(GeoDataConfig(log_level='debug').log_level, 'DEBUG')

    def test_invalid_log_level(self):
        """Test that unknown log levels raise ConfigurationError."""
        with self.assertRaises(ConfigurationError) as cm:
            GeoDataConfig(log_level='VERBOSE')
        self.assertEqual(cm.exception.config_key, 'log_level')
        self.assertIn('INFO', cm.exception.valid_values)
        self.assertEqual(get_error_severity(cm.exception), 'medium')

    def test_files_must_be_paired(self):
        """Test that one CSV without the other is rejected."""
        with self.assertRaises(ConfigurationError):
            GeoDataConfig(states_file=self.states_file)
        with self.assertRaises(ConfigurationError):
            GeoDataConfig(lgas_file=self.lgas_file)

    def test_missing_file(self):
        """Test that named files must exist."""
        with self.assertRaises(FileNotFoundError):
            GeoDataConfig(states_file=os.path.join(self.temp_dir, 'nope.csv'),
                          lgas_file=self.lgas_file)

    def test_dict_round_trip(self):
        """Test from_dict and to_dict."""
        config = GeoDataConfig(states_file=self.states_file, lgas_file=self.lgas_file,
                               log_level='WARNING')
        self.assertFalse(config.uses_bundled_dataset())
        self.assertEqual(GeoDataConfig.from_dict(config.to_dict()), config)

    def test_engine_from_config_csv(self):
        """Test building an engine from configured CSV files."""
        config = GeoDataConfig(states_file=self.states_file, lgas_file=self.lgas_file,
                               log_level='WARNING')
        engine = GeoDataEngine.from_config(config)

        self.assertEqual(engine.metadata.total_states, 2)
        self.assertEqual(engine.get_lga_count(), 3)
        self.assertEqual([lga.name for lga in engine.get_lgas_by_state('kn')], ['Nasarawa', 'Fagge'])
        self.assertEqual(engine.get_region_stats('North-West').lga_count, 3)

    def test_engine_from_config_logs_load_once(self):
        """Test that loading CSV files is reported a single time."""
        log_file = os.path.join(self.temp_dir, 'geo.log')
        config = GeoDataConfig(states_file=self.states_file, lgas_file=self.lgas_file,
                               log_file=log_file)
        engine = GeoDataEngine.from_config(config)
        for handler in engine.logger.handlers:
            handler.close()

        with open(log_file, encoding='utf-8') as fh:
            content = fh.read()
        self.assertEqual(content.count('Loaded dataset from'), 1)
        self.assertIn('2 states, 3 LGAs', content)

    def test_engine_from_config_bundled(self):
        """Test building an engine from the bundled dataset."""
        engine = GeoDataEngine.from_config(GeoDataConfig(log_level='ERROR'))
        self.assertEqual(engine.metadata.total_lgas, 774)
        self.assertEqual(engine.get_state_by_code('LA').name, 'Lagos')


class TestGeoDataLogger(unittest.TestCase):
    """Test cases for GeoDataLogger."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up test fixtures."""
        for name in ('nigeria_geo', 'nigeria_geo_test'):
            for handler in logging.getLogger(name).handlers:
                handler.close()
            logging.getLogger(name).handlers.clear()
        shutil.rmtree(self.temp_dir)

    def test_console_handler_and_level(self):
        """Test logger level and handler setup."""
        geo_logger = GeoDataLogger(name='nigeria_geo_test', level='debug')
        self.assertEqual(geo_logger.logger.level, logging.DEBUG)
        self.assertEqual(len(geo_logger.logger.handlers), 1)

    def test_file_handler_creates_directory(self):
        """Test that the log file's directory is created."""
        log_file = os.path.join(self.temp_dir, 'logs', 'geo.log')
        geo_logger = GeoDataLogger(name='nigeria_geo_test', log_file=log_file)
        geo_logger.log_file_operation('Read', 'states.csv', 37)
        for handler in geo_logger.logger.handlers:
            handler.flush()

        self.assertTrue(os.path.exists(log_file))
        with open(log_file, encoding='utf-8') as fh:
            self.assertIn('Read: states.csv (37 records)', fh.read())

    def test_helper_messages(self):
        """Test the summary helpers."""
        engine = GeoDataEngine.from_config(GeoDataConfig(log_level='ERROR'))
        geo_logger = GeoDataLogger(name='nigeria_geo_test')
        with self.assertLogs('nigeria_geo_test', level='INFO') as cm:
            geo_logger.log_index_built(engine.metadata, 0.01)
            geo_logger.log_dataset_loaded('bundled', 37, 774)
            geo_logger.log_data_quality_warning('blank capital')

        output = '\n'.join(cm.output)
        self.assertIn('LGAs: 774', output)
        self.assertIn('South-West', output)
        self.assertIn('37 states, 774 LGAs', output)
        self.assertIn('DATA QUALITY: blank capital', output)

    def test_setup_logging_from_config(self):
        """Test setup_logging honours the configured level."""
        geo_logger = setup_logging(GeoDataConfig(log_level='WARNING'))
        self.assertEqual(geo_logger.logger.name, 'nigeria_geo')
        self.assertEqual(geo_logger.logger.level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
