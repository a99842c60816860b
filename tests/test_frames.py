"""
Unit tests for DataFrame export.
"""

import unittest

import nigeria_geo
from nigeria_geo.engine import GeoDataEngine
from nigeria_geo.output import states_frame, lgas_frame, region_stats_frame
from tests.fixtures import make_sample_dataset


class TestFramesBundled(unittest.TestCase):
    """Test cases for frames over the bundled dataset."""

    def setUp(self):
        """Set up test fixtures."""
        self.engine = nigeria_geo.get_default_engine()

    def test_states_frame(self):
        """Test the states table."""
        df = states_frame(self.engine)
        self.assertEqual(list(df.columns), ['name', 'capital', 'code', 'region', 'lga_count'])
        self.assertEqual(len(df), 37)
        self.assertEqual(int(df['lga_count'].sum()), 774)

        lagos = df[df['code'] == 'LA'].iloc[0]
        self.assertEqual(lagos['capital'], 'Ikeja')
        self.assertEqual(lagos['region'], 'South-West')
        self.assertEqual(int(lagos['lga_count']), 20)

    def test_lgas_frame(self):
        """Test the LGAs table."""
        df = lgas_frame(self.engine)
        self.assertEqual(list(df.columns), ['name', 'state', 'state_name', 'region'])
        self.assertEqual(len(df), 774)

        lagos = df[df['state'] == 'LA']
        self.assertEqual(lagos.iloc[0]['name'], 'Agege')
        self.assertTrue((lagos['state_name'] == 'Lagos').all())

    def test_region_stats_frame(self):
        """Test the region statistics table."""
        df = region_stats_frame(self.engine)
        self.assertEqual(df['region'].tolist(), [r.value for r in nigeria_geo.get_all_regions()])
        self.assertEqual(int(df['lga_count'].sum()), 774)
        self.assertEqual(int(df['state_count'].sum()), 37)
        self.assertEqual(df.iloc[4]['description'], 'Oil-rich Niger Delta region')

    def test_frames_are_fresh(self):
        """Test that modifying a frame does not affect the engine."""
        df = states_frame(self.engine)
        df.loc[0, 'name'] = 'Changed'
        self.assertEqual(states_frame(self.engine).loc[0, 'name'], 'Abia')
        self.assertEqual(self.engine.get_all_states()[0].name, 'Abia')


class TestFramesSample(unittest.TestCase):
    """Test cases for frames over a synthetic dataset."""

    def test_region_with_no_states(self):
        """Test that empty regions still get a row."""
        df = region_stats_frame(GeoDataEngine.from_dataset(make_sample_dataset()))
        self.assertEqual(len(df), 6)
        north_east = df[df['region'] == 'North-East'].iloc[0]
        self.assertEqual(int(north_east['state_count']), 0)
        self.assertEqual(north_east['description'], '')


if __name__ == '__main__':
    unittest.main()
