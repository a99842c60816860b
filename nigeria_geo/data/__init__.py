"""
Bundled raw data tables.
"""
