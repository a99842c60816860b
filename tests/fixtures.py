"""
Small synthetic datasets shared by the test modules.
"""

from nigeria_geo.dataset import Dataset


SAMPLE_STATES = [
    ("Alpha", "Alpha City", "AL", "North-Central"),
    ("Beta", "Beta Town", "BE", "North-Central"),
    ("Gamma", "Gammaville", "GA", "South-West"),
]

# "Riverside" exists in two states; Beta's copy comes first
SAMPLE_LGAS = {
    "BE": ["Riverside", "Hilltop"],
    "AL": ["Central", "Riverside", "Lakeside"],
    "GA": ["Harbour"],
}

SAMPLE_DESCRIPTIONS = {
    "North-Central": "Test middle belt",
    "South-West": "Test south west",
}


def make_sample_dataset() -> Dataset:
    """Three states, six LGAs, one duplicated LGA name."""
    return Dataset.from_raw(SAMPLE_STATES, SAMPLE_LGAS, SAMPLE_DESCRIPTIONS, source="sample")
