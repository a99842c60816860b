"""
Configuration management for the Nigeria geo data library.

This module provides the GeoDataConfig dataclass, which selects the dataset
source (the bundled data or a pair of CSV files) and the logging options.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import os

from .exceptions import ConfigurationError


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class GeoDataConfig:
    """Configuration class for building a GeoDataEngine."""

    # Optional CSV input; both or neither
    states_file: Optional[str] = None
    lgas_file: Optional[str] = None

    # Logging configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_paths()
        self._validate_log_level()

    def _validate_paths(self):
        """Validate that CSV inputs are given as a pair and exist."""
        if bool(self.states_file) != bool(self.lgas_file):
            raise ConfigurationError(
                "states_file and lgas_file must be provided together",
                config_key='states_file' if not self.states_file else 'lgas_file',
                config_value=None
            )

        if self.states_file and not os.path.exists(self.states_file):
            raise FileNotFoundError(f"States file not found: {self.states_file}")

        if self.lgas_file and not os.path.exists(self.lgas_file):
            raise FileNotFoundError(f"LGAs file not found: {self.lgas_file}")

    def _validate_log_level(self):
        """Validate and normalize the log level name."""
        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}",
                config_key='log_level',
                config_value=self.log_level,
                valid_values=VALID_LOG_LEVELS
            )
        self.log_level = level

    def uses_bundled_dataset(self) -> bool:
        """True when no CSV input is configured."""
        return not self.states_file

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'GeoDataConfig':
        """Create configuration from dictionary."""
        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'states_file': self.states_file,
            'lgas_file': self.lgas_file,
            'log_level': self.log_level,
            'log_file': self.log_file
        }
