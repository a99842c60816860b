"""
Logging configuration for the Nigeria geo data library.

Library classes log through ``logging.getLogger(__name__)`` unless handed a
logger. GeoDataLogger sets up console and optional file output for
applications that want the library's messages.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class GeoDataLogger:
    """Custom logger for geo data operations."""

    def __init__(self, name: str = "nigeria_geo", level: str = "INFO",
                 log_file: Optional[str] = None):
        """
        Initialize the geo data logger.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional file path for log output
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear any existing handlers
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            self._setup_file_handler(log_file, formatter)

    def _setup_file_handler(self, log_file: str, formatter: logging.Formatter):
        """Set up file logging handler."""
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def log_index_built(self, metadata, duration: float):
        """Log a summary of a freshly built index."""
        self.info("=" * 60)
        self.info("GEO DATA INDEX READY")
        self.info("=" * 60)
        self.info(f"States: {metadata.total_states:,}")
        self.info(f"LGAs: {metadata.total_lgas:,}")
        self.info(f"Regions: {', '.join(region.value for region in metadata.regions)}")
        self.info(f"Build time: {duration:.3f} seconds")

    def log_dataset_loaded(self, source: str, states_count: int, lgas_count: int):
        """Log the size of a loaded dataset."""
        self.info(f"Loaded dataset from {source}: {states_count:,} states, {lgas_count:,} LGAs")

    def log_data_quality_warning(self, message: str):
        """Log data quality warnings."""
        self.warning(f"DATA QUALITY: {message}")

    def log_file_operation(self, operation: str, file_path: str, record_count: int):
        """Log file operations."""
        self.info(f"{operation}: {file_path} ({record_count:,} records)")


def setup_logging(config) -> GeoDataLogger:
    """
    Set up logging based on configuration.

    Args:
        config: GeoDataConfig instance

    Returns:
        Configured GeoDataLogger instance
    """
    return GeoDataLogger(
        name="nigeria_geo",
        level=config.log_level,
        log_file=config.log_file
    )
