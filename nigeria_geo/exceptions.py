"""
Custom exception classes for the Nigeria geo data library.

Queries never raise for unknown or malformed input; they return sentinels.
These exceptions cover the failures that must stop initialization: a defective
dataset, an unreadable input table, or an invalid configuration.
"""

from typing import Optional, List, Dict, Any


class GeoDataError(Exception):
    """Base exception class for all geo data errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        """
        Initialize the base geo data error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information about the error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'context': self.context
        }


class DatasetIntegrityError(GeoDataError):
    """Exception raised when the raw dataset breaks a hierarchy invariant."""

    def __init__(self, message: str, issue: str, offending_value: Any = None,
                 affected_records: Optional[int] = None):
        """
        Initialize dataset integrity error.

        Args:
            message: Human-readable error message
            issue: Short identifier of the violated invariant
                (e.g. 'duplicate_state_code', 'dangling_lga_state')
            offending_value: The value that broke the invariant
            affected_records: Number of records involved, if known
        """
        context = {
            'issue': issue,
            'offending_value': str(offending_value) if offending_value is not None else None,
            'affected_records': affected_records
        }
        super().__init__(message, error_code='DATASET_INTEGRITY_ERROR', context=context)
        self.issue = issue
        self.offending_value = offending_value
        self.affected_records = affected_records


class ValidationError(GeoDataError):
    """Exception raised for malformed input tables."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Any = None, validation_rules: Optional[List[str]] = None):
        """
        Initialize validation error.

        Args:
            message: Human-readable error message
            field_name: Name of the field that failed validation
            invalid_value: The invalid value that caused the error
            validation_rules: List of validation rules that were violated
        """
        context = {
            'field_name': field_name,
            'invalid_value': str(invalid_value) if invalid_value is not None else None,
            'validation_rules': validation_rules or []
        }
        super().__init__(message, error_code='VALIDATION_ERROR', context=context)
        self.field_name = field_name
        self.invalid_value = invalid_value
        self.validation_rules = validation_rules or []


class DataLoadError(GeoDataError):
    """Exception raised for data loading errors."""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        """
        Initialize data load error.

        Args:
            message: Human-readable error message
            file_path: Path to the file that caused the error
            original_error: Original exception that caused this error
        """
        context = {
            'file_path': file_path,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='DATA_LOAD_ERROR', context=context)
        self.file_path = file_path
        self.original_error = original_error


class FileAccessError(GeoDataError):
    """Exception raised for file access and I/O errors."""

    def __init__(self, message: str, file_path: str, operation: str,
                 original_error: Optional[Exception] = None):
        """
        Initialize file access error.

        Args:
            message: Human-readable error message
            file_path: Path to the file that caused the error
            operation: Type of operation that failed
            original_error: Original exception that caused this error
        """
        context = {
            'file_path': file_path,
            'operation': operation,
            'original_error': str(original_error) if original_error else None,
            'original_error_type': type(original_error).__name__ if original_error else None
        }
        super().__init__(message, error_code='FILE_ACCESS_ERROR', context=context)
        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error


class ConfigurationError(GeoDataError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Any = None, valid_values: Optional[List[Any]] = None):
        """
        Initialize configuration error.

        Args:
            message: Human-readable error message
            config_key: Configuration key that has invalid value
            config_value: Invalid configuration value
            valid_values: List of valid values for the configuration key
        """
        context = {
            'config_key': config_key,
            'config_value': str(config_value) if config_value is not None else None,
            'valid_values': [str(v) for v in valid_values] if valid_values else None
        }
        super().__init__(message, error_code='CONFIGURATION_ERROR', context=context)
        self.config_key = config_key
        self.config_value = config_value
        self.valid_values = valid_values or []


def create_integrity_error(issue: str, offending_value: Any,
                           affected_records: Optional[int] = None) -> DatasetIntegrityError:
    """
    Create a standardized dataset integrity error.

    Args:
        issue: Identifier of the violated invariant
        offending_value: Value that broke the invariant
        affected_records: Number of records involved

    Returns:
        DatasetIntegrityError instance
    """
    messages = {
        'duplicate_state_code': "Duplicate state code",
        'duplicate_state_name': "Duplicate state name",
        'empty_state_code': "State record has an empty code",
        'empty_state_name': "State record has an empty name",
        'unknown_region': "State references an unknown region",
        'dangling_lga_state': "LGA references an unknown state code",
        'empty_lga_name': "LGA record has an empty name",
    }
    prefix = messages.get(issue, "Dataset integrity violation")
    return DatasetIntegrityError(
        f"{prefix}: {offending_value!r}",
        issue=issue,
        offending_value=offending_value,
        affected_records=affected_records
    )


def get_error_severity(error: Exception) -> str:
    """
    Determine the severity level of an error.

    Args:
        error: Exception to evaluate

    Returns:
        Severity level ('low', 'medium', 'high', 'critical')
    """
    if isinstance(error, DatasetIntegrityError):
        return 'critical'

    if isinstance(error, (FileAccessError, DataLoadError)):
        return 'high'

    if isinstance(error, (ValidationError, ConfigurationError)):
        return 'medium'

    return 'low'
