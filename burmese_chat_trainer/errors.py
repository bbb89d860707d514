"""
Error handling system for the Burmese Chat Trainer.

This module provides centralized error definitions and actionable error
messages for data loading, Google Sheets access and progress persistence.
Nothing in the practice core raises these to the learner: loaders and the
progress tracker convert failures into recorded ProcessingErrors and carry on.
"""

import logging
from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass


class ErrorSeverity(Enum):
    """How serious a recorded problem is."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors that can occur outside the pure core."""
    DATA_LOADING = "data_loading"
    AUTHENTICATION = "authentication"
    PERSISTENCE = "persistence"


_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


@dataclass
class ProcessingError:
    """A problem met while loading data or saving progress, with next steps."""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: str
    suggested_actions: List[str]
    error_code: str
    context: Dict[str, Any] = None

    def __post_init__(self):
        if self.context is None:
            self.context = {}

    @property
    def is_warning(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'code': self.error_code,
            'category': self.category.value,
            'severity': self.severity.value,
            'message': self.message,
            'suggested_actions': list(self.suggested_actions)
        }


class BurmeseTrainerError(Exception):
    """Base exception for Burmese Chat Trainer errors."""

    def __init__(self, message: str, processing_error: Optional[ProcessingError] = None):
        self.processing_error = processing_error
        super().__init__(message)


class DataLoadingError(BurmeseTrainerError):
    """Raised when a data table cannot be read."""
    pass


class SheetsAccessError(DataLoadingError):
    """Raised when the Google Sheets API refuses or fails a request."""
    pass


class PersistenceError(BurmeseTrainerError):
    """Raised by a progress store when a read or write fails."""
    pass


class ErrorHandler:
    """
    Collects and logs processing errors.

    One handler belongs to each TrainerApp; there is no global instance.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.errors: List[ProcessingError] = []
        self.warnings: List[ProcessingError] = []

    def add_error(self, error: ProcessingError) -> None:
        """Log a problem and keep it as an error or a warning by severity."""
        if error.severity == ErrorSeverity.WARNING:
            self.warnings.append(error)
        elif not error.is_warning:
            self.errors.append(error)

        level = _LOG_LEVELS[error.severity]
        self.logger.log(level, f"[{error.error_code}] {error.message}")
        if error.details:
            self.logger.log(level, f"Details: {error.details}")

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def get_error_summary(self) -> Dict[str, Any]:
        """Counts and serializable entries for everything recorded so far."""
        return {
            'error_count': len(self.errors),
            'warning_count': len(self.warnings),
            'errors': [error.to_dict() for error in self.errors],
            'warnings': [warning.to_dict() for warning in self.warnings]
        }

    def clear_errors(self) -> None:
        self.errors.clear()
        self.warnings.clear()

    def handle_data_loading_error(self, table: str, error: Exception,
                                  context: Dict[str, Any] = None) -> ProcessingError:
        """Handle a failure to read one data table; defaults stay in use."""
        error_str = str(error).lower()

        if isinstance(error, FileNotFoundError) or 'not found' in error_str:
            return ProcessingError(
                category=ErrorCategory.DATA_LOADING,
                severity=ErrorSeverity.WARNING,
                message=f"No {table} data found, using built-in defaults",
                details=f"Data source missing: {error}",
                suggested_actions=[
                    "Check the data directory or spreadsheet URL",
                    f"Add the {table} table to load your own data"
                ],
                error_code="DATA_001",
                context=context
            )

        if 'permission' in error_str or 'access' in error_str or '403' in error_str:
            return ProcessingError(
                category=ErrorCategory.AUTHENTICATION,
                severity=ErrorSeverity.WARNING,
                message=f"Access denied to {table} data, using built-in defaults",
                details=f"Permission error: {error}",
                suggested_actions=[
                    "Ensure the spreadsheet is shared with your Google account",
                    "Run the authentication flow again"
                ],
                error_code="DATA_002",
                context=context
            )

        return ProcessingError(
            category=ErrorCategory.DATA_LOADING,
            severity=ErrorSeverity.WARNING,
            message=f"Could not load {table} data, using built-in defaults",
            details=f"Unexpected loading error: {error}",
            suggested_actions=[
                "Check that the file is a UTF-8 CSV with a header row",
                "Reload the data after fixing the source"
            ],
            error_code="DATA_003",
            context=context
        )

    def handle_persistence_error(self, operation: str, error: Exception,
                                 context: Dict[str, Any] = None) -> ProcessingError:
        """Handle a failed progress store call; in-memory progress is kept."""
        error_str = str(error).lower()

        if isinstance(error, PermissionError) or 'permission' in error_str:
            return ProcessingError(
                category=ErrorCategory.PERSISTENCE,
                severity=ErrorSeverity.ERROR,
                message=f"Progress could not be saved ({operation})",
                details=f"Permission error: {error}",
                suggested_actions=[
                    "Check write permissions of the progress directory",
                    "Choose another directory with --storage-dir"
                ],
                error_code="STORE_001",
                context=context
            )

        return ProcessingError(
            category=ErrorCategory.PERSISTENCE,
            severity=ErrorSeverity.ERROR,
            message=f"Progress store failed ({operation})",
            details=f"Store error: {error}",
            suggested_actions=[
                "Progress from this session is kept in memory",
                "Check the progress store and try again later"
            ],
            error_code="STORE_002",
            context=context
        )
