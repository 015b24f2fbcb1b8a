"""Error types, error tracking and structured logging for the statement merger."""

import json
import logging
import sys
import traceback
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


class StatementMergerError(Exception):
    """Base class for statement merger errors"""
    pass


class MalformedRecordError(StatementMergerError, ValueError):
    """A candidate record line lacks the fields needed for extraction"""

    def __init__(self, message: str, file_path: Optional[str] = None,
                 line_number: Optional[int] = None, raw_line: Optional[str] = None):
        super().__init__(message)
        self.file_path = file_path
        self.line_number = line_number
        self.raw_line = raw_line


class ConfigurationError(StatementMergerError):
    """Configuration data is invalid"""
    pass


class ErrorSeverity(Enum):
    """Error severity levels"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(Enum):
    """Error categories for classification"""
    FILE_ACCESS = "file_access"
    FILE_FORMAT = "file_format"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


@dataclass
class ErrorDetail:
    """Detailed error information"""
    timestamp: str
    severity: str
    category: str
    error_code: str
    message: str
    file_path: Optional[str] = None
    line_number: Optional[int] = None
    stack_trace: Optional[str] = None
    context: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)


class JSONFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects"""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        for key in ('error_code', 'file_path', 'category', 'context'):
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, default=str)


class ErrorHandler:
    """Collects errors and warnings raised while merging statements"""

    ERROR_CODES = {
        # File access errors
        "FILE_NOT_FOUND": "F001",
        "FILE_PERMISSION_DENIED": "F002",
        "ENCODING_ERROR": "F003",

        # File format errors
        "MALFORMED_RECORD": "F101",
        "NO_RECORDS": "F102",

        # Configuration errors
        "INVALID_CONFIG": "C001",

        "UNEXPECTED_ERROR": "S999"
    }

    def __init__(self, log_directory: Optional[str] = None, enable_console: bool = False):
        self.log_directory = Path(log_directory) if log_directory else None
        self.errors: List[ErrorDetail] = []
        self.warnings: List[ErrorDetail] = []

        self._setup_logging(enable_console)

    def _setup_logging(self, enable_console: bool):
        """Attach JSON file and console handlers to the package logger"""
        self.logger = logging.getLogger('statement_merger')

        for handler in list(self.logger.handlers):
            if getattr(handler, '_statement_merger_handler', False):
                self.logger.removeHandler(handler)
                handler.close()

        if self.log_directory is not None:
            self.log_directory.mkdir(parents=True, exist_ok=True)
            log_file = self.log_directory / f"merger_{datetime.now().strftime('%Y%m%d')}.jsonl"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(JSONFormatter())
            file_handler._statement_merger_handler = True
            self.logger.addHandler(file_handler)

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(logging.INFO)
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s'
            ))
            console_handler._statement_merger_handler = True
            self.logger.addHandler(console_handler)

    def log_error(self,
                  message: str,
                  error_type: str,
                  category: ErrorCategory = ErrorCategory.SYSTEM,
                  file_path: Optional[str] = None,
                  line_number: Optional[int] = None,
                  exception: Optional[BaseException] = None,
                  context: Optional[Dict[str, Any]] = None) -> ErrorDetail:
        """Log an error with detailed information"""
        error_code = self.ERROR_CODES.get(error_type, "S999")
        stack_trace = None

        if exception is not None:
            stack_trace = ''.join(traceback.format_exception(
                type(exception), exception, exception.__traceback__
            ))

        error_detail = ErrorDetail(
            timestamp=datetime.now().isoformat(),
            severity=ErrorSeverity.ERROR.value,
            category=category.value,
            error_code=error_code,
            message=message,
            file_path=file_path,
            line_number=line_number,
            stack_trace=stack_trace,
            context=context or {}
        )
        self.errors.append(error_detail)

        self.logger.error(
            message,
            extra={
                'error_code': error_code,
                'category': category.value,
                'file_path': file_path,
                'context': context or {}
            }
        )
        return error_detail

    def log_warning(self,
                    message: str,
                    warning_type: str,
                    category: ErrorCategory = ErrorCategory.SYSTEM,
                    file_path: Optional[str] = None,
                    context: Optional[Dict[str, Any]] = None) -> ErrorDetail:
        """Log a warning with detailed information"""
        warning_code = self.ERROR_CODES.get(warning_type, "W999")

        warning_detail = ErrorDetail(
            timestamp=datetime.now().isoformat(),
            severity=ErrorSeverity.WARNING.value,
            category=category.value,
            error_code=warning_code,
            message=message,
            file_path=file_path,
            context=context or {}
        )
        self.warnings.append(warning_detail)

        self.logger.warning(
            message,
            extra={
                'error_code': warning_code,
                'category': category.value,
                'file_path': file_path,
                'context': context or {}
            }
        )
        return warning_detail

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log informational message"""
        self.logger.info(message, extra={'context': context or {}})

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all errors and warnings"""
        errors_by_category: Dict[str, int] = {}
        for error in self.errors:
            errors_by_category[error.category] = errors_by_category.get(error.category, 0) + 1

        return {
            'total_errors': len(self.errors),
            'total_warnings': len(self.warnings),
            'errors_by_category': errors_by_category,
            'files_with_errors': sorted(set(e.file_path for e in self.errors if e.file_path)),
        }

    def clear_errors(self):
        """Clear all accumulated errors and warnings"""
        self.errors.clear()
        self.warnings.clear()

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def get_errors_for_file(self, file_path: str) -> List[ErrorDetail]:
        """Get all errors for a specific file"""
        return [error for error in self.errors if error.file_path == file_path]


def handle_file_error(error_handler: ErrorHandler,
                      file_path: str,
                      exception: BaseException) -> ErrorDetail:
    """Record a failure to read or parse a source file"""
    if isinstance(exception, MalformedRecordError):
        return error_handler.log_error(
            str(exception),
            "MALFORMED_RECORD",
            ErrorCategory.FILE_FORMAT,
            file_path=file_path,
            line_number=exception.line_number,
            exception=exception,
            context={'raw_line': exception.raw_line}
        )
    elif isinstance(exception, FileNotFoundError):
        return error_handler.log_error(
            f"File not found: {file_path}",
            "FILE_NOT_FOUND",
            ErrorCategory.FILE_ACCESS,
            file_path=file_path,
            exception=exception
        )
    elif isinstance(exception, PermissionError):
        return error_handler.log_error(
            f"Permission denied accessing file: {file_path}",
            "FILE_PERMISSION_DENIED",
            ErrorCategory.FILE_ACCESS,
            file_path=file_path,
            exception=exception
        )
    elif isinstance(exception, UnicodeDecodeError):
        return error_handler.log_error(
            f"Cannot decode file {file_path}: {exception}",
            "ENCODING_ERROR",
            ErrorCategory.FILE_ACCESS,
            file_path=file_path,
            exception=exception
        )
    else:
        return error_handler.log_error(
            f"Unexpected error processing {file_path}: {exception}",
            "UNEXPECTED_ERROR",
            ErrorCategory.SYSTEM,
            file_path=file_path,
            exception=exception
        )
