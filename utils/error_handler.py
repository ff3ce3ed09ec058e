"""
Error types and error reporting for subcomb
Fatal errors abort the run; invalid seeds are skipped and reported
"""

import traceback
from typing import Dict, Any, Optional
from datetime import datetime

from utils.logger import get_logger


class SubcombError(Exception):
    """Base exception for subcomb-specific errors"""
    def __init__(self, message: str, error_code: str = None, context: Dict[str, Any] = None):
        super().__init__(message)
        self.error_code = error_code or "SUBCOMB_ERROR"
        self.context = context or {}
        self.timestamp = datetime.now().isoformat()


class InvalidSubdomainError(SubcombError):
    """A seed that does not look like a domain name"""
    def __init__(self, target: str, reason: str = "doesn't appear to be a valid subdomain", **kwargs):
        super().__init__(f"'{target}' {reason}", "INVALID_SUBDOMAIN", kwargs)
        self.target = target
        self.reason = reason


class InputReadError(SubcombError):
    """Input file could not be opened or read"""
    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, "INPUT_READ_ERROR", kwargs)
        self.source = source


class OutputWriteError(SubcombError):
    """Output file could not be created or written"""
    def __init__(self, message: str, destination: Optional[str] = None, **kwargs):
        super().__init__(message, "OUTPUT_WRITE_ERROR", kwargs)
        self.destination = destination


class NoInputError(SubcombError):
    """No file, no seed argument and no piped stdin"""
    def __init__(self, message: str = "no input provided. Use --help for help", **kwargs):
        super().__init__(message, "NO_INPUT", kwargs)


class ErrorHandler:
    """Turns errors into a report the CLI can act on. Nothing is retried."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = get_logger(self.config)

        self.suggestions = {
            NoInputError: "Pass a subdomain, use --input FILE, or pipe domains on stdin",
            InputReadError: "Check that the input file exists and is readable text",
            OutputWriteError: "Check that the output directory exists and is writable",
        }

    def handle_error(self, error: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        """Log an error and describe whether the run can go on"""
        context = context or {}

        error_info = {
            "type": type(error).__name__,
            "code": getattr(error, "error_code", "UNEXPECTED_ERROR"),
            "message": str(error),
            "timestamp": datetime.now().isoformat(),
            "context": {**getattr(error, "context", {}), **context},
        }

        can_continue = isinstance(error, InvalidSubdomainError)
        if can_continue:
            self.logger.warning(f"Warning: {error_info['message']}")
        else:
            self.logger.debug(f"{error_info['type']} - {error_info['message']}")
            if not isinstance(error, SubcombError):
                self.logger.debug(traceback.format_exc())

        report = {
            "error": error_info,
            "can_continue": can_continue,
            "exit_code": 0 if can_continue else 1,
        }
        for exc_type, suggestion in self.suggestions.items():
            if isinstance(error, exc_type):
                report["suggestion"] = suggestion
                break
        return report
