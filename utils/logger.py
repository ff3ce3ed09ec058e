"""
Diagnostic logging for subcomb
Everything here goes to stderr (and optionally a file), never to the results stream
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional
from rich.console import Console
from rich.logging import RichHandler


def parse_level(level: Any) -> int:
    """Map a level name like "debug" to its logging constant; unknown names give INFO"""
    value = getattr(logging, str(level).strip().upper(), None)
    return value if isinstance(value, int) else logging.INFO


class DiagnosticLogger:
    """Logger for warnings and verbose progress messages"""

    def __init__(
        self,
        level: str = "INFO",
        log_path: Optional[str] = None,
        console: Optional[Console] = None
    ):
        self.console = console or Console(stderr=True)

        self.logger = logging.getLogger("subcomb")
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Rich console handler on stderr
        self.console_handler = RichHandler(
            console=self.console,
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
            markup=False
        )
        self.console_handler.setLevel(parse_level(level))
        self.logger.addHandler(self.console_handler)

        self.log_path = None
        if log_path:
            self.log_path = Path(log_path)
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_path)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(file_handler)

    def set_verbose(self, verbose: bool):
        """Show debug-level diagnostics on the console"""
        if verbose:
            self.console_handler.setLevel(logging.DEBUG)

    def info(self, message: str, *args):
        """Standard info logging"""
        self.logger.info(message, *args)

    def warning(self, message: str, *args):
        """Standard warning logging"""
        self.logger.warning(message, *args)

    def error(self, message: str, *args):
        """Standard error logging"""
        self.logger.error(message, *args)

    def debug(self, message: str, *args):
        """Standard debug logging"""
        self.logger.debug(message, *args)


# Global logger instance
_logger: Optional[DiagnosticLogger] = None


def get_logger(config: Optional[Dict[str, Any]] = None) -> DiagnosticLogger:
    """Get or create the global logger instance"""
    global _logger

    if _logger is None:
        if config and "logging" in config:
            log_config = config["logging"] or {}
            _logger = DiagnosticLogger(
                level=log_config.get("level", "INFO"),
                log_path=log_config.get("path")
            )
        else:
            _logger = DiagnosticLogger()

    return _logger


def reset_logger():
    """Drop the global logger so the next get_logger() builds a fresh one"""
    global _logger
    _logger = None
