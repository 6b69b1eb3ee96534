# utils/logger.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Logging utility for truth table generation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for truth table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TabulaLogger:
    """Centralized logger for Tabula with structured console output."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the Tabula logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TabulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula and table events
    def formula_parsed(self, text: str, rendered: str):
        """Log a formula accepted by the parser."""
        self.info(f"✅ {text.strip()}  ⟹  {rendered}")

    def formula_rejected(self, text: str, reason: str):
        """Log a formula rejected by the parser."""
        self.error(f"❌ {text.strip()}: {reason}")

    def formula_warning(self, text: str, warning: str):
        """Log a formula that parsed with a warning."""
        self.warning(f"⚠️  {text.strip()}: {warning}")

    def table_generated(self, letters: Sequence[str], formula_count: int, row_count: int):
        """Log truth table generation summary."""
        letters_str = ", ".join(letters) if letters else "none"
        self.debug(
            f"Truth table: {formula_count} formula(s), letters [{letters_str}], {row_count} row(s)"
        )

    def row_evaluated(self, state: int, bits: str, values: Sequence[bool]):
        """Log the evaluation of one truth table row."""
        values_str = " ".join("T" if v else "F" for v in values)
        self.debug(f"    row {state} [{bits or '-'}] → {values_str}")

    def quiz_event(self, action: str, **details):
        """Log a quiz state change."""
        details_str = ", ".join(f"{k}={v}" for k, v in details.items())
        self.debug(f"🧩 quiz {action}: {details_str}" if details_str else f"🧩 quiz {action}")


class TabulaFormatter(logging.Formatter):
    """Custom formatter for Tabula logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TabulaLogger] = None


def get_logger(name: str = "tabula") -> TabulaLogger:
    """Get or create the global Tabula logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TabulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TabulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
