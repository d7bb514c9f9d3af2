# utils/logger.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Logging utility for graph exploration with configurable levels

import logging
import sys
from enum import Enum
from typing import List, Optional


class LogLevel(Enum):
    """Log levels for graph exploration."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TaurusLogger:
    """Centralized logger for graph exploration with structured output."""

    def __init__(self, name: str = "taurus", level: LogLevel = LogLevel.INFO):
        """Initialize the exploration logger.

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
        console_handler.setFormatter(TaurusFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self.logger.isEnabledFor(level.value)

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

    # Specialized methods for exploration events
    def graph_loaded(self, source: str, node_count: int, edge_count: int):
        """Log a freshly loaded graph snapshot."""
        self.info(f"📂 Loaded {source}: {node_count} nodes, {edge_count} edges")

    def graph_summary(self, node_count: int, edge_count: int, tau_count: int, selected: Optional[str]):
        """Log the shape of a graph snapshot."""
        self.info("=== Graph Summary ===")
        self.info(f"Nodes: {node_count} ({tau_count} tau)")
        self.info(f"Edges: {edge_count}")
        self.info(f"Selected: {selected if selected else '-'}")

    def query_evaluated(self, query_text: str, result_text: str):
        """Log a query together with its formatted result."""
        self.info(f"{query_text} → {result_text}")

    def closure_expanded(self, node_id: int, discovered: List[int]):
        """Log tau children found while expanding a closure node."""
        self.debug(f"    🔍 Closure expanded n{node_id}: new tau children {discovered}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class TaurusFormatter(logging.Formatter):
    """Custom formatter for exploration logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TaurusLogger] = None


def get_logger(name: str = "taurus") -> TaurusLogger:
    """Get or create the global exploration logger instance.

    Args:
        name: Logger name (default: "taurus")

    Returns:
        TaurusLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TaurusLogger(name)
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
