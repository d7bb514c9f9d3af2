# utils/__init__.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Utility module exports
#
# The graph dump reader depends on ``core``, which logs through this package,
# so it is imported as ``utils.graph_reader`` rather than re-exported here.

from .logger import (
    LogLevel,
    TaurusLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "TaurusLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
