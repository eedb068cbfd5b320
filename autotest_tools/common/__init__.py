"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration and logging setup for the test suite.

Exports:
    - get_config: dot-path access to tool configuration
    - init_logger: configure loguru (console + rotating level-split files)
    - shutdown_logger: flush and detach log sinks at session end

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    log_dir = get_config("logging.dir", "logs")

================================================================================
"""

from .global_config import (
    get_config,
    init_logger,
    shutdown_logger,
)

__all__ = [
    "get_config",
    "init_logger",
    "shutdown_logger",
]
