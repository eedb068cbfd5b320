"""
================================================================================
Autotest Tools
================================================================================

Support utilities for the UI test suite.

Modules:
    - common: configuration and loguru logging setup
    - report_tools: Allure attachments and report generation

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools.allure_utils import attach_text

    init_logger()
    attach_text("hello", name="greeting")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
