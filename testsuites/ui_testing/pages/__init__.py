"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Swag Labs screens.

Each page class encapsulates:
    - Element locators (loaded from testdata)
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .auth_page import AuthPage
from .inventory_page import InventoryPage

__all__ = [
    "AuthPage",
    "InventoryPage",
]
