"""
Debug highlighting for page-object interactions.

When debug highlighting is on, every element a page object touches is painted
so a headed run shows what the test is doing. Styling problems must never fail
a test: errors are wrapped in HighlightError, logged and dropped.
"""

from __future__ import annotations

from typing import Dict

from loguru import logger
from playwright.async_api import Locator

from .errors import HighlightError


HIGHLIGHT_STYLE: Dict[str, str] = {
    "backgroundColor": "yellow",
    "border": "2px solid red",
    "color": "blue",
}

_APPLY_STYLE_JS = """
(elements, style) => {
    for (const el of elements) {
        Object.assign(el.style, style);
    }
}
"""


async def highlight(locator: Locator) -> bool:
    """
    Paint every element matched by `locator`.

    Returns:
        True if the style was applied, False if it failed (already logged).
    """
    try:
        await locator.evaluate_all(_APPLY_STYLE_JS, HIGHLIGHT_STYLE)
        return True
    except Exception as e:
        error = HighlightError(f"Failed to highlight element: {e}")
        logger.warning(str(error))
        return False


__all__ = [
    "HIGHLIGHT_STYLE",
    "highlight",
]
