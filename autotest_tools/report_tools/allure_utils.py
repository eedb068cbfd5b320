"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching Allure reports from UI tests and for turning
allure-results into an HTML report after a run.

Features:
- Text and PNG attachment helpers
- Failure capture for Playwright pages (screenshot + URL)
- Result summary and report generation for run_tests.py

================================================================================
"""

import json
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_text(text: str, name: str = "Text"):
    """Attach plain text."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(content: bytes, name: str = "Screenshot"):
    """Attach a PNG image."""
    allure.attach(
        content,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


async def attach_page_failure(page, name: str = "failure") -> bool:
    """
    Attach a full-page screenshot and the current URL of a Playwright page.

    Best effort: the page may already be closed when a test fails.

    Returns:
        True if the screenshot was attached
    """
    try:
        attach_text(page.url, name=f"{name}_url")
        attach_png(await page.screenshot(full_page=True), name=f"{name}_screenshot")
        return True
    except Exception as e:
        logger.warning(f"Failed to capture failure details: {e}")
        return False


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class TestResultSummary:
    """Summary of test execution results."""
    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0
    unknown: int = 0
    duration_ms: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "unknown": self.unknown,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
        }


def parse_results(results_dir: Path) -> List[Dict[str, Any]]:
    """Read every `*-result.json` in an allure-results directory."""
    results = []
    for result_file in Path(results_dir).glob("*-result.json"):
        try:
            with open(result_file, encoding="utf-8") as f:
                results.append(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to parse {result_file}: {e}")
    return results


def summarize_results(results_dir: Path) -> TestResultSummary:
    """Count results by status and sum their durations."""
    summary = TestResultSummary()
    for result in parse_results(results_dir):
        summary.total += 1
        status = result.get("status", "unknown")
        if status in ("passed", "failed", "broken", "skipped"):
            setattr(summary, status, getattr(summary, status) + 1)
        else:
            summary.unknown += 1
        summary.duration_ms += result.get("stop", 0) - result.get("start", 0)
    return summary


def generate_allure_report(results_dir: Path, report_dir: Path) -> bool:
    """
    Generate the Allure HTML report with the Allure CLI.

    Returns:
        True if successful, False if the CLI is missing or failed
    """
    cmd = [
        "allure", "generate",
        str(results_dir),
        "-o", str(report_dir),
        "--clean"
    ]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        logger.warning("Allure CLI not found. Please install Allure to generate reports.")
        return False

    if result.returncode != 0:
        logger.error(f"Report generation failed: {result.stderr}")
        return False

    logger.info(f"Report generated at {report_dir}")
    return True


__all__ = [
    "attach_text",
    "attach_png",
    "attach_page_failure",
    "TestResultSummary",
    "parse_results",
    "summarize_results",
    "generate_allure_report",
]
