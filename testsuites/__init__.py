"""
Test suites package.

`testsuites` is kept importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - page objects and framework helpers shared between test modules
"""
