"""Framework unit tests (no browser required)."""
