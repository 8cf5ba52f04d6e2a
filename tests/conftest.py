"""Shared pytest configuration for the FoldTree test-suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-tree tests excluded from the default run")
