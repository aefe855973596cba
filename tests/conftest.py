"""Shared pytest configuration for the BinTreeLib test suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-tree tests excluded from regular runs")
