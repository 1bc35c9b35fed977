"""
PyTest Configuration and Fixtures
"""

import logging

import pytest


@pytest.fixture
def service_logs(caplog):
    """Capture everything the service logger emits, DEBUG included"""
    caplog.set_level(logging.DEBUG, logger="fibonacci_service")
    yield caplog


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "performance: mark test as performance test")
