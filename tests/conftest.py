"""
Pytest configuration and shared fixtures for chronofilter testing.

Provides a fixed reference date, parser instances, temporary configuration
directories and marker registration for unit, integration and performance
tests.
"""

import os
import tempfile
from dataclasses import dataclass
from datetime import date
from pathlib import Path

import pytest
import yaml

from chronofilter.core.config_manager import ParserConfig
from chronofilter.core.logging_manager import LoggingManager
from chronofilter.processors.core.temporal_parser import TemporalParser


@dataclass
class TestConfig:
    """Test configuration settings"""
    __test__ = False

    reference_date: date = date(2025, 6, 15)   # A Sunday
    max_query_length: int = 500


@pytest.fixture(scope="session")
def test_config():
    """Global test configuration"""
    return TestConfig()


@pytest.fixture
def reference_date(test_config):
    """Fixed "today" used to resolve relative expressions"""
    return test_config.reference_date


# Parser Fixtures
@pytest.fixture
def parser():
    """Parser with default settings"""
    return TemporalParser()


@pytest.fixture
def strict_parser():
    """Parser that re-raises internal errors instead of returning None"""
    return TemporalParser(ParserConfig(strict=True))


@pytest.fixture
def parse(parser, reference_date):
    """Parse helper bound to the fixed reference date"""
    def _parse(text):
        return parser.parse(text, reference_date)
    return _parse


# Configuration Fixtures
@pytest.fixture
def temp_config_dir():
    """Temporary directory for test configuration files"""
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = Path(temp_dir) / "config"
        config_dir.mkdir()

        default_config = {
            "app_name": "chronofilter-test",
            "version": "0.1.0-test",
            "environment": "development",
            "parser": {
                "max_query_length": 200,
                "max_relative_days": 365,
                "strict": False
            },
            "logging": {
                "level": "DEBUG",
                "log_to_console": False,
                "log_to_file": False
            }
        }

        with open(config_dir / "default_config.yaml", "w") as f:
            yaml.dump(default_config, f)

        yield config_dir


# Test Environment Setup
@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep host CHRONOFILTER_* variables and log handlers out of the tests"""
    for key in list(os.environ):
        if key.startswith("CHRONOFILTER_"):
            monkeypatch.delenv(key)

    yield

    LoggingManager().reset()


# Custom pytest markers
def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "performance: mark test as performance test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# Test Collection Hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on file location"""
    for item in items:
        path = str(item.path)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "performance" in path:
            item.add_marker(pytest.mark.performance)
            item.add_marker(pytest.mark.slow)
