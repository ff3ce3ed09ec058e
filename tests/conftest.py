"""
Global pytest configuration and fixtures
"""
import pytest
from typing import Dict, Any

from utils.logger import reset_logger

# Import seed fixtures
pytest_plugins = ["tests.fixtures.seed_fixtures"]


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide test configuration"""
    return {
        "defaults": {
            "unique": True,
            "verbose": False,
            "format": "plain"
        },
        "logging": {
            "level": "DEBUG"
        }
    }


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create temporary directory for test outputs"""
    output_dir = tmp_path / "test_output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test gets its own diagnostic logger"""
    reset_logger()
    yield
    reset_logger()
