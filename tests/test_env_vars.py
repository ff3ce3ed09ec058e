"""
Test environment variable expansion and option resolution in configuration
"""

import os
import tempfile
from pathlib import Path
from utils.helpers import DEFAULT_OPTIONS, load_config, resolve_options


def _write_config(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(content)
        return f.name


def test_env_var_expansion_basic():
    """Test basic environment variable expansion"""
    os.environ["TEST_SUBCOMB_FORMAT"] = "json"

    config_path = _write_config("""
    defaults:
      format: "${TEST_SUBCOMB_FORMAT}"
    """)

    try:
        config = load_config(config_path)
        assert config["defaults"]["format"] == "json"
    finally:
        Path(config_path).unlink()
        del os.environ["TEST_SUBCOMB_FORMAT"]


def test_env_var_expansion_with_defaults():
    """Test environment variable expansion with default values"""
    os.environ.pop("NONEXISTENT_FORMAT", None)
    os.environ.pop("NONEXISTENT_UNIQUE", None)

    config_path = _write_config("""
    defaults:
      format: "${NONEXISTENT_FORMAT:-csv}"
      unique: "${NONEXISTENT_UNIQUE:-false}"
    """)

    try:
        config = load_config(config_path)
        assert config["defaults"]["format"] == "csv"
        assert config["defaults"]["unique"] == "false"
    finally:
        Path(config_path).unlink()


def test_env_var_expansion_nested():
    """Test environment variable expansion in nested structures"""
    os.environ["TEST_LOG_PATH"] = "/tmp/subcomb-test.log"

    config_path = _write_config("""
    logging:
      level: DEBUG
      handlers:
        - path: "${TEST_LOG_PATH}"
        - path: "static_value"
    """)

    try:
        config = load_config(config_path)
        assert config["logging"]["handlers"][0]["path"] == "/tmp/subcomb-test.log"
        assert config["logging"]["handlers"][1]["path"] == "static_value"
    finally:
        Path(config_path).unlink()
        del os.environ["TEST_LOG_PATH"]


def test_missing_config_is_empty(tmp_path):
    """A config path that does not exist yields an empty config"""
    assert load_config(str(tmp_path / "absent.yaml")) == {}


def test_invalid_yaml_warns_on_stderr(tmp_path, capsys):
    """Broken YAML yields an empty config and a warning on stderr only"""
    path = tmp_path / "broken.yaml"
    path.write_text("defaults: [unclosed\n")

    assert load_config(str(path)) == {}
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Could not load config" in captured.err


def test_resolve_options_precedence():
    """Explicit values beat config defaults, which beat built-in defaults"""
    config = {"defaults": {"format": "json", "unique": "false", "verbose": ""}}

    options = resolve_options(config)
    assert options == {"unique": False, "verbose": False, "format": "json"}

    options = resolve_options(config, format="csv", unique=True, verbose=None)
    assert options == {"unique": True, "verbose": False, "format": "csv"}


def test_resolve_options_without_config():
    assert resolve_options(None) == DEFAULT_OPTIONS
    assert resolve_options({}, verbose=True)["verbose"] is True


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
