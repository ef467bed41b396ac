"""Shared test fixtures for logkeeper."""

import os
import tempfile

import pytest

from logkeeper.levels import ConsoleMode


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file pointing at a log directory."""
    import yaml

    config_data = {
        "registry": {
            "directory": os.path.join(tmp_dir, "logs"),
            "expiration_days": 7,
            "max_file_size_bytes": 1000,
            "console": "none",
        },
        "format": {
            "include_timestamp": False,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def write_lines():
    """Write ``\\n``-terminated lines to a file and return its path."""

    def _write(path, lines, trailing=""):
        with open(path, "wb") as f:
            for line in lines:
                f.write(line.encode("utf-8") + b"\n")
            if trailing:
                f.write(trailing.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def quiet_registry_kwargs():
    """Registry arguments that keep console output out of test logs."""
    return {"console": ConsoleMode.NONE}
