from pathlib import Path

import pytest

from carcamanager.config import AppConfig
from carcamanager.exceptions import InvalidConfigurationException


def test_defaults():
    config = AppConfig()

    assert config.data_dir == Path("data")
    assert config.base_url == "https://boardgamearena.com"
    assert config.request_timeout == 30.0
    assert config.use_mock is False


def test_dict_round_trip():
    config = AppConfig(data_dir=Path("fixtures"), use_mock=True, log_level="DEBUG")

    assert AppConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize("value", ["soon", None, 0, -5])
def test_invalid_timeout(value):
    with pytest.raises(InvalidConfigurationException):
        AppConfig.from_dict({"request_timeout": value})


@pytest.mark.parametrize("value, expected", [("1", True), ("Yes", True), ("no", False)])
def test_use_mock_strings(value, expected):
    assert AppConfig.from_dict({"use_mock": value}).use_mock is expected


def test_from_env_file_and_environment(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "CARCA_DATA_DIR=fixtures\nCARCA_REQUEST_TIMEOUT=10\nBGA_USER=herchu\n"
    )

    config = AppConfig.from_env(env_file, environ={"CARCA_REQUEST_TIMEOUT": "5"})

    assert config.data_dir == Path("fixtures")
    assert config.request_timeout == 5.0
    assert config.env_file == env_file


def test_from_env_without_file(tmp_path):
    config = AppConfig.from_env(tmp_path / "missing.env", environ={"CARCA_USE_MOCK": "true"})

    assert config.use_mock is True
    assert config.data_dir == Path("data")
