import os
import sys
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, load_config, setup_logging, LOG_FORMAT


def test_load_config_defaults():
    config = load_config({})
    assert config == GameConfig(
        width=42,
        height=22,
        base_speed=4,
        num_apples=1,
        boundary="wrap",
        log_level="WARNING",
        log_file=None,
    )


def test_load_config_reads_environment():
    config = load_config({
        "SNAKE_WIDTH": "30",
        "SNAKE_HEIGHT": "15",
        "SNAKE_BASE_SPEED": "8",
        "SNAKE_NUM_APPLES": "3",
        "SNAKE_BOUNDARY": " Solid ",
        "SNAKE_LOG_LEVEL": "debug",
        "SNAKE_LOG_FILE": "/tmp/snake.log",
    })
    assert config.width == 30
    assert config.height == 15
    assert config.base_speed == 8
    assert config.num_apples == 3
    assert config.boundary == "solid"
    assert config.log_level == "DEBUG"
    assert config.log_file == "/tmp/snake.log"


def test_blank_values_fall_back_to_defaults():
    config = load_config({"SNAKE_WIDTH": "  ", "SNAKE_LOG_FILE": ""})
    assert config.width == 42
    assert config.log_file is None


@pytest.mark.parametrize("env, message", [
    ({"SNAKE_WIDTH": "wide"}, "SNAKE_WIDTH must be an integer"),
    ({"SNAKE_HEIGHT": "2"}, "at least 3x3"),
    ({"SNAKE_BASE_SPEED": "0"}, "Base speed"),
    ({"SNAKE_NUM_APPLES": "0"}, "Number of apples"),
    ({"SNAKE_WIDTH": "4", "SNAKE_HEIGHT": "4", "SNAKE_NUM_APPLES": "4"}, "do not fit"),
    ({"SNAKE_BOUNDARY": "bounce"}, "Unknown boundary policy"),
    ({"SNAKE_LOG_LEVEL": "LOUD"}, "Unknown log level"),
])
def test_load_config_rejects_bad_values(env, message):
    with pytest.raises(ValueError, match=message):
        load_config(env)


def test_setup_logging_to_stderr():
    with patch("config.logging.basicConfig") as basic_config:
        setup_logging("info")
    basic_config.assert_called_once_with(level="INFO", format=LOG_FORMAT)


def test_setup_logging_to_file():
    with patch("config.logging.basicConfig") as basic_config:
        setup_logging("DEBUG", "/tmp/snake.log")
    basic_config.assert_called_once_with(level="DEBUG", format=LOG_FORMAT, filename="/tmp/snake.log")
