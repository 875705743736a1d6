from __future__ import annotations

import logging

from config import Config, TestConfig
from rideshare import create_app


def test_json_logging_is_installed_on_the_root_handler():
    class JsonConfig(TestConfig):
        LOG_JSON = True
        LOG_LEVEL = "warning"

    create_app(JsonConfig)

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert type(root.handlers[0].formatter).__name__ == "JsonFormatter"

    create_app(TestConfig)
    assert logging.getLogger().level == logging.INFO


def test_default_config_reads_environment_defaults():
    assert Config.SQLALCHEMY_TRACK_MODIFICATIONS is False
    assert TestConfig.SQLALCHEMY_DATABASE_URI == "sqlite://"
