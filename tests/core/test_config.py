import json

import pytest
from pydantic import ValidationError
from purefn.core.config import Settings
from purefn.core.enums import ComposeOrder


@pytest.fixture
def missing_config(tmp_path):
    return {"PUREFN_CONFIG": str(tmp_path / "absent.json")}


def test_defaults(missing_config):
    settings = Settings.load(environ=missing_config)
    assert settings.LOG_LEVEL == "INFO"
    assert settings.COMPOSE_ORDER is ComposeOrder.RIGHT_TO_LEFT
    assert settings.EVENT_LIMIT == 10


def test_load_from_json_file(tmp_path):
    path = tmp_path / "purefn.json"
    path.write_text(json.dumps({"compose_order": "ltr", "event_limit": 3}))

    settings = Settings.load(environ={"PUREFN_CONFIG": str(path)})

    assert settings.COMPOSE_ORDER is ComposeOrder.LEFT_TO_RIGHT
    assert settings.EVENT_LIMIT == 3
    assert settings.CONFIG_PATH == path


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "purefn.json"
    path.write_text(json.dumps({"EVENT_LIMIT": 3, "LOG_LEVEL": "WARNING"}))

    settings = Settings.load(
        environ={"PUREFN_CONFIG": str(path), "PUREFN_EVENT_LIMIT": "7"}
    )

    assert settings.EVENT_LIMIT == 7
    assert settings.LOG_LEVEL == "WARNING"


def test_invalid_values_raise(missing_config):
    with pytest.raises(ValidationError):
        Settings.load(environ={**missing_config, "PUREFN_EVENT_LIMIT": "0"})
    with pytest.raises(ValidationError):
        Settings.load(environ={**missing_config, "PUREFN_COMPOSE_ORDER": "sideways"})


def test_log_level_is_normalised(missing_config):
    settings = Settings.load(environ={**missing_config, "PUREFN_LOG_LEVEL": "debug"})
    assert settings.LOG_LEVEL == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_invalid_log_level_from_env(missing_config):
    with pytest.raises(ValidationError):
        Settings.load(environ={**missing_config, "PUREFN_LOG_LEVEL": "chatty"})


@pytest.mark.parametrize("content", ["[1, 2]", "3", '"ltr"'])
def test_config_file_must_hold_an_object(tmp_path, content):
    path = tmp_path / "purefn.json"
    path.write_text(content)

    with pytest.raises(ValueError, match="must contain a JSON object"):
        Settings.load(environ={"PUREFN_CONFIG": str(path)})
