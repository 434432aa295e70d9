import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, PositiveInt, field_validator

from purefn.core.enums import ComposeOrder
from purefn.logger.logger import get_logger, logger, resolve_level

__all__ = ["Settings", "settings"]

ENV_PREFIX = "PUREFN_"

_log = get_logger(__name__)


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    COMPOSE_ORDER: ComposeOrder = ComposeOrder.RIGHT_TO_LEFT
    EVENT_LIMIT: PositiveInt = 10
    CONFIG_PATH: Path = Field(default_factory=lambda: Path().home() / ".purefn.json")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        resolve_level(value)
        return value.upper()

    @classmethod
    def load(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """Build settings from defaults, an optional JSON file and the environment.

        Args:
            environ: Mapping to read variables from. Defaults to ``os.environ``.

        Returns:
            Validated settings.
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        config_path = Path(
            environ.get(f"{ENV_PREFIX}CONFIG", Path().home() / ".purefn.json")
        )
        if config_path.exists():
            _log.debug(f"Reading configuration from {config_path}")
            with open(config_path, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(
                    f"Configuration file {config_path} must contain a JSON object, "
                    f"got {type(data).__name__}"
                )
            values.update({k.upper(): v for k, v in data.items()})
        values["CONFIG_PATH"] = config_path

        for name in ("LOG_LEVEL", "COMPOSE_ORDER", "EVENT_LIMIT"):
            value = environ.get(f"{ENV_PREFIX}{name}")
            if value is not None:
                values[name] = value

        return cls(**values)


settings = Settings.load()
logger.setLevel(resolve_level(settings.LOG_LEVEL))
