from datetime import timedelta
from pathlib import Path
from typing import Optional
import logging
import os
import tomllib

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Annotated, Self
from xdg_base_dirs import xdg_config_home


logger = logging.getLogger(__name__)

APP_NAME = "sao"
CONFIG_ENV_VAR = "SAO_CONFIG"

config_path = xdg_config_home() / APP_NAME
config_file = Path(os.environ.get(CONFIG_ENV_VAR, config_path / f"{APP_NAME}.toml"))


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Pause between a state change and the broadcast announcing it
    settle_delay: Annotated[timedelta, Field(default=timedelta(milliseconds=15))]
    # Random states are drawn from [state_min, state_max)
    state_min: int = 0
    state_max: int = 10
    seed: Optional[int] = None

    @field_validator("settle_delay")
    @classmethod
    def non_negative_delay(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("settle_delay must not be negative")
        return value

    @model_validator(mode="after")
    def non_empty_state_range(self) -> Self:
        if self.state_max <= self.state_min:
            raise ValueError(
                f"state_max ({self.state_max}) must be greater than "
                f"state_min ({self.state_min})"
            )
        return self


def load_settings(path: Path) -> Settings:
    if not path.is_file():
        logger.info(f'no config file at {path}, using defaults')
        return Settings()
    with path.open("rb") as file:
        try:
            config = tomllib.load(file)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Config file '{path}' is not valid TOML: {e}") from e
    return Settings.model_validate(config)


logger.info(f'{config_file=}')
settings = load_settings(config_file)
