import tomllib
from pathlib import Path

import dacite
from dacite import from_dict

from react_agent.exceptions import ConfigError
from utils.config import Config

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.toml"


def load_config(path: str | Path | None = None) -> Config:
    """Load ``config.toml`` (or ``path``); a missing default file means built-in defaults."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.is_file():
        if path is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        return Config()
    try:
        with open(config_path, "rb") as f:
            config_dict = tomllib.load(f)
        return from_dict(Config, config_dict, config=dacite.Config(strict=True, type_hooks={float: float}))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    except (dacite.DaciteError, ValueError) as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
