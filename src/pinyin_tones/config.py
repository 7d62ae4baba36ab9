import os
from dataclasses import dataclass, fields

import toml
from dotenv import load_dotenv

from .errors import ConfigError, InputNotFoundError

DEFAULT_CONFIG_PATH = "pinyin_tones.toml"

# TOML section -> {key in section: Settings field}
CONFIG_SECTIONS = {
    "vocabulary": {"sep": "sep", "output_sep": "output_sep", "header": "header"},
    "io": {"encoding": "encoding"},
    "logging": {"level": "log_level"},
}


@dataclass
class Settings:
    sep: str = ","
    output_sep: str = ","
    header: bool = True
    encoding: str = "utf-8"
    log_level: str = "INFO"


def _config_path(path):
    path = path or os.environ.get("PINYIN_TONES_CONFIG")
    if path:
        if not os.path.isfile(path):
            raise InputNotFoundError(path)
        return path
    if os.path.isfile(DEFAULT_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH
    return None


def load_settings(path: str | None = None) -> Settings:
    """
    Loads settings from the environment and an optional TOML file.

    Parameters
    ----------
    path : str, optional
        The TOML file to read. Falls back to ``$PINYIN_TONES_CONFIG`` and then
        to ``pinyin_tones.toml`` in the working directory, if either exists.

    Returns
    -------
    Settings
        The defaults, updated with the values found in the file and
        ``$PINYIN_TONES_LOG_LEVEL``.
    """
    load_dotenv()
    values = {}
    config_path = _config_path(path)
    if config_path:
        try:
            data = toml.load(config_path)
        except toml.TomlDecodeError as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e
        for section, table in data.items():
            if section not in CONFIG_SECTIONS or not isinstance(table, dict):
                raise ConfigError(f"Unknown config section [{section}] in {config_path}")
            for key, value in table.items():
                if key not in CONFIG_SECTIONS[section]:
                    raise ConfigError(f"Unknown config key {section}.{key} in {config_path}")
                values[CONFIG_SECTIONS[section][key]] = value

    if os.environ.get("PINYIN_TONES_LOG_LEVEL"):
        values["log_level"] = os.environ["PINYIN_TONES_LOG_LEVEL"]

    types = {f.name: type(f.default) for f in fields(Settings)}
    for name, value in values.items():
        if not isinstance(value, types[name]):
            raise ConfigError(f"Config value for {name} must be {types[name].__name__}, got {value!r}")
    return Settings(**values)
