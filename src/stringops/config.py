"""Packaged settings for the console boundary and the demonstration harness.

Defaults live in `stringops/data/settings.yaml`. A different file can be
loaded with `Settings.load` and passed explicitly to `stringops.console.prompt_line`
or `stringops.demo.main`.
"""

__docformat__ = 'google'

__all__ = [
    'Settings',
    'default_settings_path',
    'load_settings'
]

from dataclasses import dataclass, fields
from functools import cache
from importlib import resources
import yaml
from stringops.errors import ConfigurationError

@cache
def default_settings_path():
    """Location of the settings file shipped inside the package."""
    return resources.files('stringops.data').joinpath('settings.yaml')

@dataclass(frozen=True)
class Settings:
    """
    Text and defaults used outside the pure text functions.

    Args:
        prompt_suffix: Appended to every prompt before reading
        retry_message: Written when an empty line is read
        diagnostic_message: Prefix of the end-of-stream diagnostic
        sample_text: Demo input used when no line can be read
        replace_old: Substring the demo replaces
        replace_new: Replacement the demo inserts
        split_separator: Separator the demo splits on
        join_separator: Separator the demo joins with
        log_level: Level name passed to `stringops.logs.setup_logging`
        log_format: 'text' or 'json'
    """
    prompt_suffix: str
    retry_message: str
    diagnostic_message: str
    sample_text: str
    replace_old: str
    replace_new: str
    split_separator: str
    join_separator: str
    log_level: str = 'WARNING'
    log_format: str = 'text'

    @classmethod
    def load(cls, file_path = None):
        file_path = file_path or default_settings_path()

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(f'Settings file {file_path} must contain a mapping.')

        required = [f.name for f in fields(cls) if f.name not in ('log_level', 'log_format')]
        missing = [name for name in required if name not in data]
        if missing:
            raise ConfigurationError(
                f"Settings file {file_path} is missing: {', '.join(missing)}"
            )

        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        not_text = [key for key, value in values.items() if not isinstance(value, str)]
        if not_text:
            raise ConfigurationError(
                f"Settings file {file_path} has non-string values for: {', '.join(not_text)}"
            )
        return cls(**values)

@cache
def load_settings() -> Settings:
    """Return the packaged default settings, read once per process."""
    return Settings.load()
