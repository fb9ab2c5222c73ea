"""Holds the settings used by the pages server."""

import logging
from typing import Any

DEFAULTS: dict[str, Any] = {
  'host': '0.0.0.0',
  'port': 8080,
  'static_directory': 'static',
  'log_level': 'INFO',
  'log_file': None,
}


class Config:
  """A config class used throughout the pages server.

  Settings are fixed in code; overrides are accepted as keyword arguments
  so that callers such as tests can bind elsewhere.
  """

  # Enables autocomplete
  host: str
  port: int
  static_directory: str
  log_level: str
  log_file: str | None

  def __init__(self, **overrides: Any) -> None:
    """Build the config from DEFAULTS and any overrides.

    Args:
        overrides: settings to use instead of their defaults

    Raises:
        ValueError: if a setting is unknown or has an invalid value
    """
    unknown = sorted(set(overrides) - set(DEFAULTS))
    if unknown:
      raise ValueError(f'unknown config settings: {", ".join(unknown)}')

    self.config = {**DEFAULTS, **overrides}

    # bool is a subclass of int, but True is not a port
    if not isinstance(self.port, int) or isinstance(self.port, bool) or not 0 <= self.port <= 65535:
      raise ValueError('port must be an integer between 0 and 65535')

    self.config['log_level'] = str(self.log_level).upper()
    if not isinstance(logging.getLevelName(self.log_level), int):
      raise ValueError(f'log_level must be a logging level name, not {self.log_level}')

  def __getattr__(self, name: str) -> Any:
    """Get attribute from config dict.

    Args:
        name (str): the name of the setting

    Raises:
        AttributeError: if there is no setting with that name
    """
    # read through __dict__ so a Config without settings, e.g. mid-copy, cannot recurse
    try:
      return self.__dict__['config'][name]
    except KeyError:
      raise AttributeError(name) from None

  def bind_address(self) -> str:
    """Return the address the listener binds, as host:port."""
    return f'{self.host}:{self.port}'
