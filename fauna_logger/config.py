"""Configuration for the request logger sinks.

Settings come from an optional YAML file and are then overridden by
environment variables (a ``.env`` file is honoured via python-dotenv).

Environment Variables (.env):
  FAUNA_LOGGER_CONFIG    Path to the YAML file (default: fauna_logger.yml)
  FAUNA_LOG_FILE         Append rendered entries to this file
  FAUNA_LOG_TIMESTAMPS   1/true/yes/on to prefix entries with a UTC timestamp
  FAUNA_LOG_LEVEL        Level used by the logging sink (default: DEBUG)
  FAUNA_LOGGER_NAME      Logger name for the logging sink (default: fauna)

YAML keys mirror the dataclass fields: ``log_file``, ``with_time``,
``log_level`` and ``logger_name``.
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict
import logging
import os

import yaml
from dotenv import find_dotenv, load_dotenv

from .logging_utils import LineSink, logging_sink

DEFAULT_CONFIG_PATH = 'fauna_logger.yml'
_TRUE_VALUES = {'1', 'true', 'yes', 'on'}

log = logging.getLogger(__name__)

class ConfigError(ValueError):
    """Raised when the logger configuration is malformed."""

@dataclass(slots=True)
class LoggerConfig:
    log_file: str | None = None
    with_time: bool = True
    log_level: str = 'DEBUG'
    logger_name: str = 'fauna'

    @property
    def level(self) -> int:
        value = logging.getLevelName(self.log_level.upper())
        if not isinstance(value, int):
            raise ConfigError(f'Unknown log level: {self.log_level!r}')
        return value

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f'{path}: expected a mapping, got {type(data).__name__}')
    return data

def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES

def _check_types(data: Dict[str, Any]) -> Dict[str, Any]:
    checked = dict(data)
    with_time = checked.get('with_time', True)
    if isinstance(with_time, str):
        checked['with_time'] = _parse_bool(with_time)
    elif not isinstance(with_time, bool):
        raise ConfigError(f'with_time must be a boolean, got {with_time!r}')
    for key in ('log_level', 'logger_name'):
        if key in checked and not isinstance(checked[key], str):
            raise ConfigError(f'{key} must be a string, got {checked[key]!r}')
    log_file = checked.get('log_file')
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError(f'log_file must be a string, got {log_file!r}')
    return checked

def load_config(path: str | None = None) -> LoggerConfig:
    """Resolve configuration from YAML then environment overrides.

    A missing default file is ignored; a missing explicit ``path`` (argument
    or ``FAUNA_LOGGER_CONFIG``) raises ``FileNotFoundError``.
    """
    load_dotenv(find_dotenv(usecwd=True))
    explicit = path or os.getenv('FAUNA_LOGGER_CONFIG')
    cfg_path = explicit or DEFAULT_CONFIG_PATH
    data: Dict[str, Any] = {}
    if explicit or os.path.exists(cfg_path):
        data = load_yaml(cfg_path)
        log.debug('Loaded logger config from %s', cfg_path)

    known = {f.name for f in fields(LoggerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f'Unknown config keys: {", ".join(unknown)}')
    config = LoggerConfig(**_check_types(data))

    overrides: Dict[str, Any] = {}
    if os.getenv('FAUNA_LOG_FILE'):
        overrides['log_file'] = os.environ['FAUNA_LOG_FILE']
    if os.getenv('FAUNA_LOG_TIMESTAMPS') is not None:
        overrides['with_time'] = _parse_bool(os.environ['FAUNA_LOG_TIMESTAMPS'])
    if os.getenv('FAUNA_LOG_LEVEL'):
        overrides['log_level'] = os.environ['FAUNA_LOG_LEVEL']
    if os.getenv('FAUNA_LOGGER_NAME') is not None:
        overrides['logger_name'] = os.environ['FAUNA_LOGGER_NAME']
    config = replace(config, **overrides)
    config.level  # unknown level names raise ConfigError
    return config

def build_sink(config: LoggerConfig) -> Callable[[str], None]:
    """Pick the sink described by ``config``.

    A log file (or an empty logger name) selects :class:`LineSink`; otherwise
    entries go to the named stdlib logger.
    """
    if config.log_file or not config.logger_name:
        return LineSink(log_file=config.log_file, with_time=config.with_time)
    return logging_sink(logging.getLogger(config.logger_name), config.level)
