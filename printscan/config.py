# Copyright 2025 Michael Homer. See LICENSE for details.
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError
from .lexer import DEFAULT_CAPACITY


@dataclass
class Settings:
    """
    Runtime settings, normally taken from the environment.

    capacity is None when the working copy is unbounded.
    """
    capacity : int | None = DEFAULT_CAPACITY
    log_level : str = 'WARNING'

    @staticmethod
    def from_environ(environ: Mapping[str, str] = os.environ) -> 'Settings':
        """
        Build settings from PRINTSCAN_CAPACITY and PRINTSCAN_LOG_LEVEL.

        A capacity of 0 removes the limit.
        """
        raw_capacity = environ.get('PRINTSCAN_CAPACITY', str(DEFAULT_CAPACITY))
        try:
            capacity = int(raw_capacity)
        except ValueError:
            raise ConfigError(f"Invalid PRINTSCAN_CAPACITY '{raw_capacity}': expected a whole number") from None
        if capacity < 0:
            raise ConfigError(f"Invalid PRINTSCAN_CAPACITY '{raw_capacity}': must not be negative")
        log_level = environ.get('PRINTSCAN_LOG_LEVEL', 'WARNING').upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Invalid PRINTSCAN_LOG_LEVEL '{log_level}'")
        return Settings(capacity if capacity else None, log_level)
