# Copyright 2025 Michael Homer. See LICENSE for details.
from .errors import PrintscanError, UsageError, ConfigError, LoadError, FileOpenError, AllocationError, ShortReadError
from .interpreter import interpret, DEFAULT_ACTIONS
from .lexer import tokenise, working_copy, DEFAULT_CAPACITY
from .loader import load_source
from .scanner import scan
from .tokens import Token, Command

__version__ = '0.1.0'

__all__ = ['interpret', 'load_source', 'tokenise', 'working_copy', 'scan',
           'Token', 'Command', 'DEFAULT_ACTIONS', 'DEFAULT_CAPACITY',
           'PrintscanError', 'UsageError', 'ConfigError', 'LoadError',
           'FileOpenError', 'AllocationError', 'ShortReadError']
