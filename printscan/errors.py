# Copyright 2025 Michael Homer. See LICENSE for details.


class PrintscanError(Exception):
    """
    Base class for every error printscan reports before exiting.
    """
    pass


class UsageError(PrintscanError):
    pass


class ConfigError(PrintscanError):
    pass


class LoadError(PrintscanError):
    """
    Raised when a source file cannot be loaded.

    :param path: The path that was being loaded.
    """
    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class FileOpenError(LoadError):
    pass


class AllocationError(LoadError):
    pass


class ShortReadError(LoadError):
    pass
