# Copyright 2025 Michael Homer. See LICENSE for details.
import logging
import os
import sys
import typing

from .config import Settings
from .errors import PrintscanError, UsageError
from .interpreter import interpret
from .lexer import ENCODING, ERRORS
from .loader import load_source

logger = logging.getLogger(__name__)


def program_name() -> str:
    """
    Name the program the way it was started: the console script's own name,
    or python -m printscan when run as a module.
    """
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ''
    if not name or name in ('__main__.py', '-m', '-c'):
        return 'python -m printscan'
    return name


def usage() -> str:
    return f"Usage: {program_name()} <filename>"


def pass_bytes_through(stream: typing.TextIO) -> None:
    """
    Make stream write source text back as the file's original bytes,
    whatever encoding the stream was opened with.
    """
    reconfigure = getattr(stream, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(encoding=ENCODING, errors=ERRORS)


def main(argv: list[str] | None = None) -> int:
    """
    Load the file named by the single argument and run it.

    Returns the process exit status: 0 once the file has been interpreted,
    1 if the arguments, configuration or file could not be used. Failures
    are reported on stderr.
    """
    if argv is None:
        argv = sys.argv[1:]
    pass_bytes_through(sys.stdout)
    pass_bytes_through(sys.stderr)
    try:
        if len(argv) != 1:
            raise UsageError(usage())
        settings = Settings.from_environ()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        source = load_source(argv[0])
        logger.debug("Loaded %d characters from %s", len(source), argv[0])
        interpret(source, capacity=settings.capacity)
    except PrintscanError as e:
        print(e, file=sys.stderr)
        return 1
    logger.debug("Finished %s", argv[0])
    return 0
