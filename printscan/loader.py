# Copyright 2025 Michael Homer. See LICENSE for details.
import io
import logging
import os

from .errors import FileOpenError, AllocationError, ShortReadError
from .lexer import ENCODING, ERRORS

logger = logging.getLogger(__name__)


def load_source(path: str | os.PathLike) -> str:
    """
    Read the whole of a file into a string.

    The size is measured up front and exactly that many bytes are read; a
    file that turns out shorter than measured is an error. The bytes are
    decoded as UTF-8 with surrogateescape, so bytes that are not valid
    UTF-8 survive as lone surrogates and encode back unchanged.

    :raises FileOpenError: if the file cannot be opened.
    :raises AllocationError: if no buffer of the file's size can be made.
    :raises ShortReadError: if fewer bytes than measured could be read.
    """
    name = os.fsdecode(path)
    try:
        file = open(path, 'rb')
    except OSError as e:
        raise FileOpenError(f"Failed to open the file '{name}'", name) from e
    with file:
        logger.debug("Opened %s", name)
        try:
            size = file.seek(0, io.SEEK_END)
            file.seek(0)
            try:
                buffer = bytearray(size)
            except MemoryError as e:
                raise AllocationError("Memory allocation error", name) from e
            count = file.readinto(buffer)
        except OSError as e:
            raise ShortReadError(f"Failed to read the file '{name}'", name) from e
        if count != size:
            raise ShortReadError(f"Failed to read the file '{name}'", name)
    logger.debug("Loaded %d bytes from %s", size, name)
    return buffer.decode(ENCODING, ERRORS)
