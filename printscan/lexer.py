# Copyright 2025 Michael Homer. See LICENSE for details.
import logging
import re
from collections.abc import Iterator

from .tokens import Token

logger = logging.getLogger(__name__)

# Only these three separate tokens; '\r', '\v' and '\f' stay inside words.
DELIMITERS = ' \t\n'

# Source text holds undecodable bytes as lone surrogates, so it can always
# be turned back into the exact bytes of the file.
ENCODING = 'utf-8'
ERRORS = 'surrogateescape'

# In bytes, including the terminator, so at most DEFAULT_CAPACITY - 1 bytes are scanned.
DEFAULT_CAPACITY = 1000

word_pattern = re.compile(r'[^ \t\n]+')


def working_copy(source: str, capacity: int | None = DEFAULT_CAPACITY) -> str:
    """
    Return the part of source that will actually be scanned.

    Everything from the first NUL character on is dropped. If what remains
    encodes to at least capacity bytes it is cut to its first capacity - 1
    bytes; a keyword or argument straddling that boundary is lost or
    shortened, possibly in the middle of a multibyte character. A capacity
    of None means no limit.
    """
    text, nul, _ = source.partition('\0')
    if nul:
        logger.debug("Ignoring input after NUL character at offset %d", len(text))
    if capacity is not None:
        data = text.encode(ENCODING, ERRORS)
        if len(data) >= capacity:
            logger.debug("Truncating %d bytes of input to %d", len(data), capacity - 1)
            text = data[:max(capacity - 1, 0)].decode(ENCODING, ERRORS)
    return text


def tokenise(source: str) -> Iterator[Token]:
    """
    Lazily produce the tokens of source, left to right.

    Consecutive delimiters collapse, so no token is ever empty. The source
    string itself is left untouched.
    """
    line = 1
    line_start = 0
    position = 0
    for match in word_pattern.finditer(source):
        index = match.start()
        newlines = source.count('\n', position, index)
        if newlines:
            line += newlines
            line_start = source.rindex('\n', position, index) + 1
        position = index
        yield Token(line, index - line_start + 1, index, match.group(0))
