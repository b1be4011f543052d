# Copyright 2025 Michael Homer. See LICENSE for details.
from collections.abc import Collection, Iterable, Iterator

from .tokens import Token, Command


def scan(tokens: Iterable[Token], keywords: Collection[str] = ('print',)) -> Iterator[Command]:
    """
    Recognise keyword commands in a stream of tokens.

    Each token whose value is exactly one of keywords takes the token after
    it as its argument. That argument is consumed here and never checked for
    being a keyword itself. Tokens that are not keywords are skipped.

    :param tokens: Tokens in source order, as produced by lexer.tokenise.
    :param keywords: The case-sensitive keyword names to recognise.
    :return: An iterator of Commands, whose argument is None if the tokens ran out.
    """
    stream = iter(tokens)
    for token in stream:
        if token.value in keywords:
            yield Command(token, next(stream, None))
