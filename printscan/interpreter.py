# Copyright 2025 Michael Homer. See LICENSE for details.
import logging
import sys
import typing
from collections.abc import Mapping

from .lexer import DEFAULT_CAPACITY, tokenise, working_copy
from .scanner import scan
from .tokens import Command

logger = logging.getLogger(__name__)


class Action(typing.Protocol):
    """
    Type for the function run when a keyword is found with its argument.
    """
    def __call__(self, command: Command, stdout: typing.TextIO) -> None:
        ...


def print_action(command: Command, stdout: typing.TextIO) -> None:
    stdout.write(f"Printed: {command.argument.value}\n")


DEFAULT_ACTIONS: dict[str, Action] = {'print': print_action}


def interpret(source: str,
              actions: Mapping[str, Action] | None = None,
              capacity: int | None = DEFAULT_CAPACITY,
              stdout: typing.TextIO | None = None,
              stderr: typing.TextIO | None = None) -> None:
    """
    Run every command found in source.

    A keyword with no following token is reported on stderr and does not
    stop the run.

    :param source: The program text.
    :param actions: A mapping of keyword to the Action run for it. Only these keywords are recognised. Defaults to DEFAULT_ACTIONS, i.e. just print.
    :param capacity: Working copy capacity, including the terminator; None for no limit.
    :param stdout: Stream for command output, sys.stdout if not given.
    :param stderr: Stream for diagnostics, sys.stderr if not given.
    """
    if actions is None:
        actions = DEFAULT_ACTIONS
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr
    text = working_copy(source, capacity)
    for command in scan(tokenise(text), actions.keys()):
        if command.missing_argument:
            logger.info("'%s' at %s has no argument", command.name, command.keyword.location())
            stderr.write(f"Error: Missing argument for {command.name}\n")
            continue
        actions[command.name](command, stdout)
