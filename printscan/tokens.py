# Copyright 2025 Michael Homer. See LICENSE for details.
from dataclasses import dataclass


@dataclass
class Token:
    "A whitespace-delimited word in printscan source."
    line : int
    column : int
    offset : int
    value : str

    def location(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass
class Command:
    """
    A keyword token together with the token that followed it.

    argument is None when the source ended straight after the keyword.
    """
    keyword : Token
    argument : Token | None

    @property
    def name(self) -> str:
        return self.keyword.value

    @property
    def missing_argument(self) -> bool:
        return self.argument is None
