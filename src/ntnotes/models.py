"""Defines the small value types passed between the command-line interface, the store, and the external tools."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Note:
    """A file directly inside the base directory.

    Nothing about a note is kept in memory besides where it lives; its contents are only ever read by external
    programs.
    """

    name: str
    """The file name, which is also how the user refers to the note on the command line."""

    path: str
    """Absolute path of the file."""


class Command(Enum):
    USAGE = 'usage'
    INIT = 'init'
    LIST = 'list'
    VIEW = 'view'
    ADD = 'add'
    EDIT = 'edit'
    DELETE = 'delete'

    @classmethod
    def parse(cls, token: Optional[str]) -> Command:
        """Returns the command named by token.

        A missing token, or one that doesn't name a command, results in :attr:`USAGE`.
        """
        try:
            return cls(token or cls.USAGE.value)
        except ValueError:
            return cls.USAGE


class Action(Enum):
    """Things that can be done to a note picked from the interactive list."""
    VIEW = 'view'
    EDIT = 'edit'

    @classmethod
    def parse(cls, output: Optional[str]) -> Optional[Action]:
        """Converts the output of a chooser program into an action.

        Only the trailing line break is ignored; anything other than an exact action name gives None.
        """
        if not output:
            return None
        try:
            return cls(output.rstrip('\r\n'))
        except ValueError:
            return None
