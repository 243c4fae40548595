"""Defines the API for the interactive programs nt hands work to.

The most important class is :class:`Tools`.
"""

from typing import List, Optional


class ToolError(Exception):
    """Raised when an external program cannot be run or reports failure."""


class EditorError(ToolError):
    """Raised when the editor exits with a non-zero status."""
    def __init__(self, status: int):
        super().__init__(f'Editor exited with non-zero status: {status}')
        self.status = status


class Tools:
    """Base class for the three capabilities the commands need from outside nt.

    Every method blocks until the user is done with the program it starts.
    """

    @property
    def interactive(self) -> bool:
        """True if :meth:`prompt_choice` will actually ask the user something."""
        raise NotImplementedError()

    def prompt_choice(self, options: List[str]) -> Optional[str]:
        """Asks the user to pick one of the options.

        Returns the output of the chooser exactly as it was written, which normally means the chosen option followed
        by a line break. Returns None if choosing is disabled.
        """
        raise NotImplementedError()

    def render_view(self, path: str) -> None:
        """Displays the file at path. Does nothing if rendering is disabled."""
        raise NotImplementedError()

    def invoke_editor(self, path: str) -> None:
        """Lets the user edit the file at path, which need not exist yet.

        Raises :exc:`EditorError` if the editor fails.
        """
        raise NotImplementedError()
