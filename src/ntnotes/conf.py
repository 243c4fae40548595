from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
import os.path
from typing import List


class ConfError(Exception):
    """Raised when the user's config file cannot be used."""


def default_base_directory() -> str:
    return os.path.expanduser(os.path.join('~', '.nt'))


def default_ignore(filename: str) -> bool:
    return filename.startswith('.')


@dataclass(frozen=True)
class NtConf:
    """Settings for a single run of nt.

    Instances are built once at startup (see :meth:`for_user`) and passed to every component that needs them.
    """

    base_directory: str = field(default_factory=default_base_directory)
    """The folder holding your notes. Every non-hidden file directly inside it is a note.

    Defaults to ``~/.nt``. The ``-b``/``--base-directory`` command-line option takes precedence over this.
    """

    renderer: bool = True
    """If True, the ``view`` command displays notes using :attr:`renderer_command`.

    If False, ``view`` does nothing.
    """

    chooser: bool = True
    """If True, the ``list`` command lets you pick a note and an action interactively using :attr:`chooser_command`.

    If False, ``list`` prints one note name per line instead.
    """

    renderer_command: List[str] = field(default_factory=lambda: ['glow', '-p'])
    """Program and arguments used to render a note. The note's path is appended."""

    chooser_command: List[str] = field(default_factory=lambda: ['gum', 'choose'])
    """Program and arguments used to pick one option. The options are appended; the program must print the chosen
    option to standard output."""

    default_editor: str = 'vi'
    """Editor used when the ``EDITOR`` environment variable is not set."""

    log_level: str = 'WARNING'
    """Name of the lowest level of log messages written to standard error."""

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', '.nt.conf.py'))

    @classmethod
    def for_user(cls) -> NtConf:
        """Loads settings from ``~/.nt.conf.py``, or returns the defaults if that file does not exist.

        The file is run as Python and must assign an instance of :class:`NtConf` to the variable ``conf``,
        for example:

        .. code-block:: python

           from ntnotes.conf import *
           conf = NtConf(base_directory='/Users/jacob/notes', chooser=False)
        """
        path = cls.user_config_path()
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise ConfError('You need to assign an instance of NtConf to the variable `conf` '
                            f'in your config file: {path}')
        conf = context['conf']
        if not isinstance(logging.getLevelName(str(conf.log_level).upper()), int):
            raise ConfError(f'Unknown log_level {conf.log_level!r} in your config file: {path}')
        return conf

    def standardize(self) -> NtConf:
        return replace(
            self,
            base_directory=os.path.abspath(os.path.expanduser(self.base_directory))
        )

    def instantiate(self):
        from ntnotes.api import Nt
        return Nt(self.standardize())
