"""Provides :class:`NoteStore`, which reads and changes the base directory, and the :class:`PathResolver` it uses."""

import logging
import os
import os.path
from pathlib import Path
from typing import List

from ntnotes.conf import NtConf, default_ignore
from ntnotes.models import Note


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a note or the base directory cannot be created or removed."""


class PathResolver:
    """Builds paths inside the base directory. Never touches the filesystem."""
    def __init__(self, base_directory: str):
        self.base_directory = base_directory

    def resolve(self, *components: str) -> str:
        return os.path.join(self.base_directory, *components)


class NoteStore:
    """Accesses the notes in the configured base directory.

    Operations that take a note name do nothing when the name is empty or None.

    .. attribute:: conf
       :type: NtConf
    """
    def __init__(self, conf: NtConf):
        self.conf = conf
        self.paths = PathResolver(conf.base_directory)

    def base_exists(self) -> bool:
        return os.path.isdir(self.paths.resolve())

    def ensure_base_directory(self) -> None:
        """Creates the base directory, and any missing parents, if it does not exist."""
        path = self.paths.resolve()
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise StoreError(f'Could not create directory {path}: {e.strerror or e}') from e

    def list_notes(self) -> List[Note]:
        """Returns every non-hidden entry in the base directory, in the order the filesystem lists them.

        If the base directory does not exist, the result is empty.
        """
        path = self.paths.resolve()
        if not os.path.isdir(path):
            logger.debug('base directory %s does not exist', path)
            return []
        try:
            with os.scandir(path) as entries:
                return [Note(entry.name, entry.path) for entry in entries if not default_ignore(entry.name)]
        except OSError as e:
            raise StoreError(f'Could not list {path}: {e.strerror or e}') from e

    def create_note(self, name: str) -> None:
        """Creates an empty note, or updates the modification time of an existing one without changing it."""
        if not name:
            return
        path = self.paths.resolve(name)
        logger.debug('touching %s', path)
        try:
            Path(path).touch()
        except OSError as e:
            raise StoreError(f'Could not create {name}: {e.strerror or e}') from e

    def delete_note(self, name: str) -> None:
        if not name:
            return
        path = self.paths.resolve(name)
        logger.debug('removing %s', path)
        try:
            os.remove(path)
        except OSError as e:
            raise StoreError(f'Could not delete {name}: {e.strerror or e}') from e
