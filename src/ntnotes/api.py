"""Provides the main entry point for using the library, :class:`Nt`"""

from __future__ import annotations
import logging
from typing import List, Optional

from ntnotes.conf import NtConf
from ntnotes.models import Action, Note
from ntnotes.store import NoteStore
from ntnotes.tools.base import Tools
from ntnotes.tools.external import ExternalTools


logger = logging.getLogger(__name__)


class Nt:
    """Carries out the nt commands against a collection of notes.

    Generally, you should get an instance using :meth:`Nt.for_user`.

    .. attribute:: conf
       :type: ntnotes.conf.NtConf

    .. attribute:: store
       :type: ntnotes.store.NoteStore

    .. attribute:: tools
       :type: ntnotes.tools.base.Tools

    Here's an example of how to use this class. This would create a note named "todo" and open it in your editor.

    .. code-block:: python

       from ntnotes.api import Nt
       nt = Nt.for_user()
       nt.init()
       nt.add('todo')
       nt.edit('todo')
    """

    @staticmethod
    def for_user() -> Nt:
        """Creates an instance using the user's ``~/.nt.conf.py`` file, or the defaults if there isn't one."""
        return NtConf.for_user().instantiate()

    def __init__(self, conf: NtConf, tools: Optional[Tools] = None):
        self.conf = conf
        self.store = NoteStore(conf)
        self.tools = tools or ExternalTools(conf)

    def init(self) -> None:
        if self.store.base_exists():
            logger.debug('%s already exists', self.conf.base_directory)
            return
        self.store.ensure_base_directory()

    def list(self) -> List[Note]:
        return self.store.list_notes()

    def browse(self, notes: List[Note]) -> None:
        """Asks the user to pick one of the notes, then whether to view or edit it, and does that.

        Nothing happens if there are no notes or the user does not pick a listed note and action.
        """
        if not notes:
            return
        note = self._choose_note(notes)
        if not note:
            return
        action = Action.parse(self.tools.prompt_choice([a.value for a in Action]))
        if action == Action.VIEW:
            self.tools.render_view(note.path)
        elif action == Action.EDIT:
            self.tools.invoke_editor(note.path)
        else:
            logger.debug('no action chosen for %s', note.name)

    def _choose_note(self, notes: List[Note]) -> Optional[Note]:
        choice = self.tools.prompt_choice([n.name for n in notes])
        if not choice:
            return None
        name = choice.rstrip('\r\n')
        for note in notes:
            if note.name == name:
                return note
        logger.debug('chooser returned unknown note %r', name)
        return None

    def view(self, name: str) -> None:
        """Renders the named note. Whether the note exists is left for the renderer to discover."""
        if not name:
            return
        if not self.store.base_exists():
            logger.debug('%s does not exist, nothing to view', self.conf.base_directory)
            return
        self.tools.render_view(self.store.paths.resolve(name))

    def add(self, name: str) -> None:
        self.store.create_note(name)

    def edit(self, name: str) -> None:
        """Opens the named note in the editor, even if it does not exist yet."""
        if not name:
            return
        self.tools.invoke_editor(self.store.paths.resolve(name))

    def delete(self, name: str) -> None:
        self.store.delete_note(name)
