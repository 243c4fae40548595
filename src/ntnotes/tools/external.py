"""Provides the :class:`ExternalTools` class."""

import logging
import os
import shlex
import subprocess
from typing import List, Optional

from ntnotes.conf import NtConf
from ntnotes.tools.base import Tools, ToolError, EditorError


logger = logging.getLogger(__name__)


class ExternalTools(Tools):
    """Runs the chooser, renderer, and editor as subprocesses attached to the current terminal.

    Only the chooser's standard output is captured; everything else is inherited, so the programs behave as if
    they had been started directly from the shell.

    .. attribute:: conf
       :type: NtConf
    """
    def __init__(self, conf: NtConf):
        self.conf = conf

    @property
    def interactive(self) -> bool:
        return self.conf.chooser

    def _run(self, argv: List[str], **kwargs) -> subprocess.CompletedProcess:
        logger.debug('running %s', argv)
        try:
            return subprocess.run(argv, **kwargs)
        except OSError as e:
            raise ToolError(f'Could not run {argv[0]}: {e.strerror or e}') from e

    def prompt_choice(self, options: List[str]) -> Optional[str]:
        if not self.conf.chooser:
            return None
        result = self._run(self.conf.chooser_command + list(options), stdout=subprocess.PIPE, universal_newlines=True)
        return result.stdout

    def render_view(self, path: str) -> None:
        if not self.conf.renderer:
            logger.debug('rendering is disabled, not showing %s', path)
            return
        result = self._run(self.conf.renderer_command + [path])
        if result.returncode != 0:
            logger.warning('%s exited with status %d', self.conf.renderer_command[0], result.returncode)

    def editor_command(self) -> List[str]:
        """Returns the program and arguments from ``$EDITOR``, or the configured default editor."""
        return shlex.split(os.environ.get('EDITOR', '')) or shlex.split(self.conf.default_editor)

    def invoke_editor(self, path: str) -> None:
        result = self._run(self.editor_command() + [path])
        if result.returncode != 0:
            raise EditorError(result.returncode)
