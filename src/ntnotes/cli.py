"""Command-line interface for nt."""


import argparse
from dataclasses import replace
import logging
import sys
from terminaltables import AsciiTable
from ntnotes.api import Nt
from ntnotes.conf import NtConf, ConfError
from ntnotes.models import Command
from ntnotes.store import StoreError
from ntnotes.tools.base import ToolError


logger = logging.getLogger(__name__)

COMMAND_HELP = [
    (Command.USAGE, '', 'Display this usage information.'),
    (Command.INIT, '', 'Create the notes directory if it does not exist.'),
    (Command.LIST, '', 'List all notes. With the chooser enabled, pick a note to view or edit.'),
    (Command.VIEW, 'name', 'Display the note with the given name using the renderer.'),
    (Command.ADD, 'name', 'Add an empty note with the given name.'),
    (Command.EDIT, 'name', 'Open the note with the given name in $EDITOR (default: vi).'),
    (Command.DELETE, 'name', 'Delete the note with the given name.'),
]


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(2, f'{self.prog}: error in command line arguments: {message}\n')


def _init(args, nt: Nt) -> int:
    nt.init()
    return 0


def _list(args, nt: Nt) -> int:
    notes = nt.list()
    if nt.tools.interactive:
        nt.browse(notes)
    else:
        for note in notes:
            print(note.name)
    return 0


def _view(args, nt: Nt) -> int:
    nt.view(args.name)
    return 0


def _add(args, nt: Nt) -> int:
    nt.add(args.name)
    return 0


def _edit(args, nt: Nt) -> int:
    nt.edit(args.name)
    return 0


def _delete(args, nt: Nt) -> int:
    nt.delete(args.name)
    return 0


COMMANDS = {
    Command.INIT: _init,
    Command.LIST: _list,
    Command.VIEW: _view,
    Command.ADD: _add,
    Command.EDIT: _edit,
    Command.DELETE: _delete,
}


def commands_table() -> str:
    data = [('Command', 'Description')]
    data += [(f'{c.value} {arg}'.strip(), desc) for c, arg, desc in COMMAND_HELP]
    table = AsciiTable(data)
    table.title = 'Commands'
    return table.table


def argparser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='nt',
        description='Manage a collection of notes stored as plain files in a single directory.',
        epilog=commands_table(),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-b', '--base-directory', '--base_directory', dest='base_directory',
                        help='Directory where notes are stored. Defaults to ~/.nt, or the base_directory set '
                             'in ~/.nt.conf.py.')
    parser.add_argument('command', nargs='?', default=Command.USAGE.value,
                        help='One of the commands listed below. Unrecognized commands show this usage information.')
    parser.add_argument('name', nargs='?', help='Name of the note to view, add, edit, or delete.')
    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    command = Command.parse(args.command)
    if command == Command.USAGE:
        parser.print_help()
        return 0
    try:
        conf = NtConf.for_user()
        if args.base_directory:
            conf = replace(conf, base_directory=args.base_directory)
        logging.basicConfig(level=conf.log_level.upper(), format='%(name)s: %(levelname)s: %(message)s')
        nt = conf.instantiate()
        logger.debug('running %s in %s', command.value, nt.conf.base_directory)
        return COMMANDS[command](args, nt)
    except (ConfError, StoreError, ToolError) as e:
        print(f'{parser.prog}: {e}', file=sys.stderr)
        return 1
