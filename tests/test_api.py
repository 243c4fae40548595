import os.path
from pathlib import Path
from unittest.mock import call, Mock
import pytest
from ntnotes.api import Nt
from ntnotes.models import Note
from ntnotes.store import StoreError
from ntnotes.tools.base import Tools, EditorError
from ntnotes.tools.external import ExternalTools


def interactive_tools(*outputs):
    tools = Mock(spec=Tools)
    tools.interactive = True
    tools.prompt_choice.side_effect = outputs
    return tools


NOTES = [Note('meeting', '/notes/meeting'), Note('todo', '/notes/todo')]


def test_for_user(fs):
    confpy = """from ntnotes.conf import *
conf = NtConf(base_directory='/notes', chooser=False)"""
    fs.create_file(os.path.expanduser('~/.nt.conf.py'), contents=confpy)
    nt = Nt.for_user()
    assert nt.conf.base_directory == '/notes'
    assert not nt.conf.chooser
    assert isinstance(nt.tools, ExternalTools)


def test_init(conf):
    nt = Nt(conf)
    nt.init()
    assert Path('/notes').is_dir()
    Path('/notes/meeting').write_text('agenda')
    nt.init()
    assert Path('/notes/meeting').read_text() == 'agenda'


def test_add_and_list(conf):
    nt = Nt(conf)
    assert nt.list() == []
    nt.init()
    nt.add('meeting')
    assert nt.list() == [Note('meeting', '/notes/meeting')]
    nt.add('meeting')
    assert nt.list() == [Note('meeting', '/notes/meeting')]
    nt.delete('meeting')
    assert nt.list() == []


def test_delete_missing(conf, fs):
    fs.create_dir('/notes')
    with pytest.raises(StoreError, match='meeting'):
        Nt(conf).delete('meeting')


def test_browse_view():
    tools = interactive_tools('todo\n', 'view\n')
    Nt(Mock(), tools).browse(NOTES)
    assert tools.prompt_choice.call_args_list == [call(['meeting', 'todo']), call(['view', 'edit'])]
    tools.render_view.assert_called_once_with('/notes/todo')
    tools.invoke_editor.assert_not_called()


def test_browse_edit():
    tools = interactive_tools('meeting\n', 'edit\n')
    Nt(Mock(), tools).browse(NOTES)
    tools.invoke_editor.assert_called_once_with('/notes/meeting')
    tools.render_view.assert_not_called()


def test_browse_edit_failure():
    tools = interactive_tools('meeting\n', 'edit\n')
    tools.invoke_editor.side_effect = EditorError(1)
    with pytest.raises(EditorError):
        Nt(Mock(), tools).browse(NOTES)


def test_browse_no_action():
    for action in ('', 'preview\n', 'edits\n'):
        tools = interactive_tools('meeting\n', action)
        Nt(Mock(), tools).browse(NOTES)
        tools.render_view.assert_not_called()
        tools.invoke_editor.assert_not_called()


def test_browse_no_note_chosen():
    for choice in ('', None, 'meet\n'):
        tools = interactive_tools(choice)
        Nt(Mock(), tools).browse(NOTES)
        assert tools.prompt_choice.call_count == 1
        tools.render_view.assert_not_called()
        tools.invoke_editor.assert_not_called()


def test_browse_nothing_to_choose():
    tools = interactive_tools()
    Nt(Mock(), tools).browse([])
    tools.prompt_choice.assert_not_called()


def test_view(conf, fs):
    fs.create_file('/notes/meeting')
    tools = Mock(spec=Tools)
    nt = Nt(conf, tools)
    nt.view('meeting')
    nt.view('missing')
    assert tools.render_view.call_args_list == [call('/notes/meeting'), call('/notes/missing')]


def test_view_no_op(conf):
    tools = Mock(spec=Tools)
    nt = Nt(conf, tools)
    nt.view('meeting')
    Path('/notes').mkdir()
    nt.view('')
    nt.view(None)
    tools.render_view.assert_not_called()


def test_edit(conf):
    tools = Mock(spec=Tools)
    nt = Nt(conf, tools)
    nt.edit('report')
    tools.invoke_editor.assert_called_once_with('/notes/report')
    assert not Path('/notes/report').exists()


def test_edit_no_name(conf):
    tools = Mock(spec=Tools)
    nt = Nt(conf, tools)
    nt.edit('')
    nt.edit(None)
    tools.invoke_editor.assert_not_called()
