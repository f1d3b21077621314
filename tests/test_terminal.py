"""Tests for user-facing error reports."""

from toolexec.command import Command
from toolexec.exceptions import CommandFailed, IOFailure, ToolNotFound
from toolexec.terminal import Style, announce, report


def test_no_colors_without_tty():
    assert Style.red('text') == 'text'


def test_colors_can_be_disabled(monkeypatch, default_config):
    monkeypatch.setattr('os.isatty', lambda fd: True)
    assert Style.green('text') == '\033[32mtext\033[0m'

    default_config['misc']['colors'] = False
    assert Style.green('text') == 'text'


def test_announce(capsys):
    announce(Command('bundletool', 'build-apks'))
    assert capsys.readouterr().out == '$ bundletool build-apks\n'


def test_report_simple_error(capsys):
    report(ToolNotFound('bundletool'))

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == 'bundletool is not found\n'


def test_report_io_failure(capsys):
    report(IOFailure(FileNotFoundError('missing')))
    assert capsys.readouterr().err == 'IO error: missing\n'


def test_report_command_failed_tail(capsys, default_config):
    default_config['misc']['log_lines'] = 2
    error = CommandFailed(Command('false'), stdout='', stderr='a\nb\nc\nd\n', returncode=1)

    report(error)

    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == 'Command false failed with exit code 1'
    assert lines[1] == 'LOG:'
    assert lines[-2:] == ['c', 'd']
    assert 'a' not in lines


def test_report_command_failed_falls_back_to_stdout(capsys):
    error = CommandFailed(Command('false'), stdout='only stdout\n', stderr='', returncode=1)

    report(error)

    assert capsys.readouterr().err.endswith('only stdout\n')


def test_report_command_failed_without_output(capsys):
    report(CommandFailed(Command('false'), returncode=1))
    assert capsys.readouterr().err == 'Command false failed with exit code 1\n'
