import os
import sys

from toolexec.config import CONFIG
from toolexec.exceptions import CommandFailed, Error
from toolexec.utils import eprint, limit_lines


class Style:
    BOLD = 1
    RED = 31
    GREEN = 32

    @staticmethod
    def enabled():
        return os.isatty(1) and os.isatty(2) and CONFIG['misc']['colors']

    @staticmethod
    def style(color, text):
        if Style.enabled():
            return f'\033[{color}m{text}\033[0m'
        return text

    @staticmethod
    def bold(text):
        return Style.style(Style.BOLD, text)

    @staticmethod
    def red(text):
        return Style.style(Style.RED, text)

    @staticmethod
    def green(text):
        return Style.style(Style.GREEN, text)


def announce(command) -> None:
    # print simplified command
    print(Style.green(f'$ {command}'), file=sys.stdout, flush=True)


def report(error: Error) -> None:
    """
    Print an error for the user, with a tail of the tool's log if any.
    """

    if not isinstance(error, CommandFailed):
        eprint(Style.red(str(error)))
        return

    eprint(Style.red('Command {} failed with exit code {}'.format(
        Style.bold(error.command), error.returncode)))

    log = error.stderr or error.stdout  # attach output if possible
    if log:
        eprint('LOG:\n\n<... skipped lines ...>')
        eprint(limit_lines(log, CONFIG['misc']['log_lines']))
