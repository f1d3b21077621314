import subprocess
import sys
import threading

from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Optional

from toolexec.command import Command
from toolexec.config import CONFIG
from toolexec.exceptions import CommandFailed, IOFailure
from toolexec.terminal import announce
from toolexec.utils import decode_lossy

CHUNK_SIZE = 8192


class StreamMode(Enum):
    """
    How the output of a spawned subprocess is captured.
    """

    Buffered = 'buffered'
    Echoed = 'echoed'

    @staticmethod
    def from_flag(print_logs: bool) -> 'StreamMode':
        return StreamMode.Echoed if print_logs else StreamMode.Buffered


@dataclass(frozen=True)
class CapturedOutput:
    returncode: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.returncode == 0


class _Tee(threading.Thread):
    """
    Copy a pipe to one of our own streams, keeping everything read.
    """

    def __init__(self, source, sink):
        super().__init__(daemon=True)
        self.source = source
        self.sink = sink
        self.chunks = []
        self.error = None

    def run(self):
        try:
            for chunk in iter(partial(self.source.read1, CHUNK_SIZE), b''):
                self.chunks.append(chunk)
                if self.sink is not None:
                    self.passthrough(chunk)
        except OSError as e:
            self.error = e
        finally:
            self.source.close()

    def passthrough(self, chunk):
        buffer = getattr(self.sink, 'buffer', None)
        try:
            if buffer is not None:
                self.sink.flush()
                buffer.write(chunk)
                buffer.flush()
            else:
                self.sink.write(decode_lossy(chunk))
                self.sink.flush()
        except (OSError, ValueError):
            # our stream is gone, stop echoing but keep capturing
            self.sink = None

    @property
    def data(self) -> bytes:
        return b''.join(self.chunks)


def _spawn(command: Command, **kwargs):
    try:
        return subprocess.Popen(command.argv,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                cwd=command.cwd,
                                env=command.environ(),
                                **kwargs)
    except (OSError, ValueError) as e:
        # ValueError: e.g. embedded null byte in argv
        raise IOFailure(e) from e


def _reap(p):
    # interrupted before the child exited
    if p.returncode is None:
        p.kill()
        p.wait()


def _collect_buffered(command: Command):
    p = _spawn(command, stdin=subprocess.DEVNULL)
    try:
        out, err = p.communicate()
    except OSError as e:
        raise IOFailure(e) from e
    finally:
        _reap(p)

    return p.returncode, out, err


def _collect_echoed(command: Command):
    announce(command)

    # stdin is inherited, so the tool may prompt the user
    p = _spawn(command)
    tees = [_Tee(p.stdout, sys.stdout), _Tee(p.stderr, sys.stderr)]
    for t in tees:
        t.start()

    # pipes hit EOF once the child (and anything it spawned) exits
    try:
        for t in tees:
            t.join()
        p.wait()
    finally:
        _reap(p)

    for t in tees:
        if t.error is not None:
            raise IOFailure(t.error) from t.error

    out, err = (t.data for t in tees)
    return p.returncode, out, err


def execute(command: Command,
            mode: Optional[StreamMode] = None) -> CapturedOutput:
    """
    Run a command to completion and capture its output.

    Raises :class:`IOFailure` if the process could not be spawned or its
    output could not be read, and :class:`CommandFailed` if it exited
    with a non-zero status.
    """

    if mode is None:
        mode = StreamMode.from_flag(CONFIG['execute']['print_logs'])

    if mode == StreamMode.Echoed:
        returncode, out, err = _collect_echoed(command)
    else:
        returncode, out, err = _collect_buffered(command)

    output = CapturedOutput(returncode=returncode, stdout=out, stderr=err)

    if not output.success:
        raise CommandFailed(command,
                            stdout=decode_lossy(out),
                            stderr=decode_lossy(err),
                            returncode=returncode,
                            output=output)

    return output


def check_output(command: Command,
                 mode: Optional[StreamMode] = None) -> str:
    return decode_lossy(execute(command, mode).stdout)
