import os
import sys

from typing import Optional


def path_exists(path: str) -> Optional[str]:
    if os.path.exists(path):
        return path


def decode_lossy(data: bytes) -> str:
    # invalid sequences become U+FFFD instead of raising
    return data.decode('utf8', errors='replace')


def eprint(*args, **kwargs) -> None:
    print(*args, file=sys.stderr, **kwargs)


def limit_lines(string: str, n: int) -> str:
    return '\n'.join(string.splitlines()[-n:])
