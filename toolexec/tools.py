import os
import shutil

from toolexec.command import Command
from toolexec.config import CONFIG
from toolexec.exceptions import ToolNotFound
from toolexec.utils import path_exists


def env_override(name: str) -> str:
    return '{}_PATH'.format(name.upper().replace('-', '_'))


def find_tool(name: str) -> str:
    """
    Locate an external tool.

    Lookup order: ``<NAME>_PATH`` environment variable, the ``tools``
    section of the config, then ``PATH``.
    """

    candidate = (os.environ.get(env_override(name))
                 or CONFIG['tools'].get(name)
                 or name)

    # explicit paths must exist, bare names are looked up in PATH
    if os.sep in candidate:
        found = path_exists(candidate)
    else:
        found = shutil.which(candidate)

    if not found:
        raise ToolNotFound(name)

    return found


def tool_command(name: str, *args, **kwargs) -> Command:
    path = find_tool(name)

    # e.g. bundletool is shipped as bundletool-all-<ver>.jar
    if path.endswith('.jar'):
        return Command(find_tool('java'), '-jar', path, *args, **kwargs)

    return Command(path, *args, **kwargs)
