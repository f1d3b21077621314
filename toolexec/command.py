import os
import shlex

from typing import Dict, Iterable, List, Optional


class Command:
    """
    Description of an external process: program, arguments, environment
    overrides and working directory.
    """

    def __init__(self,
                 program,
                 *args,
                 env: Optional[Dict[str, str]] = None,
                 cwd=None):
        self.program = program
        self.args = list(args)
        self.env = dict(env) if env else {}
        self.cwd = cwd

    def arg(self, value) -> 'Command':
        self.args.append(value)
        return self

    def extend(self, values: Iterable) -> 'Command':
        self.args.extend(values)
        return self

    @property
    def argv(self) -> List[str]:
        return [os.fspath(x) for x in (self.program, *self.args)]

    def environ(self) -> Optional[Dict[str, str]]:
        # overrides are applied on top of the parent's environment
        if not self.env:
            return None
        env = os.environ.copy()
        env.update(self.env)
        return env

    def __str__(self):
        return shlex.join(self.argv)

    def __repr__(self):
        return 'Command({})'.format(', '.join(map(repr, self.argv)))
