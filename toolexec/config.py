import copy
import os
import toml

from toolexec.exceptions import ConfigError


def merge_config(current, new):
    if isinstance(current, dict):
        for k, v in new.items():
            if k not in current:
                raise ConfigError(f'Config: unknown option: {k}')

            # sections can't be replaced with scalars
            if isinstance(current[k], dict) and not isinstance(v, dict):
                raise ConfigError(f'Config: bad option type: {k}')

            if not merge_config(current[k], new[k]):
                if type(current[k]) != type(v):
                    raise ConfigError(f'Config: bad option type: {k}')
                current[k] = v

        return True

    return False


DEFAULTS = {
    'execute': {
        'print_logs': False,
    },
    'tools': {
        'bundletool': 'bundletool',
        'java': 'java',
    },
    'misc': {
        'colors': True,
        'log_lines': 8,
    }
}

CONFIG = copy.deepcopy(DEFAULTS)

# select default file
CONFIG_FILE = (os.environ.get('TOOLEXEC_CONFIG')
               or os.path.join(os.path.expanduser('~'), '.toolexec.toml'))


def load_config(path=CONFIG_FILE):
    with open(path, 'r') as f:
        try:
            new = toml.loads(f.read())
        except toml.TomlDecodeError as e:
            raise ConfigError(f'Config: failed to parse {path}: {e}') from e

    merge_config(CONFIG, new)
    return CONFIG


def reset_config():
    CONFIG.clear()
    CONFIG.update(copy.deepcopy(DEFAULTS))
    return CONFIG


if os.path.exists(CONFIG_FILE):
    load_config(CONFIG_FILE)
