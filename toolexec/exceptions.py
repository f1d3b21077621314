from contextlib import contextmanager


class Error(Exception):
    """
    Base class of all errors raised while running external tools.
    """

    template = None

    def __str__(self):
        if self.template is None:
            return super().__str__()
        return self.template.format_map(vars(self))

    @staticmethod
    def wrap(exc: BaseException) -> 'Error':
        if isinstance(exc, Error):
            return exc
        if isinstance(exc, OSError):
            return IOFailure(exc)
        return OtherError(exc)


class CommandFailed(Error):
    """
    This exception represents a process that ran but exited with a failure.
    """

    template = ("Command '{command}' had a non-zero exit code. "
                "Stdout: {stdout} Stderr: {stderr}")

    def __init__(self, command, stdout='', stderr='', returncode=None,
                 output=None):
        super().__init__(command, stdout, stderr)
        self.command = command
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.output = output


class ToolNotFound(Error):
    template = '{tool} is not found'

    def __init__(self, tool):
        super().__init__(tool)
        self.tool = tool


class IOFailure(Error):
    template = 'IO error: {cause}'

    def __init__(self, cause: Exception):
        super().__init__(cause)
        self.cause = cause


class OtherError(Error):
    template = 'Other error: {cause}'

    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause


class ConfigError(Exception):
    """
    Bad option in a config file.
    """


@contextmanager
def wrap_errors():
    """
    Re-raise anything escaping the block as an :class:`Error`.
    """

    try:
        yield
    except Error:
        raise
    except Exception as e:
        raise Error.wrap(e) from e
