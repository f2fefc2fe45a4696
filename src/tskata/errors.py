"""Exception types raised while planning and running a scaffold."""


class ScaffoldError(Exception):
    """Base class for every error the scaffolder reports to the operator."""


class CancelledByOperator(ScaffoldError):
    """The operator declined or abandoned a prompt."""


class InvalidAnswer(ScaffoldError):
    """A required answer was missing or empty."""


class SubprocessFailure(ScaffoldError):
    """An external command exited non-zero or could not be started."""

    def __init__(self, command, returncode, output):
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(f"'{command}' exited with code {returncode}: {output.strip()}")


class FileSystemError(ScaffoldError):
    """A file or directory could not be created, read or written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ConfigParseError(ScaffoldError):
    """A config document could not be parsed after comment stripping."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path}: {reason}")


class StepFailed(ScaffoldError):
    """A pipeline step failed; the remaining steps were not run.

    Attributes:
        title: Title of the step that failed.
        cause: The underlying exception.
        completed: Status strings of the steps that succeeded before it.
    """

    def __init__(self, title, cause, completed=()):
        self.title = title
        self.cause = cause
        self.completed = list(completed)
        super().__init__(f"{title}: {cause}")
