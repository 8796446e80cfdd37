# src/minigrep/errors.py


class MinigrepError(Exception):
    pass


class UsageError(MinigrepError):
    """Stops the run before any file is touched; usage text is shown instead."""
    exit_code = 0


class ArgumentParseError(UsageError):
    exit_code = 1


class FileReadError(MinigrepError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read {path}: {cause}")
