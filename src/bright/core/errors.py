"""
Error types shared across bright.

Every failure the library can report derives from BrightError so the CLI
can turn any of them into a message and an exit code.
"""

from pathlib import Path


class BrightError(Exception):
    """Base exception for all bright errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(BrightError):
    """
    Raised when the configuration file cannot be used.

    Examples:
    - The file is not valid TOML
    - An easing entry cannot be parsed
    - BRIGHT_CONFIG points at something that isn't a file
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Config file {path}: {reason}")


# =============================================================================
# Evaluation errors
# =============================================================================


class ExpressionEvalError(BrightError):
    """
    Error during expression evaluation.

    Raised directly (chained from the underlying cause) for failures
    without a dedicated subclass, e.g. a malformed restore file.
    """


class BrightnessReadError(ExpressionEvalError):
    """The device's current brightness couldn't be read."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"can't read the current brightness ({cause})")


class UnsupportedFunctionError(ExpressionEvalError):
    """A call of a function that doesn't exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"`{name}` isn't an available function")


class WrongArgumentCountError(ExpressionEvalError):
    """A builtin called with too few or too many arguments."""

    def __init__(self, function: str, provided: int, min: int, max: int | None):
        self.function = function
        self.provided = provided
        self.min = min
        self.max = max
        if max is None:
            expected = f"at least {min}"
        elif min == max:
            expected = str(min)
        else:
            expected = f"{min}-{max}"
        super().__init__(f"`{function}` expects {expected} arguments but {provided} were provided")


class MissingRestoreFileError(ExpressionEvalError):
    """restore() without a previously saved brightness."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file {path} doesn't exist")
