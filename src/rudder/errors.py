"""
rudder.errors - Error types.

Every error is terminal for a single command invocation. The CLI
prints str(error) and exits 1; the original exception stays reachable
through ``cause`` / ``__cause__`` for logs and tests.
"""

from __future__ import annotations

import re


_RPC_PREFIX = re.compile(r"^rpc error: code = \w+ desc = ")


class RudderError(Exception):
    """Base error for rudder."""
    pass


class InvalidArgumentCount(RudderError):
    """Wrong number of positional arguments."""

    def __init__(self, expected: int, actual: int, required: list[str]):
        self.expected = expected
        self.actual = actual
        self.required = required
        noun = "argument" if expected == 1 else "arguments"
        super().__init__(
            f"This command needs {expected} {noun}: {', '.join(required)}"
        )


class FileReadError(RudderError):
    """A values file could not be read."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Cannot read values file {path}: {reason}")


class ReleaseServiceError(RudderError):
    """The release service rejected a request or could not be reached."""

    def __init__(self, message: str, code: str = ""):
        self.code = code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ReleaseServiceError(code={self.code!r}, message={self.message!r})"


class ServiceError(RudderError):
    """An install call failed.

    Wraps the original error. ``str()`` gives the short message meant
    for the terminal, ``cause`` keeps the error as it was raised.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(pretty_message(cause))

    def __repr__(self) -> str:
        return f"ServiceError(cause={self.cause!r})"


class ConfigError(RudderError):
    """Malformed rudder config file."""
    pass


def pretty_message(err: BaseException) -> str:
    """Rewrite an error into a short user-readable message.

    >>> pretty_message(Exception("rpc error: code = 2 desc = chart not found"))
    'chart not found'
    """
    if isinstance(err, ReleaseServiceError):
        text = err.message
    else:
        text = str(err)
    text = _RPC_PREFIX.sub("", text.strip())
    return text or type(err).__name__
