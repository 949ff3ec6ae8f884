from __future__ import annotations

"""Exception types shared across ghwrap.

Only `CommandAbort` reaches the user directly; the CLI turns it into a
message on stderr and a non-zero exit status.
"""


class GhWrapError(Exception):
    """Base class for every error raised by ghwrap itself."""


class CommandAbort(GhWrapError):
    """A rewrite rule cannot continue; the whole invocation stops."""

    def __init__(self, message: str, code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.code = int(code)


class ContextUnavailable(GhWrapError):
    """A repository query does not apply to the current directory."""


class ApiError(GhWrapError):
    """The hosting API answered with a non-success status."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f'{reason} (HTTP {status})')
        self.status = int(status)
        self.reason = reason
