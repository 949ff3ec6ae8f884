from __future__ import annotations

"""Default process primitives backed by `os.exec*` and `subprocess`.

Children inherit the current stdin/stdout/stderr file descriptors, so once
the pager has redirected fd 1 every child writes into the pager pipe too.
"""

import logging
import os
import subprocess
import sys
from typing import Optional, Sequence

from ghwrap.core.interfaces.process import ProcessRunnerProtocol
from ghwrap.logging.helpers import get_logger

# Status a POSIX shell reports for a command it cannot find.
_NOT_FOUND = 127


def shell_status(code: int) -> int:
    """Map a child return code to what a shell reports: signal N becomes 128+N."""
    return 128 - code if code < 0 else code


def _flush_std() -> None:
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            pass


class SubprocessRunner(ProcessRunnerProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('process')

    def replace(self, argv: Sequence[str]) -> int:
        argv = list(argv)
        _flush_std()
        if os.name != 'posix':
            # No real exec on this platform: run the child and report its status.
            return self.call(argv)
        try:
            os.execvp(argv[0], argv)
        except OSError as exc:
            self._log.error('%s: %s', argv[0], exc.strerror or exc)
            return _NOT_FOUND
        return 0  # pragma: no cover - execvp does not return

    def call(self, argv: Sequence[str]) -> int:
        argv = list(argv)
        _flush_std()
        self._log.debug('run: %s', ' '.join(argv))
        try:
            return shell_status(subprocess.call(argv))
        except OSError as exc:
            self._log.error('%s: %s', argv[0], exc.strerror or exc)
            return _NOT_FOUND

    def shell(self, line: str) -> int:
        _flush_std()
        self._log.debug('sh: %s', line)
        return shell_status(subprocess.call(line, shell=True))  # nosec B602 (line comes from a rewrite rule)
