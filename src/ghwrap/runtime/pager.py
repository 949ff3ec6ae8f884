from __future__ import annotations

"""git-style automatic paging.

`PagerAdapter.maybe_page()` is the single entry point. When stdout is a
terminal it creates a pipe and forks:

    parent (consumer) – stdin is re-pointed at the read end. It blocks until
                        the pipe is readable, then runs the pager as a child
                        and waits for it. A pipe that reaches EOF without a
                        byte starts no pager at all. Either way it then reaps
                        the producer and exits with the producer's status.
    child  (producer) – stdout, and stderr when it is a terminal, are
                        re-pointed at the write end. It returns to the caller
                        and carries on with the normal command flow.

The shell waits on the parent, so the prompt comes back only once the
pager exits, and the status it sees is the one of the command chain.

Launch order is the configured pager, `/bin/sh -c` for lines that need a
shell, `more`, and finally an in-process copy of stdin to stdout. The last
step needs no external program, so the consumer always drains the pipe.
"""

import logging
import os
import select
import shlex
import shutil
import subprocess
import sys
from typing import Callable, List, Mapping, MutableMapping, Optional, TextIO

from ghwrap.constants import DEFAULT_PAGER, FALLBACK_PAGER, PAGER_LESS_FLAGS
from ghwrap.core.interfaces.process import PagerProtocol
from ghwrap.logging.helpers import get_logger
from ghwrap.runtime.process import shell_status

_SHELL_CHARS = set('|&;<>()$`\\"\'*?[]#~=%')


def _bytes_available(fd: int) -> Optional[int]:
    """Bytes waiting in `fd`, or None when the platform cannot tell."""
    try:
        import fcntl
        import struct
        import termios

        buf = fcntl.ioctl(fd, termios.FIONREAD, b'\0\0\0\0')
        return struct.unpack('i', buf)[0]
    except (ImportError, OSError, AttributeError):
        return None


def _wait_for(pid: int) -> int:
    """Reap `pid` and return its status the way a shell reports it.

    Ctrl-C reaches the whole foreground group; the pager and the producer
    decide for themselves, so the waiting consumer keeps waiting.
    """
    while True:
        try:
            _, status = os.waitpid(pid, 0)
        except KeyboardInterrupt:
            continue
        except ChildProcessError:
            return 0
        return shell_status(os.waitstatus_to_exitcode(status))


class PagerAdapter(PagerProtocol):
    def __init__(
        self,
        *,
        config_lookup: Optional[Callable[[str], Optional[str]]] = None,
        env: Optional[MutableMapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config_lookup = config_lookup or (lambda _key: None)
        self._env = os.environ if env is None else env
        self._stdout = stdout
        self._stderr = stderr
        self._log = logger or get_logger('pager')
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def _out(self) -> TextIO:
        return self._stdout or sys.stdout

    def _err(self) -> TextIO:
        return self._stderr or sys.stderr

    @staticmethod
    def _isatty(stream: TextIO) -> bool:
        try:
            return bool(stream.isatty())
        except (AttributeError, ValueError):
            return False

    # ------------------------------------------------------------------ #
    #  Selection                                                         #
    # ------------------------------------------------------------------ #
    def select_pager(self, env: Optional[Mapping[str, str]] = None) -> str:
        """Pick the pager command line; an empty setting means `cat`."""
        env = self._env if env is None else env
        pager = env.get('GIT_PAGER')
        if pager is None:
            configured = self._config_lookup('core.pager')
            pager = configured.splitlines()[0] if configured else None
        if pager is None:
            pager = env.get('PAGER')
        if pager is None:
            pager = DEFAULT_PAGER
        return pager.strip() or 'cat'

    def launch_candidates(self, pager: str) -> List[List[str]]:
        """argv lists to try, in order, for `pager`."""
        candidates: List[List[str]] = []
        try:
            argv = shlex.split(pager)
        except ValueError:
            argv = []
        needs_shell = not argv or any(ch in _SHELL_CHARS for ch in pager)
        if argv and not needs_shell:
            candidates.append(argv)
        elif os.path.exists('/bin/sh'):
            candidates.append(['/bin/sh', '-c', pager])
        if not argv or argv[0] != FALLBACK_PAGER:
            candidates.append([FALLBACK_PAGER])
        return candidates

    # ------------------------------------------------------------------ #
    #  Split                                                             #
    # ------------------------------------------------------------------ #
    def maybe_page(self) -> bool:
        """Split into pager/producer when stdout is a terminal.

        Returns True in the producer once output is redirected, False when
        nothing was done. The consumer side never returns: it exits with the
        producer's status.
        """
        if self._active:
            return False
        out = self._out()
        if not self._isatty(out) or not hasattr(os, 'fork'):
            return False

        err = self._err()
        read_fd, write_fd = os.pipe()
        out.flush()
        err.flush()

        producer = os.fork()
        if producer:
            status = 1
            try:
                os.dup2(read_fd, 0)
                os.close(read_fd)
                os.close(write_fd)
                status = self._consume(producer)
            finally:
                os._exit(status)

        os.dup2(write_fd, out.fileno())
        if self._isatty(err):
            os.dup2(write_fd, err.fileno())
        os.close(read_fd)
        os.close(write_fd)
        self._active = True
        return True

    def _consume(self, producer: int) -> int:
        """Page fd 0 until EOF, then reap the producer and return its status."""
        self._env['LESS'] = PAGER_LESS_FLAGS
        select.select([0], [], [])
        if _bytes_available(0) != 0:
            self._run_pager()
        # the producer's exit status is the invocation's exit status
        os.close(0)
        return _wait_for(producer)

    def _run_pager(self) -> None:
        pager = self.select_pager()
        for argv in self.launch_candidates(pager):
            if argv[0] != '/bin/sh' and shutil.which(argv[0], path=self._env.get('PATH')) is None:
                continue
            try:
                proc = subprocess.Popen(argv, env=dict(self._env))
            except OSError as exc:
                self._log.debug('pager %r failed: %s', argv[0], exc)
                continue
            _wait_for(proc.pid)
            return
        self.relay()

    @staticmethod
    def relay(src_fd: int = 0, dst_fd: int = 1, chunk: int = 65536) -> None:
        """Copy src_fd to dst_fd until EOF; the last-resort pager."""
        while True:
            data = os.read(src_fd, chunk)
            if not data:
                return
            while data:
                written = os.write(dst_fd, data)
                data = data[written:]
