from __future__ import annotations

"""Process orchestration for a finalized ArgumentList.

Two paths exist:

    direct      – nothing scheduled: exec git in place of this process.
    supervised  – pre commands, primary, post actions run one after another
                  as blocking children. The first non-zero status stops the
                  chain and becomes the invocation's exit status.

Post-action callbacks run in-process. They may raise SystemExit to end the
invocation with their own code; their return value is ignored.

No timeouts are applied to any child.
"""

import logging
import shlex
from typing import List, Optional

from ghwrap.constants import DEFAULT_GIT
from ghwrap.core.args import ArgumentList
from ghwrap.core.interfaces.process import ProcessRunnerProtocol
from ghwrap.core.models import CommandSpec, ScheduledCommand, ShellLine
from ghwrap.logging.helpers import get_logger
from ghwrap.runtime.process import SubprocessRunner


class ProcessOrchestrator:
    def __init__(
        self,
        *,
        executable: str = DEFAULT_GIT,
        runner: Optional[ProcessRunnerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._executable = executable
        self._runner = runner or SubprocessRunner()
        self._log = logger or get_logger('orchestrator')

    @property
    def executable(self) -> str:
        return self._executable

    def primary_argv(self, args: ArgumentList) -> List[str]:
        """Program and arguments of the primary command."""
        if args.executable_override:
            head = shlex.split(args.executable_override) or [args.executable_override]
        else:
            head = [self._executable]
        return head + list(args.tokens)

    def run(self, args: ArgumentList) -> int:
        """Execute `args`; return the exit status for the invoking shell."""
        if not args.needs_supervision():
            argv = self.primary_argv(args)
            self._log.debug('exec: %s', ' '.join(argv))
            return self._runner.replace(argv)
        return self._supervise(args)

    def _supervise(self, args: ArgumentList) -> int:
        for spec in args.pre_commands:
            status = self._run_command(spec)
            if status != 0:
                self._log.debug('pre command failed with %d; chain stopped', status)
                return status

        if args.skip:
            self._log.debug('primary command skipped')
        else:
            status = self._runner.call(self.primary_argv(args))
            if status != 0:
                return status

        for action in args.post_actions:
            if isinstance(action, (CommandSpec, ShellLine)):
                status = self._run_command(action)
                if status != 0:
                    self._log.debug('post command failed with %d; chain stopped', status)
                    return status
            else:
                action()
        return 0

    def _run_command(self, spec: ScheduledCommand) -> int:
        if isinstance(spec, ShellLine):
            return self._runner.shell(spec.line)
        return self._runner.call(spec.to_argv(self._executable))
