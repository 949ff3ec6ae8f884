from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional, Sequence

from ghwrap.commands.env import RuleEnv
from ghwrap.commands.registry import build_rule_set
from ghwrap.commands.resolver import Resolver
from ghwrap.constants import PROGRAM_NAME
from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import CommandAbort
from ghwrap.core.interfaces.context import RepositoryContextProtocol
from ghwrap.core.interfaces.logging import LoggerFactoryProtocol
from ghwrap.core.interfaces.net import HostingApiProtocol
from ghwrap.core.interfaces.process import PagerProtocol, ProcessRunnerProtocol
from ghwrap.discovery.git_context import GitContext, make_git_call
from ghwrap.logging.factory import DefaultLoggerFactory
from ghwrap.logging.helpers import get_logger
from ghwrap.net.github_api import GitHubApiClient
from ghwrap.net.urllib_transport import UrllibHTTPTransport
from ghwrap.runtime.config import WrapperConfig
from ghwrap.runtime.console import Console
from ghwrap.runtime.orchestrator import ProcessOrchestrator
from ghwrap.runtime.pager import PagerAdapter

logger = get_logger('ghwrap')


def _configure_logging(config: WrapperConfig) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    if getattr(_configure_logging, '_configured', False):
        return
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=config.json_logs, level=config.log_level)
    global logger
    logger = factory.get_logger('ghwrap')
    setattr(_configure_logging, '_configured', True)


class GhWrap:
    """Top-level façade: resolve argv, let one rule rewrite it, run the result.

    Every collaborator can be injected; the defaults talk to the real git,
    the hosting API and the terminal.
    """

    def __init__(
        self,
        config: Optional[WrapperConfig] = None,
        *,
        context: Optional[RepositoryContextProtocol] = None,
        api: Optional[HostingApiProtocol] = None,
        pager: Optional[PagerProtocol] = None,
        runner: Optional[ProcessRunnerProtocol] = None,
        console: Optional[Console] = None,
        version: Optional[str] = None,
    ) -> None:
        from ghwrap import __version__

        self.config = config or WrapperConfig.from_env()
        git = make_git_call(self.config.git_executable)
        self.context = context or GitContext(git=git, github_host=self.config.github_host)
        self.api = api or GitHubApiClient(
            UrllibHTTPTransport(user_agent=f'{PROGRAM_NAME}/{__version__}'),
            base_url=self.config.api_url,
            token_provider=self.context.github_token,
        )
        if pager is None:
            config_lookup = getattr(self.context, 'git_config', None)
            pager = PagerAdapter(config_lookup=config_lookup)
        self.pager = pager
        self.console = console or Console(self.pager)
        self.env = RuleEnv(
            context=self.context,
            api=self.api,
            out=self.console,
            version=version or __version__,
        )
        self.resolver = Resolver(build_rule_set(), self.env)
        self.orchestrator = ProcessOrchestrator(executable=self.config.git_executable, runner=runner)

    def prepare(self, argv: Sequence[str]) -> ArgumentList:
        """Resolve and rewrite `argv` without running anything."""
        resolution = self.resolver.resolve(argv)
        args = ArgumentList(resolution.tokens)
        self.resolver.dispatch(args, resolution)
        return args

    def run(self, argv: Sequence[str]) -> int:
        """Rewrite `argv` and execute it; return the exit status."""
        return self.orchestrator.run(self.prepare(argv))


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `ghwrap` console script."""
    config = WrapperConfig.from_env()
    _configure_logging(config)
    try:
        status = GhWrap(config).run(sys.argv[1:] if argv is None else list(argv))
    except CommandAbort as exc:
        logger.error('%s', exc.message)
        raise SystemExit(exc.code)
    except KeyboardInterrupt:
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if config.debug or os.getenv('DEBUG') == '1':
            raise
        logger.error('%s: unexpected error: %s', PROGRAM_NAME, exc)
        raise SystemExit(1)
    raise SystemExit(status)


if __name__ == '__main__':
    main()
