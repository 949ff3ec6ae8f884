from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from ghwrap.core.errors import CommandAbort
from ghwrap.core.interfaces.context import RepositoryContextProtocol
from ghwrap.core.interfaces.net import HostingApiProtocol
from ghwrap.runtime.console import Console


def default_browser_launcher(
    env: Optional[Mapping[str, str]] = None,
    *,
    platform: Optional[str] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> str:
    """Pick a program that opens URLs: $BROWSER, `open`, `xdg-open`, `cygstart`."""
    env = os.environ if env is None else env
    if env.get('BROWSER'):
        return env['BROWSER']
    if (platform or sys.platform) == 'darwin':
        return 'open'
    for candidate in ('xdg-open', 'cygstart'):
        if which(candidate):
            return candidate
    raise CommandAbort('Please set $BROWSER to a web launcher to use this command.')


@dataclass
class RuleEnv:
    """Read-only collaborators handed to every rewrite rule."""
    context: RepositoryContextProtocol
    api: HostingApiProtocol
    out: Console
    version: str
    browser: Callable[[], str] = field(default=default_browser_launcher)
