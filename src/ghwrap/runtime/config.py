from __future__ import annotations

"""Environment-driven configuration for a single ghwrap invocation."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ghwrap.constants import DEFAULT_GIT, DEFAULT_HOST
from ghwrap.logging.helpers import parse_level


@dataclass(frozen=True)
class WrapperConfig:
    """Immutable settings resolved once at startup.

    Environment:
        GHWRAP_GIT        git executable (default 'git').
        GITHUB_HOST       hosting host name (default 'github.com').
        GHWRAP_API_URL    API base URL (default 'https://api.<host>').
        GHWRAP_JSON_LOGS  '1' switches log lines to JSON.
        GHWRAP_LOG_LEVEL  log level name (default WARNING).
        DEBUG             '1' re-raises unexpected errors.
    """
    git_executable: str = DEFAULT_GIT
    github_host: str = DEFAULT_HOST
    api_url: str = f'https://api.{DEFAULT_HOST}'
    json_logs: bool = False
    log_level: int = logging.WARNING
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'WrapperConfig':
        env = os.environ if env is None else env
        host = (env.get('GITHUB_HOST') or DEFAULT_HOST).strip()
        return cls(
            git_executable=(env.get('GHWRAP_GIT') or DEFAULT_GIT).strip(),
            github_host=host,
            api_url=(env.get('GHWRAP_API_URL') or f'https://api.{host}').rstrip('/'),
            json_logs=env.get('GHWRAP_JSON_LOGS') == '1',
            log_level=parse_level(env.get('GHWRAP_LOG_LEVEL')),
            debug=env.get('DEBUG') == '1',
        )
