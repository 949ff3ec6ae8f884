from __future__ import annotations

"""Repository context backed by git itself.

Every query shells out to `git` once and caches the answer for the rest of
the invocation. Lookups never raise for a missing value; they return None.
Only `require_repo()` and `repo_name()` outside a repository raise
`ContextUnavailable`.
"""

import logging
import os
import re
import subprocess
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ghwrap.constants import DEFAULT_GIT, DEFAULT_HOST
from ghwrap.core.errors import ContextUnavailable
from ghwrap.core.interfaces.context import RepositoryContextProtocol
from ghwrap.logging.helpers import get_logger, trace_io

GitCall = Callable[[Sequence[str]], Optional[str]]

_MISSING = object()


def make_git_call(executable: str = DEFAULT_GIT, *, logger: Optional[logging.Logger] = None) -> GitCall:
    """Return a function running `git <args>` and yielding stripped stdout.

    A non-zero exit or a missing git binary yields None.
    """
    log = logger or get_logger('git')

    def _call(args: Sequence[str]) -> Optional[str]:
        cmd = [executable, *args]
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as exc:
            log.debug('git unavailable: %s', exc)
            return None
        trace_io(log, 'git query', cmd=cmd, status=proc.returncode)
        if proc.returncode != 0:
            return None
        return proc.stdout.rstrip('\n')

    return _call


class GitContext(RepositoryContextProtocol):
    def __init__(
        self,
        *,
        git: Optional[GitCall] = None,
        github_host: str = DEFAULT_HOST,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[Path] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._git = git or make_git_call(logger=logger)
        self.github_host = github_host
        self._env = os.environ if env is None else env
        self._cwd = cwd
        self._log = logger or get_logger('context')
        self._cache: Dict[Tuple[str, ...], object] = {}

    def _cached(self, key: Tuple[str, ...], fn: Callable[[], object]):
        value = self._cache.get(key, _MISSING)
        if value is _MISSING:
            value = fn()
            self._cache[key] = value
        return value

    # ------------------------------------------------------------------ #
    #  Raw git access                                                    #
    # ------------------------------------------------------------------ #
    def git_config(self, name: str, *, all_values: bool = False) -> Optional[str]:
        flag = '--get-all' if all_values else '--get'
        value = self._cached(('config', flag, name), lambda: self._git(['config', flag, name]))
        return value or None

    def git_alias_for(self, name: str) -> Optional[str]:
        return self.git_config(f'alias.{name}')

    def is_repo(self) -> bool:
        return self._cached(
            ('is_repo',), lambda: self._git(['rev-parse', '--git-dir']) is not None
        )

    def require_repo(self) -> None:
        if not self.is_repo():
            raise ContextUnavailable('Not a git repository')

    # ------------------------------------------------------------------ #
    #  Credentials                                                       #
    # ------------------------------------------------------------------ #
    def github_user(self) -> Optional[str]:
        return self._env.get('GITHUB_USER') or self.git_config('github.user')

    def github_token(self) -> Optional[str]:
        return self._env.get('GITHUB_TOKEN') or self.git_config('github.token')

    def http_clone(self) -> bool:
        return (self.git_config('hub.http-clone') or '').lower() in ('true', 'yes', '1')

    # ------------------------------------------------------------------ #
    #  Remotes & branches                                                #
    # ------------------------------------------------------------------ #
    def remotes(self) -> List[str]:
        def _load() -> List[str]:
            names = (self._git(['remote']) or '').split()
            # origin first, the rest alphabetically
            return sorted(names, key=lambda n: (n != 'origin', n))
        return list(self._cached(('remotes',), _load))

    def remotes_group(self, name: str) -> Optional[str]:
        return self.git_config(f'remotes.{name}')

    def default_remote(self) -> str:
        return 'origin'

    def remote_url(self, remote: str) -> Optional[str]:
        return self.git_config(f'remote.{remote}.url')

    def _owner_and_repo(self, remote: str) -> Tuple[Optional[str], Optional[str]]:
        url = self.remote_url(remote)
        if not url:
            return (None, None)
        host = re.escape(self.github_host)
        m = re.search(rf'{host}[:/]([^/]+)/([^/]+?)(?:\.git)?/?$', url)
        if not m:
            return (None, None)
        return (m.group(1), m.group(2))

    def repo_owner(self) -> Optional[str]:
        return self._owner_and_repo(self.default_remote())[0]

    def current_branch(self) -> Optional[str]:
        ref = self._cached(('head',), lambda: self._git(['symbolic-ref', '-q', 'HEAD']))
        if not ref:
            return None
        return ref[len('refs/heads/'):] if ref.startswith('refs/heads/') else ref

    def tracked_branch(self) -> Optional[str]:
        branch = self.current_branch()
        if not branch:
            return None
        merge = self.git_config(f'branch.{branch}.merge')
        if not merge:
            return None
        return merge[len('refs/heads/'):] if merge.startswith('refs/heads/') else merge

    def repo_user(self) -> Optional[str]:
        """Owner of the repository the current branch tracks."""
        branch = self.current_branch()
        remote = self.git_config(f'branch.{branch}.remote') if branch else None
        if remote and remote != '.':
            owner = self._owner_and_repo(remote)[0]
            if owner:
                return owner
        return self.repo_owner()

    def current_dirname(self) -> str:
        return (self._cwd or Path.cwd()).resolve().name

    def repo_name(self) -> str:
        name = self._owner_and_repo(self.default_remote())[1]
        if name:
            return name
        if not self.is_repo():
            raise ContextUnavailable('Not a git repository')
        return self.current_dirname()

    # ------------------------------------------------------------------ #
    #  URLs                                                              #
    # ------------------------------------------------------------------ #
    def github_url(
        self,
        *,
        user: Optional[str] = None,
        repo: Optional[str] = None,
        private: bool = False,
        web: Optional[str] = None,
    ) -> str:
        """Clone or web URL on the hosting service.

        `repo` may be "user/repo". Missing parts default to the configured
        user and the current repository name. `web` is a path suffix; pass
        '' for the repository page itself.
        """
        if repo and '/' in repo:
            user, repo = repo.split('/', 1)
        user = user or self.github_user()
        if not user:
            raise ContextUnavailable(
                'Set the hosting user name with: git config --global github.user USER'
            )
        repo = repo or self.repo_name()
        host = self.github_host

        if web is not None:
            return f'https://{host}/{user}/{repo}{web}'
        if private:
            return f'git@{host}:{user}/{repo}.git'
        if self.http_clone():
            return f'http://{host}/{user}/{repo}.git'
        return f'git://{host}/{user}/{repo}.git'
