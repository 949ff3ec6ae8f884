"""Fakes shared by the ghwrap test-suite.

Nothing here spawns a process or opens a socket: git answers come from a
dict, the hosting API from an in-memory set, processes from a recorder.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ghwrap.commands.env import RuleEnv
from ghwrap.core.errors import ApiError
from ghwrap.discovery.git_context import GitContext
from ghwrap.runtime.console import Console

DEFAULT_GIT_ANSWERS: Dict[str, Optional[str]] = {
    "rev-parse --git-dir": ".git",
    "config --get github.user": "tpw",
    "config --get github.token": "abc123",
    "config --get remote.origin.url": "git://github.com/defunkt/hub.git",
    "remote": "origin",
    "symbolic-ref -q HEAD": "refs/heads/master",
}


class FakeGit:
    """Callable standing in for `make_git_call`; records every query."""

    def __init__(self, answers: Optional[Dict[str, Optional[str]]] = None, **overrides: Optional[str]) -> None:
        self.answers = dict(DEFAULT_GIT_ANSWERS if answers is None else answers)
        self.answers.update(overrides)
        self.calls: List[str] = []

    def __call__(self, args: Sequence[str]) -> Optional[str]:
        key = " ".join(args)
        self.calls.append(key)
        return self.answers.get(key)


class FakeApi:
    def __init__(self, existing: Sequence[Tuple[str, str]] = (), error: Optional[ApiError] = None) -> None:
        self.existing = set(existing)
        self.error = error
        self.forks: List[Tuple[str, str]] = []
        self.created: List[dict] = []

    def repo_exists(self, user: str, repo: str) -> bool:
        return (user, repo) in self.existing

    def fork_repo(self, owner: str, repo: str) -> None:
        if self.error:
            raise self.error
        self.forks.append((owner, repo))

    def create_repo(self, name: str, *, private: bool = False, description=None, homepage=None) -> None:
        if self.error:
            raise self.error
        self.created.append(
            {"name": name, "private": private, "description": description, "homepage": homepage}
        )


class FakePager:
    def __init__(self) -> None:
        self.calls = 0

    def maybe_page(self) -> bool:
        self.calls += 1
        return False


class FakeRunner:
    """Records process requests; `statuses` maps a joined argv to an exit code."""

    def __init__(self, statuses: Optional[Dict[str, int]] = None) -> None:
        self.statuses = dict(statuses or {})
        self.log: List[Tuple[str, str]] = []

    def _status(self, key: str) -> int:
        return self.statuses.get(key, 0)

    def replace(self, argv: Sequence[str]) -> int:
        key = " ".join(argv)
        self.log.append(("replace", key))
        return self._status(key)

    def call(self, argv: Sequence[str]) -> int:
        key = " ".join(argv)
        self.log.append(("call", key))
        return self._status(key)

    def shell(self, line: str) -> int:
        self.log.append(("shell", line))
        return self._status(line)

    @property
    def commands(self) -> List[str]:
        return [cmd for _, cmd in self.log]


def make_context(git: Optional[FakeGit] = None, *, env: Optional[Dict[str, str]] = None, cwd: str = "/work/hub") -> GitContext:
    return GitContext(git=git or FakeGit(), env=env or {}, cwd=Path(cwd))


def make_env(
    git: Optional[FakeGit] = None,
    *,
    api: Optional[FakeApi] = None,
    browser: str = "open",
) -> Tuple[RuleEnv, io.StringIO]:
    out = io.StringIO()
    env = RuleEnv(
        context=make_context(git),
        api=api or FakeApi(),
        out=Console(FakePager(), stream=out),
        version="0.9.0",
        browser=lambda: browser,
    )
    return env, out
