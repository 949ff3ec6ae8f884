from __future__ import annotations

"""Mutable argument model threaded through a single ghwrap invocation.

An `ArgumentList` is built from the raw argv, handed to exactly one rewrite
rule and then consumed by the process orchestrator. Besides the token list it
carries the scheduling slots a rule may fill:

    * pre_commands   – run in order before the primary command.
    * post_actions   – commands or callbacks run after it succeeds.
    * executable_override – program used instead of git.
    * skip           – do not run the primary command at all.

Index-based helpers do not track positions across mutations. A rule that
inserts or deletes must look indices up again before the next index-based
call.
"""

from typing import Iterator, List, Optional, Sequence, Union

from ghwrap.core.models import (
    Callback,
    PostAction,
    ScheduledCommand,
    to_command,
)


class ArgumentList:
    def __init__(self, tokens: Sequence[str]) -> None:
        if not tokens:
            raise ValueError('ArgumentList requires at least the command name')
        self.tokens: List[str] = [str(t) for t in tokens]
        self.pre_commands: List[ScheduledCommand] = []
        self.post_actions: List[PostAction] = []
        self.executable_override: Optional[str] = None
        self.skip: bool = False

    # ------------------------------------------------------------------ #
    #  Sequence surface                                                  #
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def __getitem__(self, idx):
        return self.tokens[idx]

    def __setitem__(self, idx: int, token: str) -> None:
        self.tokens[idx] = token

    def __repr__(self) -> str:
        return (
            f'ArgumentList(tokens={self.tokens!r}, pre={self.pre_commands!r}, '
            f'post={len(self.post_actions)}, executable={self.executable_override!r}, '
            f'skip={self.skip!r})'
        )

    def get(self, idx: int) -> Optional[str]:
        """Return the token at `idx` or None when out of range."""
        try:
            return self.tokens[idx]
        except IndexError:
            return None

    def index(self, token: str) -> int:
        return self.tokens.index(token)

    def find(self, token: str) -> Optional[int]:
        """Like index() but returns None instead of raising."""
        try:
            return self.tokens.index(token)
        except ValueError:
            return None

    def words(self) -> List[str]:
        """Tokens that are not flags."""
        return [t for t in self.tokens if not t.startswith('-')]

    def flags(self) -> List[str]:
        return [t for t in self.tokens if t.startswith('-')]

    # ------------------------------------------------------------------ #
    #  Token mutation                                                    #
    # ------------------------------------------------------------------ #
    def insert_before(self, *tokens: str) -> None:
        """Prepend `tokens` keeping their relative order."""
        self.tokens[0:0] = list(tokens)

    def insert_at(self, idx: int, *tokens: str) -> None:
        """Insert `tokens` so that the first of them ends up at `idx`."""
        self.tokens[idx:idx] = list(tokens)

    def insert_after_index(self, idx: int, *tokens: str) -> None:
        self.tokens[idx + 1:idx + 1] = list(tokens)

    def delete_at(self, idx: int) -> str:
        return self.tokens.pop(idx)

    def delete(self, token: str) -> Optional[str]:
        """Remove every occurrence of `token`; return it if anything was removed."""
        if token not in self.tokens:
            return None
        self.tokens = [t for t in self.tokens if t != token]
        return token

    def replace_all(self, *tokens: str) -> None:
        self.tokens = list(tokens)

    def append(self, *tokens: str) -> None:
        self.tokens.extend(tokens)

    def shift(self) -> Optional[str]:
        """Remove and return the first token, or None when empty."""
        return self.tokens.pop(0) if self.tokens else None

    def pop(self) -> Optional[str]:
        return self.tokens.pop() if self.tokens else None

    # ------------------------------------------------------------------ #
    #  Scheduling                                                        #
    # ------------------------------------------------------------------ #
    def schedule_before(self, spec: Union[ScheduledCommand, str, Sequence[str]]) -> None:
        """Queue a command to run before the primary one.

        A plain sequence runs with the git executable, a plain string is a
        shell line.
        """
        self.pre_commands.append(to_command(spec))

    def schedule_after(self, spec: Union[ScheduledCommand, str, Sequence[str], Callback]) -> None:
        """Queue a command or a zero-argument callback for after the primary one."""
        if callable(spec):
            self.post_actions.append(spec)
        else:
            self.post_actions.append(to_command(spec))

    def set_executable(self, name: str) -> None:
        self.executable_override = name

    def mark_skip(self) -> None:
        self.skip = True

    def needs_supervision(self) -> bool:
        """True when running this list takes more than a plain exec."""
        return bool(
            self.pre_commands
            or self.post_actions
            or self.executable_override
            or self.skip
        )
