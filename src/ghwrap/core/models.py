from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class CommandSpec:
    """A program plus its arguments; `executable=None` means the git binary."""
    args: Tuple[str, ...]
    executable: Optional[str] = None

    def to_argv(self, default_executable: str) -> list[str]:
        return [self.executable or default_executable, *self.args]


@dataclass(frozen=True)
class ShellLine:
    """A raw command line handed to the system shell verbatim."""
    line: str


Callback = Callable[[], object]
ScheduledCommand = Union[CommandSpec, ShellLine]
PostAction = Union[CommandSpec, ShellLine, Callback]


@dataclass(frozen=True)
class FetchRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class FetchResponse:
    status: int
    headers: Mapping[str, str]
    body: bytes
    final_url: str


def to_command(spec: Union[ScheduledCommand, str, Sequence[str]]) -> ScheduledCommand:
    """Normalize a loose command description into a CommandSpec or ShellLine."""
    if isinstance(spec, (CommandSpec, ShellLine)):
        return spec
    if isinstance(spec, str):
        return ShellLine(spec)
    return CommandSpec(tuple(str(a) for a in spec))
