from typing import Sequence, Protocol, runtime_checkable


@runtime_checkable
class ProcessRunnerProtocol(Protocol):
    """Process primitives used by the orchestrator."""

    def replace(self, argv: Sequence[str]) -> int:
        """Replace the current process image.

        Returns only where replacement is unavailable (or the exec itself
        failed), with the exit status of an emulating child.
        """
        ...

    def call(self, argv: Sequence[str]) -> int:
        """Run argv to completion with inherited stdio; return its status."""
        ...

    def shell(self, line: str) -> int:
        """Run a raw line through the system shell; return its status."""
        ...


@runtime_checkable
class PagerProtocol(Protocol):
    def maybe_page(self) -> bool:
        """Route stdout through a pager if it is a terminal. Idempotent."""
        ...
