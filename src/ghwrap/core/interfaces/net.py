from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable

from ghwrap.core.models import FetchRequest, FetchResponse


@runtime_checkable
class HTTPTransportProtocol(Protocol):
    def request(self, req: FetchRequest) -> FetchResponse:
        ...


@runtime_checkable
class HostingApiProtocol(Protocol):
    """Repository operations on the hosting service."""

    def repo_exists(self, user: str, repo: str) -> bool:
        ...

    def fork_repo(self, owner: str, repo: str) -> None:
        ...

    def create_repo(
        self,
        name: str,
        *,
        private: bool = False,
        description: Optional[str] = None,
        homepage: Optional[str] = None,
    ) -> None:
        ...
