from typing import List, Optional, Protocol, runtime_checkable


@runtime_checkable
class AliasLookupProtocol(Protocol):
    """Source of git's own alias definitions."""

    def git_alias_for(self, name: str) -> Optional[str]: ...


@runtime_checkable
class RepositoryContextProtocol(AliasLookupProtocol, Protocol):
    """Read-only view of the repository the user is standing in.

    Queries return None when the answer is unknown. Queries that make no
    sense outside a repository raise ContextUnavailable.
    """

    github_host: str

    def github_user(self) -> Optional[str]: ...

    def github_token(self) -> Optional[str]: ...

    def remotes(self) -> List[str]: ...

    def remotes_group(self, name: str) -> Optional[str]: ...

    def repo_owner(self) -> Optional[str]: ...

    def repo_user(self) -> Optional[str]: ...

    def repo_name(self) -> str: ...

    def tracked_branch(self) -> Optional[str]: ...

    def default_remote(self) -> str: ...

    def is_repo(self) -> bool: ...

    def current_dirname(self) -> str: ...

    def github_url(
        self,
        *,
        user: Optional[str] = None,
        repo: Optional[str] = None,
        private: bool = False,
        web: Optional[str] = None,
    ) -> str: ...
