from __future__ import annotations

"""Public surface for ghwrap.core.

Stable import location for the argument model, command specs, errors and
the Protocol contracts:

    from ghwrap.core import ArgumentList, CommandSpec, CommandAbort
"""

from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import ApiError, CommandAbort, ContextUnavailable, GhWrapError
from ghwrap.core.models import CommandSpec, ShellLine
from ghwrap.core.interfaces import (
    AliasLookupProtocol,
    HostingApiProtocol,
    HTTPTransportProtocol,
    PagerProtocol,
    ProcessRunnerProtocol,
    RepositoryContextProtocol,
)

__all__ = [
    'ArgumentList',
    'CommandSpec',
    'ShellLine',
    'GhWrapError',
    'CommandAbort',
    'ContextUnavailable',
    'ApiError',
    'AliasLookupProtocol',
    'HostingApiProtocol',
    'HTTPTransportProtocol',
    'PagerProtocol',
    'ProcessRunnerProtocol',
    'RepositoryContextProtocol',
]
