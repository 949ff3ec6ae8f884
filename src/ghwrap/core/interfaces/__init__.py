from .context import AliasLookupProtocol, RepositoryContextProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .net import HostingApiProtocol, HTTPTransportProtocol
from .process import PagerProtocol, ProcessRunnerProtocol

__all__ = [
    'AliasLookupProtocol',
    'RepositoryContextProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'HostingApiProtocol',
    'HTTPTransportProtocol',
    'PagerProtocol',
    'ProcessRunnerProtocol',
]
