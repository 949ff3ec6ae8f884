from __future__ import annotations

__version__ = '0.9.0'

from ghwrap.cli import GhWrap, main
from ghwrap.commands import Resolution, Resolver, RuleEnv, build_rule_set
from ghwrap.core import ArgumentList, CommandAbort, CommandSpec, ShellLine
from ghwrap.runtime import Console, PagerAdapter, ProcessOrchestrator, WrapperConfig

__all__ = [
    '__version__',
    'GhWrap',
    'main',
    'ArgumentList',
    'CommandAbort',
    'CommandSpec',
    'ShellLine',
    'Resolution',
    'Resolver',
    'RuleEnv',
    'build_rule_set',
    'Console',
    'PagerAdapter',
    'ProcessOrchestrator',
    'WrapperConfig',
]
