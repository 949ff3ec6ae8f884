from __future__ import annotations

"""The closed set of rewrite rules, keyed by normalized command name."""

from types import MappingProxyType
from typing import Callable, Mapping

from ghwrap.commands import browse, hosting, meta, remotes
from ghwrap.commands.env import RuleEnv
from ghwrap.core.args import ArgumentList

RewriteRule = Callable[[ArgumentList, RuleEnv], None]


def build_rule_set() -> Mapping[str, RewriteRule]:
    """Return a read-only mapping of every known rule."""
    rules = {
        'clone': remotes.clone,
        'submodule': remotes.submodule,
        'remote': remotes.remote,
        'fetch': remotes.fetch,
        'cherry_pick': remotes.cherry_pick,
        'am': remotes.am,
        'init': remotes.init,
        'push': remotes.push,
        'fork': hosting.fork,
        'create': hosting.create,
        'browse': browse.browse,
        'compare': browse.compare,
        'alias': meta.alias,
        'version': meta.version,
        '--version': meta.version,
        'help': meta.show_help,
        '--help': meta.show_help,
    }
    return MappingProxyType(rules)
