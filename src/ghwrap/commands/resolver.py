from __future__ import annotations

"""Command resolution: alias expansion, name normalization, rule lookup.

    >>> resolver.resolve(['co', 'master'])          # alias.co = checkout
    Resolution(command='checkout', tokens=['co', 'master'], rule=None)

Alias expansions are only substituted into the tokens when a rule matches.
Anything else reaches git exactly as typed and git expands its own aliases.
So `co` with alias.co = checkout resolves to command 'checkout' while the
tokens stay ['co', ...]: git runs the same `checkout` either way, and no
ghwrap rule exists for it.
"""

import logging
import re
import shlex
from typing import List, Mapping, NamedTuple, Optional, Sequence

from ghwrap.constants import HELP_COMMAND
from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import CommandAbort, ContextUnavailable
from ghwrap.core.interfaces.context import AliasLookupProtocol
from ghwrap.commands.env import RuleEnv
from ghwrap.commands.registry import RewriteRule
from ghwrap.logging.helpers import get_logger

# A word, or one of the flags git treats as a complete command line.
_COMMAND_LIKE = re.compile(r'^[^-]|version|exec-path$|html-path')
_COMPOUND = re.compile(r'(\w)-')


class Resolution(NamedTuple):
    command: str
    tokens: List[str]
    rule: Optional[RewriteRule]


def normalize(name: str) -> str:
    """`cherry-pick` -> `cherry_pick`; only the first compound is joined."""
    return _COMPOUND.sub(r'\1_', name, count=1)


class Resolver:
    def __init__(
        self,
        rules: Mapping[str, RewriteRule],
        env: RuleEnv,
        *,
        aliases: Optional[AliasLookupProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._rules = rules
        self._env = env
        self._aliases = aliases if aliases is not None else env.context
        self._log = logger or get_logger('resolver')

    def expand_alias(self, name: str) -> Optional[List[str]]:
        """Shell-split git's alias for `name`; None for shell aliases or none."""
        expansion = self._aliases.git_alias_for(name)
        if not expansion or expansion.startswith('!'):
            return None
        try:
            words = shlex.split(expansion)
        except ValueError as exc:
            self._log.debug('alias %r not expanded: %s', name, exc)
            return None
        return words or None

    def resolve(self, raw_tokens: Sequence[str]) -> Resolution:
        tokens = list(raw_tokens)
        if not any(_COMMAND_LIKE.search(t) for t in tokens):
            tokens.insert(0, HELP_COMMAND)

        candidate = tokens[0]
        expanded = self.expand_alias(candidate)
        command = normalize(expanded[0] if expanded else candidate)
        rule = self._rules.get(command)
        if rule is None:
            return Resolution(command, tokens, None)
        if expanded:
            self._log.debug('alias %s -> %s', candidate, ' '.join(expanded))
            tokens[0:1] = expanded
        return Resolution(command, tokens, rule)

    def dispatch(self, args: ArgumentList, resolution: Optional[Resolution] = None) -> bool:
        """Run the matching rule on `args`; return False when nothing matched."""
        if resolution is None:
            resolution = self.resolve(args.tokens)
        if resolution.rule is None:
            return False
        if resolution.tokens != args.tokens:
            args.replace_all(*resolution.tokens)
        self._log.debug('rule %s: %s', resolution.command, ' '.join(args.tokens))
        try:
            resolution.rule(args, self._env)
        except ContextUnavailable as exc:
            raise CommandAbort(str(exc)) from exc
        return True
