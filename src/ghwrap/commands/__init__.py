from ghwrap.commands.env import RuleEnv, default_browser_launcher
from ghwrap.commands.registry import RewriteRule, build_rule_set
from ghwrap.commands.resolver import Resolution, Resolver, normalize

__all__ = [
    'RuleEnv',
    'default_browser_launcher',
    'RewriteRule',
    'build_rule_set',
    'Resolution',
    'Resolver',
    'normalize',
]
