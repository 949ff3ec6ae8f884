from __future__ import annotations

"""Rules that open hosting web pages instead of running git.

    $ ghwrap browse
    > open https://github.com/CURRENT_REPO

    $ ghwrap browse pjhyett/github-services wiki
    > open https://github.com/pjhyett/github-services/wiki

    $ ghwrap compare -u 1.0...2.0
    > echo https://github.com/CURRENT_REPO/compare/1.0...2.0
"""

from typing import Callable, Dict, Optional

from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import CommandAbort
from ghwrap.commands.env import RuleEnv
from ghwrap.logging.helpers import get_logger

logger = get_logger('commands.browse')


def _browse_command(args: ArgumentList, env: RuleEnv, build: Callable[[], Dict[str, Optional[str]]]) -> None:
    url_only = args.delete('-u')
    if args.delete('-p'):
        logger.warning('Warning: the `-p` flag has no effect anymore')
    params = build()

    args.set_executable('echo' if url_only else env.browser())
    args.append(env.context.github_url(
        user=params.get('user'),
        repo=params.get('repo'),
        web=params.get('web') or '',
        private=True,
    ))


def browse(args: ArgumentList, env: RuleEnv) -> None:
    args.shift()

    def _params() -> Dict[str, Optional[str]]:
        ctx = env.context
        user = repo = None
        dest = args.shift()
        if dest == '--':
            dest = None

        if dest:
            repo = dest
        else:
            user = ctx.repo_user()
            if not user:
                raise CommandAbort('Usage: ghwrap browse [<USER>/]<REPOSITORY>')

        params: Dict[str, Optional[str]] = {'user': user, 'repo': repo}
        subpage = args.shift()
        if subpage == 'commits':
            branch = (not dest and ctx.tracked_branch()) or 'master'
            params['web'] = f'/commits/{branch}'
        elif subpage in ('tree', None):
            branch = not dest and ctx.tracked_branch()
            if branch and branch != 'master':
                params['web'] = f'/tree/{branch}'
        else:
            params['web'] = f'/{subpage}'
        return params

    _browse_command(args, env, _params)


def compare(args: ArgumentList, env: RuleEnv) -> None:
    args.shift()

    def _params() -> Dict[str, Optional[str]]:
        ctx = env.context
        if not len(args):
            branch = ctx.tracked_branch()
            if not branch or branch == 'master':
                raise CommandAbort('Usage: ghwrap compare [USER] [<START>...]<END>')
            range_, user = branch, ctx.repo_user()
        else:
            range_ = args.pop()
            user = args.pop() or ctx.repo_user()
        return {'user': user, 'web': f'/compare/{range_}'}

    _browse_command(args, env, _params)
