from __future__ import annotations

"""Rules that talk to the hosting API before handing over to git.

    $ ghwrap fork
    > (fork CURRENT_REPO under YOUR_USER)
    > git remote add -f YOUR_USER git@github.com:YOUR_USER/CURRENT_REPO.git

    $ ghwrap create -d "description"
    > (create YOUR_USER/CURRENT_REPO)
    > git remote add -f origin git@github.com:YOUR_USER/CURRENT_REPO.git
"""

from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import ApiError, CommandAbort
from ghwrap.commands.env import RuleEnv


def fork(args: ArgumentList, env: RuleEnv) -> None:
    ctx = env.context
    user, token, owner = ctx.github_user(), ctx.github_token(), ctx.repo_owner()
    # without credentials and an upstream owner there is nothing to fork
    if not (user and token and owner):
        return

    repo = ctx.repo_name()
    try:
        if env.api.repo_exists(user, repo):
            env.out.puts(f'{user}/{repo} already exists on {ctx.github_host}')
        else:
            env.api.fork_repo(owner, repo)
    except ApiError as exc:
        raise CommandAbort(f'error creating fork: {exc.reason} (HTTP {exc.status})') from exc

    if '--no-remote' in args:
        args.mark_skip()
        return
    url = ctx.github_url(private=True)
    args.replace_all('remote', 'add', '-f', user, url)
    args.schedule_after(lambda: env.out.puts(f'new remote: {user}'))


def create(args: ArgumentList, env: RuleEnv) -> None:
    ctx = env.context
    if not ctx.is_repo():
        env.out.puts("'create' must be run from inside a git repository")
        args.mark_skip()
        return
    user, token = ctx.github_user(), ctx.github_token()
    if not (user and token):
        return

    args.shift()
    private = bool(args.delete('-p'))
    description = homepage = None
    while len(args):
        arg = args.shift()
        if arg == '-d':
            description = args.shift()
        elif arg == '-h':
            homepage = args.shift()
        else:
            raise CommandAbort(f'unexpected argument: {arg}')

    repo = ctx.repo_name()
    try:
        if env.api.repo_exists(user, repo):
            env.out.puts(f'{user}/{repo} already exists on {ctx.github_host}')
            action = 'set remote origin'
        else:
            env.api.create_repo(repo, private=private, description=description, homepage=homepage)
            action = 'created repository'
    except ApiError as exc:
        raise CommandAbort(f'error creating repository: {exc.reason} (HTTP {exc.status})') from exc

    url = ctx.github_url(private=True)
    remotes = ctx.remotes()
    if not remotes or remotes[0] != 'origin':
        args.replace_all('remote', 'add', '-f', 'origin', url)
    else:
        args.replace_all('remote', '-v')
    args.schedule_after(lambda: env.out.puts(f'{action}: {user}/{repo}'))
