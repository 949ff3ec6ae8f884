from __future__ import annotations

"""Rules that turn short `user/repo` references into hosting URLs.

    $ ghwrap clone rtomayko/tilt
    > git clone git://github.com/rtomayko/tilt.git

    $ ghwrap fetch mislav,xoebus
    > git remote add mislav git://github.com/mislav/REPO.git
    > git remote add xoebus git://github.com/xoebus/REPO.git
    > git fetch --multiple mislav xoebus

    $ ghwrap push origin,staging feature
    > git push origin feature
    > git push staging feature
"""

import os
import re
import tempfile

from ghwrap.core.args import ArgumentList
from ghwrap.core.models import CommandSpec
from ghwrap.commands.env import RuleEnv

_CLONE_VALUE_FLAGS = re.compile(r'^(--(upload-pack|template|depth|origin|branch|reference)|-[ubo])$')
_LOOKS_LIKE_URL = re.compile(r'.+?://|.+?@|^[./]')


def clone(args: ArgumentList, env: RuleEnv) -> None:
    ssh = args.delete('-p')

    idx = 1
    while idx < len(args):
        arg = args[idx]
        if arg.startswith('-'):
            if _CLONE_VALUE_FLAGS.match(arg):
                idx += 1
        elif '://' in arg or '@' in arg or os.path.isdir(arg):
            break
        elif arg.count('/') <= 1 and ':' not in arg:
            args[idx] = env.context.github_url(repo=arg, private=bool(ssh))
            break
        idx += 1


def submodule(args: ArgumentList, env: RuleEnv) -> None:
    index = args.find('add')
    if index is None:
        return
    args.delete_at(index)

    branch = args.find('-b')
    if branch is None:
        branch = args.find('--branch')
    branch_name = None
    if branch is not None:
        args.delete_at(branch)
        branch_name = args.delete_at(branch)

    clone(args, env)

    if branch_name is not None:
        args.insert_at(branch, '-b', branch_name)
    args.insert_at(index, 'add')


def remote(args: ArgumentList, env: RuleEnv) -> None:
    if args.get(1) not in ('add', 'set-url') or _LOOKS_LIKE_URL.search(args[-1]):
        return

    words = args.words()
    if len(words) < 3:
        return
    ssh = args.delete('-p')

    m = re.search(r'\b(.+?)(?:/(.+))?$', args[-1])
    user, repo = (m.group(1), m.group(2)) if m else (args[-1], None)

    if len(words) == 3 and words[2] == 'origin':
        # `remote add origin` points at the user's own copy
        user = repo = None
    elif words[-2] == words[1]:
        # `remote add rtomayko/tilt` names the remote after the user
        args[args.index(words[-1])] = user
    else:
        # `remote add blah rtomayko/tilt`: the name was given explicitly
        args.replace_all(*args.tokens[:-1])

    args.append(env.context.github_url(user=user, repo=repo, private=bool(ssh)))


def fetch(args: ArgumentList, env: RuleEnv) -> None:
    words = args.words()
    if '--multiple' in args:
        names = words[1:]
    elif len(words) > 1:
        remote_name = words[1]
        if re.fullmatch(r'\w+(,\w+)+', remote_name):
            index = args.index(remote_name)
            args.delete(remote_name)
            names = remote_name.split(',')
            args.insert_at(index, '--multiple', *names)
        else:
            names = [remote_name]
    else:
        names = []

    if not names:
        return
    ctx = env.context
    known = ctx.remotes()
    for name in names:
        if re.search(r'\W', name) or name in known or ctx.remotes_group(name):
            continue
        if not env.api.repo_exists(name, ctx.repo_name()):
            continue
        args.schedule_before(['remote', 'add', name, ctx.github_url(user=name)])


def cherry_pick(args: ArgumentList, env: RuleEnv) -> None:
    if '-m' in args or '--mainline' in args:
        return
    words = args.words()
    if len(words) < 2:
        return
    ref = words[-1]
    ctx = env.context
    host = re.escape(ctx.github_host)

    commit_url = re.match(rf'^(?:https?:)?//{host}/(.+?)/(.+?)/commit/([a-f0-9]{{7,40}})', ref)
    short_ref = re.match(r'^(\w+)@([a-f0-9]{7,40})$', ref)
    if commit_url:
        user, repo, sha = commit_url.groups()
    elif short_ref:
        user, repo, sha = short_ref.group(1), None, short_ref.group(2)
    else:
        return
    args[args.index(ref)] = sha

    if user == ctx.repo_owner():
        args.schedule_before(['fetch', ctx.default_remote()])
    elif user in ctx.remotes():
        args.schedule_before(['fetch', user])
    else:
        url = ctx.github_url(user=user, repo=repo, private=False)
        args.schedule_before(['remote', 'add', '-f', user, url])


def am(args: ArgumentList, env: RuleEnv) -> None:
    host = re.escape(env.context.github_host)
    pattern = re.compile(rf'^https?://(gist\.)?{host}/')
    idx = next((i for i, a in enumerate(args) if pattern.match(a)), None)
    if idx is None:
        return
    url = args[idx]
    gist = pattern.match(url).group(1) == 'gist.'
    if not gist:
        # "pull/42/files" and "pull/42/commits" both mean the pull request
        url = re.sub(r'(/pull/\d+)/\w*$', r'\1', url)
    ext = '.txt' if gist else '.patch'
    if os.path.splitext(url)[1] != ext:
        url += ext
    prefix = 'gist-' if gist else ''
    patch_file = os.path.join(tempfile.gettempdir(), prefix + os.path.basename(url))

    args.schedule_before(CommandSpec(
        ('-#LA', f'ghwrap {env.version}', url, '-o', patch_file),
        executable='curl',
    ))
    args[idx] = patch_file


def init(args: ArgumentList, env: RuleEnv) -> None:
    if args.delete('-g'):
        url = env.context.github_url(private=True, repo=env.context.current_dirname())
        args.schedule_after(['remote', 'add', 'origin', url])


def push(args: ArgumentList, env: RuleEnv) -> None:
    target = args.get(1)
    if not target or ',' not in target:
        return

    branch = args.get(2)
    names = [n for n in target.split(',') if n]
    if not names:
        return
    args[1] = names.pop(0)
    for name in names:
        args.schedule_after(['push', name] + ([branch] if branch else []))
