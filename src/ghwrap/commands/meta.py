from __future__ import annotations

"""Rules about ghwrap itself: help, version and shell alias snippets."""

import re

from ghwrap.constants import PROGRAM_NAME
from ghwrap.core.args import ArgumentList
from ghwrap.core.errors import CommandAbort
from ghwrap.commands.env import RuleEnv

IMPROVED_HELP_TEXT = """\
usage: git [--version] [--exec-path[=GIT_EXEC_PATH]] [--html-path]
    [-p|--paginate|--no-pager] [--bare] [--git-dir=GIT_DIR]
    [--work-tree=GIT_WORK_TREE] [--help] COMMAND [ARGS]

Basic Commands:
   init       Create an empty git repository or reinitialize an existing one
   add        Add new or modified files to the staging area
   rm         Remove files from the working directory and staging area
   mv         Move or rename a file, a directory, or a symlink
   status     Show the status of the working directory and staging area
   commit     Record changes to the repository

History Commands:
   log        Show the commit history log
   diff       Show changes between commits, commit and working tree, etc
   show       Show information about commits, tags or files

Branching Commands:
   branch     List, create, or delete branches
   checkout   Switch the active branch to another branch
   merge      Join two or more development histories (branches) together
   tag        Create, list, delete, sign or verify a tag object

Remote Commands:
   clone      Clone a remote repository into a new directory
   fetch      Download data, tags and branches from a remote repository
   pull       Fetch from and merge with another repository or a local branch
   push       Upload data, tags and branches to a remote repository
   remote     View and manage a set of remote repositories

Hosting Commands:
   browse     Open the repository page in a web browser
   compare    Open a compare view between two refs
   fork       Fork the current repository and add a remote for it
   create     Create the current repository on the hosting service

Advanced commands:
   reset      Reset your staging area or working directory to another point
   rebase     Re-apply a series of patches in one branch onto another
   bisect     Find by binary search the change that introduced a bug
   grep       Print files with lines matching a pattern in your codebase

See 'git help COMMAND' for more information on a specific command.
"""

WRAPPER_USAGE = f"""\
usage: {PROGRAM_NAME} COMMAND [ARGS]

{PROGRAM_NAME} runs git, first expanding hosting shorthands such as
`clone user/repo`, `fetch a,b`, `push a,b BRANCH` and `cherry-pick user@SHA`.
Unknown commands are passed to git untouched.

Environment:
   GHWRAP_GIT        git executable to run (default: git)
   GITHUB_HOST       hosting host name (default: github.com)
   GITHUB_USER       overrides `git config github.user`
   GITHUB_TOKEN      overrides `git config github.token`
   GIT_PAGER, PAGER  pager for output printed by {PROGRAM_NAME}
   BROWSER           program used by browse and compare
"""

SHELL_ALIASES = {
    'sh': f'alias git={PROGRAM_NAME}',
    'bash': f'alias git={PROGRAM_NAME}',
    'zsh': f'function git(){{{PROGRAM_NAME} "$@"}}',
    'csh': f'alias git {PROGRAM_NAME}',
    'fish': f'alias git {PROGRAM_NAME}',
}


def version(args: ArgumentList, env: RuleEnv) -> None:
    args.schedule_after(lambda: env.out.puts(f'{PROGRAM_NAME} version {env.version}'))


def show_help(args: ArgumentList, env: RuleEnv) -> None:
    words = args.words()
    command = words[1] if len(words) > 1 else None

    if command == PROGRAM_NAME:
        args.mark_skip()
        args.schedule_after(lambda: env.out.puts(WRAPPER_USAGE))
    elif command is None and not any(re.match(r'^--?a', f) for f in args.flags()):
        # plain `help` prints without a pager unless -p/--paginate asked for one
        paginate = any(re.match(r'^-{1,2}p', f) for f in args.flags())
        args.mark_skip()
        args.schedule_after(lambda: env.out.puts(IMPROVED_HELP_TEXT, page=paginate))


def alias(args: ArgumentList, env: RuleEnv) -> None:
    silent = args.delete('-s')
    shell = args.get(1)
    args.mark_skip()

    if not shell:
        lines = [
            f'usage: {PROGRAM_NAME} alias [-s] SHELL',
            '',
            f'You already have {PROGRAM_NAME} installed and available in your PATH,',
            "but to get the full experience you'll want to alias it to",
            '`git`.',
            '',
            'To see how to accomplish this for your shell, run the alias',
            'command again with the name of your shell.',
            '',
            'Known shells:',
            *(f'  {key}' for key in sorted(SHELL_ALIASES)),
            '',
            'Options:',
            '  -s   Silent. Useful when using the output with eval, e.g.',
            f'       $ eval `{PROGRAM_NAME} alias -s bash`',
        ]
        args.schedule_after(lambda: env.out.puts(*lines))
        return

    snippet = SHELL_ALIASES.get(shell)
    if snippet is None:
        raise CommandAbort(f"fatal: never heard of `{shell}'")

    def _print() -> None:
        if not silent:
            env.out.puts(f'Run this in your shell to start using `{PROGRAM_NAME}` as `git`:')
            env.out.write('  ')
        env.out.puts(snippet)

    args.schedule_after(_print)
