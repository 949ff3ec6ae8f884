from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

PROGRAM_NAME: str = 'ghwrap'

DEFAULT_GIT: str = 'git'
DEFAULT_HOST: str = 'github.com'

# Command name the resolver falls back to when argv holds only flags.
HELP_COMMAND: str = 'help'

# Pager selection and the environment it runs with.
DEFAULT_PAGER: str = 'less -isr'
FALLBACK_PAGER: str = 'more'
PAGER_LESS_FLAGS: str = 'FSRX'

HTTP_TIMEOUT: float = 30.0
