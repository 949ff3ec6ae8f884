from __future__ import annotations

"""User-facing output for rules and post-action callbacks.

Every line printed by ghwrap itself goes through `Console.puts`, so the
first write decides whether the pager gets interposed.
"""

import sys
from typing import Optional, TextIO

from ghwrap.core.interfaces.process import PagerProtocol


class Console:
    def __init__(self, pager: Optional[PagerProtocol] = None, *, stream: Optional[TextIO] = None) -> None:
        self._pager = pager
        self._stream = stream

    def puts(self, *lines: str, page: bool = True) -> None:
        if page and self._pager is not None:
            self._pager.maybe_page()
        out = self._stream or sys.stdout
        for line in lines or ('',):
            out.write(line if line.endswith('\n') else line + '\n')
        out.flush()

    def write(self, text: str, *, page: bool = True) -> None:
        """Write `text` without adding a newline."""
        if page and self._pager is not None:
            self._pager.maybe_page()
        out = self._stream or sys.stdout
        out.write(text)
        out.flush()
