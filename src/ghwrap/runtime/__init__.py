from ghwrap.runtime.config import WrapperConfig
from ghwrap.runtime.console import Console
from ghwrap.runtime.orchestrator import ProcessOrchestrator
from ghwrap.runtime.pager import PagerAdapter
from ghwrap.runtime.process import SubprocessRunner

__all__ = [
    'WrapperConfig',
    'Console',
    'ProcessOrchestrator',
    'PagerAdapter',
    'SubprocessRunner',
]
