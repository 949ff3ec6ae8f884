from ghwrap.discovery.git_context import GitContext, make_git_call

__all__ = ['GitContext', 'make_git_call']
