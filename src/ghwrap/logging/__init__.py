from ghwrap.logging.factory import DefaultLoggerFactory
from ghwrap.logging.helpers import get_logger, setup_base_logger, trace_io

__all__ = ['DefaultLoggerFactory', 'get_logger', 'setup_base_logger', 'trace_io']
