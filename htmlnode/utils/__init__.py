"""
Utility modules for htmlnode.
"""

from htmlnode.utils.config import Config, get_config, set_config
from htmlnode.utils.logging import setup_logging, log_exception, LogFormatter

__all__ = [
    'Config',
    'get_config',
    'set_config',
    'setup_logging',
    'log_exception',
    'LogFormatter',
]
