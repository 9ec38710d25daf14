"""
File format handlers for knowledge-base/query problems.
"""

from .base import FileFormat
from .kbq import KBQFormat, ENTAILED, NOT_ENTAILED
from .json import JSONFormat
from .registry import FileFormatRegistry, get_format_handler

__all__ = [
    'FileFormat', 'KBQFormat', 'JSONFormat', 'ENTAILED', 'NOT_ENTAILED',
    'FileFormatRegistry', 'get_format_handler'
]
