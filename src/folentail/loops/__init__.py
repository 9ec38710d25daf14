"""Refutation loops."""

from .base import Loop
from .saturation import SaturationLoop, saturate, DEFAULT_TIMEOUT
from .registry import LoopRegistry, get_loop, register_loop

__all__ = [
    'Loop', 'SaturationLoop', 'saturate', 'DEFAULT_TIMEOUT',
    'LoopRegistry', 'get_loop', 'register_loop'
]
