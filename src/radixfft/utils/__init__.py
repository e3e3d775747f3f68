"""
Utility modules.
"""

from .interleave import interleave, deinterleave
from .logging import setup_logging
from .seed import set_seed, get_seed_from_config

__all__ = [
    'interleave',
    'deinterleave',
    'setup_logging',
    'set_seed',
    'get_seed_from_config',
]
