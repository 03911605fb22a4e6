"""
Link discovery and prioritization for image crawling
"""

from .link_tier import LinkTier
from .link_info import LinkInfo
from .link_prioritizer import LinkPrioritizer

__all__ = [
    'LinkTier',
    'LinkInfo',
    'LinkPrioritizer'
]
