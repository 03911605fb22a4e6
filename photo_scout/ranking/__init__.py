"""
Resolution ranking for discovered images
"""

from .ranked_image import RankedImage
from .dimensions import read_dimensions
from .image_ranker import ImageRanker

__all__ = [
    'RankedImage',
    'read_dimensions',
    'ImageRanker'
]
