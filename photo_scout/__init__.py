"""
Photo Scout - finds the best representative photos on a business website
"""

from .config import CrawlConfig, RankConfig
from .crawler import ImageCrawler, CrawlerBuilder, ImageCrawlResult
from .ranking import ImageRanker, RankedImage
from .pipeline import find_best_photos, search_photos, PhotoSearchResult

__all__ = [
    'CrawlConfig',
    'RankConfig',
    'ImageCrawler',
    'CrawlerBuilder',
    'ImageCrawlResult',
    'ImageRanker',
    'RankedImage',
    'find_best_photos',
    'search_photos',
    'PhotoSearchResult'
]
