"""
Image discovery crawler
"""

from .base import ImageCrawler
from .builder import CrawlerBuilder
from .result import CrawlResult, ImageCrawlResult, ImageCandidateSet

__all__ = ['ImageCrawler', 'CrawlerBuilder', 'CrawlResult', 'ImageCrawlResult', 'ImageCandidateSet']
