"""
Crawler Builder - Fluent API for building image crawlers
"""

import logging
from typing import List, Optional
import aiohttp
from ..config import CrawlConfig, DEFAULT_MAX_IMAGES, DEFAULT_PAGE_TIMEOUT, DEFAULT_USER_AGENT
from .base import ImageCrawler


class CrawlerBuilder:
    """Builder for creating image crawlers"""

    def __init__(self):
        self._max_images = DEFAULT_MAX_IMAGES
        self._page_timeout = DEFAULT_PAGE_TIMEOUT
        self._high_priority_keywords: Optional[List[str]] = None
        self._low_priority_keywords: Optional[List[str]] = None
        self._user_agent = DEFAULT_USER_AGENT
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger: Optional[logging.Logger] = None

    def max_images(self, count: int):
        """Set the image quota"""
        self._max_images = count
        return self

    def page_timeout(self, seconds: float):
        """Set the per-page fetch timeout"""
        self._page_timeout = seconds
        return self

    def high_priority_keywords(self, *keywords: str):
        """Set keywords that mark gallery-style links"""
        self._high_priority_keywords = list(keywords)
        return self

    def low_priority_keywords(self, *keywords: str):
        """Set keywords that mark secondary links worth a visit"""
        self._low_priority_keywords = list(keywords)
        return self

    def user_agent(self, user_agent: str):
        """Set the User-Agent header sent with page requests"""
        self._user_agent = user_agent
        return self

    def with_session(self, session: aiohttp.ClientSession):
        """Reuse a caller-owned HTTP session instead of opening one per crawl"""
        self._session = session
        return self

    def with_logger(self, logger: logging.Logger):
        """Log through the given logger instead of the module logger"""
        self._logger = logger
        return self

    def build(self) -> ImageCrawler:
        """Build the configured crawler"""
        config = CrawlConfig(
            max_images=self._max_images,
            page_timeout=self._page_timeout,
            high_priority_keywords=self._high_priority_keywords,
            low_priority_keywords=self._low_priority_keywords,
            user_agent=self._user_agent
        )
        return ImageCrawler(config, session=self._session, logger=self._logger)
