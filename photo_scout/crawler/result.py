"""
Crawl Result - Data structures for crawling results
"""

from dataclasses import dataclass, field
from typing import List, Optional
from ..error_handler import ErrorType


@dataclass
class CrawlResult:
    """Result of fetching a single page"""
    url: str
    content: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None
    response_time: float = 0.0
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None


@dataclass
class ImageCrawlResult:
    """Outcome of one image discovery crawl"""
    root_url: str
    images: List[str] = field(default_factory=list)
    visited_pages: List[str] = field(default_factory=list)
    fetched_pages: List[str] = field(default_factory=list)
    failed_pages: List[str] = field(default_factory=list)


class ImageCandidateSet:
    """Insertion-ordered set of image URLs capped at a quota"""

    def __init__(self, quota: int):
        self.quota = quota
        self._urls = {}

    def add(self, url: str) -> bool:
        """Add url unless it is already present or the quota is met"""
        if self.is_full or url in self._urls:
            return False
        self._urls[url] = None
        return True

    @property
    def is_full(self) -> bool:
        return len(self._urls) >= self.quota

    def snapshot(self) -> tuple:
        return tuple(self._urls)

    def to_list(self) -> List[str]:
        return list(self.snapshot()[:self.quota])

    def __len__(self):
        return len(self._urls)

    def __contains__(self, url):
        return url in self._urls
