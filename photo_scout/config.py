from dataclasses import dataclass
from typing import List

DEFAULT_USER_AGENT = "PhotoScout/1.0"
DEFAULT_MAX_IMAGES = 10
DEFAULT_PAGE_TIMEOUT = 5.0
DEFAULT_IMAGE_TIMEOUT = 10.0
MAX_IMAGE_BYTES = 10 * 1024 * 1024


@dataclass
class CrawlConfig:
    """Configuration for image discovery crawling"""
    max_images: int = DEFAULT_MAX_IMAGES
    page_timeout: float = DEFAULT_PAGE_TIMEOUT
    high_priority_keywords: List[str] = None
    low_priority_keywords: List[str] = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if self.high_priority_keywords is None:
            self.high_priority_keywords = ['gallery', 'photos']
        if self.low_priority_keywords is None:
            self.low_priority_keywords = ['menu', 'restaurant', 'space', 'about']
        if self.max_images < 1:
            raise ValueError(f"max_images must be at least 1, got {self.max_images}")
        if self.page_timeout <= 0:
            raise ValueError(f"page_timeout must be positive, got {self.page_timeout}")

        # Keyword matching is done against lower-cased text
        self.high_priority_keywords = [k.lower() for k in self.high_priority_keywords]
        self.low_priority_keywords = [k.lower() for k in self.low_priority_keywords]


@dataclass
class RankConfig:
    """Configuration for resolution ranking"""
    image_timeout: float = DEFAULT_IMAGE_TIMEOUT
    max_image_bytes: int = MAX_IMAGE_BYTES
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if self.image_timeout <= 0:
            raise ValueError(f"image_timeout must be positive, got {self.image_timeout}")
