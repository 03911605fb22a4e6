from enum import Enum


class LinkTier(Enum):
    """Crawl priority buckets for discovered links"""
    HIGH = "high"           # Gallery / photo pages
    LOW = "low"             # Menu, about, space pages
    IGNORED = "ignored"     # Everything else
