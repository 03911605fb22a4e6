import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple
from urllib.parse import urlparse
from ..config import CrawlConfig
from ..utils.urls import resolve_url, page_key, origin_of
from .link_info import LinkInfo
from .link_tier import LinkTier


class LinkPrioritizer:
    """Sorts same-origin links into high and low priority crawl tiers"""

    def __init__(self, config: Optional[CrawlConfig] = None, logger: Optional[logging.Logger] = None):
        self.config = config or CrawlConfig()
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, url: str, link_text: str = "") -> LinkTier:
        """Assign a tier from the link's visible text and URL path

        High priority keywords win when both tiers match.
        """
        text_lower = (link_text or "").lower()
        location = self._match_target(url)

        def matches(keywords: List[str]) -> bool:
            return any(keyword in text_lower or keyword in location for keyword in keywords)

        if matches(self.config.high_priority_keywords):
            return LinkTier.HIGH
        if matches(self.config.low_priority_keywords):
            return LinkTier.LOW
        return LinkTier.IGNORED

    @staticmethod
    def same_origin(url: str, root_url: str) -> bool:
        """Check that url shares scheme, host and port with root_url"""
        origin = origin_of(url)
        return origin is not None and origin == origin_of(root_url)

    def prioritize(self, anchors: Iterable[Tuple[str, str]], root_url: str,
                   visited: Set[str]) -> List[LinkInfo]:
        """Build the traversal queue from a page's anchors

        Args:
            anchors: (href, visible text) pairs in document order
            root_url: URL the crawl started from; hrefs resolve against it
            visited: pages already fetched during this crawl

        Returns:
            High tier links followed by low tier links, each deduplicated
            and kept in discovery order. Ignored links are dropped.
        """
        tiers: Dict[LinkTier, Dict[str, LinkInfo]] = {
            LinkTier.HIGH: {},
            LinkTier.LOW: {}
        }

        for href, link_text in anchors:
            absolute_url = resolve_url(root_url, href)
            if absolute_url is None:
                continue
            absolute_url = page_key(absolute_url)

            if not self.same_origin(absolute_url, root_url):
                self.logger.debug(f"Skipping off-site link {absolute_url}")
                continue
            if absolute_url in visited:
                continue

            tier = self.classify(absolute_url, link_text)
            if tier == LinkTier.IGNORED:
                continue

            # Dicts keep first-seen order and drop repeats
            tiers[tier].setdefault(absolute_url, LinkInfo(
                url=absolute_url,
                source_url=root_url,
                link_text=link_text,
                tier=tier
            ))

        high = list(tiers[LinkTier.HIGH].values())
        low = list(tiers[LinkTier.LOW].values())
        self.logger.info(f"🔗 Queued {len(high)} high and {len(low)} low priority links from {root_url}")
        return high + low

    @staticmethod
    def _match_target(url: str) -> str:
        """Lower-cased path and query of a URL, the part keywords are matched against"""
        parsed = urlparse(url)
        target = parsed.path
        if parsed.query:
            target += '?' + parsed.query
        return target.lower()
