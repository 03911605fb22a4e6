"""
Photo pipeline - crawl a business website, rank what was found, keep the best
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional
import aiohttp
from .config import CrawlConfig, RankConfig
from .crawler import ImageCrawler, ImageCrawlResult
from .ranking import ImageRanker, RankedImage


@dataclass
class PhotoSearchResult:
    """Crawl outcome plus the ranked photos selected from it"""
    website_url: Optional[str]
    crawl: Optional[ImageCrawlResult] = None
    photos: List[RankedImage] = field(default_factory=list)


async def search_photos(website_url: Optional[str],
                        max_images: Optional[int] = None,
                        top_k: Optional[int] = None,
                        *,
                        crawl_config: Optional[CrawlConfig] = None,
                        rank_config: Optional[RankConfig] = None,
                        session: Optional[aiohttp.ClientSession] = None,
                        logger: Optional[logging.Logger] = None) -> PhotoSearchResult:
    """Discover images on website_url and rank them by resolution

    Args:
        website_url: business website; a missing URL yields an empty result
        max_images: crawl quota, defaults to the crawl config's
        top_k: number of ranked photos to keep, all of them when None

    Returns:
        PhotoSearchResult whose photos are sorted best-first
    """
    logger = logger or logging.getLogger(__name__)
    result = PhotoSearchResult(website_url=website_url)

    if not website_url or not website_url.strip():
        logger.info("No website URL available, skipping photo crawl")
        return result

    crawler = ImageCrawler(crawl_config, session=session, logger=logger)
    result.crawl = await crawler.crawl(website_url.strip(), max_images)
    if not result.crawl.images:
        return result

    ranker = ImageRanker(rank_config, session=session, logger=logger)
    ranked = await ranker.rank_by_resolution(result.crawl.images)
    result.photos = ranked if top_k is None else ranked[:max(top_k, 0)]
    return result


async def find_best_photos(website_url: Optional[str],
                           max_images: Optional[int] = None,
                           top_k: Optional[int] = None,
                           **kwargs) -> List[RankedImage]:
    """Return the top_k highest resolution photos found on website_url"""
    result = await search_photos(website_url, max_images, top_k, **kwargs)
    return result.photos
