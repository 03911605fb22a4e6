"""
Image Crawler - Prioritized same-origin crawl that collects image URLs
"""

import aiohttp
import time
import logging
from typing import List, Optional
from ..config import CrawlConfig
from ..error_handler import ErrorHandler
from ..link_manager import LinkPrioritizer
from ..utils.parser import HTMLParser
from ..utils.urls import resolve_url, page_key, is_data_uri, is_vector_image
from .result import CrawlResult, ImageCrawlResult, ImageCandidateSet


class ImageCrawler:
    """
    Crawls a website's root page and its gallery/menu style pages for images.

    Pages are fetched one at a time: high priority links first, then low
    priority links, until the image quota is met or the queue runs out.
    """

    def __init__(self, config: Optional[CrawlConfig] = None,
                 session: Optional[aiohttp.ClientSession] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or CrawlConfig()
        self.session = session
        self.logger = logger or logging.getLogger(__name__)
        self.prioritizer = LinkPrioritizer(self.config, self.logger)

    async def discover_images(self, root_url: str, quota: Optional[int] = None) -> List[str]:
        """Return up to quota absolute image URLs found on root_url's site"""
        result = await self.crawl(root_url, quota)
        return result.images

    async def crawl(self, root_url: str, quota: Optional[int] = None) -> ImageCrawlResult:
        """Main crawling workflow"""
        quota = self.config.max_images if quota is None else quota
        self.logger.info(f"Starting prioritized crawl for images on {root_url}")

        if self.session is not None:
            return await self._crawl(self.session, root_url, quota)

        async with aiohttp.ClientSession() as session:
            return await self._crawl(session, root_url, quota)

    async def _crawl(self, session: aiohttp.ClientSession, root_url: str, quota: int) -> ImageCrawlResult:
        result = ImageCrawlResult(root_url=root_url)
        errors = ErrorHandler()
        visited = set()
        candidates = ImageCandidateSet(quota)

        if quota < 1:
            return result

        root_page = await self._fetch_html(session, root_url, errors)
        result.fetched_pages.append(root_url)
        visited.add(page_key(root_url))
        if not root_page.ok:
            self.logger.warning(f"Could not fetch the main page {root_url}. Exiting crawl.")
            result.failed_pages.append(root_url)
            result.visited_pages = sorted(visited)
            return result

        root_parser = HTMLParser(root_page.content)
        self._collect_images(root_parser, root_url, root_url, candidates)

        if not candidates.is_full:
            queue = self.prioritizer.prioritize(root_parser.anchors(), root_url, visited)

            for link in queue:
                if candidates.is_full:
                    break
                if link.url in visited:
                    continue

                page = await self._fetch_html(session, link.url, errors)
                result.fetched_pages.append(link.url)
                visited.add(link.url)
                if not page.ok:
                    result.failed_pages.append(link.url)
                    continue

                found = self._collect_images(HTMLParser(page.content), link.url, root_url, candidates)
                self.logger.debug(f"Found {found} new images on {link.url} ({link.tier.value} priority)")

        result.images = candidates.to_list()
        result.visited_pages = sorted(visited)
        self.logger.info(f"Crawler found {len(result.images)} images.")
        if errors.error_history:
            self.logger.debug(f"Crawl errors for {root_url}: {errors.get_error_summary()}")
        return result

    def _collect_images(self, parser: HTMLParser, page_url: str, root_url: str,
                        candidates: ImageCandidateSet) -> int:
        """Add a page's usable <img> sources to candidates, resolved against the crawl root"""
        added = 0
        # A bare "#" resolves back to the page itself, not to an image
        pages = {page_key(page_url), page_key(root_url)}
        for src in parser.image_sources():
            if candidates.is_full:
                break
            if is_data_uri(src) or is_vector_image(src):
                continue

            absolute_url = resolve_url(root_url, src)
            if absolute_url is None or page_key(absolute_url) in pages:
                continue
            if candidates.add(absolute_url):
                added += 1
        return added

    async def _fetch_html(self, session: aiohttp.ClientSession, url: str, errors: ErrorHandler) -> CrawlResult:
        """Fetch a single page and return the result"""
        start_time = time.time()

        try:
            headers = {'User-Agent': self.config.user_agent}
            timeout = aiohttp.ClientTimeout(total=self.config.page_timeout)

            async with session.get(url, headers=headers, timeout=timeout) as response:
                if 200 <= response.status < 300:
                    content = await response.text()
                    return CrawlResult(
                        url=url,
                        content=content,
                        response_time=time.time() - start_time,
                        status_code=response.status
                    )

                error_info = errors.record(url, status_code=response.status)

        except Exception as e:  # pylint: disable=broad-except
            error_info = errors.record(url, e)

        self.logger.error(
            f"Failed to fetch HTML from {url}: {error_info.error_type.value} - {error_info.message}"
        )
        return CrawlResult(
            url=url,
            error=error_info.message,
            error_type=error_info.error_type,
            response_time=time.time() - start_time,
            status_code=error_info.status_code
        )
