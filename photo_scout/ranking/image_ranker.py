"""
Image Ranker - Orders candidate images by pixel resolution
"""

import asyncio
import logging
from typing import Iterable, List, Optional
import aiohttp
from ..config import RankConfig
from ..error_handler import ErrorHandler, HTTPStatusError, PayloadTooLargeError
from .dimensions import read_dimensions
from .ranked_image import RankedImage


class ImageRanker:
    """Fetches candidate images concurrently and sorts them best-first"""

    def __init__(self, config: Optional[RankConfig] = None,
                 session: Optional[aiohttp.ClientSession] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or RankConfig()
        self.session = session
        self.logger = logger or logging.getLogger(__name__)

    async def rank_by_resolution(self, urls: Iterable[str]) -> List[RankedImage]:
        """Return the images that could be measured, largest resolution first

        Images that fail to download or decode are dropped. Ties keep their
        input order since the sort is stable.
        """
        urls = list(urls)
        self.logger.info(f"Ranking {len(urls)} images by resolution.")
        if not urls:
            return []

        errors = ErrorHandler()
        if self.session is not None:
            images = await self._measure_all(self.session, urls, errors)
        else:
            async with aiohttp.ClientSession() as session:
                images = await self._measure_all(session, urls, errors)

        if errors.error_history:
            self.logger.info(f"Dropped {len(errors.get_failed_urls())} of {len(urls)} images: "
                             f"{errors.get_error_summary()['error_types']}")
        return sorted(images, key=lambda image: image.resolution, reverse=True)

    async def _measure_all(self, session: aiohttp.ClientSession, urls: List[str],
                           errors: ErrorHandler) -> List[RankedImage]:
        results = await asyncio.gather(*(self._measure(session, url, errors) for url in urls))
        return [image for image in results if image is not None]

    async def _measure(self, session: aiohttp.ClientSession, url: str,
                       errors: ErrorHandler) -> Optional[RankedImage]:
        """Download one image and read its dimensions, or None on any failure"""
        try:
            data = await self._fetch_image(session, url)
            width, height = read_dimensions(data)
            return RankedImage(url=url, width=width, height=height)
        except Exception as e:  # pylint: disable=broad-except
            error_info = errors.record(url, e)

        self.logger.warning(
            f"Could not process image at {url}: {error_info.error_type.value} - {error_info.message}"
        )
        return None

    async def _fetch_image(self, session: aiohttp.ClientSession, url: str) -> bytes:
        headers = {'User-Agent': self.config.user_agent}
        timeout = aiohttp.ClientTimeout(total=self.config.image_timeout)

        async with session.get(url, headers=headers, timeout=timeout) as response:
            if not 200 <= response.status < 300:
                raise HTTPStatusError(response.status)

            max_bytes = self.config.max_image_bytes
            if response.content_length is not None and response.content_length > max_bytes:
                raise PayloadTooLargeError(f"{response.content_length} bytes exceeds {max_bytes}")

            data = await response.read()
            if len(data) > max_bytes:
                raise PayloadTooLargeError(f"{len(data)} bytes exceeds {max_bytes}")
            return data
