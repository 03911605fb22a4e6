"""
Error classification and configuration tests
"""

import asyncio
import aiohttp
import pytest
from photo_scout.config import CrawlConfig, RankConfig
from photo_scout.error_handler import (
    ErrorHandler,
    ErrorType,
    HTTPStatusError,
    ImageDecodeError,
    PayloadTooLargeError,
)


@pytest.mark.parametrize("error,status_code,expected", [
    (asyncio.TimeoutError(), None, ErrorType.NETWORK_TIMEOUT),
    (aiohttp.ClientConnectionError("refused"), None, ErrorType.CONNECTION_ERROR),
    (HTTPStatusError(404), None, ErrorType.HTTP_CLIENT_ERROR),
    (HTTPStatusError(429), None, ErrorType.RATE_LIMITED),
    (HTTPStatusError(502), None, ErrorType.HTTP_SERVER_ERROR),
    (None, 410, ErrorType.HTTP_CLIENT_ERROR),
    (ImageDecodeError("bad header"), None, ErrorType.DECODE_ERROR),
    (PayloadTooLargeError("too big"), None, ErrorType.PAYLOAD_TOO_LARGE),
    (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), None, ErrorType.PARSING_ERROR),
    (RuntimeError("???"), None, ErrorType.UNKNOWN_ERROR),
])
def test_classify_error(error, status_code, expected):
    assert ErrorHandler().classify_error(error, status_code) == expected


def test_record_and_summary():
    handler = ErrorHandler()
    assert handler.get_error_summary() == {"total_errors": 0}

    timeout_info = handler.record("https://example.test/a", asyncio.TimeoutError())
    status_info = handler.record("https://example.test/b", status_code=500)
    handler.record("https://example.test/b", HTTPStatusError(503))

    assert timeout_info.error_type == ErrorType.NETWORK_TIMEOUT
    assert timeout_info.message == "TimeoutError"
    assert status_info.message == "HTTP 500"
    assert status_info.status_code == 500
    assert handler.get_failed_urls() == ["https://example.test/a", "https://example.test/b"]
    assert handler.get_error_summary() == {
        "total_errors": 3,
        "failed_urls": 2,
        "error_types": {"network_timeout": 1, "http_server_error": 2},
    }


def test_crawl_config_defaults():
    config = CrawlConfig()

    assert config.max_images == 10
    assert config.page_timeout == 5.0
    assert config.high_priority_keywords == ["gallery", "photos"]
    assert config.low_priority_keywords == ["menu", "restaurant", "space", "about"]


@pytest.mark.parametrize("kwargs", [{"max_images": 0}, {"page_timeout": 0}, {"page_timeout": -1.0}])
def test_crawl_config_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        CrawlConfig(**kwargs)


def test_rank_config_rejects_bad_timeout():
    with pytest.raises(ValueError):
        RankConfig(image_timeout=0)
