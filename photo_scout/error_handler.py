import asyncio
import time
from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Any
from collections import defaultdict
import aiohttp


class ErrorType(Enum):
    """Classification of different error types"""
    NETWORK_TIMEOUT = "network_timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_CLIENT_ERROR = "http_client_error"  # 4xx
    HTTP_SERVER_ERROR = "http_server_error"  # 5xx
    RATE_LIMITED = "rate_limited"  # 429
    PARSING_ERROR = "parsing_error"
    DECODE_ERROR = "decode_error"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    UNKNOWN_ERROR = "unknown_error"


class ImageDecodeError(Exception):
    """Raised when image dimensions cannot be read from a payload"""


class PayloadTooLargeError(Exception):
    """Raised when a downloaded payload exceeds the configured size cap"""


class HTTPStatusError(Exception):
    """Raised when a response carries a non-success status"""

    def __init__(self, status: int):
        super().__init__(f"HTTP {status}")
        self.status = status


@dataclass
class ErrorInfo:
    """Information about an error occurrence"""
    url: str
    error_type: ErrorType
    status_code: Optional[int]
    message: str
    timestamp: float


class ErrorHandler:
    """Classifies and records fetch failures for one crawl or rank call"""

    def __init__(self):
        self.error_history: List[ErrorInfo] = []
        self.failed_urls: Dict[str, List[ErrorInfo]] = defaultdict(list)

    def classify_error(self, error: Optional[Exception], status_code: Optional[int] = None) -> ErrorType:
        """Classify an error into appropriate error type"""
        if status_code is None:
            status_code = getattr(error, 'status', None)

        if isinstance(error, asyncio.TimeoutError):
            return ErrorType.NETWORK_TIMEOUT
        elif isinstance(error, ImageDecodeError):
            return ErrorType.DECODE_ERROR
        elif isinstance(error, PayloadTooLargeError):
            return ErrorType.PAYLOAD_TOO_LARGE
        elif isinstance(error, (aiohttp.ClientConnectionError, aiohttp.InvalidURL)):
            return ErrorType.CONNECTION_ERROR
        elif status_code:
            if status_code == 429:
                return ErrorType.RATE_LIMITED
            elif 400 <= status_code < 500:
                return ErrorType.HTTP_CLIENT_ERROR
            elif 500 <= status_code < 600:
                return ErrorType.HTTP_SERVER_ERROR
        elif isinstance(error, (UnicodeDecodeError, ValueError)):
            return ErrorType.PARSING_ERROR

        return ErrorType.UNKNOWN_ERROR

    def record(self, url: str, error: Optional[Exception] = None,
               status_code: Optional[int] = None) -> ErrorInfo:
        """Classify an error or bad status and add it to the history"""
        if status_code is None:
            status_code = getattr(error, "status", None)

        if error is None:
            message = f"HTTP {status_code}"
        else:
            message = str(error) or error.__class__.__name__

        error_info = ErrorInfo(
            url=url,
            error_type=self.classify_error(error, status_code),
            status_code=status_code,
            message=message,
            timestamp=time.time()
        )
        self.error_history.append(error_info)
        self.failed_urls[url].append(error_info)
        return error_info

    def get_error_summary(self) -> Dict[str, Any]:
        """Get summary of all errors encountered"""
        if not self.error_history:
            return {"total_errors": 0}

        error_counts = defaultdict(int)
        for error in self.error_history:
            error_counts[error.error_type.value] += 1

        return {
            "total_errors": len(self.error_history),
            "failed_urls": len(self.failed_urls),
            "error_types": dict(error_counts)
        }

    def get_failed_urls(self) -> List[str]:
        """Get list of URLs that failed"""
        return list(self.failed_urls.keys())
