import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Optional
from ..crawler.result import ImageCrawlResult


class LogManager:
    """Logging setup with console output and optional log files"""

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up logging handlers on the root logger"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, log_level.upper()))
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        # Crawl summaries go out as one JSON object per line
        self.summary_logger = logging.getLogger('photo_scout.summary')
        self.summary_logger.setLevel(logging.INFO)
        self.summary_logger.propagate = False
        self.summary_logger.handlers.clear()

        if not self.log_dir:
            self.summary_logger.addHandler(console_handler)
            return

        all_logs_file = self.log_dir / f"photo_scout_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        error_file = self.log_dir / f"errors_{datetime.now().strftime('%Y%m%d')}.log"
        error_handler = logging.FileHandler(error_file)
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

        summary_file = self.log_dir / f"summary_{datetime.now().strftime('%Y%m%d')}.log"
        self.summary_logger.addHandler(logging.FileHandler(summary_file))

    def log_crawl_summary(self, result: ImageCrawlResult, **kwargs):
        """Log a one-line JSON summary of a finished crawl"""
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'root_url': result.root_url,
            'images_found': len(result.images),
            'pages_fetched': len(result.fetched_pages),
            'pages_failed': len(result.failed_pages),
            **kwargs
        }
        self.summary_logger.info(json.dumps(event_data))
        return event_data
