from dataclasses import dataclass
from .link_tier import LinkTier


@dataclass
class LinkInfo:
    """Information about a discovered link"""
    url: str
    source_url: str
    link_text: str = ""
    tier: LinkTier = LinkTier.IGNORED
