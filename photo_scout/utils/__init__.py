"""
Utility modules for HTML parsing and URL handling
"""

from .parser import HTMLParser
from .urls import resolve_url, page_key, origin_of, is_data_uri, is_vector_image

__all__ = [
    'HTMLParser',
    'resolve_url',
    'page_key',
    'origin_of',
    'is_data_uri',
    'is_vector_image'
]
