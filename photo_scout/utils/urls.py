from typing import Optional
from urllib.parse import urldefrag, urljoin, urlparse


def resolve_url(base_url: str, reference: str) -> Optional[str]:
    """Resolve a reference against base_url, returning None if it is not a usable http(s) URL"""
    try:
        absolute_url = urljoin(base_url, reference.strip())
        parsed = urlparse(absolute_url)
        # Accessing .port validates it and raises ValueError on garbage
        parsed.port
    except ValueError:
        return None

    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        return None
    return absolute_url


def page_key(url: str) -> str:
    """Identity of the page a URL points at: fragment dropped, empty path written as /"""
    url = urldefrag(url)[0]
    parsed = urlparse(url)
    if not parsed.path:
        url = parsed._replace(path='/').geturl()
    return url


def origin_of(url: str) -> Optional[tuple]:
    """Return (scheme, host, port) with the default port filled in"""
    try:
        parsed = urlparse(url)
        port = parsed.port
    except ValueError:
        return None

    if not parsed.scheme or not parsed.hostname:
        return None
    if port is None:
        port = 443 if parsed.scheme == 'https' else 80
    return parsed.scheme.lower(), parsed.hostname.lower(), port


def is_data_uri(src: str) -> bool:
    return src.strip().lower().startswith('data:')


def is_vector_image(src: str) -> bool:
    """Check whether an image reference points at an SVG asset"""
    return '.svg' in src.lower()
