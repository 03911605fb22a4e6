from typing import List, Tuple
from bs4 import BeautifulSoup


class HTMLParser:
    """Document-ordered queries over a fetched HTML page"""

    def __init__(self, html_content: str):
        self.soup = BeautifulSoup(html_content or '', 'html.parser')

    def image_sources(self) -> List[str]:
        """Extract the raw src attribute of every <img>, in document order"""
        sources = []
        for img in self.soup.find_all('img'):
            src = (img.get('src') or '').strip()
            if src:
                sources.append(src)
        return sources

    def anchors(self) -> List[Tuple[str, str]]:
        """Extract (href, visible text) for every <a href>, in document order"""
        links = []
        for link in self.soup.find_all('a', href=True):
            href = link['href']
            if href:
                links.append((href, link.get_text(' ', strip=True)))
        return links
