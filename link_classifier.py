"""
Link extraction and internal/external classification
"""
import logging
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from models import Link, LinkSummary, INTERNAL, EXTERNAL
from urls import registrable_domain, host_of

logger = logging.getLogger(__name__)

SKIPPED_PREFIXES = ("javascript:", "mailto:", "#")


def classify_links(soup: BeautifulSoup, base_url: str) -> List[Link]:
    """
    Resolve every anchor against base_url and label it internal or external.

    A link is internal when its registrable domain matches the base URL's, so
    www.example.com and shop.example.com are internal to each other. Links
    keep document order and duplicates are kept.
    """
    base_host = host_of(base_url)
    base_domain = registrable_domain(base_host)

    links = []
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        if not href or href.startswith(SKIPPED_PREFIXES):
            continue

        try:
            absolute = urljoin(base_url, href)
        except ValueError:
            logger.debug(f"Skipping unresolvable link {href!r}")
            continue

        link_type = INTERNAL if registrable_domain(host_of(absolute)) == base_domain else EXTERNAL
        links.append(Link(href=absolute, type=link_type))

    return links


def summarize_links(links: List[Link], sample_size: int = 20) -> LinkSummary:
    internal = len([link for link in links if link.type == INTERNAL])
    return LinkSummary(
        total=len(links),
        internal=internal,
        external=len(links) - internal,
        sample=links[:sample_size]
    )
