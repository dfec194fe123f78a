"""
robots.txt retrieval and sitemap discovery
"""
import re
import logging

from models import RobotsInfo
from fetcher import FetchError
from urls import origin_of

logger = logging.getLogger(__name__)

ROBOTS_MAX_CHARS = 2000

_SITEMAP_LINE_RE = re.compile(r"^sitemap:\s*(.+)$", re.IGNORECASE | re.MULTILINE)


def find_sitemap_url(robots_txt: str) -> str:
    """Value of the first Sitemap: directive, or an empty string"""
    if not robots_txt:
        return ""
    match = _SITEMAP_LINE_RE.search(robots_txt)
    if not match:
        return ""
    # Split on the first colon only so the URL's own scheme colon survives
    return match.group(0).split(":", 1)[1].strip()


async def probe_robots(fetcher, final_url: str, max_chars: int = ROBOTS_MAX_CHARS) -> RobotsInfo:
    """
    Fetch {origin}/robots.txt for final_url and look for a sitemap.

    Never raises: an unreachable robots.txt yields empty text, and any other
    failure yields an empty RobotsInfo with ``error`` set.
    """
    try:
        robots_url = f"{origin_of(final_url)}/robots.txt"
        try:
            robots_txt = await fetcher.fetch_text(robots_url)
        except FetchError as e:
            logger.info(f"robots.txt not reachable at {robots_url}: {e}")
            robots_txt = ""

        return RobotsInfo(
            robots_url=robots_url,
            robots_txt=robots_txt[:max_chars],
            sitemap_url=find_sitemap_url(robots_txt)
        )
    except Exception as e:
        logger.error(f"Error probing robots.txt for {final_url}: {e}")
        return RobotsInfo(error=str(e) or e.__class__.__name__)
