"""
Concurrent reachability checks for a sample of page links
"""
import asyncio
import logging
from typing import List

from models import Link, LinkStatus, LinkStatusSummary

logger = logging.getLogger(__name__)


def is_broken(status: int) -> bool:
    """Anything outside 2xx/3xx is broken, including 0 (the probe failed)"""
    return not 200 <= status < 400


async def check_link_statuses(fetcher, links: List[Link], limit: int = 50,
                              sample_size: int = 20) -> LinkStatusSummary:
    """
    HEAD-probe the first ``limit`` links concurrently.

    ``asyncio.gather`` returns results in argument order, so each status is
    paired with the link it was issued for regardless of completion order.
    Never raises; an unexpected failure yields an empty summary with
    ``error`` set.
    """
    try:
        to_check = links[:limit]
        statuses = await asyncio.gather(*[fetcher.head_status(link.href) for link in to_check])

        results = [
            LinkStatus(href=link.href, type=link.type, status=status)
            for link, status in zip(to_check, statuses)
        ]
        broken_count = len([result for result in results if is_broken(result.status)])

        logger.info(f"Checked {len(results)} links, {broken_count} broken")
        return LinkStatusSummary(
            checked=len(results),
            broken_count=broken_count,
            sample=results[:sample_size]
        )
    except Exception as e:
        logger.error(f"Error checking link statuses: {e}")
        return LinkStatusSummary(error=str(e) or e.__class__.__name__)
