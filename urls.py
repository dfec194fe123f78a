"""
URL normalization and registrable-domain helpers
"""
import re
import logging
from typing import Optional
from urllib.parse import urlparse, urlunparse

import tldextract

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https"

_HOST_RE = re.compile(r"^[a-z0-9._~%!$&'()*+,;=:\-\[\]]+$")

# Bundled public-suffix snapshot only; never fetch the list over the network
_tld_extract = tldextract.TLDExtract(suffix_list_urls=())


class InvalidURLError(ValueError):
    """Raised when input cannot be turned into an absolute URL"""

    def __init__(self, raw_url: str):
        super().__init__("Invalid URL")
        self.raw_url = raw_url


def _parse_absolute(candidate: str) -> Optional[str]:
    """Return the canonical form of candidate if it is an absolute URL with a valid host"""
    try:
        parsed = urlparse(candidate)
        parsed.port  # raises ValueError on a malformed port
    except ValueError:
        return None

    if not parsed.scheme or not parsed.netloc:
        return None

    host = parsed.hostname
    if not host or not _HOST_RE.match(host):
        return None

    userinfo, at, hostport = parsed.netloc.rpartition("@")
    netloc = userinfo + at + hostport.lower()

    return urlunparse((
        parsed.scheme.lower(),
        netloc,
        parsed.path or "/",
        parsed.params,
        parsed.query,
        parsed.fragment,
    ))


def normalize_url(raw_url: str) -> Optional[str]:
    """
    Turn user input into an absolute URL.

    The input is parsed as-is first; when that fails it is retried with
    ``https://`` prepended. Returns None when neither attempt yields a URL
    with a scheme and a usable host.
    """
    candidate = (raw_url or "").strip()
    if not candidate:
        return None

    normalized = _parse_absolute(candidate)
    if normalized is None:
        normalized = _parse_absolute(f"{DEFAULT_SCHEME}://{candidate}")

    if normalized is None:
        logger.debug(f"Could not normalize URL: {raw_url!r}")
    return normalized


def registrable_domain(host: str) -> str:
    """Public-suffix aware registrable domain, e.g. shop.example.co.uk -> example.co.uk.

    Hosts without one (IP addresses, localhost) are returned unchanged.
    """
    if not host:
        return ""
    host = host.lower()
    extracted = _tld_extract(host)
    if extracted.domain and extracted.suffix:
        return f"{extracted.domain}.{extracted.suffix}"
    return host


def host_of(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def origin_of(url: str) -> str:
    """scheme://host[:port] of an absolute URL"""
    parsed = urlparse(url)
    hostport = parsed.netloc.rpartition("@")[2]
    return f"{parsed.scheme}://{hostport}"
