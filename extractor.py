"""
Markup extraction: SEO signals pulled from a parsed HTML document
"""
import copy
import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from models import (
    PageSignals, ImageStats, SocialTags, OpenGraphTags, TwitterTags,
    StructuredData, Assets
)
from utils import normalize_whitespace, safe_extract_text, safe_extract_attribute
from config import AnalyzerConfig, config

logger = logging.getLogger(__name__)

TITLE_MIN, TITLE_MAX = 10, 60
DESCRIPTION_MIN, DESCRIPTION_MAX = 50, 160

FAVICON_RELS = ("icon", "shortcut icon", "apple-touch-icon")
HEAD_ONLY_TAGS = ("head", "title")


def parse_document(html: str) -> BeautifulSoup:
    """Parse HTML into a queryable document"""
    return BeautifulSoup(html or "", "html.parser")


def _rel(tag) -> str:
    return normalize_whitespace(safe_extract_attribute(tag, "rel")).lower()


def _first_link_with_rel(soup: BeautifulSoup, rels) -> Optional[Tag]:
    """First <link> in document order whose rel is one of rels"""
    for tag in soup.find_all("link"):
        if _rel(tag) in rels:
            return tag
    return None


def _meta_content(soup: BeautifulSoup, attribute: str, value: str) -> str:
    tag = soup.select_one(f'meta[{attribute}="{value}"]')
    return normalize_whitespace(safe_extract_attribute(tag, "content"))


def _extract_title(soup: BeautifulSoup) -> str:
    title = soup.select_one("head > title")
    # html.parser does not synthesize <head> for documents that omit it
    if title is None and soup.head is None:
        title = soup.find("title")
    return safe_extract_text(title)


def body_text(soup: BeautifulSoup) -> str:
    """Normalized text of <body>.

    Documents that omit the <body> tag contribute everything except <head>
    and <title> content. Like get_text(), <script> and <style> contents are
    left out.
    """
    if soup.body is not None:
        return safe_extract_text(soup.body)

    document = copy.copy(soup)
    for tag in document.find_all(HEAD_ONLY_TAGS):
        tag.extract()
    return safe_extract_text(document)


def extract_signals(soup: BeautifulSoup, final_url: str,
                    settings: Optional[AnalyzerConfig] = None) -> PageSignals:
    """Extract textual, metadata and structural facts from the document"""
    settings = settings or config

    title = _extract_title(soup)
    meta_description = _meta_content(soup, "name", "description")
    html_tag = soup.find("html")

    h1s = [safe_extract_text(h1) for h1 in soup.find_all("h1")]

    images = soup.find_all("img")
    without_alt = len([img for img in images if not normalize_whitespace(safe_extract_attribute(img, "alt"))])

    text = body_text(soup)
    word_count = len(text.split(" ")) if text else 0

    signals = PageSignals(
        url=final_url,
        title=title,
        title_length=len(title),
        meta_description=meta_description,
        meta_description_length=len(meta_description),
        meta_robots=_meta_content(soup, "name", "robots"),
        canonical=normalize_whitespace(safe_extract_attribute(_first_link_with_rel(soup, ("canonical",)), "href")),
        viewport_present=bool(_meta_content(soup, "name", "viewport")),
        lang=normalize_whitespace(safe_extract_attribute(html_tag, "lang")),
        h1_count=len(h1s),
        h1_samples=h1s[:settings.h1_sample_size],
        images=ImageStats(total=len(images), without_alt=without_alt),
        word_count=word_count
    )

    logger.debug(f"Extracted signals for {final_url}: {signals.h1_count} H1, {word_count} words, "
                 f"{without_alt}/{len(images)} images without alt")
    return signals


def extract_social(soup: BeautifulSoup) -> SocialTags:
    """Open Graph and Twitter card tags; absent tags default to empty strings"""
    return SocialTags(
        og=OpenGraphTags(
            title=_meta_content(soup, "property", "og:title"),
            description=_meta_content(soup, "property", "og:description"),
            image=_meta_content(soup, "property", "og:image"),
            type=_meta_content(soup, "property", "og:type"),
        ),
        twitter=TwitterTags(
            card=_meta_content(soup, "name", "twitter:card"),
            title=_meta_content(soup, "name", "twitter:title"),
            description=_meta_content(soup, "name", "twitter:description"),
            image=_meta_content(soup, "name", "twitter:image"),
        )
    )


def extract_structured_data(soup: BeautifulSoup) -> StructuredData:
    return StructuredData(ld_json_count=len(soup.select('script[type="application/ld+json"]')))


def extract_assets(soup: BeautifulSoup) -> Assets:
    favicon = _first_link_with_rel(soup, FAVICON_RELS)
    return Assets(favicon=normalize_whitespace(safe_extract_attribute(favicon, "href")))


def quality_hints(page: PageSignals, social: SocialTags, structured_data: StructuredData) -> List[str]:
    """
    Human-readable observations derived from the extracted signals.

    Each check contributes at most one hint and the checks always run in the
    same order, so the output is stable for a given page.
    """
    if not page.title:
        title_hint = "Missing <title> tag."
    elif not TITLE_MIN <= page.title_length <= TITLE_MAX:
        title_hint = "Title length should be ~10-60 chars."
    else:
        title_hint = None

    if not page.meta_description:
        description_hint = "Missing meta description."
    elif not DESCRIPTION_MIN <= page.meta_description_length <= DESCRIPTION_MAX:
        description_hint = "Meta description should be ~50-160 chars."
    else:
        description_hint = None

    if page.h1_count == 0:
        h1_hint = "Missing H1."
    elif page.h1_count > 1:
        h1_hint = "Multiple H1s found."
    else:
        h1_hint = None

    hints = [
        title_hint,
        description_hint,
        h1_hint,
        f"{page.images.without_alt} images without alt." if page.images.without_alt > 0 else None,
        "Missing viewport meta (mobile friendliness)." if not page.viewport_present else None,
        "Missing canonical link." if not page.canonical else None,
        "Missing Open Graph/Twitter tags." if not social.og.title and not social.twitter.title else None,
        "No structured data (ld+json) detected." if structured_data.ld_json_count == 0 else None,
        "Missing lang attribute on <html>." if not page.lang else None,
    ]
    return [hint for hint in hints if hint]
