"""
Data models for SEO Analyzer
"""
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional

INTERNAL = "internal"
EXTERNAL = "external"


@dataclass
class AnalysisRequest:
    """Echo of the request plus what the page fetch observed"""
    input_url: str
    final_url: str = ""
    status: int = 0
    content_type: str = ""


@dataclass
class FetchResult:
    """Result of a full-page GET; body is empty unless the response is HTML"""
    final_url: str
    status: int
    content_type: str
    body: str = ""

    @property
    def is_html(self) -> bool:
        return "text/html" in self.content_type.lower()


@dataclass
class ImageStats:
    total: int = 0
    without_alt: int = 0


@dataclass
class PageSignals:
    """Structural facts extracted from the page markup"""
    url: str
    title: str = ""
    title_length: int = 0
    meta_description: str = ""
    meta_description_length: int = 0
    meta_robots: str = ""
    canonical: str = ""
    viewport_present: bool = False
    lang: str = ""
    h1_count: int = 0
    h1_samples: List[str] = field(default_factory=list)
    images: ImageStats = field(default_factory=ImageStats)
    word_count: int = 0


@dataclass
class OpenGraphTags:
    title: str = ""
    description: str = ""
    image: str = ""
    type: str = ""


@dataclass
class TwitterTags:
    card: str = ""
    title: str = ""
    description: str = ""
    image: str = ""


@dataclass
class SocialTags:
    og: OpenGraphTags = field(default_factory=OpenGraphTags)
    twitter: TwitterTags = field(default_factory=TwitterTags)


@dataclass
class StructuredData:
    ld_json_count: int = 0


@dataclass
class Assets:
    favicon: str = ""


@dataclass
class Link:
    """An absolute outbound link labelled internal or external"""
    href: str
    type: str


@dataclass
class LinkSummary:
    total: int = 0
    internal: int = 0
    external: int = 0
    sample: List[Link] = field(default_factory=list)


@dataclass
class LinkStatus:
    """HEAD probe outcome; status 0 means the probe itself failed"""
    href: str
    type: str
    status: int


@dataclass
class LinkStatusSummary:
    checked: int = 0
    broken_count: int = 0
    sample: List[LinkStatus] = field(default_factory=list)
    error: str = ""


@dataclass
class RobotsInfo:
    robots_url: str = ""
    robots_txt: str = ""
    sitemap_url: str = ""
    error: str = ""


@dataclass
class ScoreItem:
    item: str
    points: int


@dataclass
class ScoreReport:
    score: int = 0
    total: int = 100
    breakdown: List[ScoreItem] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)


@dataclass
class KeywordCount:
    word: str
    count: int


@dataclass
class ContentSuggestion:
    action: str
    reason: str
    suggestions: List[str] = field(default_factory=list)


@dataclass
class KeywordSuggestions:
    top_keywords: List[KeywordCount] = field(default_factory=list)
    suggested_content: List[ContentSuggestion] = field(default_factory=list)
    keyword_gaps: List[str] = field(default_factory=list)


@dataclass
class AnalysisReport:
    """Aggregate report returned for one analyzed URL.

    A successful report populates every section. A degraded report (the
    response was not HTML) carries only ``request`` and ``error``.
    """
    request: AnalysisRequest
    page: Optional[PageSignals] = None
    social: Optional[SocialTags] = None
    structured_data: Optional[StructuredData] = None
    assets: Optional[Assets] = None
    links: Optional[LinkSummary] = None
    quality_hints: Optional[List[str]] = None
    robots: Optional[RobotsInfo] = None
    link_statuses: Optional[LinkStatusSummary] = None
    recommendations: Optional[List[str]] = None
    score: Optional[ScoreReport] = None
    keyword_suggestions: Optional[KeywordSuggestions] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; sections that were never computed are left out"""
        return {key: value for key, value in asdict(self).items() if value is not None}
