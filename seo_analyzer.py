"""
Main SEO Analyzer - Orchestrates the single-page analysis pipeline
"""
import asyncio
import logging
from typing import List, Optional

from config import AnalyzerConfig, config
from models import AnalysisRequest, AnalysisReport
from urls import normalize_url, InvalidURLError
from fetcher import PageFetcher
from extractor import (
    parse_document, extract_signals, extract_social, extract_structured_data,
    extract_assets, quality_hints
)
from link_classifier import classify_links, summarize_links
from robots import probe_robots
from link_checker import check_link_statuses
from scorer import score_page
from keywords import suggest_keywords
from utils import PerformanceMonitor

logger = logging.getLogger(__name__)

NOT_HTML_ERROR = "Content is not HTML or could not be fetched."


def merge_recommendations(*groups: List[str]) -> List[str]:
    """Union of recommendation lists, first occurrence wins"""
    return list(dict.fromkeys(item for group in groups for item in group))


class SEOAnalyzer:
    """Runs the fetch, extract, probe, score and suggest stages for one URL"""

    def __init__(self, settings: Optional[AnalyzerConfig] = None, fetcher: Optional[PageFetcher] = None):
        self.settings = settings or config
        self.fetcher = fetcher
        self.performance_monitor = PerformanceMonitor()

    async def analyze(self, input_url: str) -> AnalysisReport:
        """
        Analyze a single page.

        Raises InvalidURLError before any network call when the input cannot
        be normalized, and FetchError when the page itself cannot be fetched.
        Robots and link probes degrade to empty values instead of failing.
        """
        normalized = normalize_url(input_url)
        if not normalized:
            raise InvalidURLError(input_url)

        logger.info(f"Starting analysis for {normalized}")
        self.performance_monitor.start_timer(normalized)

        try:
            if self.fetcher is not None:
                return await self._run(self.fetcher, input_url, normalized)
            async with PageFetcher(self.settings) as fetcher:
                return await self._run(fetcher, input_url, normalized)
        finally:
            self.performance_monitor.end_timer(normalized)
            self.performance_monitor.metrics.pop(normalized, None)

    async def _run(self, fetcher: PageFetcher, input_url: str, normalized: str) -> AnalysisReport:
        settings = self.settings
        fetched = await fetcher.fetch_page(normalized)

        request = AnalysisRequest(
            input_url=input_url,
            final_url=fetched.final_url,
            status=fetched.status,
            content_type=fetched.content_type
        )

        if not fetched.body or not fetched.is_html:
            logger.warning(f"Skipping analysis of {fetched.final_url}: content type {fetched.content_type!r}")
            return AnalysisReport(request=request, error=NOT_HTML_ERROR)

        soup = parse_document(fetched.body)
        page = extract_signals(soup, fetched.final_url, settings)
        social = extract_social(soup)
        structured_data = extract_structured_data(soup)
        assets = extract_assets(soup)
        hints = quality_hints(page, social, structured_data)
        links = summarize_links(classify_links(soup, fetched.final_url), settings.link_sample_size)

        robots, link_statuses = await asyncio.gather(
            probe_robots(fetcher, fetched.final_url, settings.robots_max_chars),
            check_link_statuses(fetcher, links.sample, settings.link_check_limit, settings.status_sample_size)
        )

        score = score_page(page, social, structured_data, robots, link_statuses, links)
        keyword_suggestions = suggest_keywords(fetched.body, page.title, page.meta_description, page.word_count)

        logger.info(f"Completed analysis for {fetched.final_url}: score {score.score}, "
                    f"{links.total} links, {link_statuses.broken_count} broken in sample")

        return AnalysisReport(
            request=request,
            page=page,
            social=social,
            structured_data=structured_data,
            assets=assets,
            links=links,
            quality_hints=hints,
            robots=robots,
            link_statuses=link_statuses,
            recommendations=merge_recommendations(hints, score.tips),
            score=score,
            keyword_suggestions=keyword_suggestions
        )


async def analyze_url(input_url: str, settings: Optional[AnalyzerConfig] = None) -> AnalysisReport:
    """Analyze input_url with a fresh analyzer and HTTP session"""
    return await SEOAnalyzer(settings).analyze(input_url)
