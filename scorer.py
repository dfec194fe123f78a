"""
Deterministic SEO scoring rubric
"""
import logging

from models import (
    PageSignals, SocialTags, StructuredData, RobotsInfo, LinkStatusSummary,
    LinkSummary, ScoreItem, ScoreReport
)
from extractor import TITLE_MIN, TITLE_MAX, DESCRIPTION_MIN, DESCRIPTION_MAX

logger = logging.getLogger(__name__)

MAX_SCORE = 100
MIN_WORD_COUNT = 200
INTERNAL_LINKS_BONUS = 4


class _Rubric:
    """Accumulates awarded points, breakdown entries and tips"""

    def __init__(self):
        self.points = 0
        self.breakdown = []
        self.tips = []

    def add(self, passed: bool, points: int, success: str, tip: str):
        if passed:
            self.points += points
            self.breakdown.append(ScoreItem(item=success, points=points))
        else:
            self.breakdown.append(ScoreItem(item=tip, points=0))
            self.tips.append(tip)

    def report(self) -> ScoreReport:
        score = max(0, min(MAX_SCORE, int(round(self.points))))
        return ScoreReport(score=score, total=MAX_SCORE, breakdown=self.breakdown, tips=self.tips)


def score_page(page: PageSignals, social: SocialTags, structured_data: StructuredData,
               robots: RobotsInfo, link_statuses: LinkStatusSummary, links: LinkSummary) -> ScoreReport:
    """Apply the fixed-weight rubric and return a 0-100 score with breakdown and tips"""
    rubric = _Rubric()

    rubric.add(bool(page.title) and TITLE_MIN <= page.title_length <= TITLE_MAX, 10,
               "Good title length", "Set a concise, descriptive title (~10–60 chars).")
    rubric.add(bool(page.meta_description) and DESCRIPTION_MIN <= page.meta_description_length <= DESCRIPTION_MAX, 10,
               "Meta description present", "Add a compelling meta description (~50–160 chars).")
    rubric.add(page.h1_count == 1, 8,
               "Single H1 present", "Use exactly one H1 that reflects page topic.")
    rubric.add(page.viewport_present, 6,
               "Mobile viewport set", "Add a responsive viewport meta tag.")
    rubric.add(bool(page.canonical), 6,
               "Canonical set", "Add a canonical URL to avoid duplicates.")
    rubric.add(bool(page.lang), 4,
               "Lang attribute set", "Set the lang attribute on <html>.")
    rubric.add(page.images.without_alt == 0, 8,
               "Images have alt text", "Add descriptive alt text to images.")
    rubric.add(page.word_count >= MIN_WORD_COUNT, 6,
               "Sufficient on-page text", "Increase helpful textual content (aim 200+ words).")
    rubric.add(bool(social.og.title or social.twitter.title), 6,
               "Social tags present", "Add Open Graph/Twitter card tags for rich sharing.")
    rubric.add(structured_data.ld_json_count > 0, 10,
               "Structured data present", "Add relevant schema.org JSON-LD.")
    rubric.add(bool(robots.robots_url and robots.robots_txt), 6,
               "robots.txt accessible", "Expose a valid robots.txt at /robots.txt.")
    rubric.add(link_statuses.broken_count == 0, 10,
               "No broken links detected (sample)", "Fix broken internal/external links.")

    if links.internal > 0:
        rubric.points += INTERNAL_LINKS_BONUS
        rubric.breakdown.append(ScoreItem(item="Internal links present", points=INTERNAL_LINKS_BONUS))
    else:
        rubric.tips.append("Add internal links to distribute PageRank and context.")

    report = rubric.report()
    logger.info(f"Scored {page.url}: {report.score}/{report.total}")
    return report
