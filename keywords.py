"""
Keyword frequency and content-gap suggestions
"""
import re
import logging
from collections import Counter

from models import KeywordSuggestions, KeywordCount, ContentSuggestion
from extractor import parse_document, body_text, DESCRIPTION_MIN

logger = logging.getLogger(__name__)

TOP_KEYWORDS = 10
GAP_CANDIDATES = 5
MAX_GAPS = 3
MIN_WORD_COUNT = 200

_CONTENT_WORD_RE = re.compile(r"\b[a-z]{4,}\b", re.ASCII)
_META_WORD_RE = re.compile(r"\b[a-z]{3,}\b", re.ASCII)


def suggest_keywords(html: str, title: str, description: str, word_count: int) -> KeywordSuggestions:
    """
    Compare body-text term frequency against title/description vocabulary.

    Counts keep first-seen order and the sort is stable, so keywords with
    equal counts are listed in the order they first appear in the body.
    Matching is on exact lower-cased tokens.
    """
    soup = parse_document(html)
    text = body_text(soup).lower()

    frequencies = Counter(_CONTENT_WORD_RE.findall(text))
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)[:TOP_KEYWORDS]

    current_keywords = set(_META_WORD_RE.findall((title or "").lower()))
    current_keywords.update(_META_WORD_RE.findall((description or "").lower()))

    suggestions = KeywordSuggestions(
        top_keywords=[KeywordCount(word=word, count=count) for word, count in ranked]
    )

    if word_count < MIN_WORD_COUNT:
        suggestions.suggested_content.append(ContentSuggestion(
            action="Expand content",
            reason=f"Current word count is {word_count}. Aim for 200+ words for better SEO.",
            suggestions=["Add detailed descriptions", "Include FAQ section", "Add more context about the topic"]
        ))

    if not description or len(description) < DESCRIPTION_MIN:
        suggestions.suggested_content.append(ContentSuggestion(
            action="Improve meta description",
            reason="Meta description is missing or too short.",
            suggestions=["Write a compelling 50-160 character description", "Include primary keywords",
                         "Add a call-to-action"]
        ))

    top_words = [word for word, _ in ranked[:GAP_CANDIDATES]]
    suggestions.keyword_gaps = [word for word in top_words if word not in current_keywords][:MAX_GAPS]

    logger.debug(f"Keyword gaps: {suggestions.keyword_gaps}")
    return suggestions
