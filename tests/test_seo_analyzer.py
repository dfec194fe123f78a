"""
Tests for the analysis pipeline
"""
import asyncio
import json

import pytest
from unittest.mock import patch

from fetcher import FetchError
from models import FetchResult
from seo_analyzer import SEOAnalyzer, merge_recommendations, NOT_HTML_ERROR
from urls import InvalidURLError
from conftest import html_result


def analyze(mock_fetcher, test_config, url="https://example.com/"):
    return asyncio.run(SEOAnalyzer(test_config, fetcher=mock_fetcher).analyze(url))


class TestSEOAnalyzer:
    """Tests for SEOAnalyzer.analyze"""

    def test_invalid_url_fails_before_network(self, mock_fetcher, test_config):
        with pytest.raises(InvalidURLError):
            analyze(mock_fetcher, test_config, url="   ")

        mock_fetcher.fetch_page.assert_not_awaited()

    def test_url_normalized_before_fetch(self, mock_fetcher, test_config, minimal_html):
        mock_fetcher.fetch_page.return_value = html_result(minimal_html)

        report = analyze(mock_fetcher, test_config, url="example.com")

        mock_fetcher.fetch_page.assert_awaited_once_with("https://example.com/")
        assert report.request.input_url == "example.com"

    def test_fetch_failure_propagates(self, mock_fetcher, test_config):
        mock_fetcher.fetch_page.side_effect = FetchError("https://example.com/", "Timed out")

        with pytest.raises(FetchError):
            analyze(mock_fetcher, test_config)

    def test_timer_closed_when_fetch_fails(self, mock_fetcher, test_config):
        mock_fetcher.fetch_page.side_effect = FetchError("https://example.com/", "Timed out")
        analyzer = SEOAnalyzer(test_config, fetcher=mock_fetcher)

        with patch.object(analyzer.performance_monitor, "end_timer",
                          wraps=analyzer.performance_monitor.end_timer) as end_timer:
            with pytest.raises(FetchError):
                asyncio.run(analyzer.analyze("https://example.com/"))

        end_timer.assert_called_once_with("https://example.com/")
        assert analyzer.performance_monitor.get_metrics() == {}

    def test_reused_analyzer_does_not_accumulate_metrics(self, mock_fetcher, test_config, minimal_html):
        mock_fetcher.fetch_page.return_value = html_result(minimal_html)
        analyzer = SEOAnalyzer(test_config, fetcher=mock_fetcher)

        for url in ("https://example.com/a", "https://example.com/b"):
            asyncio.run(analyzer.analyze(url))

        assert analyzer.performance_monitor.get_metrics() == {}

    def test_non_html_response(self, mock_fetcher, test_config):
        """Test that a PDF yields an error report with only the request echo"""
        mock_fetcher.fetch_page.return_value = FetchResult(
            final_url="https://example.com/doc.pdf", status=200, content_type="application/pdf", body=""
        )

        report = analyze(mock_fetcher, test_config, url="https://example.com/doc.pdf")
        data = report.to_dict()

        assert report.error == NOT_HTML_ERROR
        assert set(data) == {"request", "error"}
        assert data["request"] == {
            "input_url": "https://example.com/doc.pdf",
            "final_url": "https://example.com/doc.pdf",
            "status": 200,
            "content_type": "application/pdf",
        }
        mock_fetcher.fetch_text.assert_not_awaited()
        mock_fetcher.head_status.assert_not_awaited()

    def test_empty_html_body_is_degraded(self, mock_fetcher, test_config):
        mock_fetcher.fetch_page.return_value = FetchResult(
            final_url="https://example.com/", status=500, content_type="text/html", body=""
        )

        report = analyze(mock_fetcher, test_config)

        assert report.error == NOT_HTML_ERROR
        assert report.page is None
        assert report.score is None

    def test_minimal_page(self, mock_fetcher, test_config, minimal_html):
        mock_fetcher.fetch_page.return_value = html_result(minimal_html)

        report = analyze(mock_fetcher, test_config)

        assert report.error is None
        assert report.page.h1_count == 0
        assert report.page.word_count == 0
        assert "Missing H1." in report.quality_hints
        assert "Missing canonical link." in report.quality_hints
        assert report.score.score < 50
        assert report.links.total == 0
        assert report.link_statuses.checked == 0

    def test_optimized_page(self, mock_fetcher, test_config, optimized_html):
        """Test that a fully optimized page earns every rubric point"""
        mock_fetcher.fetch_page.return_value = html_result(optimized_html, final_url="https://example.com/mugs")

        report = analyze(mock_fetcher, test_config, url="https://example.com/mugs")

        assert report.score.score == 94
        assert report.score.total == 100
        assert report.recommendations == []
        assert report.links.internal == 1
        assert report.links.external == 1
        assert report.link_statuses.checked == 2
        assert report.link_statuses.broken_count == 0
        assert report.robots.robots_url == "https://example.com/robots.txt"
        assert report.keyword_suggestions.top_keywords[0].word == "pottery"
        assert report.keyword_suggestions.keyword_gaps == ["shop", "partner"]

    def test_link_statuses_probe_classified_links(self, mock_fetcher, test_config, optimized_html):
        mock_fetcher.fetch_page.return_value = html_result(optimized_html)

        analyze(mock_fetcher, test_config)

        probed = [call.args[0] for call in mock_fetcher.head_status.await_args_list]
        assert probed == ["https://example.com/shop", "https://partner.org/"]

    def test_robots_failure_does_not_fail_report(self, mock_fetcher, test_config, optimized_html):
        mock_fetcher.fetch_page.return_value = html_result(optimized_html)
        mock_fetcher.fetch_text.side_effect = FetchError("https://example.com/robots.txt", "refused")

        report = analyze(mock_fetcher, test_config)

        assert report.robots.robots_txt == ""
        assert "Expose a valid robots.txt at /robots.txt." in report.recommendations
        assert report.score.score == 94 - 6

    def test_broken_links_reported(self, mock_fetcher, test_config, optimized_html):
        mock_fetcher.fetch_page.return_value = html_result(optimized_html)
        mock_fetcher.head_status.return_value = 0

        report = analyze(mock_fetcher, test_config)

        assert report.link_statuses.broken_count == 2
        assert "Fix broken internal/external links." in report.recommendations

    def test_recommendations_merge_hints_then_tips(self, mock_fetcher, test_config, minimal_html):
        mock_fetcher.fetch_page.return_value = html_result(minimal_html)

        report = analyze(mock_fetcher, test_config)

        hint_count = len(report.quality_hints)
        assert report.recommendations[:hint_count] == report.quality_hints
        assert report.recommendations[hint_count:] == report.score.tips

    def test_report_is_json_serializable_with_all_fields(self, mock_fetcher, test_config, optimized_html):
        mock_fetcher.fetch_page.return_value = html_result(optimized_html)

        data = analyze(mock_fetcher, test_config).to_dict()

        assert set(data) == {
            "request", "page", "social", "structured_data", "assets", "links", "quality_hints",
            "robots", "link_statuses", "recommendations", "score", "keyword_suggestions",
        }
        assert data["assets"] == {"favicon": "/favicon.ico"}
        assert data["links"]["sample"][0] == {"href": "https://example.com/shop", "type": "internal"}
        json.dumps(data)


class TestMergeRecommendations:
    """Tests for merge_recommendations"""

    def test_duplicates_kept_once_in_first_order(self):
        hints = ["Missing canonical link.", "Missing H1."]
        tips = ["Add a canonical URL to avoid duplicates.", "Missing H1."]

        assert merge_recommendations(hints, tips) == [
            "Missing canonical link.", "Missing H1.", "Add a canonical URL to avoid duplicates."
        ]

    def test_empty(self):
        assert merge_recommendations([], []) == []
