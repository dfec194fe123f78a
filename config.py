"""
Configuration file for SEO Analyzer
"""
import os
from dataclasses import dataclass


@dataclass
class AnalyzerConfig:
    """Configuration settings for the SEO analyzer"""

    # Identifying client token sent on every request
    user_agent: str = "SEO-Analyzer/1.0 (+https://example.com)"

    # Timeouts (seconds)
    page_timeout: float = 20.0
    text_timeout: float = 15.0
    head_timeout: float = 8.0

    # Sampling limits
    link_check_limit: int = 50
    link_sample_size: int = 20
    status_sample_size: int = 20
    robots_max_chars: int = 2000
    h1_sample_size: int = 5

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(levelname)s - %(message)s"
    log_dir: str = ""

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 3000

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Build a config with SEO_ANALYZER_* environment overrides"""
        settings = cls()
        env = os.environ

        settings.user_agent = env.get("SEO_ANALYZER_USER_AGENT", settings.user_agent)
        settings.page_timeout = float(env.get("SEO_ANALYZER_PAGE_TIMEOUT", settings.page_timeout))
        settings.text_timeout = float(env.get("SEO_ANALYZER_TEXT_TIMEOUT", settings.text_timeout))
        settings.head_timeout = float(env.get("SEO_ANALYZER_HEAD_TIMEOUT", settings.head_timeout))
        settings.link_check_limit = int(env.get("SEO_ANALYZER_LINK_CHECK_LIMIT", settings.link_check_limit))
        settings.log_level = env.get("SEO_ANALYZER_LOG_LEVEL", settings.log_level).upper()
        settings.log_dir = env.get("SEO_ANALYZER_LOG_DIR", settings.log_dir)
        settings.api_host = env.get("SEO_ANALYZER_HOST", settings.api_host)
        settings.api_port = int(env.get("PORT", settings.api_port))

        return settings


# Default configuration instance
config = AnalyzerConfig.from_env()
