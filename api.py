"""
FastAPI web application for SEO Analyzer
"""
import logging
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, Depends, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import config
from fetcher import FetchError
from monitoring import setup_logging
from seo_analyzer import SEOAnalyzer
from urls import InvalidURLError

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


# Initialize FastAPI app
app = FastAPI(
    title="SEO Analyzer API",
    description="Single-page SEO analysis: signals, link health, score and keyword suggestions",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Configure logging on startup"""
    setup_logging(config.log_level, config.log_dir or None)
    logger.info("SEO Analyzer API started successfully")


def get_analyzer() -> SEOAnalyzer:
    """Dependency providing a fresh analyzer per request"""
    return SEOAnalyzer(config)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "SEO Analyzer API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "analyze": "/api/analyze?url=https://example.com"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.get("/api/analyze", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def analyze(
    url: Optional[str] = Query(None, description="Page URL to analyze"),
    analyzer: SEOAnalyzer = Depends(get_analyzer)
):
    """Analyze a single page and return the full report"""
    if not url or not url.strip():
        return error_response(400, 'Query param "url" is required.')

    try:
        report = await analyzer.analyze(url)
    except InvalidURLError as e:
        logger.warning(f"Rejected invalid URL {url!r}")
        return error_response(400, "Invalid URL", str(e))
    except FetchError as e:
        logger.error(f"Error fetching {url}: {e}")
        return error_response(500, "Failed to analyze URL", str(e))
    except Exception as e:
        logger.exception(f"Error analyzing {url}: {e}")
        return error_response(500, "Failed to analyze URL", str(e))

    return report.to_dict()


if __name__ == "__main__":
    uvicorn.run(
        "api:app",
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower()
    )
