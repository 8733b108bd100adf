"""FastAPI application exposing the news search service over HTTP."""

import logging
from datetime import datetime

from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from newsfeed.api.schemas import BucketResponse, ErrorResponse, SearchResultResponse
from newsfeed.data import TimeUnit
from newsfeed.errors import InvalidKeywordError, InvalidModeError, NoContentError
from newsfeed.service import NewsService

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def create_app(service: NewsService) -> FastAPI:
    """Create the FastAPI application around an existing service."""
    app = FastAPI(title="Newsfeed", version="0.1.0")

    def get_service() -> NewsService:
        return service

    @app.exception_handler(InvalidKeywordError)
    async def invalid_keyword_handler(request: Request, exc: InvalidKeywordError) -> JSONResponse:
        logger.warning("Invalid keyword on %s: %s", request.url.path, exc)
        return _error_response(request, 400, "Invalid Keyword", str(exc))

    @app.exception_handler(InvalidModeError)
    async def invalid_mode_handler(request: Request, exc: InvalidModeError) -> JSONResponse:
        logger.warning("Invalid mode on %s: %s", request.url.path, exc)
        return _error_response(request, 400, "Invalid Input", str(exc))

    @app.exception_handler(NoContentError)
    async def no_content_handler(request: Request, exc: NoContentError) -> Response:
        logger.info("No content on %s: %s", request.url.path, exc)
        return Response(status_code=204)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unexpected error on %s", request.url.path, exc_info=exc)
        return _error_response(
            request, 500, "Internal Server Error", "An unexpected error occurred."
        )

    @app.get("/healthz", summary="Health check")
    async def health_check(svc: NewsService = Depends(get_service)) -> dict[str, str]:
        return {"status": "ok", "mode": svc.get_mode().value}

    @app.get(
        "/api/news/search",
        summary="Search news articles",
        response_model=SearchResultResponse,
        response_model_by_alias=True,
    )
    async def search_news(
        keyword: str = Query(..., description="Letters and digits only"),
        svc: NewsService = Depends(get_service),
    ) -> SearchResultResponse:
        logger.info("Starting news search for keyword: %s", keyword)
        result = await svc.search(keyword)
        return SearchResultResponse.from_result(result)

    @app.get(
        "/api/news/newsGroupByInterval",
        summary="Group news articles by publication interval",
        response_model=dict[str, BucketResponse],
        response_model_by_alias=True,
    )
    async def group_news(
        keyword: str = Query(..., description="Letters and digits only"),
        interval: int = Query(12, ge=1, description="Bucket width"),
        unit: TimeUnit = Query(TimeUnit.HOURS, description="Unit of the interval"),
        svc: NewsService = Depends(get_service),
    ) -> dict[str, BucketResponse]:
        logger.info(
            "Grouping news articles for keyword: %s, interval: %s, unit: %s",
            keyword,
            interval,
            unit,
        )
        buckets = await svc.grouped_search(keyword, interval, unit)
        return {label: BucketResponse.from_bucket(bucket) for label, bucket in buckets.items()}

    @app.post(
        "/api/news/toggle-mode",
        summary="Set application mode",
        response_class=PlainTextResponse,
    )
    async def toggle_mode(
        mode: str = Query(..., description="'online' or 'offline'"),
        svc: NewsService = Depends(get_service),
    ) -> PlainTextResponse:
        new_mode = svc.set_mode(mode)
        return PlainTextResponse(f"Mode successfully set to: {new_mode}")

    return app
