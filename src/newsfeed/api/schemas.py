"""Pydantic schemas for response payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from newsfeed.data import Article, Bucket, ResultStatus, SearchResult


class ArticleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    url: str
    published_at: str = Field(alias="publishedAt")

    @classmethod
    def from_article(cls, article: Article) -> "ArticleResponse":
        return cls(
            title=article.title,
            description=article.description,
            url=article.url,
            published_at=article.published_at,
        )


class SearchResultResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: ResultStatus
    total_results: int = Field(alias="totalResults")
    articles: list[ArticleResponse]

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultResponse":
        return cls(
            status=result.status,
            total_results=result.total_results,
            articles=[ArticleResponse.from_article(a) for a in result.articles],
        )


class BucketResponse(BaseModel):
    count: int
    articles: list[ArticleResponse]

    @classmethod
    def from_bucket(cls, bucket: Bucket) -> "BucketResponse":
        return cls(
            count=bucket.count,
            articles=[ArticleResponse.from_article(a) for a in bucket.articles],
        )


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str


__all__ = ["ArticleResponse", "BucketResponse", "ErrorResponse", "SearchResultResponse"]
