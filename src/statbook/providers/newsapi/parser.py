from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from statbook.core.errors import JsonDecodeError
from statbook.models.news import Article


class _Upstream(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class SourceRef(_Upstream):
    id: str | None = None
    name: str | None = None


class NewsApiArticle(_Upstream):
    source: SourceRef | None = None
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    content: str | None = None

    def to_article(self) -> Article:
        return Article(
            title=self.title or "",
            description=self.description or "",
            published_at=self.published_at or "",
            content=self.content or "",
        )


class NewsApiResponse(_Upstream):
    status: str | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    articles: list[NewsApiArticle] | None = None


def decode_news_response(payload: Mapping[str, Any]) -> NewsApiResponse:
    try:
        return NewsApiResponse.model_validate(payload)
    except PydanticValidationError as e:
        raise JsonDecodeError(
            f"Unexpected NewsAPI payload ({e.error_count()} error(s)): {e}"
        ) from e


def parse_articles(payload: Mapping[str, Any]) -> list[Article]:
    """Articles in upstream order; missing fields become empty strings."""

    response = decode_news_response(payload)
    return [a.to_article() for a in response.articles or []]
