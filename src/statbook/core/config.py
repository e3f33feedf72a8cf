from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from statbook.core.errors import ConfigError, MissingApiKey, ValidationError

DEFAULT_STATS_BASE_URL = "https://api.mysportsfeeds.com/v2.1"
DEFAULT_NEWS_BASE_URL = "https://newsapi.org/v2"
DEFAULT_USER_AGENT = "statbook/0.1"

# MySportsFeeds authenticates with HTTP Basic where the password is this literal.
MYSPORTSFEEDS_PASSWORD = "MYSPORTSFEEDS"


class SortBy(StrEnum):
    PUBLISHED_AT = "publishedAt"
    RELEVANCY = "relevancy"
    POPULARITY = "popularity"


class NewsSettings(BaseModel):
    """Tuning for news queries built by the client."""

    model_config = ConfigDict(frozen=True)

    max_articles: int = Field(default=5, ge=1, le=100)
    # Unset means no `from` filter; NewsAPI's free tier rejects dated queries with HTTP 426.
    days_back: int | None = Field(default=None, ge=1)
    sort_by: SortBy = SortBy.PUBLISHED_AT
    language: str = "en"

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid news settings: {e}") from e


def _check_base_url(name: str, value: str) -> str:
    if not value.startswith("http"):
        raise ConfigError(f"{name} must start with http or https, got {value!r}")
    return value.rstrip("/")


@dataclass(frozen=True)
class StatbookConfig:
    """Validated, immutable client configuration.

    Construction fails fast: empty keys raise MissingApiKey and malformed base
    URLs raise ConfigError, before anything touches the network. Key format is
    left to the remote APIs to judge.
    """

    stats_api_key: str = field(repr=False)
    news_api_key: str = field(repr=False)
    stats_base_url: str = DEFAULT_STATS_BASE_URL
    news_base_url: str = DEFAULT_NEWS_BASE_URL
    stats_password: str = field(default=MYSPORTSFEEDS_PASSWORD, repr=False)
    user_agent: str = DEFAULT_USER_AGENT
    timeout_s: float = 30.0
    news: NewsSettings = field(default_factory=NewsSettings)

    def __post_init__(self) -> None:
        if not self.stats_api_key:
            raise MissingApiKey("STATS_API_KEY")
        if not self.news_api_key:
            raise MissingApiKey("NEWS_API_KEY")
        if self.timeout_s <= 0:
            raise ConfigError(f"timeout_s must be positive, got {self.timeout_s}")

        # frozen: normalized URLs go through object.__setattr__
        object.__setattr__(
            self, "stats_base_url", _check_base_url("stats_base_url", self.stats_base_url)
        )
        object.__setattr__(
            self, "news_base_url", _check_base_url("news_base_url", self.news_base_url)
        )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # mysportsfeeds
    stats_api_key: str | None = Field(default=None, repr=False, validation_alias="STATS_API_KEY")
    stats_base_url: str = Field(default=DEFAULT_STATS_BASE_URL, validation_alias="STATS_BASE_URL")
    stats_password: str = Field(
        default=MYSPORTSFEEDS_PASSWORD, repr=False, validation_alias="STATS_PASSWORD"
    )

    # newsapi
    news_api_key: str | None = Field(default=None, repr=False, validation_alias="NEWS_API_KEY")
    news_base_url: str = Field(default=DEFAULT_NEWS_BASE_URL, validation_alias="NEWS_BASE_URL")
    news: NewsSettings = Field(default_factory=NewsSettings)

    user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="STATBOOK_USER_AGENT")
    timeout_s: float = Field(default=30.0, validation_alias="STATBOOK_TIMEOUT_S")

    @classmethod
    def load(cls) -> Settings:
        """Read the environment and .env; malformed values raise ValidationError."""
        try:
            return cls()
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid settings: {e}") from e

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_stats_api_key(self) -> str:
        if not self.stats_api_key:
            raise MissingApiKey("STATS_API_KEY")
        return self.stats_api_key

    def require_news_api_key(self) -> str:
        if not self.news_api_key:
            raise MissingApiKey("NEWS_API_KEY")
        return self.news_api_key

    def to_config(self) -> StatbookConfig:
        return StatbookConfig(
            stats_api_key=self.require_stats_api_key(),
            news_api_key=self.require_news_api_key(),
            stats_base_url=self.stats_base_url,
            news_base_url=self.news_base_url,
            stats_password=self.stats_password,
            user_agent=self.user_agent,
            timeout_s=self.timeout_s,
            news=self.news,
        )
