from __future__ import annotations

from pathlib import Path

import pytest

from statbook.core.config import (
    DEFAULT_NEWS_BASE_URL,
    DEFAULT_STATS_BASE_URL,
    MYSPORTSFEEDS_PASSWORD,
    NewsSettings,
    Settings,
    SortBy,
    StatbookConfig,
)
from statbook.client import StatbookClient
from statbook.core.errors import ConfigError, MissingApiKey, ValidationError

_ENV_VARS = [
    "STATS_API_KEY",
    "NEWS_API_KEY",
    "STATS_BASE_URL",
    "NEWS_BASE_URL",
    "STATS_PASSWORD",
    "NEWS__MAX_ARTICLES",
    "NEWS__SORT_BY",
    "NEWS__DAYS_BACK",
    "NEWS__LANGUAGE",
    "STATBOOK_TIMEOUT_S",
    "STATBOOK_USER_AGENT",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    # Keep a developer's .env or exported keys out of the way.
    monkeypatch.chdir(tmp_path)
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_config_defaults() -> None:
    config = StatbookConfig(stats_api_key="stats-key", news_api_key="news-key")

    assert config.stats_base_url == DEFAULT_STATS_BASE_URL
    assert config.news_base_url == DEFAULT_NEWS_BASE_URL
    assert config.stats_password == MYSPORTSFEEDS_PASSWORD
    assert config.news == NewsSettings()
    assert "stats-key" not in repr(config)


def test_config_accepts_any_non_empty_key() -> None:
    config = StatbookConfig(stats_api_key="x", news_api_key="y" * 200)
    assert config.stats_api_key == "x"


@pytest.mark.parametrize(
    ("stats_key", "news_key", "missing"),
    [("", "news-key", "STATS_API_KEY"), ("stats-key", "", "NEWS_API_KEY")],
)
def test_config_rejects_empty_keys(stats_key: str, news_key: str, missing: str) -> None:
    with pytest.raises(MissingApiKey) as exc_info:
        StatbookConfig(stats_api_key=stats_key, news_api_key=news_key)

    assert exc_info.value.key == missing
    assert isinstance(exc_info.value, ConfigError)


@pytest.mark.parametrize("field", ["stats_base_url", "news_base_url"])
def test_config_rejects_non_http_base_url(field: str) -> None:
    with pytest.raises(ConfigError, match=field):
        StatbookConfig(stats_api_key="k", news_api_key="k", **{field: "ftp://example.com"})


def test_config_strips_trailing_slash() -> None:
    config = StatbookConfig(
        stats_api_key="k", news_api_key="k", stats_base_url="http://localhost:8080/v2.1/"
    )
    assert config.stats_base_url == "http://localhost:8080/v2.1"


def test_news_settings_bounds() -> None:
    with pytest.raises(ValidationError):
        NewsSettings(max_articles=0)
    with pytest.raises(ValidationError):
        NewsSettings(max_articles=101)
    with pytest.raises(ValidationError, match="days_back"):
        NewsSettings(days_back=0)


def test_news_settings_rejects_unknown_sort_order() -> None:
    with pytest.raises(ConfigError, match="sort_by"):
        NewsSettings(sort_by="newest")


def test_settings_reads_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("STATS_API_KEY", "env-stats")
    clean_env.setenv("NEWS_API_KEY", "env-news")
    clean_env.setenv("NEWS_BASE_URL", "http://localhost:9000")
    clean_env.setenv("NEWS__MAX_ARTICLES", "12")
    clean_env.setenv("NEWS__SORT_BY", "relevancy")

    config = Settings().to_config()

    assert config.stats_api_key == "env-stats"
    assert config.news_api_key == "env-news"
    assert config.news_base_url == "http://localhost:9000"
    assert config.news.max_articles == 12
    assert config.news.sort_by is SortBy.RELEVANCY


def test_settings_reads_dotenv_file(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("STATS_API_KEY=file-stats\nNEWS_API_KEY=file-news\n")

    settings = Settings()

    assert settings.require_stats_api_key() == "file-stats"
    assert settings.require_news_api_key() == "file-news"


def test_settings_missing_key_raises(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("NEWS_API_KEY", "env-news")

    with pytest.raises(MissingApiKey) as exc_info:
        Settings().to_config()

    assert exc_info.value.key == "STATS_API_KEY"


@pytest.mark.parametrize(
    ("var", "value"),
    [
        ("NEWS__MAX_ARTICLES", "0"),
        ("NEWS__SORT_BY", "newest"),
        ("NEWS__DAYS_BACK", "0"),
        ("STATBOOK_TIMEOUT_S", "soon"),
    ],
)
def test_settings_load_rejects_malformed_values(
    clean_env: pytest.MonkeyPatch, var: str, value: str
) -> None:
    clean_env.setenv("STATS_API_KEY", "env-stats")
    clean_env.setenv("NEWS_API_KEY", "env-news")
    clean_env.setenv(var, value)

    with pytest.raises(ValidationError) as exc_info:
        Settings.load()

    assert isinstance(exc_info.value, ConfigError)
    assert exc_info.value.__cause__ is not None


def test_from_env_reports_bad_news_tuning_as_config_error(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("STATS_API_KEY", "env-stats")
    clean_env.setenv("NEWS_API_KEY", "env-news")
    clean_env.setenv("NEWS__MAX_ARTICLES", "0")

    with pytest.raises(ConfigError, match="max_articles"):
        StatbookClient.from_env()
