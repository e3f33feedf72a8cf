from __future__ import annotations


class StatbookError(RuntimeError):
    """Base exception for everything raised by statbook."""


class ConfigError(StatbookError):
    """Configuration failed validation (raised at construction time)."""


class MissingApiKey(ConfigError):
    """A required API key is missing or empty."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing API key: {key}")
        self.key = key

    def __reduce__(self):
        return (type(self), (self.key,))


class ValidationError(ConfigError):
    """Settings or call arguments failed validation before any request was made."""


class ProviderError(StatbookError):
    """Base exception for data-source failures."""


class NetworkError(ProviderError):
    """Transport layer failures (timeouts, connection errors, etc.)."""


class JsonDecodeError(ProviderError):
    """Response body was not valid JSON or did not match the expected structure."""


class ApiStatusError(ProviderError):
    """Provider answered with a non-2xx HTTP status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{status} - {message}")
        self.status = status
        self.message = message

    def __reduce__(self):
        return (type(self), (self.status, self.message))


class StatsApiError(ApiStatusError):
    def __str__(self) -> str:
        return f"Stats API error: {self.status} - {self.message}"


class NewsApiError(ApiStatusError):
    def __str__(self) -> str:
        return f"News API error: {self.status} - {self.message}"


class PlayerNotFound(ProviderError):
    """The stats provider returned no entry for the requested player."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player '{name}' not found")
        self.name = name

    def __reduce__(self):
        return (type(self), (self.name,))
