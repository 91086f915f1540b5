"""Pydantic models for searchmind configuration."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from searchmind.embeddings.base import EmbedderType
from searchmind.models import SearchOptions


class SearchConfig(BaseModel):
    """Default search options."""

    case_sensitive: bool = False
    fuzzy_matching: bool = True
    pattern_match: bool = False
    semantic: bool = False
    max_results: int = Field(default=100, ge=1)
    timeout: float | None = Field(default=None, gt=0)
    search_paths: list[str] = Field(default_factory=list)
    file_extensions: list[str] = Field(default_factory=list)

    def to_options(self, api_key: str | None = None, **overrides: Any) -> SearchOptions:
        """Build search options from these defaults.

        Args:
            api_key: Credential for semantic search.
            **overrides: Option values that replace the configured ones;
                None values are ignored.

        Returns:
            Immutable search options.
        """
        values: dict[str, Any] = self.model_dump()
        # empty lists mean "not configured"
        for key in ("search_paths", "file_extensions"):
            values[key] = values[key] or None
        values["api_key"] = api_key
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SearchOptions(**values)


class EmbeddingConfig(BaseModel):
    """Embedding backend configuration."""

    provider: EmbedderType = EmbedderType.OPENAI
    model: str = "text-embedding-ada-002"
    base_url: str | None = None
    api_key: str | None = None  # Use SEARCHMIND_API_KEY / OPENAI_API_KEY env var
    timeout: float = 60.0


class DatabaseConfig(BaseModel):
    """Remote record store configuration."""

    base_url: str | None = None
    auth_token: str | None = None  # Use SEARCHMIND_DATABASE_TOKEN env var
    timeout: float = 30.0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None  # Default: no file logging
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class SearchMindConfig(BaseModel):
    """Root configuration for searchmind."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
