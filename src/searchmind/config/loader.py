"""Load searchmind configuration from TOML and the environment.

Precedence, lowest first: model defaults, the TOML file, environment
variables. Credentials set in the file are never replaced by the
environment.
"""

import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from searchmind.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_API_KEY,
    ENV_DATABASE_TOKEN,
    ENV_DATABASE_URL,
    ENV_EMBEDDER,
    ENV_LOG_LEVEL,
    ENV_OPENAI_API_KEY,
    get_config_path,
)
from searchmind.config.schema import SearchMindConfig
from searchmind.embeddings.base import EmbedderType
from searchmind.exceptions import ConfigError, ConfigNotFoundError, ConfigValidationError
from searchmind.utils.logging import get_logger

logger = get_logger(__name__)

_config: SearchMindConfig | None = None


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = True,
) -> SearchMindConfig:
    """Read, validate and override the configuration.

    Args:
        config_path: Explicit file; defaults to ``$SEARCHMIND_CONFIG`` or
            ``~/.config/searchmind/config.toml``.
        create_if_missing: Write the commented default file when absent.

    Raises:
        ConfigNotFoundError: ``config_path`` is absent and may not be created.
        ConfigError: The file cannot be written, read or parsed.
        ConfigValidationError: The values fail validation.
    """
    path = config_path or get_config_path()

    if not path.exists():
        if not create_if_missing:
            if config_path is not None:
                raise ConfigNotFoundError(f"Config file not found: {path}")
            return _apply_env_overrides(SearchMindConfig())
        _write_default(path)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    try:
        config = SearchMindConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {path}: {e}") from e

    return _apply_env_overrides(config)


def _write_default(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to create config at {path}: {e}") from e
    logger.debug("Wrote default config to %s", path)


def _apply_env_overrides(config: SearchMindConfig) -> SearchMindConfig:
    env = os.environ

    level = env.get(ENV_LOG_LEVEL)
    if level:
        config.logging.level = level.upper()

    embedder = env.get(ENV_EMBEDDER)
    if embedder:
        try:
            config.embedding.provider = EmbedderType(embedder.lower())
        except ValueError:
            logger.warning("Ignoring unknown %s=%r", ENV_EMBEDDER, embedder)

    if not config.embedding.api_key:
        config.embedding.api_key = env.get(ENV_API_KEY) or env.get(ENV_OPENAI_API_KEY)

    database_url = env.get(ENV_DATABASE_URL)
    if database_url:
        config.database.base_url = database_url

    if not config.database.auth_token:
        config.database.auth_token = env.get(ENV_DATABASE_TOKEN)

    return config


def get_config() -> SearchMindConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration (used by tests)."""
    global _config
    _config = None
