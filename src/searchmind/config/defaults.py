"""Default configuration values and paths."""

import os
from pathlib import Path
from typing import Final

# Default directories
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "searchmind"

# Default file paths
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "SEARCHMIND_CONFIG"
ENV_LOG_LEVEL: Final[str] = "SEARCHMIND_LOG_LEVEL"
ENV_EMBEDDER: Final[str] = "SEARCHMIND_EMBEDDER"
ENV_DATABASE_URL: Final[str] = "SEARCHMIND_DATABASE_URL"
ENV_DATABASE_TOKEN: Final[str] = "SEARCHMIND_DATABASE_TOKEN"

# Credential environment variables, checked in order
ENV_API_KEY: Final[str] = "SEARCHMIND_API_KEY"
ENV_OPENAI_API_KEY: Final[str] = "OPENAI_API_KEY"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# searchmind configuration

[search]
case_sensitive = false
fuzzy_matching = true
pattern_match = false
semantic = false
max_results = 100
# timeout = 5.0          # seconds; unset means no limit
# file_extensions = ["py", "md"]

[embedding]
provider = "openai"
model = "text-embedding-ada-002"
timeout = 60.0
# base_url = ""          # OpenAI-compatible endpoint
# api_key = ""           # Use SEARCHMIND_API_KEY or OPENAI_API_KEY env var

[database]
# base_url = "https://example.firebaseio.com"
# auth_token = ""        # Use SEARCHMIND_DATABASE_TOKEN env var
timeout = 30.0

[logging]
level = "WARNING"
json_format = false
"""


def get_config_path() -> Path:
    """Get the configuration file path."""
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
