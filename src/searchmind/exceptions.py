"""Exception hierarchy for searchmind."""


class SearchMindError(Exception):
    """Base exception for all searchmind errors."""

    exit_code: int = 1
    user_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


class _PathError(SearchMindError):
    """Error tied to a single scope locator."""

    def __init__(
        self,
        path: str,
        message: str | None = None,
        *,
        user_message: str | None = None,
    ) -> None:
        self.path = path
        super().__init__(
            message or f"{self.user_message}: {path}",
            user_message=user_message,
        )


# Embedding Errors
class EmbeddingError(SearchMindError):
    """Embedding collaborator errors."""

    exit_code = 2
    user_message = "Embedding provider error"


class MissingKeyError(EmbeddingError):
    """Semantic search invoked without a credential."""

    exit_code = 3
    user_message = "API key not found"


class FailedEmbeddingExtractionError(EmbeddingError):
    """Embedding response did not contain a usable vector."""

    exit_code = 4
    user_message = "Failed to extract embedding from the fetched API data"


class EmbeddingAuthError(EmbeddingError):
    """Authentication against the embedding service failed."""

    exit_code = 4
    user_message = "Authentication failed. Check your API key."


class EmbeddingRateLimitError(EmbeddingError):
    """Rate limit exceeded."""

    exit_code = 5
    user_message = "Rate limit exceeded. Try again later."


class EmbeddingTimeoutError(EmbeddingError):
    """Embedding request timed out."""

    exit_code = 6
    user_message = "Embedding request timed out. Try again."


# Config Errors
class ConfigError(SearchMindError):
    """Configuration errors."""

    exit_code = 20
    user_message = "Configuration error"


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    exit_code = 21
    user_message = "Configuration file not found"


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    exit_code = 22
    user_message = "Invalid configuration"


# Search Errors
class SearchError(SearchMindError):
    """Search-related errors."""

    exit_code = 30
    user_message = "Search error"


class InvalidSearchPathError(_PathError, SearchError):
    """A scope entry does not resolve to a file, directory or collection."""

    exit_code = 31
    user_message = "Invalid search path"


class FileAccessDeniedError(_PathError, SearchError):
    """Permission failure reading a scope member."""

    exit_code = 32
    user_message = "Access denied to file"


class SearchTimeoutError(SearchError):
    """The search did not finish before its timeout elapsed."""

    exit_code = 33
    user_message = "Search operation timed out"


class EmptySearchTermError(SearchError):
    """The search term is empty."""

    exit_code = 34
    user_message = "Search term cannot be empty"


class SearchPathUnavailableError(SearchError):
    """A provider that needs an explicit scope was given none."""

    exit_code = 35
    user_message = (
        "Search path not defined. Can't begin the operation, missing the search scope"
    )


class InvalidSnapshotFormatError(SearchError):
    """Remote scope payload is not a keyed structure."""

    exit_code = 36
    user_message = "Snapshot data is not in the expected format."


class UnableToLoadContentError(_PathError, SearchError):
    """A scope member could not be decoded as text."""

    exit_code = 37
    user_message = "Unable to extract content from the target file"


class InternalError(SearchError):
    """Unexpected collaborator failure."""

    exit_code = 39
    user_message = "Internal error"
