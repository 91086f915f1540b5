"""File system helpers for the file-backed providers."""

from collections.abc import Iterable
from pathlib import Path

from searchmind.exceptions import (
    FileAccessDeniedError,
    InvalidSearchPathError,
    UnableToLoadContentError,
)


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden.

    Args:
        path: Path to check.

    Returns:
        True if path is hidden (starts with .).
    """
    return path.name.startswith(".")


def matches_extension(path: Path, extensions: Iterable[str] | None) -> bool:
    """Check a path against an extension allow-list.

    Args:
        path: Path to check.
        extensions: Extensions without the leading dot, or None for any.

    Returns:
        True if no filter is given or the extension is listed.
    """
    if not extensions:
        return True
    return path.suffix.removeprefix(".") in extensions


def list_directory_files(directory: Path) -> list[Path]:
    """List the immediate regular, non-hidden files of a directory.

    Subdirectories are not descended into.

    Args:
        directory: Directory to list.

    Returns:
        Files sorted by name.

    Raises:
        FileAccessDeniedError: If the directory cannot be listed.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
        return [entry for entry in entries if not is_hidden(entry) and entry.is_file()]
    except PermissionError as e:
        raise FileAccessDeniedError(str(directory)) from e


def expand_scope(
    search_paths: Iterable[str],
    extensions: Iterable[str] | None = None,
) -> list[Path]:
    """Resolve scope locators into the files they cover.

    Args:
        search_paths: Files or directories.
        extensions: Optional extension allow-list.

    Returns:
        Files in scope order; directory members sorted by name.

    Raises:
        InvalidSearchPathError: If a locator does not exist.
        FileAccessDeniedError: If a locator cannot be inspected or a
            directory cannot be listed.
    """
    files: list[Path] = []
    for locator in search_paths:
        path = Path(locator)
        try:
            is_dir = path.is_dir()
            exists = is_dir or path.exists()
        except PermissionError as e:
            raise FileAccessDeniedError(locator) from e

        if is_dir:
            files.extend(list_directory_files(path))
        elif exists:
            files.append(path)
        else:
            raise InvalidSearchPathError(locator)

    return [f for f in files if matches_extension(f, extensions)]


def read_text_strict(path: Path) -> str:
    """Read a file as UTF-8 text.

    Args:
        path: Path to file.

    Returns:
        Decoded file content.

    Raises:
        FileAccessDeniedError: If the file cannot be opened for reading.
        UnableToLoadContentError: If the bytes are not valid UTF-8.
    """
    try:
        raw = path.read_bytes()
    except PermissionError as e:
        raise FileAccessDeniedError(str(path)) from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise UnableToLoadContentError(str(path)) from e
