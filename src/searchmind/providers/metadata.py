"""Item metadata and record flattening helpers."""

from pathlib import PurePosixPath
from typing import Any

from searchmind.models import SearchType

PREVIEW_LENGTH = 80


def make_preview(data: str, length: int = PREVIEW_LENGTH) -> str:
    """First ``length`` characters of ``data`` on a single line."""
    return data[:length].replace("\n", " ")


def create_metadata(data: str, path: str, search_type: SearchType) -> dict[str, str]:
    """Build the metadata mapping for an item.

    Args:
        data: The item payload.
        path: The item locator.
        search_type: Source kind that produced the item.

    Returns:
        String-to-string metadata specific to the source kind.
    """
    locator = PurePosixPath(path)
    metadata: dict[str, str] = {"provider": search_type.value}

    if search_type == SearchType.FILE:
        metadata["filename"] = locator.name
        metadata["fileExtension"] = locator.suffix.removeprefix(".")
        metadata["directory"] = locator.parent.name
    elif search_type == SearchType.FILE_CONTENTS:
        metadata["filename"] = locator.name
        metadata["fileExtension"] = locator.suffix.removeprefix(".")
        metadata["lineCount"] = str(data.count("\n") + 1)
        metadata["characterCount"] = str(len(data))
        metadata["preview"] = make_preview(data)
    else:
        metadata["collection"] = locator.parent.name
        metadata["documentId"] = locator.name
        metadata["preview"] = make_preview(data)

    return metadata


def _leaf_text(value: Any) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return None


def flatten_record(value: Any) -> str:
    """Flatten a structured record into newline-joined leaf text.

    Nested mappings are visited in lexicographic key order and lists in
    index order, so the output is stable across runs.

    Args:
        value: A record (mapping, list or scalar).

    Returns:
        Every string and number leaf, joined by newlines.
    """
    collected: list[str] = []

    def _flatten(node: Any) -> None:
        if isinstance(node, dict):
            for key in sorted(node):
                _flatten(node[key])
        elif isinstance(node, (list, tuple)):
            for element in node:
                _flatten(element)
        else:
            text = _leaf_text(node)
            if text is not None:
                collected.append(text)

    _flatten(value)
    return "\n".join(collected)
