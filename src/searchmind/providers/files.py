"""Local file system providers.

``FileNameProvider`` searches file names, ``FileContentsProvider`` searches
decoded file bodies. Both expand directory scopes to their immediate,
non-hidden regular files only.
"""

import asyncio
import uuid
from pathlib import Path

from searchmind.exceptions import UnableToLoadContentError
from searchmind.models import SearchableItem, SearchOptions, SearchType
from searchmind.providers.base import ItemProvider
from searchmind.providers.metadata import create_metadata
from searchmind.utils.files import expand_scope, read_text_strict
from searchmind.utils.logging import get_logger

logger = get_logger(__name__)


class FileNameProvider(ItemProvider):
    """Provides one item per file whose payload is the file name.

    Without explicit search paths the current working directory is used.
    """

    search_type = SearchType.FILE
    requires_search_paths = False

    async def fetch_items(
        self,
        options: SearchOptions,
        *,
        skip_undecodable: bool = False,
    ) -> list[SearchableItem]:
        search_paths = self.scope(options) or (str(Path.cwd()),)
        files = await asyncio.to_thread(
            expand_scope, search_paths, options.file_extensions
        )

        items = []
        for file_path in files:
            path = str(file_path.resolve())
            items.append(
                SearchableItem(
                    id=str(uuid.uuid4()),
                    data=file_path.name,
                    path=path,
                    metadata=create_metadata(file_path.name, path, self.search_type),
                )
            )
        return items


class FileContentsProvider(ItemProvider):
    """Provides one item per file whose payload is the decoded UTF-8 body."""

    search_type = SearchType.FILE_CONTENTS
    requires_search_paths = True

    async def fetch_items(
        self,
        options: SearchOptions,
        *,
        skip_undecodable: bool = False,
    ) -> list[SearchableItem]:
        search_paths = self.scope(options) or ()
        files = await asyncio.to_thread(
            expand_scope, search_paths, options.file_extensions
        )

        items = []
        for file_path in files:
            try:
                content = await asyncio.to_thread(read_text_strict, file_path)
            except UnableToLoadContentError:
                if not skip_undecodable:
                    raise
                logger.debug("Skipping undecodable file %s", file_path)
                continue

            if not content:
                logger.debug("Skipping empty file %s", file_path)
                continue

            path = str(file_path.resolve())
            items.append(
                SearchableItem(
                    id=str(uuid.uuid4()),
                    data=content,
                    path=path,
                    metadata=create_metadata(content, path, self.search_type),
                )
            )
        return items
