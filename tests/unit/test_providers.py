"""Unit tests for item providers."""

from pathlib import Path

import pytest

from searchmind.engine import SearchEngine
from searchmind.exceptions import (
    FileAccessDeniedError,
    InternalError,
    InvalidSearchPathError,
    InvalidSnapshotFormatError,
    SearchPathUnavailableError,
    UnableToLoadContentError,
)
from searchmind.models import SearchOptions, SearchType
from searchmind.providers import (
    FileContentsProvider,
    FileNameProvider,
    RemoteRecordProvider,
)
from searchmind.providers.metadata import create_metadata, flatten_record, make_preview
from searchmind.stores.base import InMemoryRecordStore


class TestFileNameProvider:
    """Tests for FileNameProvider."""

    @pytest.mark.asyncio
    async def test_lists_immediate_visible_files(self, sample_files: Path) -> None:
        """Test hidden files and subdirectories are excluded."""
        provider = FileNameProvider()
        items = await provider.fetch_items(
            SearchOptions(search_paths=[str(sample_files)])
        )

        assert [item.data for item in items] == ["apple.txt", "main.py", "notes.md"]
        assert all(item.path.startswith(str(sample_files.resolve())) for item in items)
        assert len({item.id for item in items}) == 3

    @pytest.mark.asyncio
    async def test_extension_filter(self, sample_files: Path) -> None:
        """Test only allowed extensions are kept."""
        provider = FileNameProvider()
        items = await provider.fetch_items(
            SearchOptions(search_paths=[str(sample_files)], file_extensions=[".py"])
        )

        assert [item.data for item in items] == ["main.py"]

    @pytest.mark.asyncio
    async def test_defaults_to_working_directory(
        self, sample_files: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the working directory is searched when no paths are given."""
        monkeypatch.chdir(sample_files)
        items = await FileNameProvider().fetch_items(SearchOptions())

        assert "apple.txt" in [item.data for item in items]

    @pytest.mark.asyncio
    async def test_single_file_path(self, sample_files: Path) -> None:
        """Test a file locator yields that file."""
        items = await FileNameProvider().fetch_items(
            SearchOptions(search_paths=[str(sample_files / "notes.md")])
        )

        assert len(items) == 1
        assert items[0].metadata["filename"] == "notes.md"
        assert items[0].metadata["fileExtension"] == "md"

    @pytest.mark.asyncio
    async def test_missing_path(self, temp_dir: Path) -> None:
        """Test a missing locator raises InvalidSearchPathError."""
        missing = str(temp_dir / "nope")
        with pytest.raises(InvalidSearchPathError) as exc_info:
            await FileNameProvider().fetch_items(SearchOptions(search_paths=[missing]))
        assert exc_info.value.path == missing


class TestFileContentsProvider:
    """Tests for FileContentsProvider."""

    @pytest.mark.asyncio
    async def test_reads_contents(self, sample_files: Path) -> None:
        """Test items carry decoded file bodies."""
        items = await FileContentsProvider().fetch_items(
            SearchOptions(search_paths=[str(sample_files)], file_extensions=["py"])
        )

        assert len(items) == 1
        assert items[0].data == "def main():\n    print('Hello')\n"
        assert items[0].metadata["lineCount"] == "3"
        assert items[0].metadata["characterCount"] == str(len(items[0].data))

    @pytest.mark.asyncio
    async def test_requires_search_paths(self) -> None:
        """Test missing scope raises before any I/O."""
        with pytest.raises(SearchPathUnavailableError):
            await FileContentsProvider().fetch_items(SearchOptions())

    @pytest.mark.asyncio
    async def test_skips_empty_files(self, temp_dir: Path) -> None:
        """Test empty files produce no item."""
        (temp_dir / "empty.txt").write_text("")
        (temp_dir / "full.txt").write_text("content")

        items = await FileContentsProvider().fetch_items(
            SearchOptions(search_paths=[str(temp_dir)])
        )

        assert [item.data for item in items] == ["content"]

    @pytest.mark.asyncio
    async def test_undecodable_file_fails(self, temp_dir: Path) -> None:
        """Test invalid UTF-8 raises UnableToLoadContentError."""
        (temp_dir / "blob.bin").write_bytes(b"\xff\xfe\x00\x80")

        with pytest.raises(UnableToLoadContentError):
            await FileContentsProvider().fetch_items(
                SearchOptions(search_paths=[str(temp_dir)])
            )

    @pytest.mark.asyncio
    async def test_undecodable_file_skipped_on_request(self, temp_dir: Path) -> None:
        """Test invalid UTF-8 is skipped when asked."""
        (temp_dir / "blob.bin").write_bytes(b"\xff\xfe\x00\x80")
        (temp_dir / "text.txt").write_text("hello")

        items = await FileContentsProvider().fetch_items(
            SearchOptions(search_paths=[str(temp_dir)]),
            skip_undecodable=True,
        )

        assert [item.data for item in items] == ["hello"]


class TestFileAccessDenied:
    """Tests for permission failures in the file providers."""

    @staticmethod
    def deny(monkeypatch: pytest.MonkeyPatch, method: str, target: Path | None = None) -> None:
        original = getattr(Path, method)

        def denied(self: Path, *args, **kwargs):
            if target is None or self == target:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Path, method, denied)

    @pytest.mark.asyncio
    async def test_unreadable_file(
        self, sample_files: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a file that cannot be read raises FileAccessDeniedError."""
        self.deny(monkeypatch, "read_bytes")

        with pytest.raises(FileAccessDeniedError) as exc_info:
            await FileContentsProvider().fetch_items(
                SearchOptions(search_paths=[str(sample_files)], file_extensions=["py"])
            )
        assert exc_info.value.path.endswith("main.py")
        assert isinstance(exc_info.value.__cause__, PermissionError)

    @pytest.mark.asyncio
    async def test_unreadable_file_not_skipped(
        self, sample_files: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test skip_undecodable does not hide permission failures."""
        self.deny(monkeypatch, "read_bytes")

        with pytest.raises(FileAccessDeniedError):
            await FileContentsProvider().fetch_items(
                SearchOptions(search_paths=[str(sample_files)]),
                skip_undecodable=True,
            )

    @pytest.mark.asyncio
    async def test_unlistable_directory(
        self, sample_files: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a directory that cannot be listed raises FileAccessDeniedError."""
        self.deny(monkeypatch, "iterdir")

        with pytest.raises(FileAccessDeniedError) as exc_info:
            await FileNameProvider().fetch_items(
                SearchOptions(search_paths=[str(sample_files)])
            )
        assert exc_info.value.path == str(sample_files)

    @pytest.mark.asyncio
    async def test_uninspectable_locator(
        self, sample_files: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a locator whose type cannot be checked raises FileAccessDeniedError."""
        locator = sample_files / "src"
        self.deny(monkeypatch, "is_dir", target=locator)

        with pytest.raises(FileAccessDeniedError) as exc_info:
            await FileNameProvider().fetch_items(
                SearchOptions(search_paths=[str(locator)])
            )
        assert exc_info.value.path == str(locator)

    @pytest.mark.asyncio
    async def test_engine_keeps_access_error(
        self, sample_files: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the engine surfaces FileAccessDeniedError rather than InternalError."""
        self.deny(monkeypatch, "read_bytes")

        with pytest.raises(FileAccessDeniedError) as exc_info:
            await SearchEngine().search(
                "apple",
                SearchType.FILE_CONTENTS,
                SearchOptions(search_paths=[str(sample_files)]),
            )
        assert not isinstance(exc_info.value, InternalError)
        assert exc_info.value.exit_code == 32


class TestRemoteRecordProvider:
    """Tests for RemoteRecordProvider."""

    @pytest.mark.asyncio
    async def test_flattens_records(self, record_store: InMemoryRecordStore) -> None:
        """Test each record becomes an item keyed by its id."""
        provider = RemoteRecordProvider(record_store)
        items = await provider.fetch_items(SearchOptions(search_paths=["posts"]))

        assert [item.id for item in items] == ["post1", "post2"]
        assert items[0].path == "posts/post1"
        assert items[0].data == "Learn structured concurrency\n1\nSwift Concurrency"
        assert items[0].metadata["collection"] == "posts"
        assert items[0].metadata["documentId"] == "post1"

    @pytest.mark.asyncio
    async def test_requires_search_paths(self, record_store: InMemoryRecordStore) -> None:
        """Test missing scope raises SearchPathUnavailableError."""
        with pytest.raises(SearchPathUnavailableError):
            await RemoteRecordProvider(record_store).fetch_items(SearchOptions())

    @pytest.mark.asyncio
    async def test_absent_collection(self, record_store: InMemoryRecordStore) -> None:
        """Test an absent collection raises InvalidSearchPathError."""
        with pytest.raises(InvalidSearchPathError):
            await RemoteRecordProvider(record_store).fetch_items(
                SearchOptions(search_paths=["missing"])
            )

    @pytest.mark.asyncio
    async def test_non_keyed_snapshot(self, record_store: InMemoryRecordStore) -> None:
        """Test a list snapshot raises InvalidSnapshotFormatError."""
        with pytest.raises(InvalidSnapshotFormatError):
            await RemoteRecordProvider(record_store).fetch_items(
                SearchOptions(search_paths=["settings"])
            )


class TestMetadata:
    """Tests for metadata helpers."""

    def test_preview_is_single_line(self) -> None:
        """Test preview truncates and drops newlines."""
        preview = make_preview("a\nb" * 100)
        assert len(preview) == 80
        assert "\n" not in preview

    def test_file_metadata(self) -> None:
        """Test file name metadata."""
        metadata = create_metadata("a.py", "/src/pkg/a.py", SearchType.FILE)
        assert metadata == {
            "provider": "file",
            "filename": "a.py",
            "fileExtension": "py",
            "directory": "pkg",
        }

    def test_flatten_nested(self) -> None:
        """Test nested mappings and lists flatten in order."""
        record = {"b": [1, {"z": "last", "a": "first"}], "a": 2.5, "c": None}
        assert flatten_record(record) == "2.5\n1\nfirst\nlast"

    def test_flatten_skips_booleans(self) -> None:
        """Test boolean leaves are not text."""
        assert flatten_record({"flag": True, "n": 3.0}) == "3"
