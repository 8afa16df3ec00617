"""Tests for the file operations module."""
import errno
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from filetools.core.constants import ErrorCode
from filetools.core.errors import (
    FileOperationError,
    IoError,
    NotADirectory,
    NotFound,
    PermissionDenied,
)
from filetools.core.file_ops import (
    EntryMetadata,
    create_directories,
    create_directory,
    directory_identity,
    open_directory,
    query_metadata,
    require_directory,
)


class TestCreateDirectory:
    """Test create_directory function."""

    def test_create_single_directory(self, temp_dir):
        """Test creating a single directory."""
        new_dir = temp_dir / "newdir"
        create_directory(new_dir)
        assert new_dir.is_dir()

    def test_create_parents(self, temp_dir):
        """Test creating parent directories."""
        new_dir = temp_dir / "parent" / "child" / "grandchild"
        create_directory(new_dir, parents=True)
        assert new_dir.is_dir()

    def test_create_no_parents_fails(self, temp_dir):
        """Test creating directory without parents fails."""
        with pytest.raises(NotFound):
            create_directory(temp_dir / "parent" / "child", parents=False)

    def test_create_exist_ok_true(self, temp_dir):
        """Existing directory is not an error by default."""
        new_dir = temp_dir / "newdir"
        new_dir.mkdir()
        create_directory(new_dir)
        create_directory(new_dir, parents=False)

    def test_create_exist_ok_false(self, temp_dir):
        """Test creating existing directory with exist_ok=False."""
        new_dir = temp_dir / "newdir"
        new_dir.mkdir()
        with pytest.raises(FileOperationError) as exc_info:
            create_directory(new_dir, exist_ok=False)
        assert exc_info.value.error_code == ErrorCode.CONFLICT

    def test_create_over_file(self, temp_dir):
        """A file in the way is reported as NotADirectory."""
        target = temp_dir / "occupied"
        target.write_text("x")
        with pytest.raises(NotADirectory):
            create_directory(target)

    def test_create_below_file(self, temp_dir):
        """A file as an intermediate component is reported as NotADirectory."""
        (temp_dir / "file").write_text("x")
        with pytest.raises(NotADirectory):
            create_directory(temp_dir / "file" / "sub")

    def test_create_permission_denied(self):
        """Test create with permission denied."""
        with patch("os.makedirs", side_effect=PermissionError(errno.EACCES, "denied")):
            with pytest.raises(PermissionDenied) as exc_info:
                create_directory("/some/dir")
        assert exc_info.value.error_code == ErrorCode.PERMISSION_DENIED
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_create_io_error(self):
        """Test create with IO error."""
        with patch("os.makedirs", side_effect=OSError(errno.EIO, "OS error")):
            with pytest.raises(IoError) as exc_info:
                create_directory("/some/dir")
        assert exc_info.value.error_code == ErrorCode.INTERNAL_ERROR


class TestCreateDirectories:
    """Test create_directories function."""

    def test_duplicates_succeed(self, temp_dir):
        target = temp_dir / "a" / "b"
        created = create_directories([target, target])
        assert created == [target, target]
        assert target.is_dir()

    def test_stops_at_first_failure(self, temp_dir):
        """Earlier directories stay, later ones are never attempted."""
        (temp_dir / "blocker").write_text("x")
        first = temp_dir / "first"
        last = temp_dir / "last"

        with pytest.raises(NotADirectory):
            create_directories([first, temp_dir / "blocker", last])

        assert first.is_dir()
        assert not last.exists()


class TestRequireDirectory:
    """Test require_directory function."""

    def test_directory(self, temp_dir):
        st = require_directory(temp_dir)
        assert st.st_ino == os.stat(temp_dir).st_ino

    def test_missing(self, temp_dir):
        with pytest.raises(NotFound):
            require_directory(temp_dir / "missing")

    def test_file(self, temp_dir):
        target = temp_dir / "file.txt"
        target.write_text("x")
        with pytest.raises(NotADirectory):
            require_directory(target)


class TestQueryMetadata:
    """Test query_metadata function."""

    def test_regular_file(self, temp_dir):
        target = temp_dir / "file.txt"
        target.write_text("x")
        assert query_metadata(target) == EntryMetadata(is_file=True, is_dir=False, is_symlink=False)

    def test_directory(self, temp_dir):
        assert query_metadata(temp_dir) == EntryMetadata(is_file=False, is_dir=True, is_symlink=False)

    def test_symlink_followed(self, temp_dir):
        (temp_dir / "real").mkdir()
        link = temp_dir / "link"
        link.symlink_to(temp_dir / "real")
        metadata = query_metadata(link)
        assert metadata.is_dir
        assert metadata.is_symlink

    def test_symlink_not_followed(self, temp_dir):
        (temp_dir / "real").mkdir()
        link = temp_dir / "link"
        link.symlink_to(temp_dir / "real")
        metadata = query_metadata(link, follow_symlinks=False)
        assert not metadata.is_dir
        assert metadata.is_symlink

    def test_dangling_symlink(self, temp_dir):
        link = temp_dir / "dangling"
        link.symlink_to(temp_dir / "nowhere")
        metadata = query_metadata(link)
        assert not metadata.is_file
        assert not metadata.is_dir
        assert metadata.is_symlink

    def test_self_referencing_symlink(self, temp_dir):
        link = temp_dir / "loop"
        link.symlink_to(link)
        metadata = query_metadata(link)
        assert not metadata.is_file and not metadata.is_dir

    def test_vanished_entry(self, temp_dir):
        with pytest.raises(NotFound):
            query_metadata(temp_dir / "vanished")

    def test_permission_denied(self, temp_dir):
        with patch("os.lstat", side_effect=PermissionError(errno.EACCES, "denied")):
            with pytest.raises(PermissionDenied):
                query_metadata(temp_dir / "any")


class TestOpenDirectory:
    """Test open_directory context manager."""

    def test_enumerates_children(self, temp_dir):
        (temp_dir / "file1.txt").write_text("1")
        (temp_dir / "subdir").mkdir()

        with open_directory(temp_dir) as entries:
            names = sorted(entry.name for entry in entries)

        assert names == ["file1.txt", "subdir"]

    def test_not_found(self, temp_dir):
        with pytest.raises(NotFound):
            with open_directory(temp_dir / "missing"):
                pass

    def test_not_a_directory(self, temp_dir):
        target = temp_dir / "file.txt"
        target.write_text("x")
        with pytest.raises(NotADirectory):
            with open_directory(target):
                pass

    def test_permission_denied(self, temp_dir):
        with patch("os.scandir", side_effect=PermissionError(errno.EACCES, "denied")):
            with pytest.raises(PermissionDenied):
                with open_directory(temp_dir):
                    pass

    def test_error_during_iteration(self, temp_dir):
        """Errors raised while reading entries are translated too."""

        class FailingScanner:
            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self.closed = True
                return False

            def __iter__(self):
                return self

            def __next__(self):
                raise OSError(errno.EIO, "read error")

        scanner = FailingScanner()
        with patch("os.scandir", return_value=scanner):
            with pytest.raises(IoError):
                with open_directory(temp_dir) as entries:
                    list(entries)
        assert scanner.closed


class TestDirectoryIdentity:
    """Test directory_identity function."""

    def test_symlink_shares_identity(self, temp_dir):
        real = temp_dir / "real"
        real.mkdir()
        link = temp_dir / "link"
        link.symlink_to(real)
        assert directory_identity(link) == directory_identity(real)

    def test_missing(self, temp_dir):
        with pytest.raises(NotFound):
            directory_identity(Path(temp_dir) / "missing")
