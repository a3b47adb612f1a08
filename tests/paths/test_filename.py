"""Tests for base_file_name and file_extension."""

import pytest

from pathlex.errors import InvalidPathArgumentError
from pathlex.paths import DEFAULT_MULTIPLE_PART_EXTENSIONS, base_file_name, file_extension


class TestBaseFileName:
    """Test base_file_name."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("photo.jpg", "photo"),
            ("/var/www/index.html", "index"),
            ("C:\\Temp\\report.PDF", "report"),
            ("archive.tar.gz", "archive"),
            ("archive.TAR.GZ", "archive"),
            ("backup.tar.gz.enc", "backup"),
            ("README", "README"),
            ("/path/to/view.blade.php", "view.blade"),
        ],
    )
    def test_defaults(self, path: str, expected: str):
        assert base_file_name(path) == expected

    def test_custom_extensions_replace_defaults(self):
        assert base_file_name("dataset.test.csv", [".test.csv"]) == "dataset"
        assert base_file_name("archive.tar.gz", [".test.csv"]) == "archive.tar"

    def test_extended_defaults(self):
        extensions = [*DEFAULT_MULTIPLE_PART_EXTENSIONS, ".blade.php"]
        assert base_file_name("/path/to/view.blade.php", extensions) == "view"

    @pytest.mark.parametrize("path", ["", "dir/", "C:\\dir\\"])
    def test_invalid(self, path: str):
        with pytest.raises(InvalidPathArgumentError):
            base_file_name(path)


class TestFileExtension:
    """Test file_extension."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/path/to/file.txt", ".txt"),
            ("/another/path/DOCUMENT.PDF", ".pdf"),
            ("/path/to/file", None),
            ("filename", None),
            ("/view.blade.php", ".php"),
            ("C:\\path\\to\\file.TXT", ".txt"),
            ("/archive.tar.gz", ".tar.gz"),
        ],
    )
    def test_defaults(self, path: str, expected):
        assert file_extension(path) == expected

    def test_multi_part(self):
        multi_part = [".tar.gz", ".blade.php"]
        assert file_extension("/archive.tar.gz", multi_part) == ".tar.gz"
        assert file_extension("/view.blade.php", multi_part) == ".blade.php"
        assert file_extension("/archive.TAR.GZ", multi_part) == ".tar.gz"

    def test_preserve_case(self):
        assert file_extension("/path/to/file.TXT", lowercase=False) == ".TXT"
        assert file_extension("C:\\path\\to\\file.TXT", None, False) == ".TXT"
        assert file_extension("/archive.TAR.GZ", [".tar.gz"], lowercase=False) == ".TAR.GZ"

    def test_invalid(self):
        with pytest.raises(InvalidPathArgumentError, match="cannot be empty"):
            file_extension("")
